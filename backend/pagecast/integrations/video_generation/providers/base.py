"""Abstract base class for video generation providers."""

from abc import ABC, abstractmethod

from ..exceptions import VideoGenerationError
from ..types import (
    VideoConfig,
    VideoGenerationResult,
    VideoModelConfig,
    VideoPending,
    VideoProcessing,
)


class VideoProvider(ABC):
    """Abstract base class for video generation providers."""

    provider_name: str = "base"

    @abstractmethod
    async def submit(
        self,
        prompt: str,
        config: VideoConfig,
        model: VideoModelConfig,
    ) -> VideoGenerationResult:
        """
        Start video generation for a resolved catalog model.

        Args:
            prompt: Final text prompt for the video model
            config: Caller's video settings
            model: Catalog entry for ``config.model``

        Returns:
            A completed result, or a pending/processing one to poll

        Raises:
            ProviderRequestError: If the provider rejects the request
        """
        ...

    @abstractmethod
    async def get_status(self, task_id: str) -> VideoGenerationResult:
        """
        Query a previously submitted task once.

        Args:
            task_id: The provider's task identifier

        Returns:
            Current state of the task
        """
        ...

    def describe_failure(self, error: VideoGenerationError) -> str:
        """Message shown to the user when submission fails."""
        return error.message


def in_flight_result(task_id: str, status: str, progress: int, **fields) -> VideoGenerationResult:
    """Non-terminal result for a task the provider reports as ``status``."""
    if status == "processing":
        return VideoProcessing(task_id=task_id, progress=progress, provider_status=status, **fields)
    return VideoPending(task_id=task_id, progress=progress, provider_status=status, **fields)
