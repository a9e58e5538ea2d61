"""Video generation workflow: prompt synthesis, task submission and polling."""

import logging

import httpx

from ...config import Settings
from .catalog import resolve_video_model, supports_aspect_ratio
from .exceptions import (
    InvalidConfigurationError,
    ProviderNotFoundError,
    ProviderRequestError,
    VideoGenerationError,
)
from .prompt_generator import generate_video_prompt
from .providers import PoeProvider, TogetherProvider, VideoProvider
from .types import (
    PromptResult,
    VideoConfig,
    VideoFailed,
    VideoProcessing,
    VideoResponse,
)

logger = logging.getLogger(__name__)


class VideoGenerationService:
    """
    Two-stage video workflow bound to one Settings value.

    Every method returns a result/error pair; provider errors, transport
    errors and bad responses are converted instead of raised.
    """

    def __init__(self, settings: Settings):
        """
        Initialize the video generation service.

        Args:
            settings: Text and video provider credentials and endpoints
        """
        self.settings = settings
        self._providers: dict[str, VideoProvider] = {}

    def _get_provider(self, provider_name: str) -> VideoProvider:
        """Get or create a provider instance."""
        if provider_name not in self._providers:
            if provider_name == "together":
                self._providers["together"] = TogetherProvider(
                    api_key=self.settings.video_api_key,
                    base_url=self.settings.video_base_url,
                )
            elif provider_name == "poe":
                self._providers["poe"] = PoeProvider(
                    api_key=self.settings.api_key,
                    base_url=self.settings.base_url,
                )
            else:
                raise ProviderNotFoundError(provider_name)
        return self._providers[provider_name]

    async def generate_prompt(
        self, product_description: str, video_system_prompt: str
    ) -> PromptResult:
        return await generate_video_prompt(product_description, video_system_prompt, self.settings)

    async def submit(self, prompt: str, video_config: VideoConfig) -> VideoResponse:
        """
        Submit a video request for an already generated prompt.

        Returns a completed result, a pending/processing result to poll, or a
        failed result that hands ``prompt`` back as fallback content.
        """
        try:
            model = resolve_video_model(video_config.model)
            if not supports_aspect_ratio(model, video_config.aspect_ratio):
                raise InvalidConfigurationError(
                    model.provider,
                    f"{model.name} does not support aspect ratio {video_config.aspect_ratio}",
                )
            provider = self._get_provider(model.provider)
        except VideoGenerationError as exc:
            logger.warning("[VIDEO] submit rejected: %s", exc.message)
            return VideoResponse(result=VideoFailed.with_fallback(prompt, exc.message), error=exc.message)

        try:
            result = await provider.submit(prompt, video_config, model)
        except VideoGenerationError as exc:
            message = provider.describe_failure(exc)
        except (httpx.HTTPError, ValueError) as exc:
            message = str(exc)
        else:
            error = (result.message or None) if isinstance(result, VideoFailed) else None
            logger.info("[VIDEO] submitted model=%s state=%s task_id=%s", model.name, result.status, result.task_id)
            return VideoResponse(result=result, error=error)

        logger.warning("[VIDEO] submit failed model=%s: %s", model.name, message)
        return VideoResponse(result=VideoFailed.with_fallback(prompt, message), error=message)

    async def poll(self, task_id: str, provider: str = "together") -> VideoResponse:
        """
        Query a task once and classify it.

        A failed status fetch keeps the task in ``processing`` so the caller
        can poll again; only a provider-reported failure is terminal.
        """
        try:
            if not task_id:
                raise InvalidConfigurationError(provider, "task id is required")
            provider_instance = self._get_provider(provider)
            result = await provider_instance.get_status(task_id)
        except ProviderRequestError as exc:
            return VideoResponse(result=VideoProcessing(task_id=task_id), error=exc.message)
        except VideoGenerationError as exc:
            return VideoResponse(result=VideoFailed(task_id=task_id or None, message=exc.message), error=exc.message)
        except (httpx.HTTPError, ValueError) as exc:
            logger.warning("[VIDEO] poll task_id=%s failed: %s", task_id, exc)
            return VideoResponse(result=VideoProcessing(task_id=task_id), error=str(exc))

        if isinstance(result, VideoFailed):
            logger.warning("[VIDEO] task_id=%s failed: %s", task_id, result.message)
            return VideoResponse(result=result, error=result.message)
        return VideoResponse(result=result)

    async def generate(
        self,
        product_description: str,
        video_system_prompt: str,
        video_config: VideoConfig,
    ) -> VideoResponse:
        """
        Run prompt generation followed by video submission.

        The stage-one prompt is attached to whatever stage two returns. When
        stage one fails nothing is submitted.
        """
        prompt_result = await self.generate_prompt(product_description, video_system_prompt)
        if prompt_result.error or not prompt_result.prompt:
            error = prompt_result.error or "Failed to generate video prompt"
            logger.warning("[VIDEO] prompt stage failed: %s", error)
            return VideoResponse(result=VideoFailed(message=error), error=error)

        response = await self.submit(prompt_result.prompt, video_config)
        return VideoResponse(
            result=response.result.with_prompt(prompt_result.prompt),
            error=response.error,
        )


async def generate_video(
    product_description: str,
    video_system_prompt: str,
    video_config: VideoConfig,
    settings: Settings,
) -> VideoResponse:
    """Generate a video prompt from a product description, then request the video."""
    service = VideoGenerationService(settings)
    return await service.generate(product_description, video_system_prompt, video_config)


async def submit_video_task(prompt: str, video_config: VideoConfig, settings: Settings) -> VideoResponse:
    return await VideoGenerationService(settings).submit(prompt, video_config)


async def poll_video_task(task_id: str, settings: Settings, provider: str = "together") -> VideoResponse:
    return await VideoGenerationService(settings).poll(task_id, provider)
