"""Together AI video generation provider (submit a task, then poll it)."""

import logging
from typing import Any

import httpx

from ...chat import extract_error_message, get_headers, is_success
from ..exceptions import ProviderAuthenticationError, ProviderRequestError
from ..payloads import build_request_fields, extract_video_url
from ..types import (
    VideoCompleted,
    VideoConfig,
    VideoFailed,
    VideoGenerationResult,
    VideoModelConfig,
)
from .base import VideoProvider, in_flight_result

logger = logging.getLogger(__name__)

DEFAULT_FAILURE_MESSAGE = "Video generation failed"


def _task_error(data: dict[str, Any]) -> str | None:
    error = data.get("error")
    if isinstance(error, dict):
        return error.get("message")
    return str(error) if error else None


class TogetherProvider(VideoProvider):
    """Asynchronous task API: ``POST /video/generations`` then ``GET /video/generations/{id}``."""

    provider_name = "together"
    BASE_URL = "https://api.together.xyz/v1"

    def __init__(self, api_key: str | None, base_url: str | None = None):
        """
        Initialize Together provider.

        Args:
            api_key: Video API key from settings
            base_url: API root, defaults to the public Together endpoint
        """
        if not api_key:
            raise ProviderAuthenticationError("together", "Video API Key not configured")
        self.api_key = api_key
        self.base_url = (base_url or self.BASE_URL).rstrip("/")

    def _parse_submit_response(
        self, data: dict[str, Any], prompt: str, duration: int
    ) -> VideoGenerationResult:
        """Classify the immediate task-creation response."""
        task_id = data.get("id") or None
        status = data.get("status") or "pending"
        video_url = extract_video_url(data)

        if status == "completed" and video_url:
            return VideoCompleted(
                video_url=video_url,
                duration=duration,
                prompt=prompt,
                task_id=task_id,
                progress=100,
                provider_status=status,
            )
        if status == "failed":
            return VideoFailed.with_fallback(
                prompt,
                _task_error(data) or DEFAULT_FAILURE_MESSAGE,
                task_id=task_id,
                provider_status=status,
            )
        if not task_id:
            raise ProviderRequestError("together", details="Task response did not include an id")
        # "completed" without a discoverable URL is treated as not done yet
        return in_flight_result(task_id, status, 0, prompt=prompt, duration=duration)

    def _parse_status_response(self, data: dict[str, Any], task_id: str) -> VideoGenerationResult:
        """Classify a task status response."""
        status = data.get("status") or "pending"
        video_url = extract_video_url(data)

        if status == "completed" and video_url:
            return VideoCompleted(
                video_url=video_url,
                task_id=task_id,
                progress=100,
                provider_status=status,
            )
        if status == "failed":
            return VideoFailed(
                message=_task_error(data) or DEFAULT_FAILURE_MESSAGE,
                task_id=task_id,
                provider_status=status,
            )
        progress = 50 if status == "processing" else 10
        return in_flight_result(task_id, status, progress)

    async def submit(
        self,
        prompt: str,
        config: VideoConfig,
        model: VideoModelConfig,
    ) -> VideoGenerationResult:
        """Create a video generation task."""
        payload = build_request_fields(prompt, config, model)
        logger.info(
            "[VIDEO] submit provider=together model=%s duration=%s fields=%s",
            payload["model"],
            payload["duration_seconds"],
            sorted(payload),
        )

        async with httpx.AsyncClient() as client:
            response = await client.post(
                f"{self.base_url}/video/generations",
                headers=get_headers(self.api_key),
                json=payload,
                timeout=30.0,
            )

            if not is_success(response):
                details = extract_error_message(response)
                logger.warning("[VIDEO] submit status=%s error=%s", response.status_code, details)
                raise ProviderRequestError("together", response.status_code, details)

            data = response.json()
            if not isinstance(data, dict):
                raise ProviderRequestError("together", response.status_code, "Unexpected response body")
            return self._parse_submit_response(data, prompt, payload["duration_seconds"])

    async def get_status(self, task_id: str) -> VideoGenerationResult:
        """Fetch the status of a video generation task."""
        async with httpx.AsyncClient() as client:
            response = await client.get(
                f"{self.base_url}/video/generations/{task_id}",
                headers=get_headers(self.api_key),
                timeout=30.0,
            )

            if not is_success(response):
                details = extract_error_message(response)
                logger.warning(
                    "[VIDEO] poll task_id=%s status=%s error=%s",
                    task_id,
                    response.status_code,
                    details,
                )
                raise ProviderRequestError("together", response.status_code, details)

            data = response.json()
            if not isinstance(data, dict):
                raise ProviderRequestError("together", response.status_code, "Unexpected response body")
            return self._parse_status_response(data, task_id)
