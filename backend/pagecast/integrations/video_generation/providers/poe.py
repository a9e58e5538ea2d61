"""POE video bots served through the chat-completion endpoint (single synchronous call)."""

import logging
from typing import Any

from ...chat import first_message, request_chat_completion
from ..catalog import normalize_duration
from ..exceptions import (
    InvalidConfigurationError,
    ProviderAuthenticationError,
    VideoGenerationError,
)
from ..payloads import build_capability_fields, extract_message_video_url
from ..types import (
    VideoCompleted,
    VideoConfig,
    VideoFailed,
    VideoGenerationResult,
    VideoModelConfig,
)
from .base import VideoProvider

logger = logging.getLogger(__name__)


class PoeProvider(VideoProvider):
    """Multi-modal video models that answer a chat completion with a finished video."""

    provider_name = "poe"
    BASE_URL = "https://api.poe.com/v1"

    def __init__(self, api_key: str | None, base_url: str | None = None):
        """
        Initialize POE provider.

        Args:
            api_key: Chat API key from settings (POE bots share the text key)
            base_url: API root, defaults to the public POE endpoint
        """
        if not api_key:
            raise ProviderAuthenticationError("poe", "API Key not configured")
        self.api_key = api_key
        self.base_url = (base_url or self.BASE_URL).rstrip("/")

    def _build_messages(self, prompt: str, fields: dict[str, Any]) -> list[dict[str, Any]]:
        """User message with the prompt, plus the reference image when allowed."""
        if "image_url" in fields:
            content: Any = [
                {"type": "text", "text": prompt},
                {"type": "image_url", "image_url": {"url": fields["image_url"]}},
            ]
        else:
            content = prompt
        return [{"role": "user", "content": content}]

    def _parse_chat_response(
        self, data: dict[str, Any], prompt: str, duration: int
    ) -> VideoGenerationResult:
        message = first_message(data)
        text = message.get("content") if isinstance(message.get("content"), str) else ""
        video_url = extract_message_video_url(message)

        if video_url:
            return VideoCompleted(
                video_url=video_url,
                duration=duration,
                prompt=prompt,
                provider_status="completed",
            )
        # The bot answered with text only; show it in place of the video
        return VideoFailed(prompt=prompt, fallback_text=text or prompt)

    async def submit(
        self,
        prompt: str,
        config: VideoConfig,
        model: VideoModelConfig,
    ) -> VideoGenerationResult:
        """Ask the video bot for a finished clip."""
        fields = build_capability_fields(config, model)
        logger.info("[VIDEO] submit provider=poe model=%s fields=%s", model.api_model_id, sorted(fields))

        data = await request_chat_completion(
            self.base_url,
            self.api_key,
            self._build_messages(prompt, fields),
            model=model.api_model_id,
            provider=self.provider_name,
        )
        return self._parse_chat_response(data, prompt, normalize_duration(model, config.duration))

    async def get_status(self, task_id: str) -> VideoGenerationResult:
        raise InvalidConfigurationError(
            self.provider_name, "synchronous video models have no tasks to poll"
        )

    def describe_failure(self, error: VideoGenerationError) -> str:
        return f"Video generation failed: {error.message}. Showing generated prompt instead."
