"""Request state for one extension panel: loading flag, last error, last results."""

from __future__ import annotations

import asyncio
import logging
from typing import Optional

from pydantic import BaseModel

from .config import AIConfig, Settings
from .integrations.chat import send_to_ai
from .integrations.video_generation import (
    VideoConfig,
    VideoGenerationResult,
    VideoGenerationTimeoutError,
    generate_video,
    get_video_model,
    poll_video_task,
)

logger = logging.getLogger(__name__)


class AISession(BaseModel):
    """State a UI renders while chat and video requests are in flight."""

    loading: bool = False
    error: Optional[str] = None
    result: Optional[str] = None
    video_result: Optional[VideoGenerationResult] = None
    video_provider: str = "together"

    def _start(self) -> None:
        self.loading = True
        self.error = None
        self.result = None
        self.video_result = None

    async def send_prompt(
        self,
        user_content: str,
        settings: Settings,
        ai_config: AIConfig | None = None,
    ) -> str | None:
        """Send page content to the chat model and store the reply or the error."""
        self._start()
        try:
            response = await send_to_ai(user_content, settings, ai_config)
            if response.error:
                self.error = response.error
                return None
            self.result = response.content
            return response.content
        finally:
            self.loading = False

    async def send_video_request(
        self,
        product_description: str,
        video_system_prompt: str,
        video_config: VideoConfig,
        settings: Settings,
    ) -> VideoGenerationResult:
        """Run the video workflow; a failed run still keeps any fallback text."""
        self._start()
        model = get_video_model(video_config.model)
        self.video_provider = model.provider if model else "together"
        try:
            response = await generate_video(
                product_description, video_system_prompt, video_config, settings
            )
            if response.error:
                if response.result.content:
                    self.video_result = response.result
                self.error = response.error
                return response.result

            self.video_result = response.result
            return response.result
        finally:
            self.loading = False

    async def refresh_video(self, settings: Settings) -> VideoGenerationResult | None:
        """Poll the current task once and replace the stored result."""
        current = self.video_result
        if current is None or current.is_terminal or not current.task_id:
            return current

        response = await poll_video_task(current.task_id, settings, self.video_provider)
        updates = {"prompt": current.prompt}
        if response.result.duration is None and current.duration is not None:
            updates["duration"] = current.duration
        self.video_result = response.result.model_copy(update=updates)
        self.error = response.error
        return self.video_result

    async def watch_video(
        self,
        settings: Settings,
        poll_interval: float = 5.0,
        timeout: float = 600.0,
    ) -> VideoGenerationResult | None:
        """
        Poll until the stored task reaches a terminal state.

        Args:
            settings: Provider settings used for each poll
            poll_interval: Seconds between status checks (default: 5.0)
            timeout: Maximum seconds to wait (default: 600.0 = 10 minutes)

        Raises:
            VideoGenerationTimeoutError: If timeout is reached
        """
        elapsed = 0.0

        while elapsed < timeout:
            result = await self.refresh_video(settings)
            if result is None or result.is_terminal:
                return result

            await asyncio.sleep(poll_interval)
            elapsed += poll_interval

        task_id = self.video_result.task_id if self.video_result else ""
        logger.warning("[VIDEO] watch timed out task_id=%s", task_id)
        raise VideoGenerationTimeoutError(
            provider=self.video_provider,
            task_id=task_id or "",
            timeout_seconds=timeout,
        )

    def clear_result(self) -> None:
        self.result = None
        self.video_result = None
        self.error = None
