"""Provider settings and per-request AI options."""

from __future__ import annotations

import os
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_BASE_URL = "https://api.poe.com/v1"
DEFAULT_MODEL = "GPT-5.1"
DEFAULT_VIDEO_BASE_URL = "https://api.together.xyz/v1"

# Environment variable for each Settings field
ENV_VARS = {
    "api_key": "AI_API_KEY",
    "base_url": "AI_BASE_URL",
    "model": "AI_MODEL",
    "video_api_key": "VIDEO_API_KEY",
    "video_base_url": "VIDEO_BASE_URL",
}

URL_KEY_FIELDS = {
    "base_url": "api_key",
    "video_base_url": "video_api_key",
}

REASONING_TEMPERATURE = {
    "low": 0.3,
    "medium": 0.7,
    "high": 1.0,
}


class Settings(BaseModel):
    """Credentials and endpoints for the text and video providers."""

    model_config = ConfigDict(frozen=True)

    api_key: str = Field("", description="Bearer token for the chat-completion endpoint")
    base_url: str = Field(DEFAULT_BASE_URL, description="OpenAI-compatible API root")
    model: str = Field(DEFAULT_MODEL, description="Text model used for chat and prompts")
    video_api_key: str = Field("", description="Bearer token for the video task API")
    video_base_url: str = Field(DEFAULT_VIDEO_BASE_URL, description="Video task API root")

    @classmethod
    def from_env(cls) -> Settings:
        """Build settings from environment variables, keeping defaults for unset ones."""
        values = {
            field: os.environ[env_name]
            for field, env_name in ENV_VARS.items()
            if os.environ.get(env_name)
        }
        return cls(**values)

    def merged(self, overrides: dict[str, Any] | None) -> Settings:
        """
        Copy with non-empty overrides applied.

        Raises:
            ValueError: If an endpoint is overridden without its matching key
        """
        if not overrides:
            return self
        updates = {key: value for key, value in overrides.items() if value and key in ENV_VARS}
        # The configured key must never be sent to a caller-chosen host
        for url_field, key_field in URL_KEY_FIELDS.items():
            if url_field in updates and key_field not in updates:
                raise ValueError(f"{url_field} override requires {key_field}")
        return self.model_copy(update=updates)


class AIConfig(BaseModel):
    """Options for a plain chat request made from the extension."""

    model_config = ConfigDict(frozen=True)

    system_prompt: str = ""
    output_language: str = "auto"
    output_format: str = "markdown"
    enable_web_search: bool = False
    reasoning_effort: Literal["low", "medium", "high"] = "medium"

    @property
    def temperature(self) -> float:
        return REASONING_TEMPERATURE.get(self.reasoning_effort, 0.7)
