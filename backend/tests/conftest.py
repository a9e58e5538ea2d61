"""Pytest configuration and shared fixtures for the chat and video workflow tests."""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from pagecast.config import Settings
from pagecast.integrations.video_generation import VideoConfig


# ============================================================================
# Settings Fixtures
# ============================================================================


@pytest.fixture
def settings() -> Settings:
    """Settings with both text and video keys configured."""
    return Settings(
        api_key="sk-text-key",
        base_url="https://api.poe.test/v1",
        model="GPT-5.1",
        video_api_key="video-key",
        video_base_url="https://api.together.test/v1",
    )


@pytest.fixture
def settings_without_text_key(settings: Settings) -> Settings:
    return settings.model_copy(update={"api_key": ""})


@pytest.fixture
def settings_without_video_key(settings: Settings) -> Settings:
    return settings.model_copy(update={"video_api_key": ""})


# ============================================================================
# Config Fixtures
# ============================================================================


@pytest.fixture
def text_to_video_config() -> VideoConfig:
    """Default Wan text-to-video config."""
    return VideoConfig(model="wan-ai/wan2.1-t2v-14b", duration=5, aspect_ratio="16:9")


@pytest.fixture
def luma_config_with_extras() -> VideoConfig:
    """Luma config asking for both an image reference and sound."""
    return VideoConfig(
        model="Luma/ray2",
        duration=9,
        aspect_ratio="21:9",
        use_image_reference=True,
        reference_image_url="https://example.com/product.png",
        enable_sound=True,
    )


@pytest.fixture
def poe_config() -> VideoConfig:
    return VideoConfig(model="Veo-3.1", duration=8, aspect_ratio="16:9")


# ============================================================================
# Response Fixtures
# ============================================================================


@pytest.fixture
def chat_completion_body() -> dict:
    """Chat-completion body whose message is the generated prompt."""
    return {
        "id": "chatcmpl-001",
        "choices": [
            {"index": 0, "message": {"role": "assistant", "content": "A red sports car on a highway"}}
        ],
    }


@pytest.fixture
def task_pending_body() -> dict:
    return {"id": "task_001", "status": "pending"}


@pytest.fixture
def task_completed_body() -> dict:
    return {
        "id": "task_001",
        "status": "completed",
        "output": {"video_url": "https://x/video.mp4"},
    }


# ============================================================================
# HTTP Mock Helpers
# ============================================================================


def _make_response(status_code: int = 200, body=None, json_error: bool = False) -> MagicMock:
    """Build a mock httpx response."""
    response = MagicMock()
    response.status_code = status_code
    if json_error:
        response.json.side_effect = ValueError("Expecting value")
    else:
        response.json.return_value = body if body is not None else {}
    return response


@pytest.fixture
def make_response():
    """Factory for mock httpx responses."""
    return _make_response


@pytest.fixture
def mock_http():
    """Patch httpx.AsyncClient and yield the client mock; set ``post``/``get`` per test."""
    with patch("httpx.AsyncClient") as mock_client_class:
        mock_client = MagicMock()
        mock_client.__aenter__ = AsyncMock(return_value=mock_client)
        mock_client.__aexit__ = AsyncMock(return_value=None)
        mock_client.post = AsyncMock()
        mock_client.get = AsyncMock()
        mock_client_class.return_value = mock_client
        yield mock_client
