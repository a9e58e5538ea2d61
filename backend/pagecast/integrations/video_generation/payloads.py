"""Request payload construction and response URL lookup shared by providers."""

import re
from typing import Any

from .catalog import normalize_duration
from .types import VideoConfig, VideoModelConfig

# Providers disagree on where the finished video lives; first non-empty wins.
VIDEO_URL_PATHS: tuple[tuple[str, ...], ...] = (
    ("output", "video_url"),
    ("output", "url"),
    ("result", "url"),
)

VIDEO_LINK_PATTERN = re.compile(r"https?://[^\s<>\"{}|\\^`\[\]]+\.(mp4|webm|mov|avi)", re.IGNORECASE)


def build_capability_fields(config: VideoConfig, model: VideoModelConfig) -> dict[str, Any]:
    """
    Optional fields the model is allowed to receive for this config.

    A field is only emitted when the caller asked for it and the catalog
    entry declares the capability.
    """
    fields: dict[str, Any] = {}
    if (
        config.use_image_reference
        and config.reference_image_url
        and model.supports_image_reference
    ):
        fields["image_url"] = config.reference_image_url
    if config.enable_sound and model.supports_sound_generation:
        fields["audio"] = True
    return fields


def build_request_fields(prompt: str, config: VideoConfig, model: VideoModelConfig) -> dict[str, Any]:
    """Build the full task-creation body for a resolved catalog model."""
    payload: dict[str, Any] = {
        "model": model.api_model_id,
        "prompt": prompt,
        "duration_seconds": normalize_duration(model, config.duration),
        "aspect_ratio": config.aspect_ratio,
    }
    payload.update(build_capability_fields(config, model))
    return payload


def extract_video_url(data: Any) -> str | None:
    """Return the first non-empty video URL found in a task response."""
    if not isinstance(data, dict):
        return None
    for path in VIDEO_URL_PATHS:
        node: Any = data
        for key in path:
            node = node.get(key) if isinstance(node, dict) else None
        if isinstance(node, str) and node:
            return node
    return None


def extract_message_video_url(message: dict[str, Any]) -> str | None:
    """Find a video URL in a chat-completion message (attachment, then inline link)."""
    attachments = message.get("attachments") or []
    if attachments and isinstance(attachments[0], dict) and attachments[0].get("url"):
        return attachments[0]["url"]
    content = message.get("content")
    if isinstance(content, str):
        match = VIDEO_LINK_PATTERN.search(content)
        if match:
            return match.group(0)
    return None
