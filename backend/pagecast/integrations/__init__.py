"""Integrations module for external API providers."""

# video_generation loads first; its providers import chat, which imports its exceptions
from .video_generation import (
    # Service
    VideoGenerationService,
    generate_video,
    poll_video_task,
    submit_video_task,
    # Types
    VideoConfig,
    VideoGenerationResult,
    VideoResponse,
    # Exceptions
    VideoGenerationError,
)
from .chat import AIResponse, extract_error_message, request_chat_completion, send_to_ai

__all__ = [
    # Chat
    "AIResponse",
    "extract_error_message",
    "request_chat_completion",
    "send_to_ai",
    # Service
    "VideoGenerationService",
    "generate_video",
    "poll_video_task",
    "submit_video_task",
    # Types
    "VideoConfig",
    "VideoGenerationResult",
    "VideoResponse",
    # Exceptions
    "VideoGenerationError",
]
