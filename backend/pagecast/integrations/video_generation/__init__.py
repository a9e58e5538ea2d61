"""Two-stage video generation: prompt synthesis, then a task-and-poll or synchronous video backend."""

from .exceptions import (
    InvalidConfigurationError,
    ProviderAuthenticationError,
    ProviderNotFoundError,
    ProviderRequestError,
    UnknownVideoModelError,
    VideoGenerationError,
    VideoGenerationTimeoutError,
)
from .types import (
    PromptResult,
    VideoCompleted,
    VideoConfig,
    VideoFailed,
    VideoGenerationResult,
    VideoModelConfig,
    VideoPending,
    VideoProcessing,
    VideoResponse,
)
from .catalog import VIDEO_MODELS, get_video_model, normalize_duration, resolve_video_model
from .payloads import build_capability_fields, build_request_fields, extract_video_url
from .providers import PoeProvider, TogetherProvider, VideoProvider
from .prompt_generator import generate_video_prompt
from .service import (
    VideoGenerationService,
    generate_video,
    poll_video_task,
    submit_video_task,
)

__all__ = [
    # Service
    "VideoGenerationService",
    "generate_video",
    "generate_video_prompt",
    "submit_video_task",
    "poll_video_task",
    # Providers
    "VideoProvider",
    "TogetherProvider",
    "PoeProvider",
    # Catalog and payloads
    "VIDEO_MODELS",
    "get_video_model",
    "resolve_video_model",
    "normalize_duration",
    "build_capability_fields",
    "build_request_fields",
    "extract_video_url",
    # Types
    "VideoConfig",
    "VideoModelConfig",
    "VideoGenerationResult",
    "VideoPending",
    "VideoProcessing",
    "VideoCompleted",
    "VideoFailed",
    "VideoResponse",
    "PromptResult",
    # Exceptions
    "VideoGenerationError",
    "UnknownVideoModelError",
    "ProviderNotFoundError",
    "ProviderAuthenticationError",
    "ProviderRequestError",
    "InvalidConfigurationError",
    "VideoGenerationTimeoutError",
]
