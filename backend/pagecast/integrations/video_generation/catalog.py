"""Static catalog of supported video models and their capabilities."""

from .exceptions import UnknownVideoModelError
from .types import VideoModelConfig

_COMMON_RATIOS = ("16:9", "9:16", "1:1")

VIDEO_MODELS: tuple[VideoModelConfig, ...] = (
    # Together AI task API
    VideoModelConfig(
        name="wan-ai/wan2.1-t2v-14b",
        display_name="Wan 2.1 Text-to-Video",
        provider="together",
        api_model_id="wan-ai/wan2.1-t2v-14b",
        min_duration=3,
        max_duration=9,
        duration_step=1,
        aspect_ratios=_COMMON_RATIOS,
        description="High-quality text-to-video generation",
    ),
    VideoModelConfig(
        name="wan-ai/wan2.1-i2v-14b-720p",
        display_name="Wan 2.1 Image-to-Video",
        provider="together",
        api_model_id="wan-ai/wan2.1-i2v-14b-720p",
        min_duration=3,
        max_duration=9,
        duration_step=1,
        aspect_ratios=_COMMON_RATIOS,
        supports_image_reference=True,
        description="Convert images to animated video",
    ),
    VideoModelConfig(
        name="Luma/ray2",
        display_name="Luma Ray 2",
        provider="together",
        api_model_id="Luma/ray2",
        min_duration=5,
        max_duration=9,
        duration_step=4,
        aspect_ratios=("16:9", "9:16", "1:1", "4:3", "3:4", "21:9", "9:21"),
        supports_image_reference=True,
        supports_sound_generation=True,
        description="Luma's Ray 2 with audio generation",
    ),
    # POE chat-completion video bots. Duration ranges, ratios and capability flags
    # are local assumptions; the bots accept free-form text and do not publish limits.
    VideoModelConfig(
        name="Veo-3.1",
        display_name="Veo 3.1",
        provider="poe",
        api_model_id="Veo-3",
        min_duration=4,
        max_duration=8,
        duration_step=2,
        aspect_ratios=("16:9", "9:16"),
        supports_image_reference=True,
        supports_sound_generation=True,
        description="Google Veo with native audio",
    ),
    VideoModelConfig(
        name="Sora-2",
        display_name="Sora 2",
        provider="poe",
        api_model_id="Sora-2",
        min_duration=4,
        max_duration=12,
        duration_step=4,
        aspect_ratios=("16:9", "9:16"),
        supports_image_reference=True,
        description="OpenAI Sora 2",
    ),
    VideoModelConfig(
        name="Kling-2.0",
        display_name="Kling 2.0",
        provider="poe",
        api_model_id="Kling-2",
        min_duration=5,
        max_duration=10,
        duration_step=5,
        aspect_ratios=_COMMON_RATIOS,
        supports_image_reference=True,
        description="Kling 2.0 text and image to video",
    ),
    VideoModelConfig(
        name="Runway-Gen3",
        display_name="Runway Gen-3 Alpha",
        provider="poe",
        api_model_id="Runway-Gen3-Alpha",
        min_duration=5,
        max_duration=10,
        duration_step=5,
        aspect_ratios=("16:9", "9:16"),
        supports_image_reference=True,
        description="Runway Gen-3 Alpha",
    ),
)

_MODELS_BY_NAME = {model.name: model for model in VIDEO_MODELS}


def get_video_model(name: str) -> VideoModelConfig | None:
    """Look up a catalog entry by name."""
    return _MODELS_BY_NAME.get(name)


def resolve_video_model(name: str) -> VideoModelConfig:
    """Return the catalog entry for ``name`` or raise UnknownVideoModelError."""
    model = _MODELS_BY_NAME.get(name)
    if model is None:
        raise UnknownVideoModelError(name)
    return model


def supports_aspect_ratio(model: VideoModelConfig, aspect_ratio: str) -> bool:
    return aspect_ratio in model.aspect_ratios


def normalize_duration(model: VideoModelConfig, duration: int) -> int:
    """Snap a requested duration onto the model's min/max/step grid."""
    supported = list(range(model.min_duration, model.max_duration + 1, model.duration_step))
    if duration in supported:
        return duration
    # Find closest supported duration
    return min(supported, key=lambda x: abs(x - duration))
