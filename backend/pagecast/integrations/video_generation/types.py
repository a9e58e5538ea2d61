"""Pydantic models for video generation inputs and outputs."""

from typing import Annotated, Any, ClassVar, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class VideoModelConfig(BaseModel):
    """Static catalog entry describing what a video model accepts."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Catalog name selected by the caller")
    display_name: str = Field(..., description="Human readable model name")
    provider: Literal["together", "poe"] = Field(
        ..., description="Backend adapter serving this model"
    )
    api_model_id: str = Field(..., description="Model identifier sent to the provider")
    min_duration: int = Field(..., ge=1, description="Shortest clip in seconds")
    max_duration: int = Field(..., ge=1, description="Longest clip in seconds")
    duration_step: int = Field(1, ge=1, description="Granularity of valid durations")
    aspect_ratios: tuple[str, ...] = Field(..., description="Supported aspect ratios")
    default_aspect_ratio: str = "16:9"
    supports_image_reference: bool = False
    supports_sound_generation: bool = False
    description: str = ""


class VideoConfig(BaseModel):
    """Per-request video settings chosen by the user."""

    model_config = ConfigDict(frozen=True)

    model: str = Field("wan-ai/wan2.1-t2v-14b", description="Catalog model name")
    duration: int = Field(5, ge=1, description="Video duration in seconds")
    aspect_ratio: str = Field("16:9", description="Requested aspect ratio")
    use_image_reference: bool = False
    reference_image_url: str = ""
    enable_sound: bool = False
    # Prompt generation only
    brand_name: str = "XOOBAY"
    brand_url: str = "https://www.xoobay.com/"
    target_language: Literal["zh-CN", "en", "ja", "ko"] = "zh-CN"
    video_style: Literal["product-demo", "lifestyle", "cinematic", "minimal"] = "product-demo"
    system_prompt: str = ""


class _VideoResultBase(BaseModel):
    """Fields shared by every video generation state."""

    model_config = ConfigDict(frozen=True)

    result_type: ClassVar[str] = "text"

    prompt: str = Field("", description="Generated prompt used for the video")
    task_id: Optional[str] = Field(None, description="Provider task identifier")
    progress: Optional[int] = Field(
        None, ge=0, le=100, description="Advisory progress percentage"
    )
    duration: Optional[int] = Field(None, description="Video length in seconds")
    provider_status: Optional[str] = Field(None, description="Raw status reported by the provider")

    @property
    def type(self) -> str:
        return self.result_type

    @property
    def status(self) -> str:
        return self.state  # type: ignore[attr-defined]

    @property
    def content(self) -> str:
        return ""

    @property
    def is_terminal(self) -> bool:
        return self.status in ("completed", "failed")

    def with_prompt(self, prompt: str) -> "VideoGenerationResult":
        """Return a copy carrying the given prompt."""
        return self.model_copy(update={"prompt": prompt})  # type: ignore[return-value]

    def to_payload(self) -> dict[str, Any]:
        """Serialize to the camelCase shape rendered by the extension."""
        payload: dict[str, Any] = {
            "type": self.type,
            "status": self.status,
            "content": self.content,
        }
        optional = {
            "videoUrl": getattr(self, "video_url", None),
            "thumbnailUrl": getattr(self, "thumbnail_url", None),
            "duration": self.duration,
            "prompt": self.prompt or None,
            "taskId": self.task_id,
            "progress": self.progress,
            "error": getattr(self, "message", None) or None,
        }
        payload.update({key: value for key, value in optional.items() if value is not None})
        return payload


class VideoPending(_VideoResultBase):
    """Task accepted by the provider but not running yet."""

    result_type: ClassVar[str] = "pending"

    state: Literal["pending"] = "pending"
    task_id: str = Field(..., min_length=1)


class VideoProcessing(_VideoResultBase):
    """Task currently rendering, or a poll that could not be read."""

    result_type: ClassVar[str] = "pending"

    state: Literal["processing"] = "processing"
    task_id: str = Field(..., min_length=1)


class VideoCompleted(_VideoResultBase):
    """Rendered video with a downloadable URL."""

    result_type: ClassVar[str] = "video"

    state: Literal["completed"] = "completed"
    video_url: str = Field(..., min_length=1, description="Download URL")
    thumbnail_url: Optional[str] = None
    progress: Optional[int] = Field(100, ge=0, le=100)

    @property
    def content(self) -> str:
        return self.video_url


class VideoFailed(_VideoResultBase):
    """No video; may carry the generated prompt as fallback content."""

    result_type: ClassVar[str] = "text"

    state: Literal["failed"] = "failed"
    message: str = Field("", description="Reason the video is missing")
    fallback_text: str = Field("", description="Text shown in place of the video")

    @property
    def content(self) -> str:
        return self.fallback_text

    @classmethod
    def with_fallback(cls, prompt: str, message: str = "", **kwargs: Any) -> "VideoFailed":
        """Failed result that hands the prompt back as fallback content."""
        return cls(prompt=prompt, fallback_text=prompt, message=message, **kwargs)


VideoGenerationResult = Annotated[
    Union[VideoPending, VideoProcessing, VideoCompleted, VideoFailed],
    Field(discriminator="state"),
]


class VideoResponse(BaseModel):
    """Result of one workflow stage plus the error to show, if any."""

    model_config = ConfigDict(frozen=True)

    result: VideoGenerationResult
    error: Optional[str] = None

    def to_payload(self) -> dict[str, Any]:
        return {"result": self.result.to_payload(), "error": self.error}


class PromptResult(BaseModel):
    """Output of the video prompt generator."""

    model_config = ConfigDict(frozen=True)

    prompt: str = ""
    error: Optional[str] = None
