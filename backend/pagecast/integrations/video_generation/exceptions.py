"""Custom exceptions for video generation module."""


class VideoGenerationError(Exception):
    """Base exception for video generation errors."""

    def __init__(self, message: str, provider: str | None = None):
        self.message = message
        self.provider = provider
        super().__init__(message)


class UnknownVideoModelError(VideoGenerationError):
    """Raised when a video model is not in the catalog."""

    def __init__(self, model: str):
        self.model = model
        super().__init__(f"Unknown video model: {model}")


class ProviderNotFoundError(VideoGenerationError):
    """Raised when an unknown provider is requested."""

    def __init__(self, provider: str):
        super().__init__(f"Unknown video provider: {provider}", provider)


class ProviderAuthenticationError(VideoGenerationError):
    """Raised when a provider API key is missing or rejected."""

    def __init__(self, provider: str, message: str = "API Key not configured"):
        super().__init__(message, provider)


class ProviderRequestError(VideoGenerationError):
    """Raised when a provider answers with a non-2xx response."""

    def __init__(self, provider: str, status_code: int | None = None, details: str | None = None):
        self.status_code = status_code
        self.details = details
        super().__init__(details or f"API Error: {status_code}", provider)


class InvalidConfigurationError(VideoGenerationError):
    """Raised when a video config is not legal for the selected model."""

    def __init__(self, provider: str | None, details: str):
        super().__init__(f"Invalid video configuration: {details}", provider)


class VideoGenerationTimeoutError(VideoGenerationError):
    """Raised when a caller-side watch gives up on a task."""

    def __init__(self, provider: str | None, task_id: str, timeout_seconds: float):
        self.task_id = task_id
        self.timeout_seconds = timeout_seconds
        super().__init__(
            f"Video generation timed out after {timeout_seconds}s: {task_id}",
            provider,
        )
