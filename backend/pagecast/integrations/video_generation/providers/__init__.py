"""Video generation provider implementations."""

from .base import VideoProvider
from .poe import PoeProvider
from .together import TogetherProvider

__all__ = ["VideoProvider", "PoeProvider", "TogetherProvider"]
