"""Prompt templates for page analysis and video prompt synthesis."""

from __future__ import annotations

from typing import Literal

from .integrations.video_generation.types import VideoConfig

LANGUAGE_NAMES = {
    "zh-CN": "Simplified Chinese",
    "en": "English",
    "ja": "Japanese",
    "ko": "Korean",
}

STYLE_DIRECTIONS = {
    "product-demo": "a clear product demonstration that shows the item in use and highlights its key features",
    "lifestyle": "a lifestyle scene with real people enjoying the product in an everyday setting",
    "cinematic": "a cinematic shot with dramatic lighting, smooth camera moves and a premium mood",
    "minimal": "a minimal, clean composition on a plain background with slow, precise motion",
}

VIDEO_SYSTEM_PROMPT = """You are an expert director of short e-commerce videos.
Turn the product description you receive into ONE prompt for a text-to-video model.

Requirements:
- Style: {style}.
- Length: about {duration} seconds, aspect ratio {aspect_ratio}. Describe a single continuous shot or at most three short shots.
- Brand: {brand_name} ({brand_url}). Mention the brand only if it fits naturally.
- Describe subject, setting, camera movement, lighting and mood in concrete visual terms.
- Do not include on-screen text, logos you were not given, or dialogue.
- Write any spoken or caption language in {language}, but write the prompt itself in English.

Return only the video prompt, with no preamble or explanation."""


def build_video_system_prompt(config: VideoConfig) -> str:
    """System prompt for stage one, honoring a caller-supplied override."""
    if config.system_prompt.strip():
        return config.system_prompt
    return VIDEO_SYSTEM_PROMPT.format(
        style=STYLE_DIRECTIONS[config.video_style],
        duration=config.duration,
        aspect_ratio=config.aspect_ratio,
        brand_name=config.brand_name,
        brand_url=config.brand_url,
        language=LANGUAGE_NAMES[config.target_language],
    )


def build_prompt(
    page_content: str,
    format_template: str,
    format_type: Literal["json", "xml", "custom"],
) -> str:
    """Wrap page content with an output-format instruction."""
    if format_type == "json":
        format_instruction = (
            "Please analyze the content and return the result in the following JSON format. "
            "Only return valid JSON, no other text:\n\n"
            f"```json\n{format_template}\n```"
        )
    elif format_type == "xml":
        format_instruction = (
            "Please analyze the content and return the result in the following XML format. "
            "Only return valid XML, no other text:\n\n"
            f"```xml\n{format_template}\n```"
        )
    else:
        format_instruction = format_template

    return f"{format_instruction}\n\n---\n\nHere is the content to analyze:\n\n{page_content}"
