"""Stage one of the video workflow: turn a product description into a video prompt."""

import logging

import httpx

from ...config import Settings
from ..chat import message_text, request_chat_completion
from .exceptions import ProviderRequestError
from .types import PromptResult

logger = logging.getLogger(__name__)

PROMPT_TEMPERATURE = 0.7


async def generate_video_prompt(
    product_description: str,
    video_system_prompt: str,
    settings: Settings,
) -> PromptResult:
    """
    Ask the text model for an optimized video prompt.

    Returns an empty prompt together with an error when the text key is
    missing, the endpoint rejects the call, or the model answers with no text.
    """
    if not settings.api_key:
        return PromptResult(error="Text API Key not configured")

    messages = [
        {"role": "system", "content": video_system_prompt},
        {"role": "user", "content": product_description},
    ]

    try:
        data = await request_chat_completion(
            settings.base_url,
            settings.api_key,
            messages,
            model=settings.model,
            temperature=PROMPT_TEMPERATURE,
            provider="prompt",
        )
    except ProviderRequestError as exc:
        return PromptResult(error=exc.details or f"Prompt API Error: {exc.status_code}")
    except (httpx.HTTPError, ValueError) as exc:
        logger.warning("[PROMPT] request failed: %s", exc)
        return PromptResult(error=str(exc))

    prompt = message_text(data)
    if not prompt.strip():
        return PromptResult(error="Failed to generate video prompt")

    logger.info("[PROMPT] generated %d chars", len(prompt))
    return PromptResult(prompt=prompt)
