"""OpenAI-compatible chat-completion client."""

import logging
from typing import Any, Optional

import httpx
from pydantic import BaseModel, ConfigDict

from ..config import AIConfig, Settings
from .video_generation.exceptions import ProviderRequestError

logger = logging.getLogger(__name__)

CHAT_TIMEOUT = 60.0


class AIResponse(BaseModel):
    """Generated text, or the error that prevented it."""

    model_config = ConfigDict(frozen=True)

    content: str = ""
    error: Optional[str] = None


def get_headers(api_key: str) -> dict[str, str]:
    """Get HTTP headers for API requests."""
    return {
        "Content-Type": "application/json",
        "Authorization": f"Bearer {api_key}",
    }


def is_success(response: httpx.Response) -> bool:
    return 200 <= response.status_code < 300


def extract_error_message(response: httpx.Response) -> str | None:
    """
    Best-effort error message from a failed response body.

    Looks at ``error.message`` first, then a plain ``error`` string, then a
    top-level ``message``. Returns None when the body is not JSON or has
    none of these.
    """
    try:
        data = response.json()
    except ValueError:
        return None
    if not isinstance(data, dict):
        return None
    error = data.get("error")
    if isinstance(error, dict) and error.get("message"):
        return str(error["message"])
    if isinstance(error, str) and error:
        return error
    if data.get("message"):
        return str(data["message"])
    return None


def first_message(data: Any) -> dict[str, Any]:
    """Return ``choices[0].message`` or an empty dict."""
    if not isinstance(data, dict):
        return {}
    choices = data.get("choices") or []
    if not choices or not isinstance(choices[0], dict):
        return {}
    message = choices[0].get("message")
    return message if isinstance(message, dict) else {}


def message_text(data: Any) -> str:
    content = first_message(data).get("content")
    return content if isinstance(content, str) else ""


async def request_chat_completion(
    base_url: str,
    api_key: str,
    messages: list[dict[str, Any]],
    *,
    model: str,
    temperature: float | None = None,
    extra: dict[str, Any] | None = None,
    provider: str = "chat",
) -> dict[str, Any]:
    """
    Issue one chat-completion call and return the decoded body.

    Args:
        base_url: OpenAI-compatible API root
        api_key: Bearer token
        messages: OpenAI-style message list
        model: Model identifier sent to the endpoint
        temperature: Sampling temperature, omitted when None
        extra: Additional body fields
        provider: Provider name attached to raised errors

    Raises:
        ProviderRequestError: On any non-2xx response
    """
    payload: dict[str, Any] = {
        "model": model,
        "messages": messages,
    }
    if temperature is not None:
        payload["temperature"] = temperature
    if extra:
        payload.update(extra)

    url = f"{base_url}/chat/completions"
    logger.info("[CHAT] POST %s model=%s", url, model)

    async with httpx.AsyncClient() as client:
        response = await client.post(
            url,
            headers=get_headers(api_key),
            json=payload,
            timeout=CHAT_TIMEOUT,
        )

        if not is_success(response):
            details = extract_error_message(response)
            logger.warning("[CHAT] status=%s error=%s", response.status_code, details)
            raise ProviderRequestError(provider, response.status_code, details)

        return response.json()


async def send_to_ai(
    user_content: str,
    settings: Settings,
    ai_config: AIConfig | None = None,
) -> AIResponse:
    """Send page content to the configured chat model."""
    if ai_config is None:
        ai_config = AIConfig()

    if not settings.api_key:
        return AIResponse(error="API Key not configured")

    messages = [
        {"role": "system", "content": ai_config.system_prompt},
        {"role": "user", "content": user_content},
    ]
    extra = {"web_search": True} if ai_config.enable_web_search else None

    try:
        data = await request_chat_completion(
            settings.base_url,
            settings.api_key,
            messages,
            model=settings.model,
            temperature=ai_config.temperature,
            extra=extra,
        )
    except ProviderRequestError as exc:
        return AIResponse(error=exc.message)
    except (httpx.HTTPError, ValueError) as exc:
        logger.warning("[CHAT] request failed: %s", exc)
        return AIResponse(error=str(exc))

    return AIResponse(content=message_text(data))
