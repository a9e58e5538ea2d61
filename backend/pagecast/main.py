"""FastAPI entrypoint exposing chat and video workflows to the browser extension."""

from __future__ import annotations

from dotenv import load_dotenv

load_dotenv()

import logging
from typing import Any, Optional

from fastapi import Depends, FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from .config import AIConfig, Settings
from .integrations.chat import send_to_ai
from .integrations.video_generation import (
    VIDEO_MODELS,
    VideoConfig,
    generate_video,
    poll_video_task,
)
from .prompts import build_video_system_prompt

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

app = FastAPI(title="Pagecast API")
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


class SettingsOverride(BaseModel):
    """Settings sent by the extension; empty values fall back to the server environment."""

    api_key: Optional[str] = None
    base_url: Optional[str] = None
    model: Optional[str] = None
    video_api_key: Optional[str] = None
    video_base_url: Optional[str] = None


class AIRequest(BaseModel):
    content: str = Field(..., description="Page content or selected text")
    ai_config: AIConfig = Field(default_factory=AIConfig)
    settings: Optional[SettingsOverride] = None


class VideoRequest(BaseModel):
    product_description: str = Field(..., description="Product text the video is about")
    video_config: VideoConfig = Field(default_factory=VideoConfig)
    video_system_prompt: Optional[str] = Field(
        None, description="Stage-one system prompt; built from video_config when omitted"
    )
    settings: Optional[SettingsOverride] = None


class TaskPollRequest(BaseModel):
    provider: str = "together"
    settings: Optional[SettingsOverride] = None


def get_settings() -> Settings:
    """Dependency returning settings from the environment."""
    return Settings.from_env()


def _resolve_settings(base: Settings, override: SettingsOverride | None) -> Settings:
    try:
        return base.merged(override.model_dump() if override else None)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc


@app.get("/health")
async def health_check() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "ok"}


@app.get("/video/models")
async def list_video_models() -> dict[str, Any]:
    """Video model catalog with capability flags and duration ranges."""
    return {"models": [model.model_dump() for model in VIDEO_MODELS]}


@app.post("/ai")
async def ai_request(request: AIRequest, settings: Settings = Depends(get_settings)) -> dict[str, Any]:
    """Send page content to the configured chat model."""
    logger.info("[REQUEST] ai chars=%d", len(request.content))
    response = await send_to_ai(
        request.content,
        _resolve_settings(settings, request.settings),
        request.ai_config,
    )
    return response.model_dump()


@app.post("/video")
async def video_request(request: VideoRequest, settings: Settings = Depends(get_settings)) -> dict[str, Any]:
    """Generate a video prompt and start (or finish) video generation."""
    logger.info("[REQUEST] video model=%s", request.video_config.model)
    system_prompt = request.video_system_prompt or build_video_system_prompt(request.video_config)
    response = await generate_video(
        request.product_description,
        system_prompt,
        request.video_config,
        _resolve_settings(settings, request.settings),
    )
    return response.to_payload()


@app.get("/video/tasks/{task_id}")
async def video_task_status(
    task_id: str,
    provider: str = "together",
    settings: Settings = Depends(get_settings),
) -> dict[str, Any]:
    """Poll a video task once. The extension decides how often to call this."""
    response = await poll_video_task(task_id, settings, provider)
    return response.to_payload()


@app.post("/video/tasks/{task_id}")
async def video_task_poll(
    task_id: str,
    request: TaskPollRequest,
    settings: Settings = Depends(get_settings),
) -> dict[str, Any]:
    """Poll a video task once with the same settings overrides used to submit it."""
    response = await poll_video_task(
        task_id,
        _resolve_settings(settings, request.settings),
        request.provider,
    )
    return response.to_payload()
