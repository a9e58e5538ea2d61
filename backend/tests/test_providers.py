"""Tests for video generation providers (Together, POE)."""

import pytest

from pagecast.integrations.video_generation import (
    VideoCompleted,
    VideoConfig,
    VideoFailed,
    VideoPending,
    VideoProcessing,
    resolve_video_model,
)
from pagecast.integrations.video_generation.exceptions import (
    InvalidConfigurationError,
    ProviderAuthenticationError,
    ProviderRequestError,
)
from pagecast.integrations.video_generation.providers import PoeProvider, TogetherProvider


class TestTogetherProvider:
    """Tests for TogetherProvider."""

    def test_init_with_api_key(self):
        provider = TogetherProvider(api_key="video-key", base_url="https://api.together.test/v1/")
        assert provider.api_key == "video-key"
        assert provider.base_url == "https://api.together.test/v1"
        assert provider.provider_name == "together"

    def test_init_default_base_url(self):
        assert TogetherProvider(api_key="video-key").base_url == "https://api.together.xyz/v1"

    def test_init_missing_key(self):
        with pytest.raises(ProviderAuthenticationError) as exc_info:
            TogetherProvider(api_key="")
        assert exc_info.value.message == "Video API Key not configured"

    def test_parse_submit_completed(self):
        provider = TogetherProvider(api_key="k")
        result = provider._parse_submit_response(
            {"id": "task_1", "status": "completed", "result": {"url": "https://x/v.mp4"}},
            "prompt",
            5,
        )
        assert isinstance(result, VideoCompleted)
        assert result.video_url == "https://x/v.mp4"
        assert result.duration == 5
        assert result.task_id == "task_1"
        assert result.progress == 100

    def test_parse_submit_completed_without_url_is_pending(self):
        provider = TogetherProvider(api_key="k")
        result = provider._parse_submit_response({"id": "task_1", "status": "completed"}, "prompt", 5)
        assert isinstance(result, VideoPending)
        assert result.provider_status == "completed"
        assert result.progress == 0

    def test_parse_submit_defaults_status_to_pending(self):
        provider = TogetherProvider(api_key="k")
        result = provider._parse_submit_response({"id": "task_1"}, "prompt", 5)
        assert result.status == "pending"
        assert result.task_id == "task_1"
        assert result.prompt == "prompt"

    def test_parse_submit_processing(self):
        provider = TogetherProvider(api_key="k")
        result = provider._parse_submit_response({"id": "task_1", "status": "processing"}, "p", 5)
        assert isinstance(result, VideoProcessing)
        assert result.progress == 0

    def test_parse_submit_failed(self):
        provider = TogetherProvider(api_key="k")
        result = provider._parse_submit_response({"id": "t", "status": "failed", "error": "x"}, "prompt", 5)
        assert isinstance(result, VideoFailed)
        assert result.fallback_text == "prompt"
        assert result.message == "x"
        assert result.provider_status == "failed"

    def test_parse_submit_missing_id(self):
        provider = TogetherProvider(api_key="k")
        with pytest.raises(ProviderRequestError):
            provider._parse_submit_response({"status": "queued"}, "p", 5)

    def test_parse_status_progress_heuristic(self):
        provider = TogetherProvider(api_key="k")
        assert provider._parse_status_response({"status": "processing"}, "t").progress == 50
        assert provider._parse_status_response({"status": "queued"}, "t").progress == 10

    def test_parse_status_failed(self):
        provider = TogetherProvider(api_key="k")
        result = provider._parse_status_response({"status": "failed", "error": "content policy violation"}, "t")
        assert isinstance(result, VideoFailed)
        assert result.message == "content policy violation"
        assert result.fallback_text == ""

    def test_parse_status_failed_nested_error(self):
        provider = TogetherProvider(api_key="k")
        result = provider._parse_status_response({"status": "failed", "error": {"message": "nsfw"}}, "t")
        assert result.message == "nsfw"

    def test_parse_status_failed_generic_message(self):
        provider = TogetherProvider(api_key="k")
        assert provider._parse_status_response({"status": "failed"}, "t").message == "Video generation failed"

    @pytest.mark.asyncio
    async def test_submit_posts_payload(self, mock_http, make_response, task_pending_body, luma_config_with_extras):
        provider = TogetherProvider(api_key="video-key", base_url="https://api.together.test/v1")
        mock_http.post.return_value = make_response(200, task_pending_body)

        result = await provider.submit("A cat", luma_config_with_extras, resolve_video_model("Luma/ray2"))

        assert result.task_id == "task_001"
        call = mock_http.post.call_args
        assert call.args[0] == "https://api.together.test/v1/video/generations"
        assert call.kwargs["headers"]["Authorization"] == "Bearer video-key"
        assert call.kwargs["json"] == {
            "model": "Luma/ray2",
            "prompt": "A cat",
            "duration_seconds": 9,
            "aspect_ratio": "21:9",
            "image_url": "https://example.com/product.png",
            "audio": True,
        }

    @pytest.mark.asyncio
    async def test_submit_error_response(self, mock_http, make_response, text_to_video_config):
        provider = TogetherProvider(api_key="k")
        mock_http.post.return_value = make_response(400, {"error": {"message": "bad prompt"}})

        with pytest.raises(ProviderRequestError) as exc_info:
            await provider.submit("p", text_to_video_config, resolve_video_model(text_to_video_config.model))
        assert exc_info.value.status_code == 400
        assert exc_info.value.message == "bad prompt"

    @pytest.mark.asyncio
    async def test_get_status_uses_task_url(self, mock_http, make_response):
        provider = TogetherProvider(api_key="k", base_url="https://api.together.test/v1")
        mock_http.get.return_value = make_response(200, {"id": "task_9", "status": "processing"})

        result = await provider.get_status("task_9")

        assert mock_http.get.call_args.args[0] == "https://api.together.test/v1/video/generations/task_9"
        assert result.status == "processing"
        assert result.task_id == "task_9"

    @pytest.mark.asyncio
    async def test_get_status_unparseable_error_body(self, mock_http, make_response):
        provider = TogetherProvider(api_key="k")
        mock_http.get.return_value = make_response(502, json_error=True)

        with pytest.raises(ProviderRequestError) as exc_info:
            await provider.get_status("task_9")
        assert exc_info.value.message == "API Error: 502"


class TestPoeProvider:
    """Tests for PoeProvider."""

    def test_init_missing_key(self):
        with pytest.raises(ProviderAuthenticationError):
            PoeProvider(api_key=None)

    def test_build_messages_plain(self):
        provider = PoeProvider(api_key="k")
        assert provider._build_messages("A cat", {}) == [{"role": "user", "content": "A cat"}]

    def test_build_messages_with_image(self):
        provider = PoeProvider(api_key="k")
        messages = provider._build_messages("A cat", {"image_url": "https://example.com/cat.png"})
        assert messages[0]["content"] == [
            {"type": "text", "text": "A cat"},
            {"type": "image_url", "image_url": {"url": "https://example.com/cat.png"}},
        ]

    @pytest.mark.asyncio
    async def test_submit_attachment_url(self, mock_http, make_response, poe_config):
        provider = PoeProvider(api_key="sk-text-key", base_url="https://api.poe.test/v1")
        mock_http.post.return_value = make_response(
            200,
            {
                "choices": [
                    {
                        "message": {
                            "content": "Your video is ready",
                            "attachments": [{"url": "https://cdn.poe.test/v.mp4"}],
                        }
                    }
                ]
            },
        )

        result = await provider.submit("A cat", poe_config, resolve_video_model("Veo-3.1"))

        assert isinstance(result, VideoCompleted)
        assert result.video_url == "https://cdn.poe.test/v.mp4"
        assert result.duration == 8
        body = mock_http.post.call_args.kwargs["json"]
        assert body["model"] == "Veo-3"
        assert mock_http.post.call_args.args[0] == "https://api.poe.test/v1/chat/completions"

    @pytest.mark.asyncio
    async def test_submit_text_only_reply(self, mock_http, make_response, poe_config):
        provider = PoeProvider(api_key="k")
        mock_http.post.return_value = make_response(
            200, {"choices": [{"message": {"content": "I can describe it instead"}}]}
        )

        result = await provider.submit("A cat", poe_config, resolve_video_model("Veo-3.1"))

        assert isinstance(result, VideoFailed)
        assert result.content == "I can describe it instead"
        assert result.message == ""

    @pytest.mark.asyncio
    async def test_submit_never_sends_image_to_incapable_model(self, mock_http, make_response):
        provider = PoeProvider(api_key="k")
        mock_http.post.return_value = make_response(200, {"choices": []})
        config = VideoConfig(
            model="Veo-3.1",
            use_image_reference=True,
            reference_image_url="https://example.com/a.png",
        )
        incapable = resolve_video_model("Veo-3.1").model_copy(update={"supports_image_reference": False})

        await provider.submit("A cat", config, incapable)

        assert mock_http.post.call_args.kwargs["json"]["messages"][0]["content"] == "A cat"

    @pytest.mark.asyncio
    async def test_get_status_not_supported(self):
        provider = PoeProvider(api_key="k")
        with pytest.raises(InvalidConfigurationError):
            await provider.get_status("anything")

    def test_describe_failure(self):
        provider = PoeProvider(api_key="k")
        message = provider.describe_failure(ProviderRequestError("poe", 500, "overloaded"))
        assert message == "Video generation failed: overloaded. Showing generated prompt instead."
