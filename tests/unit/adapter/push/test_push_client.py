"""Unit tests for the push webhook client."""

from unittest.mock import AsyncMock, MagicMock, patch

import httpx
import pytest

from thirdlogin.adapter.push import HttpPushClient
from thirdlogin.config import PushSettings


def status_response(status_code: int) -> MagicMock:
    response = MagicMock()
    response.status_code = status_code
    return response


@pytest.fixture
def push_client() -> HttpPushClient:
    return HttpPushClient(
        PushSettings(server_addresses="push-a:8080, push-b:8080", template_id=27)
    )


class TestPush:
    """Tests for push method."""

    @pytest.mark.asyncio
    async def test_push_sends_notice(self, push_client):
        """Should post the templated notice to the first server."""
        with patch("httpx.AsyncClient") as mock_client:
            post = AsyncMock(return_value=status_response(200))
            mock_client.return_value.__aenter__.return_value.post = post

            accepted = await push_client.push("u-1", "hello")

        assert accepted is True
        post.assert_called_once()
        assert post.call_args.args[0] == "http://push-a:8080/inner/push/sendNotice"
        body = post.call_args.kwargs["json"]
        assert body["userId"] == "u-1"
        assert body["templateId"] == 27
        assert body["pushType"] == 3
        assert body["params"] == {"im_content": "hello"}

    @pytest.mark.asyncio
    async def test_push_falls_over_to_next_server(self, push_client):
        """An unreachable or rejecting server is skipped."""
        with patch("httpx.AsyncClient") as mock_client:
            post = AsyncMock(
                side_effect=[httpx.ConnectError("refused"), status_response(200)]
            )
            mock_client.return_value.__aenter__.return_value.post = post

            accepted = await push_client.push("u-1", "hello")

        assert accepted is True
        assert post.call_args.args[0] == "http://push-b:8080/inner/push/sendNotice"

    @pytest.mark.asyncio
    async def test_push_all_servers_reject(self, push_client):
        with patch("httpx.AsyncClient") as mock_client:
            mock_client.return_value.__aenter__.return_value.post = AsyncMock(
                return_value=status_response(503)
            )

            assert await push_client.push("u-1", "hello") is False

    @pytest.mark.asyncio
    async def test_push_without_servers(self):
        assert await HttpPushClient(PushSettings()).push("u-1", "hello") is False
