import pytest
import httpx
from unittest.mock import AsyncMock, patch, MagicMock

from libs.http_client.client import HttpClient
from libs.http_client.models import Request, Response


def _mock_response(status_code=200, headers=None, content=b""):
    mock_response = MagicMock()
    mock_response.status_code = status_code
    mock_response.headers = httpx.Headers(headers or {})
    mock_response.content = content
    return mock_response


class TestHttpClientSend:
    @pytest.mark.asyncio
    async def test_simple_get(self):
        mock_response = _mock_response(
            headers={"content-type": "application/json"},
            content=b'{"ok": true}',
        )

        with patch("httpx.AsyncClient.request", new_callable=AsyncMock) as mock_request:
            mock_request.return_value = mock_response
            async with HttpClient() as client:
                response = await client.send(
                    Request(method="GET", url="https://api.example.com/data")
                )
                assert response.status_code == 200
                assert response.text() == '{"ok": true}'
                assert response.content_type == "application/json"
                assert mock_request.call_args.kwargs["method"] == "GET"

    @pytest.mark.asyncio
    async def test_post_with_body(self):
        with patch("httpx.AsyncClient.request", new_callable=AsyncMock) as mock_request:
            mock_request.return_value = _mock_response(status_code=201)
            async with HttpClient() as client:
                response = await client.send(
                    Request(
                        method="POST",
                        url="https://api.example.com/users",
                        headers={"Content-Type": "application/json; charset=utf-8"},
                        body='{"name": "tést"}'.encode("utf-8"),
                    )
                )
                assert response.status_code == 201
                call_args = mock_request.call_args
                assert call_args.kwargs["method"] == "POST"
                assert call_args.kwargs["content"] == '{"name": "tést"}'.encode("utf-8")
                assert call_args.kwargs["headers"] == {
                    "Content-Type": "application/json; charset=utf-8"
                }

    @pytest.mark.asyncio
    async def test_empty_body_sends_no_content(self):
        with patch("httpx.AsyncClient.request", new_callable=AsyncMock) as mock_request:
            mock_request.return_value = _mock_response()
            async with HttpClient() as client:
                await client.send(Request(method="DELETE", url="https://api.example.com/users/1"))
                assert mock_request.call_args.kwargs["content"] is None

    @pytest.mark.asyncio
    async def test_uses_client_default_timeout_when_unset(self):
        with patch("httpx.AsyncClient.request", new_callable=AsyncMock) as mock_request:
            mock_request.return_value = _mock_response()
            async with HttpClient() as client:
                await client.send(Request(method="GET", url="https://api.example.com/data"))
                assert mock_request.call_args.kwargs["timeout"] is httpx.USE_CLIENT_DEFAULT

    @pytest.mark.asyncio
    async def test_request_timeout_is_forwarded(self):
        with patch("httpx.AsyncClient.request", new_callable=AsyncMock) as mock_request:
            mock_request.return_value = _mock_response()
            async with HttpClient(default_timeout=12.5) as client:
                await client.send(
                    Request(method="GET", url="https://api.example.com/data", timeout=12.5)
                )
                assert mock_request.call_args.kwargs["timeout"] == 12.5

    @pytest.mark.asyncio
    async def test_headers_keep_order_and_casing(self):
        mock_response = _mock_response(
            headers=[
                ("Date", "Mon, 19 Oct 2026 10:00:00 GMT"),
                ("X-Trace", "a"),
                ("Content-Type", "text/plain"),
                ("X-Trace", "b"),
            ],
        )

        with patch("httpx.AsyncClient.request", new_callable=AsyncMock) as mock_request:
            mock_request.return_value = mock_response
            async with HttpClient() as client:
                response = await client.send(
                    Request(method="GET", url="https://api.example.com/data")
                )

        assert response.headers == [
            ("Date", "Mon, 19 Oct 2026 10:00:00 GMT"),
            ("X-Trace", "a"),
            ("Content-Type", "text/plain"),
            ("X-Trace", "b"),
        ]

    @pytest.mark.asyncio
    async def test_send_runs_middlewares_in_order(self):
        seen = []

        def tagging(tag):
            async def middleware(request, next):
                seen.append(tag)
                return await next(request.with_headers(**{f"X-{tag}": "1"}))

            return middleware

        with patch("httpx.AsyncClient.request", new_callable=AsyncMock) as mock_request:
            mock_request.return_value = _mock_response()
            async with HttpClient(middlewares=[tagging("First"), tagging("Second")]) as client:
                await client.send(Request(method="GET", url="https://example.com"))

            headers = mock_request.call_args.kwargs["headers"]

        assert seen == ["First", "Second"]
        assert headers == {"X-First": "1", "X-Second": "1"}

    @pytest.mark.asyncio
    async def test_send_with_mock_transport(self):
        def handler(request: httpx.Request) -> httpx.Response:
            assert request.method == "PUT"
            assert request.content == b"payload"
            return httpx.Response(202, text="accepted")

        async with HttpClient(transport=httpx.MockTransport(handler)) as client:
            response = await client.send(
                Request(method="PUT", url="https://example.com/items/1", body=b"payload")
            )

        assert isinstance(response, Response)
        assert response.status_code == 202
        assert response.text() == "accepted"
        assert response.request.url == "https://example.com/items/1"

    @pytest.mark.asyncio
    async def test_follow_redirects_setting(self):
        def handler(request: httpx.Request) -> httpx.Response:
            if request.url.path == "/old":
                return httpx.Response(302, headers={"Location": "https://example.com/new"})
            return httpx.Response(200, text="moved here")

        transport = httpx.MockTransport(handler)
        request = Request(method="GET", url="https://example.com/old")

        async with HttpClient(transport=transport) as client:
            followed = await client.send(request)
        async with HttpClient(transport=transport, follow_redirects=False) as client:
            not_followed = await client.send(request)

        assert followed.status_code == 200
        assert followed.text() == "moved here"
        assert not_followed.status_code == 302

    @pytest.mark.asyncio
    async def test_close_releases_client(self):
        client = HttpClient()
        await client._ensure_client()
        assert client._client is not None
        await client.close()
        assert client._client is None
