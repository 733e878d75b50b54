import time
from typing import Any

import httpx

from .models import Request, Response
from .types import Middleware


class HttpClient:
    def __init__(
        self,
        middlewares: list[Middleware] | None = None,
        default_timeout: float | None = None,
        follow_redirects: bool = True,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._middlewares = middlewares or []
        self._default_timeout = default_timeout
        self._follow_redirects = follow_redirects
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def _ensure_client(self) -> httpx.AsyncClient:
        if self._client is None:
            kwargs: dict[str, Any] = {"follow_redirects": self._follow_redirects}
            if self._default_timeout is not None:
                kwargs["timeout"] = self._default_timeout
            if self._transport is not None:
                kwargs["transport"] = self._transport
            self._client = httpx.AsyncClient(**kwargs)
        return self._client

    async def close(self) -> None:
        if self._client:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "HttpClient":
        await self._ensure_client()
        return self

    async def __aexit__(self, *_args: Any) -> None:
        await self.close()

    async def send(self, request: Request) -> Response:
        if self._middlewares:
            return await self._execute_with_middleware(request, 0)
        return await self._do_request(request)

    async def _execute_with_middleware(self, request: Request, index: int) -> Response:
        if index >= len(self._middlewares):
            return await self._do_request(request)

        middleware = self._middlewares[index]

        async def next_fn(req: Request) -> Response:
            return await self._execute_with_middleware(req, index + 1)

        return await middleware(request, next_fn)

    async def _do_request(self, request: Request) -> Response:
        client = await self._ensure_client()
        start_time = time.time()

        http_response = await client.request(
            method=request.method,
            url=request.url,
            headers=request.headers,
            content=request.body or None,
            timeout=request.timeout if request.timeout is not None else httpx.USE_CLIENT_DEFAULT,
        )

        latency_ms = int((time.time() - start_time) * 1000)
        encoding = http_response.headers.encoding

        return Response(
            status_code=http_response.status_code,
            headers=[
                (key.decode(encoding), value.decode(encoding))
                for key, value in http_response.headers.raw
            ],
            body=http_response.content,
            latency_ms=latency_ms,
            request=request,
        )

