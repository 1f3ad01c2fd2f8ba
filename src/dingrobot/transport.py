"""httpx 기반 기본 전송 구현."""

from __future__ import annotations

from typing import Mapping

import httpx

from dingrobot.errors import TransportError

# RequestError: 연결/타임아웃/본문 디코딩(gzip 손상 등) 실패, InvalidURL: 잘못된 웹훅 URL
_REQUEST_ERRORS = (httpx.RequestError, httpx.InvalidURL)
_READ_ERRORS = (httpx.RequestError, httpx.StreamError)


class HTTPXTransport:
    """httpx.Client 위의 동기 전송.

    client를 주입하지 않으면 내부에서 생성하고 close() 시 함께 닫는다.
    HTTP 상태 코드는 검사하지 않는다 (성공 여부는 응답 봉투의 errcode로 판단).
    """

    def __init__(self, client: httpx.Client | None = None, *, timeout: float | None = None) -> None:
        self._owns_client = client is None
        if client is None:
            client = httpx.Client(timeout=timeout) if timeout is not None else httpx.Client()
        self._client = client

    def post(self, url: str, content: bytes, headers: Mapping[str, str]) -> bytes:
        try:
            response = self._client.post(url, content=content, headers=dict(headers))
        except _REQUEST_ERRORS as e:
            raise TransportError(f"webhook request failed: {e}") from e
        try:
            return response.read()
        except _READ_ERRORS as e:
            raise TransportError(f"failed to read webhook response: {e}") from e

    def close(self) -> None:
        if self._owns_client:
            self._client.close()


class AsyncHTTPXTransport:
    """httpx.AsyncClient 위의 비동기 전송."""

    def __init__(
        self,
        client: httpx.AsyncClient | None = None,
        *,
        timeout: float | None = None,
    ) -> None:
        self._owns_client = client is None
        if client is None:
            client = httpx.AsyncClient(timeout=timeout) if timeout is not None else httpx.AsyncClient()
        self._client = client

    async def post(self, url: str, content: bytes, headers: Mapping[str, str]) -> bytes:
        try:
            response = await self._client.post(url, content=content, headers=dict(headers))
        except _REQUEST_ERRORS as e:
            raise TransportError(f"webhook request failed: {e}") from e
        try:
            return await response.aread()
        except _READ_ERRORS as e:
            raise TransportError(f"failed to read webhook response: {e}") from e

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()
