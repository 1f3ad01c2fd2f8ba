"""웹훅 로봇 클라이언트 (동기/비동기)."""

from __future__ import annotations

import json
from typing import Any, Mapping

from pydantic import BaseModel, ValidationError
from pydantic_core import PydanticSerializationError

from dingrobot.errors import DecodeError, RemoteRejectionError, SerializationError
from dingrobot.logging import get_logger
from dingrobot.protocols import AsyncWebhookTransport, WebhookTransport
from dingrobot.schemas import (
    AtParams,
    DingResponse,
    MarkdownMessage,
    MarkdownParams,
    TextMessage,
    TextParams,
)
from dingrobot.settings import RobotSettings, get_settings
from dingrobot.signing import Clock, gen_signed_url, now_millis
from dingrobot.transport import AsyncHTTPXTransport, HTTPXTransport

logger = get_logger("dingrobot.robot")

JSON_HEADERS = {"Content-Type": "application/json"}


def encode_message(msg: Any) -> bytes:
    """메시지를 압축 JSON 바이트로 직렬화한다.

    내장 메시지(pydantic 모델)는 alias 기준 필드명으로, 그 외에는 JSON 객체로
    인코딩 가능한 매핑만 허용한다.
    """
    if isinstance(msg, BaseModel):
        try:
            payload = msg.model_dump(mode="json", by_alias=True)
        except PydanticSerializationError as e:
            raise SerializationError(f"cannot serialize message: {e}") from e
    else:
        payload = msg
    if not isinstance(payload, Mapping):
        raise SerializationError(
            f"message must serialize to a JSON object, got {type(payload).__name__}"
        )
    try:
        return json.dumps(
            dict(payload), ensure_ascii=False, separators=(",", ":"), allow_nan=False
        ).encode()
    except (TypeError, ValueError) as e:
        raise SerializationError(f"cannot serialize message: {e}") from e


def decode_response(body: bytes) -> DingResponse:
    """응답 본문을 파싱하고 errcode != 0 이면 RemoteRejectionError를 던진다."""
    try:
        resp = DingResponse.model_validate_json(body)
    except ValidationError as e:
        raise DecodeError(f"invalid webhook response: {body[:200]!r}", body=body) from e
    if resp.errcode != 0:
        raise RemoteRejectionError(resp.errcode, resp.errmsg)
    return resp


def text_message(
    content: str, at_mobiles: list[str] | None = None, is_at_all: bool = False
) -> TextMessage:
    # 문자열 하나를 넘기면 글자 단위 목록이 되지 않도록 pydantic 검증에 맡긴다.
    try:
        return TextMessage(
            text=TextParams(content=content),
            at=AtParams(at_mobiles=[] if at_mobiles is None else at_mobiles, is_at_all=is_at_all),
        )
    except ValidationError as e:
        raise SerializationError(f"invalid text message: {e}") from e


def markdown_message(title: str, text: str) -> MarkdownMessage:
    try:
        return MarkdownMessage(markdown=MarkdownParams(title=title, text=text))
    except ValidationError as e:
        raise SerializationError(f"invalid markdown message: {e}") from e


class _RobotBase:
    def __init__(self, webhook: str, *, secret: str = "", clock: Clock | None = None) -> None:
        self.webhook = webhook
        self._secret = secret
        self._clock = clock or now_millis

    def set_secret(self, secret: str) -> None:
        """이후 전송에 사용할 서명 키를 설정한다. 빈 문자열이면 서명하지 않는다.

        secret은 동기화 없이 읽히므로 전송과 동시에 호출하지 않는다.
        """
        self._secret = secret

    @property
    def signed(self) -> bool:
        return bool(self._secret)

    def signed_url(self) -> str:
        if not self._secret:
            return self.webhook
        return self.webhook + gen_signed_url(self._secret, self._clock)

    def build_request(self, msg: Any) -> tuple[str, bytes]:
        """(요청 URL, 요청 본문)을 만든다. 서명은 직렬화가 성공한 뒤에만 계산한다."""
        body = encode_message(msg)
        return self.signed_url(), body

    def _log_dispatch(self, msg: Any) -> None:
        msgtype = msg.msgtype if isinstance(msg, (TextMessage, MarkdownMessage)) else "custom"
        logger.debug("webhook 전송", msgtype=msgtype, signed=self.signed)

    @staticmethod
    def _handle_response(body: bytes) -> None:
        resp = decode_response(body)
        logger.debug("webhook 응답", errcode=resp.errcode)


class Robot(_RobotBase):
    """동기 웹훅 로봇 클라이언트.

    참고:
    - 재시도/배치/큐잉은 하지 않는다. 실패는 즉시 호출자에게 예외로 전달된다.
    - transport를 주입하면 네트워크 없이 테스트할 수 있다.
    """

    def __init__(
        self,
        webhook: str,
        *,
        secret: str = "",
        transport: WebhookTransport | None = None,
        clock: Clock | None = None,
        timeout: float | None = None,
    ) -> None:
        super().__init__(webhook, secret=secret, clock=clock)
        self._owns_transport = transport is None
        self._transport = transport or HTTPXTransport(timeout=timeout)

    @classmethod
    def from_settings(cls, settings: RobotSettings | None = None, **kwargs: Any) -> Robot:
        settings = settings or get_settings()
        kwargs.setdefault("timeout", settings.timeout)
        return cls(settings.webhook, secret=settings.secret, **kwargs)

    def send(self, msg: Any) -> None:
        """메시지(내장 메시지 또는 JSON 객체로 직렬화 가능한 값)를 전송한다.

        Raises:
            SerializationError: 메시지 직렬화 실패
            TransportError: 네트워크/응답 읽기 실패
            DecodeError: 응답 본문이 봉투 형태가 아님
            RemoteRejectionError: errcode != 0
        """
        url, body = self.build_request(msg)
        self._log_dispatch(msg)
        data = self._transport.post(url, body, JSON_HEADERS)
        self._handle_response(data)

    def send_markdown(self, title: str, text: str) -> None:
        self.send(markdown_message(title, text))

    def send_text(
        self,
        content: str,
        at_mobiles: list[str] | None = None,
        is_at_all: bool = False,
    ) -> None:
        self.send(text_message(content, at_mobiles, is_at_all))

    def close(self) -> None:
        if self._owns_transport and isinstance(self._transport, HTTPXTransport):
            self._transport.close()

    def __enter__(self) -> Robot:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


class AsyncRobot(_RobotBase):
    """비동기 웹훅 로봇 클라이언트 (httpx.AsyncClient 기반)."""

    def __init__(
        self,
        webhook: str,
        *,
        secret: str = "",
        transport: AsyncWebhookTransport | None = None,
        clock: Clock | None = None,
        timeout: float | None = None,
    ) -> None:
        super().__init__(webhook, secret=secret, clock=clock)
        self._owns_transport = transport is None
        self._transport = transport or AsyncHTTPXTransport(timeout=timeout)

    @classmethod
    def from_settings(cls, settings: RobotSettings | None = None, **kwargs: Any) -> AsyncRobot:
        settings = settings or get_settings()
        kwargs.setdefault("timeout", settings.timeout)
        return cls(settings.webhook, secret=settings.secret, **kwargs)

    async def send(self, msg: Any) -> None:
        url, body = self.build_request(msg)
        self._log_dispatch(msg)
        data = await self._transport.post(url, body, JSON_HEADERS)
        self._handle_response(data)

    async def send_markdown(self, title: str, text: str) -> None:
        await self.send(markdown_message(title, text))

    async def send_text(
        self,
        content: str,
        at_mobiles: list[str] | None = None,
        is_at_all: bool = False,
    ) -> None:
        await self.send(text_message(content, at_mobiles, is_at_all))

    async def aclose(self) -> None:
        if self._owns_transport and isinstance(self._transport, AsyncHTTPXTransport):
            await self._transport.aclose()

    async def __aenter__(self) -> AsyncRobot:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()


def new_robot(webhook: str) -> Robot:
    """서명 없는 동기 로봇을 생성한다. 서명이 필요하면 set_secret()을 호출한다."""
    return Robot(webhook)
