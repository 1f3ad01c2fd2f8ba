from typing import Any, Mapping, Protocol, runtime_checkable


@runtime_checkable
class WebhookTransport(Protocol):
    """요청 1건을 실행하고 응답 본문 전체를 돌려주는 동기 전송 프로토콜."""

    def post(self, url: str, content: bytes, headers: Mapping[str, str]) -> bytes:
        ...


@runtime_checkable
class AsyncWebhookTransport(Protocol):
    """비동기 전송 프로토콜."""

    async def post(self, url: str, content: bytes, headers: Mapping[str, str]) -> bytes:
        ...


@runtime_checkable
class Roboter(Protocol):
    """웹훅 로봇 클라이언트 프로토콜."""

    def send(self, msg: Any) -> None:
        ...

    def send_markdown(self, title: str, text: str) -> None:
        ...

    def send_text(
        self,
        content: str,
        at_mobiles: list[str] | None = None,
        is_at_all: bool = False,
    ) -> None:
        ...

    def set_secret(self, secret: str) -> None:
        ...


@runtime_checkable
class AsyncRoboter(Protocol):
    async def send(self, msg: Any) -> None:
        ...

    async def send_markdown(self, title: str, text: str) -> None:
        ...

    async def send_text(
        self,
        content: str,
        at_mobiles: list[str] | None = None,
        is_at_all: bool = False,
    ) -> None:
        ...

    def set_secret(self, secret: str) -> None:
        ...
