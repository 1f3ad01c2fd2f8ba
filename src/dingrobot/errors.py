"""dingrobot 예외 계층."""

from __future__ import annotations


class DingRobotError(Exception):
    """dingrobot 전송 실패의 공통 부모 예외."""


class SerializationError(DingRobotError):
    """메시지를 JSON 객체로 직렬화할 수 없을 때 (호출자 버그, 재시도 불필요)."""


class TransportError(DingRobotError):
    """네트워크/연결/응답 본문 읽기 실패 (일시적일 수 있음, 호출자 판단으로 재시도)."""


class DecodeError(DingRobotError):
    """응답 본문이 JSON이 아니거나 {"errcode", "errmsg"} 형태가 아닐 때."""

    def __init__(self, message: str, body: bytes = b"") -> None:
        super().__init__(message)
        self.body = body


class RemoteRejectionError(DingRobotError):
    """응답 봉투의 errcode가 0이 아닐 때.

    errcode의 의미(서명 만료, 속도 제한 등)는 원격 서비스가 정의하며
    이 클라이언트는 성공/실패 여부만 판단한다.
    """

    def __init__(self, errcode: int, errmsg: str) -> None:
        super().__init__(f"dingrobot send failed: {errmsg}")
        self.errcode = errcode
        self.errmsg = errmsg
