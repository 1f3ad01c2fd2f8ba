import json
from typing import Mapping

FIXED_TS = 1700000000000
WEBHOOK = "https://oapi.dingtalk.com/robot/send?access_token=abc123"


def fixed_clock() -> int:
    return FIXED_TS


class RecordingTransport:
    """요청을 기록하고 미리 정한 응답 본문을 돌려주는 가짜 전송."""

    def __init__(self, body: bytes | dict = b'{"errcode":0,"errmsg":"ok"}') -> None:
        self.body = json.dumps(body).encode() if isinstance(body, dict) else body
        self.requests: list[tuple[str, bytes, dict[str, str]]] = []

    def post(self, url: str, content: bytes, headers: Mapping[str, str]) -> bytes:
        self.requests.append((url, content, dict(headers)))
        return self.body


class AsyncRecordingTransport(RecordingTransport):
    async def post(self, url: str, content: bytes, headers: Mapping[str, str]) -> bytes:  # type: ignore[override]
        return super().post(url, content, headers)
