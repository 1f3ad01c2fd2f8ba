import json

import httpx
import pytest
import respx
from httpx import Response

from dingrobot import AsyncRobot, AsyncRoboter, DecodeError, RemoteRejectionError, TransportError
from dingrobot.signing import gen_signed_url
from tests.helpers import WEBHOOK, AsyncRecordingTransport, fixed_clock


@pytest.mark.asyncio
async def test_async_send_text_signed() -> None:
    transport = AsyncRecordingTransport()
    robot = AsyncRobot(WEBHOOK, secret="SECabc", transport=transport, clock=fixed_clock)

    await robot.send_text("hello", ["13800000000"], False)

    url, body, _ = transport.requests[0]
    assert url == WEBHOOK + gen_signed_url("SECabc", fixed_clock)
    assert json.loads(body) == {
        "msgtype": "text",
        "text": {"content": "hello"},
        "at": {"atMobiles": ["13800000000"], "isAtAll": False},
    }


@pytest.mark.asyncio
async def test_async_remote_rejection() -> None:
    transport = AsyncRecordingTransport({"errcode": 310000, "errmsg": "sign not match"})
    robot = AsyncRobot(WEBHOOK, transport=transport)

    with pytest.raises(RemoteRejectionError, match="sign not match"):
        await robot.send_markdown("T", "**bold**")


@pytest.mark.asyncio
async def test_async_decode_error() -> None:
    robot = AsyncRobot(WEBHOOK, transport=AsyncRecordingTransport(b"<html>502</html>"))

    with pytest.raises(DecodeError) as exc_info:
        await robot.send_markdown("T", "body")

    assert exc_info.value.body == b"<html>502</html>"


@pytest.mark.asyncio
@respx.mock
async def test_async_send_over_http() -> None:
    route = respx.post(WEBHOOK).mock(return_value=Response(200, json={"errcode": 0, "errmsg": "ok"}))

    async with AsyncRobot(WEBHOOK) as robot:
        assert isinstance(robot, AsyncRoboter)
        await robot.send_markdown("T", "**bold**")

    assert route.called
    assert route.calls.last.request.content == (
        b'{"msgtype":"markdown","markdown":{"title":"T","text":"**bold**"}}'
    )


@pytest.mark.asyncio
@respx.mock
async def test_async_timeout_raises_transport_error() -> None:
    respx.post(WEBHOOK).mock(side_effect=httpx.ReadTimeout)

    async with AsyncRobot(WEBHOOK, timeout=1.0) as robot:
        with pytest.raises(TransportError):
            await robot.send_text("hello")
