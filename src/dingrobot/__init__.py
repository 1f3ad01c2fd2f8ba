"""DingTalk 커스텀 로봇 웹훅 클라이언트."""

from dingrobot.errors import (
    DecodeError,
    DingRobotError,
    RemoteRejectionError,
    SerializationError,
    TransportError,
)
from dingrobot.protocols import AsyncRoboter, AsyncWebhookTransport, Roboter, WebhookTransport
from dingrobot.robot import AsyncRobot, Robot, new_robot
from dingrobot.schemas import (
    MSG_TYPE_MARKDOWN,
    MSG_TYPE_TEXT,
    DingResponse,
    MarkdownMessage,
    TextMessage,
)
from dingrobot.signing import compute_hmac_sha256, gen_signed_url

__all__ = [
    "AsyncRobot",
    "AsyncRoboter",
    "AsyncWebhookTransport",
    "DecodeError",
    "DingResponse",
    "DingRobotError",
    "MSG_TYPE_MARKDOWN",
    "MSG_TYPE_TEXT",
    "MarkdownMessage",
    "RemoteRejectionError",
    "Robot",
    "Roboter",
    "SerializationError",
    "TextMessage",
    "TransportError",
    "WebhookTransport",
    "compute_hmac_sha256",
    "gen_signed_url",
    "new_robot",
]
