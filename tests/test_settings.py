import pytest

from dingrobot import Robot
from dingrobot.settings import RobotSettings, get_settings
from tests.helpers import WEBHOOK, RecordingTransport


def test_settings_defaults() -> None:
    settings = RobotSettings(_env_file=None)
    assert settings.webhook == ""
    assert settings.secret == ""
    assert settings.timeout == 5.0


def test_robot_settings_override_via_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DINGROBOT_WEBHOOK", WEBHOOK)
    monkeypatch.setenv("DINGROBOT_SECRET", "SECabc")
    monkeypatch.setenv("DINGROBOT_TIMEOUT", "2.5")

    settings = RobotSettings()
    assert settings.webhook == WEBHOOK
    assert settings.secret == "SECabc"
    assert settings.timeout == 2.5


def test_robot_from_settings() -> None:
    settings = RobotSettings(DINGROBOT_WEBHOOK=WEBHOOK, DINGROBOT_SECRET="SECabc")
    robot = Robot.from_settings(settings, transport=RecordingTransport())

    assert robot.webhook == WEBHOOK
    assert robot.signed


def test_robot_from_settings_timeout_override() -> None:
    settings = RobotSettings(DINGROBOT_WEBHOOK=WEBHOOK, DINGROBOT_TIMEOUT=5.0)

    with Robot.from_settings(settings, timeout=1.5) as robot:
        assert robot._transport._client.timeout.read == 1.5


def test_get_settings_cached() -> None:
    first = get_settings()
    second = get_settings()
    assert first is second
