from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class RobotSettings(BaseSettings):
    """웹훅 로봇 설정."""

    webhook: str = Field(
        default="",
        alias="DINGROBOT_WEBHOOK",
        description="access_token 쿼리를 포함한 웹훅 URL (예: https://oapi.dingtalk.com/robot/send?access_token=...)",
    )
    secret: str = Field(default="", alias="DINGROBOT_SECRET", description="비어 있으면 서명하지 않음")
    timeout: float = Field(default=5.0, alias="DINGROBOT_TIMEOUT")

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


@lru_cache(maxsize=1)
def get_settings() -> RobotSettings:
    """설정을 캐싱해 로드한다."""
    return RobotSettings()
