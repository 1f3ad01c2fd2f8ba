"""웹훅 메시지/응답 스키마."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, StrictInt

MSG_TYPE_TEXT = "text"
MSG_TYPE_MARKDOWN = "markdown"


class TextParams(BaseModel):
    content: str


class AtParams(BaseModel):
    at_mobiles: list[str] = Field(default_factory=list, alias="atMobiles")
    is_at_all: bool = Field(default=False, alias="isAtAll")

    model_config = ConfigDict(populate_by_name=True)


class TextMessage(BaseModel):
    """텍스트 메시지 (휴대폰 번호 또는 전체 멘션 지원)."""

    msgtype: Literal["text"] = MSG_TYPE_TEXT
    text: TextParams
    at: AtParams = Field(default_factory=AtParams)


class MarkdownParams(BaseModel):
    title: str
    text: str


class MarkdownMessage(BaseModel):
    """마크다운 메시지."""

    msgtype: Literal["markdown"] = MSG_TYPE_MARKDOWN
    markdown: MarkdownParams


class DingResponse(BaseModel):
    """모든 응답 본문에 공통인 봉투. errcode == 0 이면 성공."""

    errcode: StrictInt
    errmsg: str = ""
