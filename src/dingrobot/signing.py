"""웹훅 요청 서명 (timestamp + HMAC-SHA256 + base64 + 쿼리 이스케이프)."""

from __future__ import annotations

import base64
import hashlib
import hmac
import time
from typing import Callable
from urllib.parse import quote_plus

Clock = Callable[[], int]


def now_millis() -> int:
    """현재 시각을 Unix epoch 밀리초로 반환한다."""
    return int(time.time() * 1000)


def compute_hmac_sha256(message: str, secret: str) -> str:
    """secret을 키로 message의 HMAC-SHA256을 계산해 표준 base64(패딩 포함)로 반환한다."""
    digest = hmac.new(secret.encode(), message.encode(), hashlib.sha256).digest()
    return base64.b64encode(digest).decode()


def gen_signed_url(secret: str, clock: Clock = now_millis) -> str:
    """웹훅 URL 뒤에 붙일 서명 쿼리 접미사를 만든다.

    반환값은 항상 ``&timestamp=...&sign=...`` 형태이며 선행 ``?``는 붙이지 않는다.
    웹훅 URL은 이미 ``?access_token=...`` 쿼리를 포함한다고 가정한다.

    중요:
    - 서명은 form/query 이스케이프(quote_plus)로 인코딩한다. 서버가 기대하는
      인코딩과 다르면 서명 검증이 실패한다.
    """
    timestamp = str(clock())
    sign = compute_hmac_sha256(f"{timestamp}\n{secret}", secret)
    return f"&timestamp={timestamp}&sign={quote_plus(sign)}"
