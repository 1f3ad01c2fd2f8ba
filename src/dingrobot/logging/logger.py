"""간단한 콘솔 로거."""

import logging as std_logging
from typing import Any


class SimpleLogger:
    """key=value 구조화 데이터를 메시지에 붙이는 콘솔 로거."""

    def __init__(self, name: str = "dingrobot", log_level: int = std_logging.INFO) -> None:
        self.name = name
        self.logger = std_logging.getLogger(name)
        self.logger.setLevel(log_level)

        if not self.logger.handlers:
            handler = std_logging.StreamHandler()
            handler.setLevel(log_level)
            formatter = std_logging.Formatter(
                "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
            handler.setFormatter(formatter)
            self.logger.addHandler(handler)

    def debug(self, message: str, **extra: Any) -> None:
        """DEBUG 레벨 로그."""
        if extra:
            extra_str = " | ".join(f"{k}={v}" for k, v in extra.items())
            message = f"{message} | {extra_str}"
        self.logger.debug(message)


def get_logger(name: str = "dingrobot", log_level: int = std_logging.INFO) -> SimpleLogger:
    """로거 인스턴스 반환."""
    return SimpleLogger(name=name, log_level=log_level)
