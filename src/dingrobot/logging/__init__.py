"""구조화된 콘솔 로깅 모듈."""

from dingrobot.logging.logger import SimpleLogger, get_logger

__all__ = ["SimpleLogger", "get_logger"]
