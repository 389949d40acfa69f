"""로깅 설정 (rich 핸들러)"""
import logging

from rich.logging import RichHandler

LOGGER_NAME = "prompt_schema"


def setup_logging(level: str = "INFO") -> logging.Logger:
    """패키지 로거에 RichHandler 설정 (여러 번 호출해도 핸들러는 하나)"""
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level.upper())
    logger.handlers.clear()
    handler = RichHandler(show_path=False, rich_tracebacks=True)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.propagate = False
    return logger
