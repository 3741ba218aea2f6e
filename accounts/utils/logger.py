"""
로깅 유틸리티

애플리케이션 전반에서 사용할 로거를 설정합니다.
"""
from logging.config import dictConfig
from typing import Optional

from accounts.core.config import settings

LOGGING_CONFIG = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "default": {
            "format": "%(levelname)s:     %(asctime)s - %(name)s - %(message)s",
            "datefmt": "%Y-%m-%d %H:%M:%S",
        },
    },
    "handlers": {
        "default": {
            "formatter": "default",
            "class": "logging.StreamHandler",
            "stream": "ext://sys.stdout",
        },
    },
    "loggers": {
        "accounts": {"handlers": ["default"], "level": "INFO", "propagate": False},
        "sqlalchemy.engine": {"handlers": ["default"], "level": "WARNING", "propagate": False},
    },
}


def configure_logging(level: Optional[str] = None) -> None:
    """
    LOGGING_CONFIG를 적용합니다. level을 생략하면 settings.LOG_LEVEL을 사용합니다.
    """
    config = {**LOGGING_CONFIG, "loggers": {k: dict(v) for k, v in LOGGING_CONFIG["loggers"].items()}}
    config["loggers"]["accounts"]["level"] = (level or settings.LOG_LEVEL).upper()
    dictConfig(config)
