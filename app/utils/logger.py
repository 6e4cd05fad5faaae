"""
로깅 설정

uvicorn 접근 로그와 애플리케이션(app.*) 로그의 포맷/레벨을 정의합니다.
main.py에서 dictConfig(get_log_config(settings.LOG_LEVEL))로 적용합니다.
"""
from typing import Any, Dict

from app.core.config import settings

LOG_FORMAT = "%(levelname)s:     %(asctime)s - %(name)s - %(message)s"
ACCESS_FORMAT = '%(levelprefix)s %(asctime)s :: "%(request_line)s" %(status_code)s'


def get_log_config(level: str = settings.LOG_LEVEL) -> Dict[str, Any]:
    level = level.upper()
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "access": {
                "()": "uvicorn.logging.AccessFormatter",
                "fmt": ACCESS_FORMAT,
                "use_colors": settings.DEPLOY_PHASE == "local",
            },
            "default": {
                "format": LOG_FORMAT,
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
        },
        "handlers": {
            "access": {
                "formatter": "access",
                "class": "logging.StreamHandler",
                "stream": "ext://sys.stdout",
            },
            "default": {
                "formatter": "default",
                "class": "logging.StreamHandler",
                "stream": "ext://sys.stdout",
            },
        },
        "loggers": {
            "uvicorn.access": {"handlers": ["access"], "level": "INFO", "propagate": False},
            "app": {"handlers": ["default"], "level": level, "propagate": False},
            # SQL 로그는 DB_ECHO로만 켭니다.
            "sqlalchemy.engine": {"level": "WARNING"},
            # boto3 재시도/자격증명 탐색 로그
            "botocore": {"handlers": ["default"], "level": "WARNING", "propagate": False},
            "boto3": {"handlers": ["default"], "level": "WARNING", "propagate": False},
        },
    }
