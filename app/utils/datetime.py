"""
시각 계산 유틸리티

DB 타임스탬프와 JWT iat/exp 클레임은 모두 UTC 기준입니다.
"""
from datetime import datetime, timedelta, timezone


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def after_millis(base: datetime, millis: int) -> datetime:
    """
    base 시각으로부터 millis 밀리초 뒤의 시각 (음수면 이전 시각)

    Example:
        >>> after_millis(datetime(2025, 1, 1, tzinfo=timezone.utc), 1500).second
        1
    """
    return base + timedelta(milliseconds=millis)
