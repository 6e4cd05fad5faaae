"""
애플리케이션 공통 예외

서비스 계층은 FriendyException 하나만 던지고,
main.py의 전역 예외 핸들러가 ErrorCode에 맞는 HTTP 상태 코드로 변환합니다.
"""
from enum import Enum

from fastapi import status


class ErrorCode(Enum):
    """에러 코드와 HTTP 상태 코드 매핑"""

    INVALID_REQUEST = status.HTTP_400_BAD_REQUEST
    INVALID_FILE = status.HTTP_400_BAD_REQUEST

    UNAUTHORIZED_EMAIL = status.HTTP_401_UNAUTHORIZED
    UNAUTHORIZED_PASSWORD = status.HTTP_401_UNAUTHORIZED
    UNAUTHORIZED_USER = status.HTTP_401_UNAUTHORIZED

    RESOURCE_NOT_EXIST = status.HTTP_404_NOT_FOUND

    DUPLICATE_EMAIL = status.HTTP_409_CONFLICT
    DUPLICATE_NICKNAME = status.HTTP_409_CONFLICT

    FILE_IO_ERROR = status.HTTP_500_INTERNAL_SERVER_ERROR
    STORAGE_ERROR = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __new__(cls, http_status: int):
        # 같은 상태 코드를 가진 멤버가 별칭으로 합쳐지지 않도록 고유 값 부여
        obj = object.__new__(cls)
        obj._value_ = len(cls.__members__) + 1
        obj.http_status = http_status
        return obj


class FriendyException(Exception):
    """ErrorCode와 사용자 메시지를 담는 단일 애플리케이션 예외"""

    def __init__(self, error_code: ErrorCode, detail: str):
        super().__init__(detail)
        self.error_code = error_code
        self.detail = detail

    @property
    def status_code(self) -> int:
        return self.error_code.http_status

    def __repr__(self) -> str:
        return f"<FriendyException(code={self.error_code.name}, detail='{self.detail}')>"
