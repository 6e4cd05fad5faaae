"""
API 스키마 모듈

Request/Response 스키마들을 정의합니다.
API 데이터 형식을 정의합니다.
"""

from .auth_schema import LoginRequest, LoginResponse
from .error_schema import ErrorResponse
from .file_schema import FileUploadResponse
from .member_schema import MemberResponse, MemberSignUpRequest, PasswordRequest
from .post_schema import PostCreateRequest, PostResponse

__all__ = [
    "LoginRequest",
    "LoginResponse",
    "ErrorResponse",
    "FileUploadResponse",
    "MemberSignUpRequest",
    "MemberResponse",
    "PasswordRequest",
    "PostCreateRequest",
    "PostResponse",
]
