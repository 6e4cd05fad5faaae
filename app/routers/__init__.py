"""
컨트롤러 모듈

API 엔드포인트들을 정의합니다.
요청을 받아 적절한 서비스로 라우팅합니다.
"""

from .auth_router import router as auth_router
from .file_router import router as file_router
from .member_router import router as member_router
from .post_router import router as post_router

__all__ = [
    "auth_router",
    "file_router",
    "member_router",
    "post_router",
]
