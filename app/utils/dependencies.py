# utils/dependencies.py
from typing import Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_session
from app.services.auth_service import AuthService
from app.services.member_service import MemberService
from app.services.post_service import PostService
from app.services.storage_service import S3Service, get_s3_service
from app.utils.jwt import (JwtTokenExtractor, JwtTokenProvider,
                           jwt_token_extractor, jwt_token_provider)

# Swagger에서 Authorize → 토큰만 입력해도 Bearer 자동으로 붙음
# 누락/형식 오류 메시지는 JwtTokenExtractor가 만들도록 auto_error=False
access_token_scheme = HTTPBearer(auto_error=False)


def get_jwt_token_provider() -> JwtTokenProvider:
    return jwt_token_provider


def get_jwt_token_extractor() -> JwtTokenExtractor:
    return jwt_token_extractor


async def get_auth_service(
    db: AsyncSession = Depends(get_session),
    token_provider: JwtTokenProvider = Depends(get_jwt_token_provider),
) -> AuthService:
    """
    AuthService 의존성 주입용 팩토리 함수.
    """
    return AuthService(db, token_provider=token_provider)


async def get_member_service(
    db: AsyncSession = Depends(get_session),
    storage: S3Service = Depends(get_s3_service),
) -> MemberService:
    return MemberService(db, storage=storage)


async def get_post_service(
    db: AsyncSession = Depends(get_session),
    storage: S3Service = Depends(get_s3_service),
) -> PostService:
    return PostService(db, storage=storage)


def get_current_member_email(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(access_token_scheme),
    extractor: JwtTokenExtractor = Depends(get_jwt_token_extractor),
    token_provider: JwtTokenProvider = Depends(get_jwt_token_provider),
) -> str:
    """
    Authorization 헤더의 액세스 토큰을 검증하고 email 클레임을 반환
    """
    if credentials is None:
        # 헤더가 없거나 Bearer 형식이 아님 -> 원인별 401 메시지
        access_token = extractor.extract_access_token(request)
    else:
        access_token = credentials.credentials
    return token_provider.extract_email_from_access_token(access_token)


def get_refresh_token(
    request: Request,
    extractor: JwtTokenExtractor = Depends(get_jwt_token_extractor),
) -> str:
    return extractor.extract_refresh_token(request)
