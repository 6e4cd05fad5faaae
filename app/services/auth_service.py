# services/auth_service.py
import logging
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import ErrorCode, FriendyException
from app.models.member import Member
from app.repositories.member_repository import MemberRepository
from app.schemas.auth_schema import LoginRequest, LoginResponse
from app.utils.jwt import JwtTokenProvider, jwt_token_provider

logger = logging.getLogger(__name__)


class AuthService:
    """
    JWT 기반 인증 로직 담당
    """

    def __init__(
        self,
        db: AsyncSession,
        member_repository: Optional[MemberRepository] = None,
        token_provider: Optional[JwtTokenProvider] = None,
    ):
        self.db = db
        self.member_repository = member_repository or MemberRepository()
        self.token_provider = token_provider or jwt_token_provider

    async def login(self, request: LoginRequest) -> LoginResponse:
        """
        로그인 처리 및 JWT 토큰 발급
        """
        member = await self.get_member_by_email(request.email)

        if not member.verify_password(request.password):
            logger.warning(f"Login failed: invalid password ({request.email})")
            raise FriendyException(
                ErrorCode.UNAUTHORIZED_PASSWORD,
                "로그인에 실패하였습니다. 비밀번호를 확인해주세요.",
            )

        logger.info(f"Member login success: {member.email}")
        return self._issue_tokens(member.email)

    async def reissue_token(self, refresh_token: str) -> LoginResponse:
        """
        Refresh Token을 검증하고 새로운 Access/Refresh Token 발급
        """
        email = self.token_provider.extract_email_from_refresh_token(refresh_token)
        member = await self.get_member_by_email(email)

        logger.info(f"Token reissued for {member.email}")
        return self._issue_tokens(member.email)

    async def get_member_by_email(self, email: str) -> Member:
        member = await self.member_repository.get_by_email(self.db, email)
        if not member:
            raise FriendyException(
                ErrorCode.UNAUTHORIZED_EMAIL, "해당 이메일의 회원이 존재하지 않습니다."
            )
        return member

    def _issue_tokens(self, email: str) -> LoginResponse:
        return LoginResponse.of(
            self.token_provider.generate_access_token(email),
            self.token_provider.generate_refresh_token(email),
        )
