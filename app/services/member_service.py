import asyncio
import logging
from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import settings
from app.core.exceptions import ErrorCode, FriendyException
from app.models.member import Member
from app.repositories.member_repository import MemberRepository
from app.schemas.member_schema import (MemberResponse, MemberSignUpRequest,
                                       PasswordRequest)
from app.services.auth_service import AuthService
from app.services.storage_service import S3Service

logger = logging.getLogger(__name__)


class MemberService:
    """
    회원 관련 비즈니스 로직을 담당하는 Service 클래스
    """

    def __init__(
        self,
        db: AsyncSession,
        storage: Optional[S3Service] = None,
        member_repository: Optional[MemberRepository] = None,
        auth_service: Optional[AuthService] = None,
    ):
        self.db = db
        self.storage = storage
        self.member_repository = member_repository or MemberRepository()
        self.auth_service = auth_service or AuthService(db, self.member_repository)

    async def sign_up(self, request: MemberSignUpRequest) -> int:
        """
        회원가입을 처리하고 생성된 회원 ID를 반환합니다.

        Args:
            request: 회원가입 요청 (email, nickname, password, birthDate, imageUrl)

        Returns:
            생성된 회원 ID

        Raises:
            FriendyException: DUPLICATE_EMAIL, DUPLICATE_NICKNAME
        """
        await self.assert_unique_email(request.email)
        await self.assert_unique_name(request.nickname)

        image_url = None
        if request.image_url:
            image_url = await self._move_to(request.image_url, settings.PROFILE_IMAGE_DIR)

        member = Member(
            email=request.email,
            nickname=request.nickname,
            password=Member.hash_password(request.password),
            birth_date=request.birth_date,
            image_url=image_url,
        )

        try:
            saved = await self.member_repository.save(self.db, member)
        except IntegrityError:
            # 중복 검사 이후 동시에 가입된 경우
            await self.assert_unique_email(request.email)
            await self.assert_unique_name(request.nickname)
            raise

        logger.info(f"회원가입 완료: id={saved.id}, email={saved.email}")
        return saved.id

    async def assert_unique_email(self, email: str) -> None:
        if await self.member_repository.exists_by_email(self.db, email):
            logger.warning(f"이메일 중복 가입 시도: {email}")
            raise FriendyException(ErrorCode.DUPLICATE_EMAIL, "이미 가입된 이메일입니다.")

    async def assert_unique_name(self, nickname: str) -> None:
        if await self.member_repository.exists_by_nickname(self.db, nickname):
            logger.warning(f"닉네임 중복 가입 시도: {nickname}")
            raise FriendyException(ErrorCode.DUPLICATE_NICKNAME, "닉네임이 이미 존재합니다.")

    async def reset_password(self, request: PasswordRequest) -> None:
        member = await self.auth_service.get_member_by_email(request.email)
        member.reset_password(request.new_password)
        await self.member_repository.save(self.db, member)
        logger.info(f"비밀번호 재설정 완료: {member.email}")

    async def get_member(self, member_id: int) -> MemberResponse:
        member = await self.member_repository.get_by_id(self.db, member_id)
        if not member:
            raise FriendyException(ErrorCode.RESOURCE_NOT_EXIST, "존재하지 않는 회원입니다.")
        return MemberResponse.model_validate(member)

    async def _move_to(self, image_url: str, dir_name: str) -> str:
        if self.storage is None:
            raise FriendyException(ErrorCode.STORAGE_ERROR, "파일 저장소가 설정되지 않았습니다.")
        return await asyncio.to_thread(self.storage.move_s3_object, image_url, dir_name)
