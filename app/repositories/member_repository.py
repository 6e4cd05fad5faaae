import logging
from typing import Optional

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from app.models.member import Member

logger = logging.getLogger(__name__)


class MemberRepository:
    """
    회원 데이터베이스 접근을 담당하는 Repository 클래스
    """

    async def save(self, db: AsyncSession, member: Member) -> Member:
        """
        회원을 저장(신규 추가 또는 변경 반영)합니다.

        Args:
            db: 데이터베이스 세션
            member: 저장할 회원 객체

        Returns:
            저장된 회원 객체 (id가 채워진 상태)

        Raises:
            IntegrityError: email/nickname 유니크 제약 위반
        """
        try:
            db.add(member)
            await db.commit()
            await db.refresh(member)
        except IntegrityError as ie:
            await db.rollback()
            logger.error(f"회원 저장 무결성 오류 (email={member.email}): {ie}")
            raise

        logger.info(f"회원 저장 완료: {member.email}")
        return member

    async def get_by_id(self, db: AsyncSession, member_id: int) -> Optional[Member]:
        """
        ID로 회원을 조회합니다.
        """
        result = await db.execute(select(Member).where(Member.id == member_id))
        member = result.scalars().first()

        if not member:
            logger.warning(f"회원 ID를 찾을 수 없음: {member_id}")
        return member

    async def get_by_email(self, db: AsyncSession, email: str) -> Optional[Member]:
        """
        이메일로 회원을 조회합니다.
        """
        result = await db.execute(select(Member).where(Member.email == email))
        member = result.scalars().first()

        if not member:
            logger.warning(f"회원 이메일을 찾을 수 없음: {email}")
        return member

    async def exists_by_email(self, db: AsyncSession, email: str) -> bool:
        result = await db.execute(
            select(func.count()).select_from(Member).where(Member.email == email)
        )
        return result.scalar() > 0

    async def exists_by_nickname(self, db: AsyncSession, nickname: str) -> bool:
        result = await db.execute(
            select(func.count()).select_from(Member).where(Member.nickname == nickname)
        )
        return result.scalar() > 0
