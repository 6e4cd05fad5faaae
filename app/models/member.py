from datetime import date
from typing import Optional

from sqlalchemy.types import Text
from sqlmodel import Field

from app.models.base import TimestampModel
from app.utils.security import get_password_hash, verify_password as _verify

# RFC 5321 주소 최대 길이 (EmailStr 검증 한도와 동일)
EMAIL_MAX_LENGTH = 254


class Member(TimestampModel, table=True):
    """
    회원 정보를 저장하는 테이블
    - email, nickname은 DB 레벨에서 유니크
    - 비밀번호는 bcrypt 해시로 저장
    """

    __tablename__ = "members"

    id: Optional[int] = Field(
        default=None,
        primary_key=True,
        description="회원 고유 ID",
        sa_column_kwargs={"autoincrement": True}
    )

    email: str = Field(
        max_length=EMAIL_MAX_LENGTH,
        nullable=False,
        description="이메일 (로그인용)",
        sa_column_kwargs={"unique": True}
    )

    nickname: str = Field(
        max_length=20,
        nullable=False,
        description="닉네임",
        sa_column_kwargs={"unique": True}
    )

    password: str = Field(
        max_length=255,
        nullable=False,
        description="bcrypt로 해시된 비밀번호"
    )

    birth_date: date = Field(nullable=False, description="생년월일")

    image_url: Optional[str] = Field(
        default=None,
        sa_type=Text,
        description="프로필 이미지 URL"
    )

    # -------------------- #
    # 비밀번호 관련 유틸리티
    # -------------------- #

    @classmethod
    def hash_password(cls, password: str) -> str:
        """
        비밀번호를 bcrypt로 해싱합니다.
        """
        return get_password_hash(password)

    def verify_password(self, password: str) -> bool:
        """
        입력한 비밀번호가 저장된 해시와 일치하는지 검증합니다.
        """
        return _verify(password, self.password)

    def reset_password(self, new_password: str) -> None:
        self.password = self.hash_password(new_password)

    def __repr__(self) -> str:
        return f"<Member(id={self.id}, nickname='{self.nickname}', email='{self.email}')>"
