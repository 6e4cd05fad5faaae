import re
from datetime import date
from typing import Annotated, Optional

from pydantic import AfterValidator, BaseModel, EmailStr, Field

NICKNAME_MIN_LENGTH = 2
NICKNAME_MAX_LENGTH = 20
PASSWORD_MIN_LENGTH = 8
PASSWORD_MAX_LENGTH = 16

# 숫자, 영문자, 특수문자(~!@#$%^&*?)를 각각 하나 이상 포함
PASSWORD_PATTERN = re.compile(r"^(?=.*[0-9])(?=.*[a-zA-Z])(?=.*[~!@#$%^&*?]).*$")

NICKNAME_LENGTH_MESSAGE = "닉네임은 2~20자 사이로 입력해주세요."
PASSWORD_LENGTH_MESSAGE = "비밀번호는 8~16자 사이로 입력해주세요."
PASSWORD_PATTERN_MESSAGE = "숫자, 영문자, 특수문자(~!@#$%^&*?)를 포함해야 합니다."


def check_nickname(nickname: str) -> str:
    if not NICKNAME_MIN_LENGTH <= len(nickname) <= NICKNAME_MAX_LENGTH:
        raise ValueError(NICKNAME_LENGTH_MESSAGE)
    return nickname


def check_password(password: str) -> str:
    """길이를 먼저 검사하고, 그 다음 문자 조합을 검사합니다."""
    if not PASSWORD_MIN_LENGTH <= len(password) <= PASSWORD_MAX_LENGTH:
        raise ValueError(PASSWORD_LENGTH_MESSAGE)
    if not PASSWORD_PATTERN.match(password):
        raise ValueError(PASSWORD_PATTERN_MESSAGE)
    return password


Nickname = Annotated[str, AfterValidator(check_nickname)]
Password = Annotated[str, AfterValidator(check_password)]


class MemberSignUpRequest(BaseModel):
    """
    회원가입 요청 스키마
    """
    email: EmailStr = Field(..., description="이메일 주소")
    nickname: Nickname = Field(..., description="닉네임 (2~20자)")
    password: Password = Field(..., description="비밀번호 (8~16자, 숫자/영문자/특수문자 포함)")
    birth_date: date = Field(..., alias="birthDate", description="생년월일")
    image_url: Optional[str] = Field(None, alias="imageUrl", description="업로드된 프로필 이미지 URL")

    class Config:
        populate_by_name = True
        json_schema_extra = {
            "example": {
                "email": "example@friendy.com",
                "nickname": "bokSungKim",
                "password": "password123!",
                "birthDate": "2002-08-13",
            }
        }


class PasswordRequest(BaseModel):
    """
    비밀번호 재설정 요청 스키마
    """
    email: EmailStr = Field(..., description="이메일 주소")
    new_password: Password = Field(..., alias="newPassword", description="새 비밀번호")

    class Config:
        populate_by_name = True
        json_schema_extra = {
            "example": {
                "email": "example@friendy.com",
                "newPassword": "newPassword123!",
            }
        }


class MemberResponse(BaseModel):
    """
    회원 정보 응답 스키마 (비밀번호 제외)
    """
    id: int = Field(..., description="회원 ID")
    email: str = Field(..., description="이메일 주소")
    nickname: str = Field(..., description="닉네임")
    birth_date: date = Field(..., alias="birthDate", description="생년월일")
    image_url: Optional[str] = Field(None, alias="imageUrl", description="프로필 이미지 URL")

    class Config:
        from_attributes = True
        populate_by_name = True
