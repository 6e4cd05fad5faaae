from pydantic import BaseModel, EmailStr, Field

from app.schemas.member_schema import Password


class LoginRequest(BaseModel):
    """
    로그인 요청 스키마 (비밀번호 규칙은 회원가입과 동일)
    """
    email: EmailStr = Field(..., description="이메일 주소")
    password: Password = Field(..., description="비밀번호")

    class Config:
        json_schema_extra = {
            "example": {
                "email": "example@friendy.com",
                "password": "password123!",
            }
        }


class LoginResponse(BaseModel):
    """
    로그인 결과. 토큰은 응답 본문이 아니라 헤더로 전달됩니다.
    """
    access_token: str
    refresh_token: str

    @classmethod
    def of(cls, access_token: str, refresh_token: str) -> "LoginResponse":
        return cls(access_token=access_token, refresh_token=refresh_token)
