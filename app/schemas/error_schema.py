from typing import Optional

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """
    에러 응답 스키마
    """
    error: str = Field(..., description="에러 코드")
    detail: Optional[str] = Field(None, description="상세 에러 정보")

    class Config:
        json_schema_extra = {
            "example": {
                "error": "DUPLICATE_EMAIL",
                "detail": "이미 가입된 이메일입니다."
            }
        }
