from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

POST_CONTENT_MAX_LENGTH = 2200
POST_IMAGE_MAX_COUNT = 10


class PostCreateRequest(BaseModel):
    """
    게시글 작성 요청 스키마
    """
    content: str = Field(..., description="게시글 본문 (최대 2200자)")
    image_urls: List[str] = Field(
        default_factory=list, alias="imageUrls", description="업로드된 이미지 URL 목록"
    )

    @field_validator("content")
    @classmethod
    def check_content(cls, content: str) -> str:
        if not content.strip():
            raise ValueError("게시글 내용을 입력해주세요.")
        if len(content) > POST_CONTENT_MAX_LENGTH:
            raise ValueError("게시글은 2200자 이하로 작성해주세요.")
        return content

    @field_validator("image_urls")
    @classmethod
    def check_image_urls(cls, image_urls: List[str]) -> List[str]:
        if len(image_urls) > POST_IMAGE_MAX_COUNT:
            raise ValueError("이미지는 최대 10장까지 첨부할 수 있습니다.")
        return image_urls

    class Config:
        populate_by_name = True
        json_schema_extra = {
            "example": {
                "content": "오늘 날씨 좋다!",
                "imageUrls": [],
            }
        }


class PostResponse(BaseModel):
    """
    게시글 조회 응답 스키마
    """
    id: int
    content: str
    image_urls: List[str] = Field(default_factory=list, alias="imageUrls")
    member_id: int = Field(..., alias="memberId")
    created_at: Optional[datetime] = Field(None, alias="createdAt")

    class Config:
        from_attributes = True
        populate_by_name = True
