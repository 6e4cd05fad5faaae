from typing import TYPE_CHECKING, List, Optional

from sqlalchemy import JSON, Column
from sqlmodel import Field

from app.models.base import TimestampModel

if TYPE_CHECKING:
    from app.models.member import Member
    from app.schemas.post_schema import PostCreateRequest


class Post(TimestampModel, table=True):
    """
    게시글 테이블
    - 작성자는 members.id 외래키로 연결
    """

    __tablename__ = "posts"

    id: Optional[int] = Field(
        default=None,
        primary_key=True,
        sa_column_kwargs={"autoincrement": True}
    )

    content: str = Field(max_length=2200, nullable=False, description="게시글 본문")

    image_urls: List[str] = Field(
        default_factory=list,
        sa_column=Column(JSON, nullable=False),
        description="게시글 이미지 URL 목록"
    )

    member_id: int = Field(foreign_key="members.id", nullable=False, index=True)

    @classmethod
    def of(cls, request: "PostCreateRequest", member: "Member",
           image_urls: Optional[List[str]] = None) -> "Post":
        return cls(
            content=request.content,
            image_urls=image_urls or [],
            member_id=member.id,
        )
