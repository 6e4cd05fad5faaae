from datetime import datetime
from typing import Optional

from pydantic import ConfigDict
from sqlalchemy import func
from sqlalchemy.types import TIMESTAMP
from sqlmodel import Field, SQLModel

from app.utils.datetime import utc_now


class TimestampModel(SQLModel):
    """
    회원/게시글 테이블 공통 시각 컬럼
    - created_at: INSERT 시 애플리케이션에서 UTC로 채우고, DB 기본값(now())도 둠
    - updated_at: UPDATE 시 DB의 now()로 갱신, 생성 직후에는 NULL
    """
    __abstract__ = True

    model_config = ConfigDict(from_attributes=True)

    created_at: datetime = Field(
        default_factory=utc_now,
        sa_type=TIMESTAMP(timezone=True),
        sa_column_kwargs={"nullable": False, "server_default": func.now()},
    )

    updated_at: Optional[datetime] = Field(
        default=None,
        sa_type=TIMESTAMP(timezone=True),
        sa_column_kwargs={"nullable": True, "onupdate": func.now()},
    )
