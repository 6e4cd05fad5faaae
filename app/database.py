import logging
from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import (AsyncSession, async_sessionmaker,
                                    create_async_engine)
from sqlmodel import SQLModel

from app.core.config import settings
from app.models import Member, Post  # noqa: F401  (테이블 메타데이터 등록)

logger = logging.getLogger(__name__)

engine = create_async_engine(
    settings.DATABASE_URL,
    echo=settings.DB_ECHO,  # ORM 쿼리 로깅
)

async_session = async_sessionmaker(
    bind=engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


async def get_session() -> AsyncGenerator[AsyncSession, None]:
    """비동기 DB 세션 생성 - FastAPI Dependency Injection용"""
    session = async_session()
    try:
        yield session
    finally:
        try:
            await session.close()
        except Exception as e:
            # 이미 닫혔거나 다른 작업 중인 경우 무시
            logger.debug(f"Session close warning (safe to ignore): {e}")


async def init_db():
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    logger.info("데이터베이스 테이블 초기화 완료")


async def close_db():
    await engine.dispose()
    logger.info("데이터베이스 커넥션 풀 종료")
