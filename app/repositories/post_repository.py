import logging
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from app.models.post import Post

logger = logging.getLogger(__name__)


class PostRepository:
    """
    게시글 데이터베이스 접근을 담당하는 Repository 클래스
    """

    async def save(self, db: AsyncSession, post: Post) -> Post:
        try:
            db.add(post)
            await db.commit()
            await db.refresh(post)
        except Exception as e:
            await db.rollback()
            logger.error(f"게시글 저장 오류 (member_id={post.member_id}): {e}")
            raise

        logger.info(f"게시글 저장 완료: post_id={post.id}, member_id={post.member_id}")
        return post

    async def get_by_id(self, db: AsyncSession, post_id: int) -> Optional[Post]:
        result = await db.execute(select(Post).where(Post.id == post_id))
        post = result.scalars().first()

        if not post:
            logger.warning(f"게시글 ID를 찾을 수 없음: {post_id}")
        return post
