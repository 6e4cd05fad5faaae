import asyncio
import logging
from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import settings
from app.core.exceptions import ErrorCode, FriendyException
from app.models.post import Post
from app.repositories.post_repository import PostRepository
from app.schemas.post_schema import PostCreateRequest, PostResponse
from app.services.auth_service import AuthService
from app.services.storage_service import S3Service

logger = logging.getLogger(__name__)


class PostService:
    """
    게시글 관련 비즈니스 로직
    """

    def __init__(
        self,
        db: AsyncSession,
        storage: Optional[S3Service] = None,
        post_repository: Optional[PostRepository] = None,
        auth_service: Optional[AuthService] = None,
    ):
        self.db = db
        self.storage = storage
        self.post_repository = post_repository or PostRepository()
        self.auth_service = auth_service or AuthService(db)

    async def save_post(self, request: PostCreateRequest, email: str) -> int:
        """
        토큰의 이메일로 작성자를 찾아 게시글을 저장하고 ID를 반환합니다.
        """
        member = await self.auth_service.get_member_by_email(email)
        image_urls = await self._move_images(request.image_urls)

        post = await self.post_repository.save(self.db, Post.of(request, member, image_urls))
        logger.info(f"게시글 작성 완료: post_id={post.id}, author={member.email}")
        return post.id

    async def get_post(self, post_id: int) -> PostResponse:
        post = await self.post_repository.get_by_id(self.db, post_id)
        if not post:
            raise FriendyException(ErrorCode.RESOURCE_NOT_EXIST, "존재하지 않는 게시글입니다.")
        return PostResponse.model_validate(post)

    async def _move_images(self, image_urls: List[str]) -> List[str]:
        if not image_urls:
            return []
        if self.storage is None:
            raise FriendyException(ErrorCode.STORAGE_ERROR, "파일 저장소가 설정되지 않았습니다.")
        return [
            await asyncio.to_thread(self.storage.move_s3_object, url, settings.POST_IMAGE_DIR)
            for url in image_urls
        ]
