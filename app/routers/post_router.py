from typing import Annotated

from fastapi import APIRouter, Depends, Response, status

from app.schemas.error_schema import ErrorResponse
from app.schemas.post_schema import PostCreateRequest, PostResponse
from app.services.post_service import PostService
from app.utils.dependencies import get_current_member_email, get_post_service

router = APIRouter(prefix="/posts", tags=["post"])


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    summary="게시글 작성",
    description="액세스 토큰(Authorization: Bearer) 인증이 필요합니다.",
    responses={
        201: {"description": "게시글 작성 성공"},
        400: {"model": ErrorResponse, "description": "잘못된 요청 값"},
        401: {"model": ErrorResponse, "description": "인증 실패 또는 토큰 없음"},
    },
)
async def create_post(
    request: PostCreateRequest,
    email: Annotated[str, Depends(get_current_member_email)],
    service: Annotated[PostService, Depends(get_post_service)],
):
    post_id = await service.save_post(request, email)
    return Response(
        status_code=status.HTTP_201_CREATED,
        headers={"Location": f"/posts/{post_id}"},
    )


@router.get(
    "/{post_id}",
    response_model=PostResponse,
    summary="게시글 조회",
    responses={
        200: {"model": PostResponse, "description": "게시글 조회 성공"},
        404: {"model": ErrorResponse, "description": "게시글을 찾을 수 없음"},
    },
)
async def get_post(
    post_id: int,
    service: Annotated[PostService, Depends(get_post_service)],
):
    return await service.get_post(post_id)
