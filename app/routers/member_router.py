from typing import Annotated

from fastapi import APIRouter, Depends, Response, status

from app.schemas.error_schema import ErrorResponse
from app.schemas.member_schema import (MemberResponse, MemberSignUpRequest,
                                       PasswordRequest)
from app.services.member_service import MemberService
from app.utils.dependencies import get_member_service

router = APIRouter(tags=["member"])


@router.post(
    "/signup",
    status_code=status.HTTP_201_CREATED,
    summary="회원가입",
    description="새로운 회원을 생성합니다. 생성된 회원의 위치를 Location 헤더로 반환합니다.",
    responses={
        201: {"description": "회원가입 성공"},
        400: {"model": ErrorResponse, "description": "잘못된 요청 값"},
        409: {"model": ErrorResponse, "description": "이메일 또는 닉네임 중복"},
    },
)
async def sign_up(
    request: MemberSignUpRequest,
    service: Annotated[MemberService, Depends(get_member_service)],
):
    """
    - **email**: 이메일 주소 (유효한 이메일 형식)
    - **nickname**: 닉네임 (2~20자)
    - **password**: 비밀번호 (8~16자, 숫자/영문자/특수문자 포함)
    - **birthDate**: 생년월일
    - **imageUrl**: /file/upload로 업로드한 프로필 이미지 URL (선택)
    """
    member_id = await service.sign_up(request)
    return Response(
        status_code=status.HTTP_201_CREATED,
        headers={"Location": f"/users/{member_id}"},
    )


@router.post(
    "/password/reset",
    summary="비밀번호 재설정",
    responses={
        200: {"description": "비밀번호 변경 성공"},
        400: {"model": ErrorResponse, "description": "잘못된 요청 값"},
        401: {"model": ErrorResponse, "description": "존재하지 않는 이메일"},
    },
)
async def reset_password(
    request: PasswordRequest,
    service: Annotated[MemberService, Depends(get_member_service)],
):
    await service.reset_password(request)
    return Response(status_code=status.HTTP_200_OK)


@router.get(
    "/users/{member_id}",
    response_model=MemberResponse,
    summary="회원 조회",
    responses={
        200: {"model": MemberResponse, "description": "회원 조회 성공"},
        404: {"model": ErrorResponse, "description": "회원을 찾을 수 없음"},
    },
)
async def get_member(
    member_id: int,
    service: Annotated[MemberService, Depends(get_member_service)],
):
    return await service.get_member(member_id)
