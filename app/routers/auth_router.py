from typing import Annotated

from fastapi import APIRouter, Depends, Response, status

from app.schemas.auth_schema import LoginRequest, LoginResponse
from app.schemas.error_schema import ErrorResponse
from app.services.auth_service import AuthService
from app.utils.dependencies import get_auth_service, get_refresh_token
from app.utils.jwt import AUTHORIZATION_HEADER, REFRESH_HEADER, bearer

router = APIRouter(tags=["auth"])


def _token_response(tokens: LoginResponse) -> Response:
    return Response(
        status_code=status.HTTP_200_OK,
        headers={
            AUTHORIZATION_HEADER: bearer(tokens.access_token),
            REFRESH_HEADER: bearer(tokens.refresh_token),
        },
    )


@router.post(
    "/login",
    summary="로그인",
    description="이메일/비밀번호로 로그인하고 토큰을 Authorization, Authorization-Refresh 헤더로 발급합니다.",
    responses={
        200: {"description": "로그인 성공 (토큰은 헤더로 전달)"},
        400: {"model": ErrorResponse, "description": "잘못된 요청 값"},
        401: {"model": ErrorResponse, "description": "존재하지 않는 이메일 또는 잘못된 비밀번호"},
    },
)
async def login(
    request: LoginRequest,
    service: Annotated[AuthService, Depends(get_auth_service)],
):
    return _token_response(await service.login(request))


@router.post(
    "/token/reissue",
    summary="토큰 재발급",
    description="Authorization-Refresh 헤더의 리프레시 토큰으로 새 토큰 쌍을 발급합니다.",
    responses={
        200: {"description": "재발급 성공 (토큰은 헤더로 전달)"},
        401: {"model": ErrorResponse, "description": "리프레시 토큰 누락/만료/위조"},
    },
)
async def reissue_token(
    refresh_token: Annotated[str, Depends(get_refresh_token)],
    service: Annotated[AuthService, Depends(get_auth_service)],
):
    return _token_response(await service.reissue_token(refresh_token))
