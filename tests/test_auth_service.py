"""Tests for AuthService.

인메모리 SQLite 세션을 사용합니다.
"""
import pytest
import pytest_asyncio

from app.core.exceptions import ErrorCode, FriendyException
from app.repositories.member_repository import MemberRepository
from app.schemas.auth_schema import LoginRequest
from app.services.auth_service import AuthService
from tests.fixtures import MEMBER_EMAIL, MEMBER_PASSWORD, member_fixture


@pytest.fixture
def auth_service(session, token_provider):
    return AuthService(session, token_provider=token_provider)


@pytest_asyncio.fixture
async def saved_member(session):
    return await MemberRepository().save(session, member_fixture())


@pytest.mark.asyncio
async def test_login_success(auth_service, saved_member, token_provider):
    tokens = await auth_service.login(LoginRequest(email=MEMBER_EMAIL, password=MEMBER_PASSWORD))

    assert token_provider.extract_email_from_access_token(tokens.access_token) == MEMBER_EMAIL
    assert token_provider.extract_email_from_refresh_token(tokens.refresh_token) == MEMBER_EMAIL


@pytest.mark.asyncio
async def test_login_unknown_email(auth_service, saved_member):
    with pytest.raises(FriendyException) as exc_info:
        await auth_service.login(
            LoginRequest(email="nobody@friendy.com", password=MEMBER_PASSWORD)
        )

    assert exc_info.value.error_code == ErrorCode.UNAUTHORIZED_EMAIL
    assert exc_info.value.status_code == 401


@pytest.mark.asyncio
async def test_login_wrong_password(auth_service, saved_member):
    with pytest.raises(FriendyException) as exc_info:
        await auth_service.login(LoginRequest(email=MEMBER_EMAIL, password="wrongPass12!"))

    assert exc_info.value.error_code == ErrorCode.UNAUTHORIZED_PASSWORD
    assert exc_info.value.detail == "로그인에 실패하였습니다. 비밀번호를 확인해주세요."


@pytest.mark.asyncio
async def test_reissue_token(auth_service, saved_member, token_provider):
    refresh_token = token_provider.generate_refresh_token(MEMBER_EMAIL)

    tokens = await auth_service.reissue_token(refresh_token)

    assert token_provider.extract_email_from_access_token(tokens.access_token) == MEMBER_EMAIL
    assert token_provider.extract_email_from_refresh_token(tokens.refresh_token) == MEMBER_EMAIL


@pytest.mark.asyncio
async def test_reissue_token_with_access_token(auth_service, saved_member, token_provider):
    """액세스 토큰으로는 재발급할 수 없음"""
    access_token = token_provider.generate_access_token(MEMBER_EMAIL)

    with pytest.raises(FriendyException) as exc_info:
        await auth_service.reissue_token(access_token)

    assert exc_info.value.error_code == ErrorCode.UNAUTHORIZED_USER


@pytest.mark.asyncio
async def test_reissue_token_for_deleted_member(auth_service, token_provider):
    refresh_token = token_provider.generate_refresh_token("ghost@friendy.com")

    with pytest.raises(FriendyException) as exc_info:
        await auth_service.reissue_token(refresh_token)

    assert exc_info.value.error_code == ErrorCode.UNAUTHORIZED_EMAIL
