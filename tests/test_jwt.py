"""Tests for JwtTokenProvider and JwtTokenExtractor."""
import pytest
from jose import jwt
from starlette.requests import Request

from app.core.exceptions import ErrorCode, FriendyException
from app.utils.jwt import EMAIL_KEY, JwtTokenExtractor, JwtTokenProvider, bearer

EMAIL = "example@friendy.com"


def _request(headers: dict) -> Request:
    raw = [(k.lower().encode(), v.encode()) for k, v in headers.items()]
    return Request({"type": "http", "method": "GET", "path": "/", "headers": raw})


def test_access_token_contains_email(token_provider):
    token = token_provider.generate_access_token(EMAIL)

    claims = token_provider.validate_access_token(token)

    assert claims[EMAIL_KEY] == EMAIL
    assert claims["exp"] > claims["iat"]
    assert token_provider.extract_email_from_access_token(token) == EMAIL


def test_refresh_token_contains_email(token_provider):
    token = token_provider.generate_refresh_token(EMAIL)

    assert token_provider.extract_email_from_refresh_token(token) == EMAIL


def test_access_and_refresh_secrets_are_separate(token_provider):
    access_token = token_provider.generate_access_token(EMAIL)
    refresh_token = token_provider.generate_refresh_token(EMAIL)

    with pytest.raises(FriendyException):
        token_provider.validate_refresh_token(access_token)
    with pytest.raises(FriendyException):
        token_provider.validate_access_token(refresh_token)


def test_expired_refresh_token(token_provider):
    provider = JwtTokenProvider(
        access_secret=token_provider.access_secret,
        access_expiration_ms=token_provider.access_expiration_ms,
        refresh_secret=token_provider.refresh_secret,
        refresh_expiration_ms=-1000,
    )
    token = provider.generate_refresh_token(EMAIL)

    with pytest.raises(FriendyException) as exc_info:
        token_provider.validate_refresh_token(token)

    assert exc_info.value.error_code == ErrorCode.UNAUTHORIZED_USER
    assert exc_info.value.detail == "리프레시 토큰이 만료되었습니다."


def test_malformed_token(token_provider):
    with pytest.raises(FriendyException) as exc_info:
        token_provider.validate_access_token("abc")

    assert exc_info.value.detail == "인증 실패(잘못된 액세스 토큰) - 토큰 : abc"


def test_token_without_email_claim(token_provider):
    token = jwt.encode({"sub": "nobody"}, token_provider.access_secret, algorithm="HS256")

    with pytest.raises(FriendyException) as exc_info:
        token_provider.extract_email_from_access_token(token)

    assert exc_info.value.detail == "인증 실패(JWT 액세스 토큰 Payload 이메일 누락)"


def test_extract_access_token():
    request = _request({"Authorization": bearer("token-value")})

    assert JwtTokenExtractor().extract_access_token(request) == "token-value"


@pytest.mark.parametrize(
    "headers, detail",
    [
        ({}, "인증 실패(액세스 토큰 누락)"),
        ({"Authorization": "Bearer "}, "인증 실패(액세스 토큰 누락)"),
        ({"Authorization": "Basic abc"}, "인증 실패(Bearer 형식이 아닌 액세스 토큰)"),
    ],
)
def test_extract_access_token_failure(headers, detail):
    with pytest.raises(FriendyException) as exc_info:
        JwtTokenExtractor().extract_access_token(_request(headers))

    assert exc_info.value.status_code == 401
    assert exc_info.value.detail == detail


def test_extract_refresh_token():
    request = _request({"Authorization-Refresh": bearer("refresh-value")})

    assert JwtTokenExtractor().extract_refresh_token(request) == "refresh-value"
