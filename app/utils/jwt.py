"""
JWT 발급/검증 유틸리티

- JwtTokenProvider: email 클레임과 만료 시각을 담은 액세스/리프레시 토큰 발급 및 검증
- JwtTokenExtractor: 요청 헤더에서 Bearer 토큰 추출

액세스 토큰과 리프레시 토큰은 서로 다른 시크릿으로 서명되므로
한쪽 토큰을 다른 쪽 검증에 사용할 수 없습니다.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from fastapi import Request
from jose import jwt
from jose.exceptions import ExpiredSignatureError, JWTClaimsError, JWTError

from app.core.config import settings
from app.core.exceptions import ErrorCode, FriendyException
from app.utils.datetime import after_millis, utc_now

logger = logging.getLogger(__name__)

EMAIL_KEY = "email"
BEARER_PREFIX = "Bearer "
AUTHORIZATION_HEADER = "Authorization"
REFRESH_HEADER = "Authorization-Refresh"


class JwtTokenProvider:
    """HS256 서명 기반 JWT 발급기"""

    def __init__(
        self,
        access_secret: str = settings.JWT_ACCESS_SECRET,
        access_expiration_ms: int = settings.JWT_ACCESS_EXPIRATION_MS,
        refresh_secret: str = settings.JWT_REFRESH_SECRET,
        refresh_expiration_ms: int = settings.JWT_REFRESH_EXPIRATION_MS,
        algorithm: str = settings.JWT_ALGORITHM,
    ):
        self.access_secret = access_secret
        self.access_expiration_ms = access_expiration_ms
        self.refresh_secret = refresh_secret
        self.refresh_expiration_ms = refresh_expiration_ms
        self.algorithm = algorithm

    # -------------------- #
    # 발급
    # -------------------- #

    def _create_token(self, email: str, secret: str, expiration_ms: int) -> str:
        now = utc_now()
        claims = {
            EMAIL_KEY: email,
            "iat": now,
            "exp": after_millis(now, expiration_ms),
        }
        return jwt.encode(claims, secret, algorithm=self.algorithm)

    def generate_access_token(self, email: str) -> str:
        return self._create_token(email, self.access_secret, self.access_expiration_ms)

    def generate_refresh_token(self, email: str) -> str:
        return self._create_token(email, self.refresh_secret, self.refresh_expiration_ms)

    # -------------------- #
    # 검증
    # -------------------- #

    def _parse_claims(self, token: str, secret: str, token_label: str) -> Dict[str, Any]:
        """
        토큰을 파싱해 클레임을 반환합니다.

        만료, 클레임 오류, 형식/서명 오류는 모두 UNAUTHORIZED_USER로 변환됩니다.
        """
        try:
            return jwt.decode(token, secret, algorithms=[self.algorithm])
        except ExpiredSignatureError as e:
            logger.info(f"{token_label} 만료: {e}")
            raise FriendyException(
                ErrorCode.UNAUTHORIZED_USER, f"{token_label}이 만료되었습니다."
            ) from e
        except JWTClaimsError as e:
            logger.warning(f"{token_label} 클레임 검증 실패: {e}")
            raise FriendyException(
                ErrorCode.UNAUTHORIZED_USER, f"인증 실패(잘못된 {token_label}) - 토큰 : {token}"
            ) from e
        except JWTError as e:
            logger.warning(f"{token_label} 파싱 실패: {e}")
            raise FriendyException(
                ErrorCode.UNAUTHORIZED_USER, f"인증 실패(잘못된 {token_label}) - 토큰 : {token}"
            ) from e

    def validate_access_token(self, token: str) -> Dict[str, Any]:
        return self._parse_claims(token, self.access_secret, "액세스 토큰")

    def validate_refresh_token(self, token: str) -> Dict[str, Any]:
        return self._parse_claims(token, self.refresh_secret, "리프레시 토큰")

    @staticmethod
    def _email_of(claims: Dict[str, Any], token_label: str) -> str:
        email = claims.get(EMAIL_KEY)
        if not isinstance(email, str) or not email:
            raise FriendyException(
                ErrorCode.UNAUTHORIZED_USER,
                f"인증 실패(JWT {token_label} Payload 이메일 누락)",
            )
        return email

    def extract_email_from_access_token(self, token: str) -> str:
        return self._email_of(self.validate_access_token(token), "액세스 토큰")

    def extract_email_from_refresh_token(self, token: str) -> str:
        return self._email_of(self.validate_refresh_token(token), "리프레시 토큰")


class JwtTokenExtractor:
    """요청 헤더에서 Bearer 토큰을 꺼냅니다."""

    @staticmethod
    def _extract(header_value: Optional[str], token_label: str) -> str:
        if not header_value:
            raise FriendyException(
                ErrorCode.UNAUTHORIZED_USER, f"인증 실패({token_label} 누락)"
            )
        if not header_value.startswith(BEARER_PREFIX):
            raise FriendyException(
                ErrorCode.UNAUTHORIZED_USER, f"인증 실패(Bearer 형식이 아닌 {token_label})"
            )
        token = header_value[len(BEARER_PREFIX):].strip()
        if not token:
            raise FriendyException(
                ErrorCode.UNAUTHORIZED_USER, f"인증 실패({token_label} 누락)"
            )
        return token

    def extract_access_token(self, request: Request) -> str:
        return self._extract(request.headers.get(AUTHORIZATION_HEADER), "액세스 토큰")

    def extract_refresh_token(self, request: Request) -> str:
        return self._extract(request.headers.get(REFRESH_HEADER), "리프레시 토큰")


def bearer(token: str) -> str:
    return f"{BEARER_PREFIX}{token}"


jwt_token_provider = JwtTokenProvider()
jwt_token_extractor = JwtTokenExtractor()
