"""
리포지토리 모듈

데이터베이스 접근 계층입니다.
"""
from .member_repository import MemberRepository
from .post_repository import PostRepository

__all__ = ["MemberRepository", "PostRepository"]
