"""Pytest configuration and fixtures.

이 모듈은 모든 테스트에서 공유되는 pytest fixture들을 정의합니다.

주요 Fixture:
- client: FastAPI 테스트 클라이언트 (임시 SQLite 파일 DB 사용)
- session: 서비스 테스트용 인메모리 SQLite 세션
- token_provider: 테스트용 JwtTokenProvider
- s3_client, s3_service: moto로 모킹한 S3 클라이언트와 S3Service

설정은 app 임포트 시점에 로드되므로, 환경 변수는 app을 임포트하기 전에 지정합니다.
"""
import os
import tempfile

_TEST_DB_DIR = tempfile.mkdtemp(prefix="friendy-test-")
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{_TEST_DB_DIR}/test.db"
os.environ["AWS_ACCESS_KEY_ID"] = "testing"
os.environ["AWS_SECRET_ACCESS_KEY"] = "testing"
os.environ["AWS_S3_REGION"] = "us-east-1"
os.environ["AWS_S3_BUCKET"] = "test-bucket"

import boto3  # noqa: E402
import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from moto import mock_aws  # noqa: E402
from sqlalchemy.ext.asyncio import (AsyncSession, async_sessionmaker,  # noqa: E402
                                    create_async_engine)
from sqlalchemy.pool import StaticPool  # noqa: E402
from sqlmodel import SQLModel  # noqa: E402

from app.database import engine  # noqa: E402
from app.main import app  # noqa: E402
from app.services.storage_service import S3Service  # noqa: E402
from app.utils.jwt import JwtTokenProvider  # noqa: E402


async def _truncate_tables():
    async with engine.begin() as conn:
        for table in reversed(SQLModel.metadata.sorted_tables):
            await conn.execute(table.delete())


@pytest.fixture
def client():
    """FastAPI 테스트 클라이언트를 생성합니다.

    - lifespan(init_db/close_db)이 실행되도록 컨텍스트 매니저로 엽니다.
    - 테스트마다 테이블을 비우고, 끝나면 dependency override를 해제합니다.
    """
    with TestClient(app) as test_client:
        test_client.portal.call(_truncate_tables)
        yield test_client
    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def session():
    """서비스/리포지토리 테스트용 인메모리 DB 세션"""
    test_engine = create_async_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with test_engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)

    maker = async_sessionmaker(bind=test_engine, class_=AsyncSession, expire_on_commit=False)
    async with maker() as db:
        yield db

    await test_engine.dispose()


@pytest.fixture
def token_provider():
    return JwtTokenProvider(
        access_secret="test-access-secret-test-access-secret",
        access_expiration_ms=60_000,
        refresh_secret="test-refresh-secret-test-refresh-secret",
        refresh_expiration_ms=120_000,
    )


@pytest.fixture
def s3_client():
    """moto로 모킹한 S3 클라이언트 (test-bucket 생성됨)"""
    with mock_aws():
        client = boto3.client("s3", region_name="us-east-1")
        client.create_bucket(Bucket="test-bucket")
        yield client


@pytest.fixture
def s3_service(s3_client):
    return S3Service(
        s3_client,
        bucket="test-bucket",
        region="us-east-1",
        endpoint_url=None,
        max_bytes=1024,
    )
