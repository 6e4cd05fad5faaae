"""
Main.py works as a main function for the application
Api app starts from here
"""

from contextlib import asynccontextmanager
from logging import getLogger
from logging.config import dictConfig

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.core.config import settings
from app.core.exceptions import ErrorCode, FriendyException
from app.database import close_db, init_db
from app.routers import auth_router, file_router, member_router, post_router
from app.schemas.error_schema import ErrorResponse
from app.utils.logger import get_log_config

# ----------------------------------------------------------------------
# 로거 설정
# ----------------------------------------------------------------------
dictConfig(get_log_config(settings.LOG_LEVEL))

logger = getLogger(__name__)


# ----------------------------------------------------------------------
# Lifespan: 앱 시작 시 DB 초기화, 종료 시 커넥션 풀 정리
# ----------------------------------------------------------------------
@asynccontextmanager
async def lifespan(app: FastAPI):
    await init_db()
    yield
    await close_db()


# ----------------------------------------------------------------------
# FastAPI 애플리케이션 생성
# ----------------------------------------------------------------------
app = FastAPI(
    title=settings.APP_NAME,
    description="FastAPI 기반 커뮤니티 백엔드 API",
    version="1.0.0",
    docs_url="/docs" if settings.DEPLOY_PHASE in ("dev", "local") else None,
    lifespan=lifespan,
)


# ----------------------------------------------------------------------
# 예외 핸들러
# ----------------------------------------------------------------------
def _error_response(status_code: int, code: ErrorCode, detail: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=code.name, detail=detail).model_dump(),
    )


@app.exception_handler(FriendyException)
async def friendy_exception_handler(request: Request, exc: FriendyException):
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} -> {exc.error_code.name}: {exc.detail}")
    else:
        logger.warning(f"{request.method} {request.url.path} -> {exc.error_code.name}: {exc.detail}")
    return _error_response(exc.status_code, exc.error_code, exc.detail)


def _validation_message(error: dict) -> str:
    loc = error.get("loc") or ()
    field = loc[-1] if loc else "unknown"
    msg = error.get("msg", "")

    # 한글 메시지로 변환
    if error.get("type") == "missing" or ("input" in error and error["input"] is None):
        return f"{field}는 필수 입력 항목입니다."
    if "valid email" in msg.lower():
        return "이메일 형식이 올바르지 않습니다."
    if error.get("type") == "value_error":
        # 스키마 검증기에서 던진 메시지를 그대로 사용
        return msg.removeprefix("Value error, ")
    return f"{field}: {msg}"


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    error_messages = [_validation_message(error) for error in exc.errors()]

    for message in error_messages:
        logger.warning(message)

    return _error_response(400, ErrorCode.INVALID_REQUEST, " ".join(error_messages))


# ----------------------------------------------------------------------
# CORS 설정
# ----------------------------------------------------------------------
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["Authorization", "Authorization-Refresh", "Location"],
)

# ----------------------------------------------------------------------
# 라우터 등록
# ----------------------------------------------------------------------
app.include_router(auth_router)  # 로그인/토큰 재발급
app.include_router(member_router)  # 회원가입/비밀번호 재설정/회원 조회
app.include_router(post_router)  # 게시글
app.include_router(file_router)  # S3 파일 업로드


@app.get("/")
async def root():
    return {"message": f"{settings.APP_NAME} API"}
