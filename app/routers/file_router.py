import asyncio
from typing import Annotated

from fastapi import APIRouter, Depends, File, UploadFile

from app.core.config import settings
from app.schemas.error_schema import ErrorResponse
from app.schemas.file_schema import FileUploadResponse
from app.services.storage_service import S3Service, get_s3_service

router = APIRouter(prefix="/file", tags=["file"])


@router.post(
    "/upload",
    response_model=FileUploadResponse,
    summary="파일 업로드",
    description="이미지를 임시 디렉터리에 업로드합니다. 반환된 URL은 회원가입/게시글 작성 시 사용합니다.",
    responses={
        200: {"model": FileUploadResponse, "description": "업로드 성공"},
        400: {"model": ErrorResponse, "description": "빈 파일, 지원하지 않는 형식 또는 용량 초과"},
        500: {"model": ErrorResponse, "description": "임시 파일 또는 S3 업로드 실패"},
    },
)
async def upload_file(
    file: Annotated[UploadFile, File(description="업로드할 이미지 파일")],
    storage: Annotated[S3Service, Depends(get_s3_service)],
):
    image_url = await asyncio.to_thread(storage.upload, file, settings.UPLOAD_TEMP_DIR)
    return FileUploadResponse(image_url=image_url)
