"""
S3 오브젝트 스토리지 서비스

업로드된 파일을 임시 파일로 쓴 뒤 S3에 올리고, 임시 파일은 업로드 성공 여부와 관계없이 삭제합니다.
오브젝트 키는 "<디렉터리>/<uuid><확장자>" 형식입니다.
"""
from __future__ import annotations

import logging
import os
import tempfile
import uuid
from typing import BinaryIO, Optional, Protocol
from urllib.parse import urlparse

import boto3
from boto3.exceptions import S3UploadFailedError
from botocore.exceptions import BotoCoreError, ClientError

from app.core.config import settings
from app.core.exceptions import ErrorCode, FriendyException

logger = logging.getLogger(__name__)


class UploadedFile(Protocol):
    """FastAPI UploadFile과 호환되는 업로드 파일 인터페이스"""

    filename: Optional[str]
    content_type: Optional[str]
    file: BinaryIO


class S3Service:
    """S3 업로드 및 오브젝트 키 관리"""

    def __init__(
        self,
        s3_client,
        bucket: str = settings.AWS_S3_BUCKET,
        region: str = settings.AWS_S3_REGION,
        endpoint_url: Optional[str] = settings.AWS_S3_ENDPOINT_URL,
        max_bytes: int = settings.UPLOAD_MAX_BYTES,
        allowed_extensions: Optional[list[str]] = None,
        temp_dir: str = settings.UPLOAD_TEMP_DIR,
    ):
        self.s3_client = s3_client
        self.bucket = bucket
        self.region = region
        self.endpoint_url = endpoint_url.rstrip("/") if endpoint_url else None
        self.max_bytes = max_bytes
        self.allowed_extensions = {
            ext.lower() for ext in (allowed_extensions or settings.UPLOAD_ALLOWED_EXTENSIONS)
        }
        self.temp_dir = temp_dir

    # -------------------- #
    # 업로드
    # -------------------- #

    def upload(self, file: UploadedFile, dir_name: str) -> str:
        """
        파일을 검증한 뒤 S3에 업로드하고 오브젝트 URL을 반환합니다.

        Args:
            file: 업로드 파일 (filename, content_type, file)
            dir_name: 저장할 디렉터리 (예: "temp", "profile")

        Returns:
            업로드된 오브젝트의 URL
        """
        data = self.validate_file(file)

        # (1) 업로드 파일을 임시 파일로 변환
        temp_path = self._write_temp_file(data, file.filename)

        # (2) S3 업로드. 업로드 성공 여부와 관계없이 (1)의 임시 파일 삭제
        try:
            key = self.generate_stored_file_name(file, dir_name)
            return self._put_s3(temp_path, key, self.get_file_type(file))
        finally:
            self._remove_temp_file(temp_path)

    def validate_file(self, file: UploadedFile) -> bytes:
        """파일 이름/확장자/크기를 검증하고 파일 내용을 반환합니다."""
        if not file.filename:
            raise FriendyException(ErrorCode.INVALID_FILE, "파일 이름을 가져올 수 없습니다.")

        extension = self._extension_of(file.filename).lstrip(".").lower()
        if extension not in self.allowed_extensions:
            raise FriendyException(ErrorCode.INVALID_FILE, "지원하지 않는 파일 형식입니다.")

        # 한도보다 1바이트만 더 읽어 초과 여부를 판단
        data = file.file.read(self.max_bytes + 1)
        if not data:
            raise FriendyException(ErrorCode.INVALID_FILE, "파일이 비어 있습니다.")
        if len(data) > self.max_bytes:
            raise FriendyException(
                ErrorCode.INVALID_FILE,
                f"파일 크기는 {self._size_label(self.max_bytes)}를 초과할 수 없습니다.",
            )
        return data

    def _write_temp_file(self, data: bytes, filename: str) -> str:
        try:
            with tempfile.NamedTemporaryFile(
                delete=False, suffix=self._extension_of(filename)
            ) as temp_file:
                temp_file.write(data)
                return temp_file.name
        except OSError as e:
            logger.error(f"임시 파일 생성 실패 ({filename}): {e}")
            raise FriendyException(ErrorCode.FILE_IO_ERROR, "I/O 오류 발생") from e

    def _put_s3(self, path: str, key: str, content_type: str) -> str:
        try:
            self.s3_client.upload_file(
                path, self.bucket, key, ExtraArgs={"ContentType": content_type}
            )
        except (S3UploadFailedError, BotoCoreError, ClientError) as e:
            logger.error(f"S3 업로드 실패 (key={key}): {e}")
            raise FriendyException(ErrorCode.STORAGE_ERROR, "파일 업로드에 실패했습니다.") from e

        logger.info(f"S3 업로드 완료: {key}")
        return self.get_object_url(key)

    @staticmethod
    def _remove_temp_file(path: str) -> None:
        try:
            os.remove(path)
            logger.info("파일이 삭제되었습니다.")
        except OSError as e:
            logger.info(f"파일이 삭제되지 못했습니다. ({path}: {e})")

    # -------------------- #
    # 키/URL 관리
    # -------------------- #

    @staticmethod
    def _size_label(size: int) -> str:
        if size >= 1024 * 1024:
            return f"{size // (1024 * 1024)}MB"
        return f"{size}바이트"

    @staticmethod
    def _extension_of(filename: str) -> str:
        index = filename.rfind(".")
        return filename[index:] if index >= 0 else ""

    def generate_stored_file_name(self, file: UploadedFile, dir_name: str) -> str:
        """예: profile/123e4567-e89b-12d3-a456-426614174000.jpg"""
        if not file.filename:
            raise FriendyException(ErrorCode.INVALID_FILE, "파일 이름을 가져올 수 없습니다.")
        return f"{dir_name}/{uuid.uuid4()}{self._extension_of(file.filename)}"

    @staticmethod
    def get_file_type(file: UploadedFile) -> str:
        """파일의 MIME 타입 (예: image/jpeg)"""
        if not file.content_type:
            raise FriendyException(ErrorCode.INVALID_FILE, "파일 타입을 가져올 수 없습니다.")
        return file.content_type

    def get_object_url(self, key: str) -> str:
        if self.endpoint_url:
            # S3 호환 스토리지는 path-style URL 사용
            return f"{self.endpoint_url}/{self.bucket}/{key}"
        return f"https://{self.bucket}.s3.{self.region}.amazonaws.com/{key}"

    def extract_file_name(self, image_url: str) -> str:
        """
        이 버킷의 오브젝트 URL에서 키를 추출합니다.
        "https://bucket.s3.region.amazonaws.com/profile/a.jpg" -> "profile/a.jpg"
        """
        parsed = urlparse(image_url)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            raise FriendyException(ErrorCode.INVALID_FILE, "유효한 URL 형식이어야 합니다.")

        url = parsed._replace(query="", fragment="").geturl()
        base_url = self.get_object_url("")
        if not url.startswith(base_url):
            logger.warning(f"다른 저장소의 URL 사용 시도: {image_url}")
            raise FriendyException(ErrorCode.INVALID_FILE, "이 서비스에 업로드된 파일이 아닙니다.")

        key = url[len(base_url):]
        if not key:
            raise FriendyException(ErrorCode.INVALID_FILE, "유효한 URL 형식이어야 합니다.")
        return key

    def move_s3_object(self, image_url: str, new_dir_name: str) -> str:
        """
        temp 디렉터리의 오브젝트를 new_dir_name 디렉터리로 복사하고 새 URL을 반환합니다.
        원본(temp) 오브젝트는 버킷 수명주기 정책으로 정리됩니다.
        """
        old_key = self.extract_file_name(image_url)
        file_name = old_key[old_key.rfind("/") + 1:]
        if not old_key.startswith(f"{self.temp_dir}/") or not file_name:
            logger.warning(f"임시 업로드가 아닌 오브젝트 이동 시도: {old_key}")
            raise FriendyException(ErrorCode.INVALID_FILE, "임시 업로드된 파일만 사용할 수 있습니다.")
        new_key = f"{new_dir_name}/{file_name}"

        self.copy_object(self.bucket, old_key, self.bucket, new_key)
        logger.info(f"S3 오브젝트 이동: {old_key} -> {new_key}")
        return self.get_object_url(new_key)

    def copy_object(self, source_bucket: str, source_key: str,
                    destination_bucket: str, destination_key: str) -> None:
        try:
            self.s3_client.copy_object(
                Bucket=destination_bucket,
                Key=destination_key,
                CopySource={"Bucket": source_bucket, "Key": source_key},
            )
        except ClientError as e:
            logger.error(f"S3 오브젝트 복사 실패 ({source_key} -> {destination_key}): {e}")
            if e.response.get("Error", {}).get("Code") in ("NoSuchKey", "404"):
                raise FriendyException(
                    ErrorCode.INVALID_FILE, "존재하지 않는 파일입니다."
                ) from e
            raise FriendyException(ErrorCode.STORAGE_ERROR, "파일 이동에 실패했습니다.") from e
        except BotoCoreError as e:
            logger.error(f"S3 오브젝트 복사 실패 ({source_key} -> {destination_key}): {e}")
            raise FriendyException(ErrorCode.STORAGE_ERROR, "파일 이동에 실패했습니다.") from e

    def get_content_type_from_s3(self, key: str) -> Optional[str]:
        try:
            response = self.s3_client.head_object(Bucket=self.bucket, Key=key)
        except (BotoCoreError, ClientError) as e:
            logger.error(f"Error getting object metadata (key={key}): {e}")
            return None
        return response.get("ContentType")


_s3_service: Optional[S3Service] = None


def get_s3_service() -> S3Service:
    """S3Service 싱글톤 (FastAPI Depends용)"""
    global _s3_service
    if _s3_service is None:
        s3_client = boto3.client(
            "s3",
            aws_access_key_id=settings.AWS_ACCESS_KEY_ID,
            aws_secret_access_key=settings.AWS_SECRET_ACCESS_KEY,
            region_name=settings.AWS_S3_REGION,
            endpoint_url=settings.AWS_S3_ENDPOINT_URL,
        )
        _s3_service = S3Service(s3_client)
    return _s3_service
