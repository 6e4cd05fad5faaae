from pydantic import BaseModel, Field


class FileUploadResponse(BaseModel):
    """
    파일 업로드 응답 스키마
    """
    image_url: str = Field(..., alias="imageUrl", description="업로드된 파일의 S3 URL")

    class Config:
        populate_by_name = True
