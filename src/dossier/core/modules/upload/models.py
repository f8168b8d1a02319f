from pydantic import BaseModel, Field

UPLOADS_URL_PREFIX = "/uploads"


class UploadedFile(BaseModel):
    """Stored upload (API representation)."""

    name: str = Field(..., description="Stored file name")
    size: int = Field(..., description="Size in bytes")
    url: str = Field(..., description="Retrieval path, usable as a project url")


class UploadResult(BaseModel):
    file: UploadedFile
