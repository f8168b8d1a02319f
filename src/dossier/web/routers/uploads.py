from fastapi import APIRouter, File, UploadFile
from fastapi.responses import FileResponse

from dossier.core.modules.upload.models import UploadResult
from dossier.errors import FileTooLargeError, ValidationError
from dossier.web.deps import AppDep, AuthTokenDep
from dossier.web.openapi import ErrorResponse

router = APIRouter(tags=["uploads"])
files_router = APIRouter(tags=["uploads"])

CHUNK_SIZE = 1024 * 1024


async def read_limited(file: UploadFile, max_bytes: int) -> bytes:
    """Read the upload, failing as soon as it grows past max_bytes."""
    chunks: list[bytes] = []
    size = 0
    while chunk := await file.read(CHUNK_SIZE):
        size += len(chunk)
        if size > max_bytes:
            raise FileTooLargeError(f"File exceeds the {max_bytes} byte limit")
        chunks.append(chunk)
    return b"".join(chunks)


@router.post(
    "/upload",
    summary="Upload file",
    description="Store a document and return a path that can be used as a project url.",
    operation_id="uploadFile",
    status_code=201,
    responses={
        201: {"description": "File stored"},
        400: {"model": ErrorResponse, "description": "No file or empty file"},
        401: {"model": ErrorResponse, "description": "Not authenticated"},
        403: {"model": ErrorResponse, "description": "Owner role required"},
        413: {"model": ErrorResponse, "description": "File too large"},
    },
)
async def upload_file(app: AppDep, auth_token: AuthTokenDep, file: UploadFile | None = File(None)) -> UploadResult:
    app.ensure_upload_allowed(auth_token)
    if file is None:
        raise ValidationError("No file provided")
    content = await read_limited(file, app.max_upload_bytes)
    stored = await app.upload_file(auth_token, file.filename or "", content)
    return UploadResult(file=stored)


@files_router.get(
    "/uploads/{filename}",
    summary="Download file",
    description="Get a previously uploaded file.",
    operation_id="downloadFile",
    response_class=FileResponse,
    responses={
        200: {"description": "File content"},
        401: {"model": ErrorResponse, "description": "Not authenticated"},
        404: {"model": ErrorResponse, "description": "File not found"},
    },
)
async def download_file(filename: str, app: AppDep, auth_token: AuthTokenDep) -> FileResponse:
    path = await app.get_upload_path(auth_token, filename)
    return FileResponse(path=path, filename=filename, content_disposition_type="inline")
