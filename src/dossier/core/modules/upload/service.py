from pathlib import Path

import structlog

from dossier.core.core import Service
from dossier.core.modules.upload.models import UPLOADS_URL_PREFIX, UploadedFile
from dossier.core.modules.upload.storage import get_upload_file_path, write_upload_file
from dossier.core.modules.upload.utils import build_upload_filename, is_stored_filename
from dossier.errors import FileTooLargeError, NotFoundError, ValidationError
from dossier.utils import now_ms

logger = structlog.get_logger(__name__)


class UploadService(Service):
    """Stores uploaded documents under the uploads directory."""

    @property
    def max_size(self) -> int:
        return self.config.max_upload_bytes

    async def save(self, filename: str, content: bytes) -> UploadedFile:
        """Store file under a timestamped, sanitized name.

        Raises:
            ValidationError: If the file is empty
            FileTooLargeError: If the file exceeds the configured limit
        """
        if not content:
            raise ValidationError("Uploaded file is empty")
        if len(content) > self.max_size:
            raise FileTooLargeError(f"File exceeds the {self.max_size} byte limit")

        stored_name = build_upload_filename(filename, now_ms())
        path = await write_upload_file(self.config.uploads_path, stored_name, content)
        logger.info("file_uploaded", filename=stored_name, size=len(content), path=str(path))
        return UploadedFile(name=stored_name, size=len(content), url=f"{UPLOADS_URL_PREFIX}/{stored_name}")

    def resolve(self, filename: str) -> Path:
        """Get path of a stored upload for download.

        Raises:
            NotFoundError: If the name is not a stored upload
        """
        if not is_stored_filename(filename):
            raise NotFoundError(f"Upload not found: {filename}")
        uploads_dir = Path(self.config.uploads_path).resolve()
        path = get_upload_file_path(self.config.uploads_path, filename).resolve()
        if path.parent != uploads_dir or not path.is_file():
            raise NotFoundError(f"Upload not found: {filename}")
        return path

    async def on_start(self) -> None:
        Path(self.config.uploads_path).mkdir(parents=True, exist_ok=True)
