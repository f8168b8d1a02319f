"""File storage operations for uploads."""

from pathlib import Path

import aiofiles
import aiofiles.os


async def write_upload_file(uploads_path: str, filename: str, content: bytes) -> Path:
    """Write upload to disk, creating the directory on demand.

    Returns:
        Path to the written file
    """
    file_path = get_upload_file_path(uploads_path, filename)
    await aiofiles.os.makedirs(file_path.parent, exist_ok=True)
    async with aiofiles.open(file_path, "wb") as f:
        await f.write(content)
    return file_path


def get_upload_file_path(uploads_path: str, filename: str) -> Path:
    """Get path to an uploaded file; filename must already be sanitized."""
    return Path(uploads_path) / filename
