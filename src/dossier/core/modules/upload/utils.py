"""Utility functions for upload handling."""

import re
from pathlib import PurePosixPath, PureWindowsPath

DEFAULT_UPLOAD_NAME = "upload.pdf"
MAX_FILENAME_LENGTH = 100

_UNSAFE_RE = re.compile(r"[^A-Za-z0-9._-]+")
_UNDERSCORES_RE = re.compile(r"_+")
_STORED_NAME_RE = re.compile(r"[A-Za-z0-9][A-Za-z0-9._-]*")


def sanitize_filename(filename: str) -> str:
    """Reduce a client-supplied filename to ``[A-Za-z0-9._-]``.

    Drops any directory part (both separators), leading dots and surrounding
    underscores, and caps the length while keeping the extension.
    """
    filename = PurePosixPath(PureWindowsPath(filename).name).name
    filename = filename.lstrip(".")

    sanitized = _UNSAFE_RE.sub("_", filename)
    sanitized = _UNDERSCORES_RE.sub("_", sanitized).strip("_")

    if len(sanitized) > MAX_FILENAME_LENGTH:
        parts = sanitized.rsplit(".", 1)
        if len(parts) == 2:
            name, ext = parts
            max_name_len = MAX_FILENAME_LENGTH - 1 - len(ext)
            sanitized = f"{name[:max_name_len]}.{ext}" if max_name_len > 0 else sanitized[:MAX_FILENAME_LENGTH]
        else:
            sanitized = sanitized[:MAX_FILENAME_LENGTH]

    if not sanitized.strip("._-"):
        return DEFAULT_UPLOAD_NAME
    return sanitized


def build_upload_filename(filename: str, timestamp_ms: int) -> str:
    """Stored name: creation time prefix plus the sanitized original name."""
    return f"{timestamp_ms}-{sanitize_filename(filename)}"


def is_stored_filename(filename: str) -> bool:
    """Whether the name has the shape build_upload_filename produces."""
    return bool(_STORED_NAME_RE.fullmatch(filename))
