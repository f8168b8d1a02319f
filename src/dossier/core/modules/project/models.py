import re
from pathlib import PurePosixPath
from typing import Any
from urllib.parse import urlparse
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field

from dossier.utils import now_ms

DEFAULT_PROJECT_TYPE = "pdf"
EDITABLE_FIELDS = ("title", "type", "description", "url", "code")

_SEPARATORS_RE = re.compile(r"[._-]+")


class Project(BaseModel):
    """Document record: certificate, reference, diploma, link, etc."""

    id: str = Field(..., description="Record ID (UUID)")
    title: str = Field("", description="Display title")
    type: str = Field(DEFAULT_PROJECT_TYPE, description="Free-text category, e.g. certificate, diploma, cv, link")
    description: str = ""
    url: str = Field("", description="Uploaded file path or external link")
    code: str = ""
    created_at: int = Field(0, alias="createdAt", description="Creation time, milliseconds since epoch")

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    def to_storage(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)


class ProjectCreate(BaseModel):
    """Input for a new record. At least one of title or url is expected.

    Missing and null fields are treated alike. Values must be strings.
    """

    title: str | None = None
    type: str | None = None
    description: str | None = None
    url: str | None = None
    code: str | None = None

    def has_title_or_url(self) -> bool:
        return bool((self.title or "").strip() or (self.url or "").strip())

    def to_project(self) -> Project:
        url = (self.url or "").strip()
        project_type = (self.type or "").strip() or DEFAULT_PROJECT_TYPE
        title = (self.title or "").strip() or derive_title(url, project_type)
        return Project(
            id=str(uuid4()),
            title=title,
            type=project_type,
            description=(self.description or "").strip(),
            url=url,
            code=(self.code or "").strip(),
            created_at=now_ms(),
        )


class ProjectUpdate(BaseModel):
    """Partial update; only fields present in the request are applied.

    An explicit null clears the field to "". Values must be strings; numbers
    and other JSON types are rejected with 422 rather than coerced.
    """

    title: str | None = None
    type: str | None = None
    description: str | None = None
    url: str | None = None
    code: str | None = None

    def patch(self) -> dict[str, str]:
        """Trimmed values of the explicitly supplied fields."""
        return {name: (getattr(self, name) or "").strip() for name in EDITABLE_FIELDS if name in self.model_fields_set}


class ProjectList(BaseModel):
    items: list[Project]


class ProjectMutation(BaseModel):
    """Changed record together with the full updated collection."""

    item: Project
    items: list[Project]


def derive_title(url: str, project_type: str) -> str:
    """Fallback title: the url's file name without extension, else the type."""
    if url:
        name = PurePosixPath(urlparse(url).path).name
        stem = name.rsplit(".", 1)[0] if "." in name else name
        title = _SEPARATORS_RE.sub(" ", stem).strip()
        if title:
            return title
    return project_type


def sort_newest_first(items: list[Project]) -> list[Project]:
    return sorted(items, key=lambda p: p.created_at, reverse=True)
