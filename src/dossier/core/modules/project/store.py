"""Persistence for project records.

The whole collection is the unit of persistence: every write is a full
read-modify-write of one JSON file with no locking, so concurrent writers
race and the last one wins.
"""

from __future__ import annotations

import json
from abc import ABC, abstractmethod
from collections.abc import Sequence
from pathlib import Path

import aiofiles
import aiofiles.os
import pydantic
import structlog

from dossier.core.modules.project.models import Project, ProjectCreate, ProjectUpdate, sort_newest_first
from dossier.errors import NotFoundError, StorageError

logger = structlog.get_logger(__name__)

_PROJECT_LIST = pydantic.TypeAdapter(list[Project])


class ProjectStore(ABC):
    """CRUD over the project collection, newest first."""

    @abstractmethod
    async def list(self) -> list[Project]: ...

    @abstractmethod
    async def create(self, data: ProjectCreate) -> tuple[Project, list[Project]]: ...

    @abstractmethod
    async def update(self, project_id: str, data: ProjectUpdate) -> tuple[Project, list[Project]]: ...

    @abstractmethod
    async def delete(self, project_id: str) -> list[Project]: ...


class JsonFileProjectStore(ProjectStore):
    """Stores the collection as an indented JSON array.

    Reads fall back through ``fallback_paths`` (e.g. a bundled seed file) when
    the primary file is missing or unreadable; writes always go to ``data_path``.
    """

    def __init__(self, data_path: str | Path, fallback_paths: Sequence[str | Path] = ()) -> None:
        self._data_path = Path(data_path)
        self._fallback_paths = [Path(p) for p in fallback_paths]

    async def list(self) -> list[Project]:
        """Read the first parseable candidate file; empty list if none is."""
        for path in [self._data_path, *self._fallback_paths]:
            items = await self._read(path)
            if items is not None:
                return sort_newest_first(items)
        logger.debug("no_project_file_readable", data_path=str(self._data_path))
        return []

    async def create(self, data: ProjectCreate) -> tuple[Project, list[Project]]:
        item = data.to_project()
        items = await self._persist([item, *await self.list()])
        logger.info("project_created", project_id=item.id, type=item.type)
        return item, items

    async def update(self, project_id: str, data: ProjectUpdate) -> tuple[Project, list[Project]]:
        """Apply a partial update; id and createdAt never change."""
        items = await self.list()
        index = self._index_of(items, project_id)
        updated = items[index].model_copy(update=data.patch())
        items[index] = updated
        items = await self._persist(items)
        logger.info("project_updated", project_id=project_id)
        return updated, items

    async def delete(self, project_id: str) -> list[Project]:
        items = await self.list()
        index = self._index_of(items, project_id)
        del items[index]
        items = await self._persist(items)
        logger.info("project_deleted", project_id=project_id)
        return items

    @staticmethod
    def _index_of(items: list[Project], project_id: str) -> int:
        for index, item in enumerate(items):
            if item.id == project_id:
                return index
        raise NotFoundError(f"Project not found: {project_id}")

    async def _read(self, path: Path) -> list[Project] | None:
        try:
            async with aiofiles.open(path, encoding="utf-8") as f:
                raw = await f.read()
        except OSError as e:
            logger.debug("project_file_unreadable", path=str(path), error=str(e))
            return None

        try:
            data = json.loads(raw)
        except ValueError as e:
            logger.warning("project_file_invalid_json", path=str(path), error=str(e))
            return None

        if isinstance(data, dict):
            data = data.get("items")
        if not isinstance(data, list):
            logger.warning("project_file_unexpected_shape", path=str(path))
            return None

        try:
            return _PROJECT_LIST.validate_python(data)
        except pydantic.ValidationError as e:
            logger.warning("project_file_invalid_records", path=str(path), error_count=e.error_count())
            return None

    async def _persist(self, items: list[Project]) -> list[Project]:
        """Overwrite the primary file with the whole collection, sorted newest first."""
        items = sort_newest_first(items)
        content = json.dumps([item.to_storage() for item in items], indent=2, ensure_ascii=False)
        try:
            await aiofiles.os.makedirs(self._data_path.parent, exist_ok=True)
            async with aiofiles.open(self._data_path, "w", encoding="utf-8") as f:
                await f.write(content)
        except OSError as e:
            logger.exception("project_file_write_failed", path=str(self._data_path))
            raise StorageError(f"Cannot write {self._data_path}") from e
        return items
