from dossier.config import Config
from dossier.core.core import Service
from dossier.core.modules.project.models import Project, ProjectCreate, ProjectUpdate
from dossier.core.modules.project.store import JsonFileProjectStore, ProjectStore


class ProjectService(Service):
    """Project records backed by a ProjectStore."""

    def __init__(self, config: Config, store: ProjectStore | None = None) -> None:
        super().__init__(config)
        self._store = store or JsonFileProjectStore(config.data_path, config.fallback_data_paths)

    async def list_projects(self) -> list[Project]:
        return await self._store.list()

    async def create_project(self, data: ProjectCreate) -> tuple[Project, list[Project]]:
        return await self._store.create(data)

    async def update_project(self, project_id: str, data: ProjectUpdate) -> tuple[Project, list[Project]]:
        return await self._store.update(project_id, data)

    async def delete_project(self, project_id: str) -> list[Project]:
        return await self._store.delete(project_id)
