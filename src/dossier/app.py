from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from pathlib import Path

from dossier.config import Config
from dossier.core.core import Core
from dossier.core.modules.access.policy import Operation
from dossier.core.modules.project.models import Project, ProjectCreate, ProjectUpdate
from dossier.core.modules.session.models import AuthToken, IssuedToken, SessionPayload
from dossier.core.modules.upload.models import UploadedFile
from dossier.errors import ValidationError


class App:
    """Facade for all application operations, validates permissions before delegating to Core."""

    def __init__(self, config: Config) -> None:
        self._core = Core(config)

    @property
    def config(self) -> Config:
        return self._core.config

    @asynccontextmanager
    async def lifespan(self) -> AsyncGenerator[None]:
        """Application lifespan management - delegates to Core."""
        async with self._core.lifespan():
            yield

    def decode_session(self, auth_token: AuthToken | None) -> SessionPayload | None:
        """Verify a token without enforcing anything."""
        return self._core.services.session.decode(auth_token)

    async def login(self, username: str, password: str) -> IssuedToken:
        """Check credentials and issue a session token for the matching role."""
        account = self._core.services.user.authenticate(username, password)
        return self._core.services.session.issue(account.username, account.role)

    async def get_session(self, auth_token: AuthToken | None) -> SessionPayload:
        return self._core.services.access.ensure(auth_token, Operation.READ_SESSION)

    async def get_projects(self, auth_token: AuthToken | None) -> list[Project]:
        """List records, newest first (viewer or owner)."""
        self._core.services.access.ensure(auth_token, Operation.LIST_PROJECTS)
        return await self._core.services.project.list_projects()

    async def create_project(self, auth_token: AuthToken | None, data: ProjectCreate) -> tuple[Project, list[Project]]:
        """Create record (owner only); needs a title or a url."""
        self._core.services.access.ensure(auth_token, Operation.CREATE_PROJECT)
        if not data.has_title_or_url():
            raise ValidationError("Title or url required")
        return await self._core.services.project.create_project(data)

    async def update_project(
        self, auth_token: AuthToken | None, project_id: str, data: ProjectUpdate
    ) -> tuple[Project, list[Project]]:
        """Partially update record (owner only)."""
        self._core.services.access.ensure(auth_token, Operation.UPDATE_PROJECT)
        return await self._core.services.project.update_project(project_id, data)

    async def delete_project(self, auth_token: AuthToken | None, project_id: str) -> list[Project]:
        """Delete record (owner only)."""
        self._core.services.access.ensure(auth_token, Operation.DELETE_PROJECT)
        return await self._core.services.project.delete_project(project_id)

    async def upload_file(self, auth_token: AuthToken | None, filename: str, content: bytes) -> UploadedFile:
        """Store an uploaded document (owner only)."""
        self._core.services.access.ensure(auth_token, Operation.UPLOAD_FILE)
        return await self._core.services.upload.save(filename, content)

    async def get_upload_path(self, auth_token: AuthToken | None, filename: str) -> Path:
        """Resolve a stored upload for download (viewer or owner)."""
        self._core.services.access.ensure(auth_token, Operation.DOWNLOAD_FILE)
        return self._core.services.upload.resolve(filename)

    def ensure_upload_allowed(self, auth_token: AuthToken | None) -> None:
        """Check upload permission before the request body is read."""
        self._core.services.access.ensure(auth_token, Operation.UPLOAD_FILE)

    @property
    def max_upload_bytes(self) -> int:
        return self._core.services.upload.max_size
