from dossier.web.routers.auth import router as auth_router
from dossier.web.routers.projects import router as projects_router
from dossier.web.routers.session import router as session_router
from dossier.web.routers.uploads import files_router
from dossier.web.routers.uploads import router as uploads_router

__all__ = [
    "auth_router",
    "files_router",
    "projects_router",
    "session_router",
    "uploads_router",
]
