import structlog
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

from dossier.app import App
from dossier.core.modules.access.policy import is_public_path
from dossier.web.deps import read_auth_token
from dossier.web.error_handlers import create_json_error_response

logger = structlog.get_logger(__name__)

PROTECTED_PREFIXES = ("/api/", "/uploads/")
UPLOAD_PATH = "/api/upload"
# Room for multipart boundaries and part headers around the file itself
MULTIPART_OVERHEAD_BYTES = 64 * 1024


class AccessGateMiddleware(BaseHTTPMiddleware):
    """Rejects requests to protected paths that carry no valid session.

    Role checks per operation happen in the App facade; this only keeps
    anonymous traffic away from everything outside the public allowlist, and
    turns away uploads whose declared size is over the limit before the body
    is spooled to disk.
    """

    def __init__(self, app: ASGIApp, app_instance: App, include_docs: bool = False) -> None:
        super().__init__(app)
        self._app_instance = app_instance
        self._include_docs = include_docs

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        path = request.url.path
        if request.method == "OPTIONS" or is_public_path(path, self._include_docs):
            return await call_next(request)
        if not path.startswith(PROTECTED_PREFIXES):
            return await call_next(request)

        session = self._app_instance.decode_session(read_auth_token(request))
        if session is None:
            logger.debug("request_rejected_no_session", path=path, method=request.method)
            return create_json_error_response(401, "Login required", "authentication_error")

        max_bytes = self._app_instance.max_upload_bytes
        if path == UPLOAD_PATH and self._declared_size(request) > max_bytes + MULTIPART_OVERHEAD_BYTES:
            logger.info("upload_rejected_too_large", content_length=request.headers.get("content-length"))
            return create_json_error_response(413, f"File exceeds the {max_bytes} byte limit", "file_too_large")
        return await call_next(request)

    @staticmethod
    def _declared_size(request: Request) -> int:
        """Content-Length of the request, 0 when absent or malformed."""
        try:
            return int(request.headers.get("content-length", "0"))
        except ValueError:
            return 0
