from pydantic_settings import BaseSettings


class Config(BaseSettings):
    """Application configuration loaded from environment variables."""

    host: str = "127.0.0.1"
    port: int = 8000
    debug: bool = False
    is_production: bool = False  # Marks the session cookie as Secure
    cors_origins: list[str] = []
    token_secret: str  # HMAC key for session tokens
    owner_username: str
    owner_password: str
    viewer_username: str = ""  # Read-only account, disabled when empty
    viewer_password: str = ""
    data_path: str = "data/projects.json"  # Primary project records file
    # Read-only fallbacks tried in order when the primary file is missing or unreadable
    fallback_data_paths: list[str] = ["public/assets/projects.json"]
    uploads_path: str = "uploads"  # Directory for uploaded documents
    max_upload_bytes: int = 20 * 1024 * 1024

    model_config = {
        "env_file": [".env"],
        "env_prefix": "DOSSIER_",
        "extra": "ignore",
    }
