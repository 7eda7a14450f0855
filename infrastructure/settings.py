import os
from dataclasses import dataclass, field

from dotenv import load_dotenv


def _as_bool(value: str) -> bool:
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _as_list(value: str) -> list[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


@dataclass(slots=True, frozen=True)
class Settings:
    """Process configuration, read once at startup from the environment."""

    mongodb_uri: str | None = None
    mongodb_db: str = "task_manager"
    database_url: str | None = None
    host: str = "127.0.0.1"
    port: int = 3000
    reload: bool = False
    log_level: str = "info"
    cors_origins: list[str] = field(default_factory=lambda: ["*"])
    cors_allow_credentials: bool = True
    cors_allow_methods: list[str] = field(default_factory=lambda: ["*"])
    cors_allow_headers: list[str] = field(default_factory=lambda: ["*"])
    api_base: str = "http://localhost:3000"

    @property
    def storage_mode(self) -> str:
        if self.mongodb_uri:
            return "mongo"
        if self.database_url:
            return "sql"
        return "memory"


def load_settings() -> Settings:
    # Load environment variables from .env file
    load_dotenv()

    return Settings(
        mongodb_uri=os.getenv("MONGODB_URI") or None,
        mongodb_db=os.getenv("MONGODB_DB") or "task_manager",
        database_url=os.getenv("DATABASE_URL") or None,
        host=os.getenv("HOST", "127.0.0.1"),
        port=int(os.getenv("PORT", "3000")),
        reload=_as_bool(os.getenv("RELOAD", "false")),
        log_level=os.getenv("LOG_LEVEL", "info").lower(),
        cors_origins=_as_list(os.getenv("CORS_ORIGINS", "*")),
        cors_allow_credentials=_as_bool(os.getenv("CORS_ALLOW_CREDENTIALS", "true")),
        cors_allow_methods=_as_list(os.getenv("CORS_ALLOW_METHODS", "*")),
        cors_allow_headers=_as_list(os.getenv("CORS_ALLOW_HEADERS", "*")),
        api_base=os.getenv("TASKS_API_BASE", "http://localhost:3000"),
    )
