from functools import lru_cache
from typing import Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_HTTP_PORT = 8082


class Settings(BaseSettings):
    PROJECT_NAME: str = "shorty"
    ENV: str = "local"

    # Storage: DATABASE_URL wins; otherwise a SQLite file at STORAGE_PATH.
    # "memory://" selects the in-process store.
    DATABASE_URL: Optional[str] = None
    STORAGE_PATH: str = "storage/storage.db"

    # HTTP server
    HTTP_ADDRESS: str = "localhost:8082"
    HTTP_TIMEOUT: float = 4.0
    HTTP_IDLE_TIMEOUT: float = 60.0

    # Basic auth is enabled only when HTTP_USER is set
    HTTP_USER: Optional[str] = None
    HTTP_PASSWORD: str = ""

    # Alias generation
    ALIAS_LENGTH: int = 5
    ALIAS_MAX_ATTEMPTS: int = 5

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    @property
    def database_url(self) -> str:
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return f"sqlite:///{self.STORAGE_PATH}"

    @field_validator("HTTP_ADDRESS")
    @classmethod
    def check_http_address(cls, v: str) -> str:
        host, sep, port = v.rpartition(":")
        if sep and not port.isdigit():
            raise ValueError(f"HTTP_ADDRESS port must be numeric: {v!r}")
        return v

    @property
    def host(self) -> str:
        host, sep, _ = self.HTTP_ADDRESS.rpartition(":")
        if not sep:
            return self.HTTP_ADDRESS or "0.0.0.0"
        return host or "0.0.0.0"

    @property
    def port(self) -> int:
        _, sep, port = self.HTTP_ADDRESS.rpartition(":")
        return int(port) if sep else DEFAULT_HTTP_PORT


@lru_cache
def get_settings() -> Settings:
    return Settings()
