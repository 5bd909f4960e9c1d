from pydantic_settings import BaseSettings, SettingsConfigDict

from functools import lru_cache
from pathlib import Path


class Settings(BaseSettings):
    PROJECT_NAME: str = "Blog"
    ENV: str = "dev"
    DEBUG: bool = True

    # Database (any SQLAlchemy async URL)
    DATABASE_URL: str = "sqlite+aiosqlite:///./blog.db"

    # Collection mount point, e.g. "/posts"
    BASE_PATH: str = "/posts"

    # Post rules
    SUMMARY_LENGTH: int = 50
    TITLE_MAX_LENGTH: int = 200
    BODY_MAX_LENGTH: int = 10000
    CHECK_BODY_LENGTH_ON_UPDATE: bool = True

    # Serve the flat "/post/{id}" paths as redirects to BASE_PATH
    LEGACY_ROUTES: bool = True

    LOG_DIR: str = "logs"

    model_config = SettingsConfigDict(env_file=str(Path(__file__).parent.parent.parent / ".env"))

    @property
    def base_path(self) -> str:
        """BASE_PATH with a single leading slash and no trailing slash."""
        path = self.BASE_PATH.strip().strip("/")
        return f"/{path}" if path else ""


@lru_cache()
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
