from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


def choose_env_file() -> str:
    return ".env.local" if Path(".env.local").exists() else ".env"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=choose_env_file(),
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",  # tolerate unrelated env vars
    )

    # Site metadata
    SITE_TITLE: str = "My Blog"
    SITE_URL: str = "http://localhost:8000"
    SITE_AUTHOR: str = ""
    SITE_AUTHOR_SUMMARY: str = ""
    SITE_DESCRIPTION: str = ""
    SITE_LANG: str = "en"

    # Content
    CONTENT_DIR: str = "content/blog"
    PATH_PREFIX: str = ""
    EXCERPT_LENGTH: int = 160
    DATE_FORMAT: str = "%B %d, %Y"

    # Comments
    DISQUS_SHORTNAME: str = ""

    # Logging
    LOG_LEVEL: str = "INFO"

    @property
    def content_path(self) -> Path:
        return Path(self.CONTENT_DIR)


# Global settings instance (evaluated at import, but reads env on construction)
settings = Settings()
