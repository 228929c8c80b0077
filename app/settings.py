from pathlib import Path
from typing import Optional

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

    # Content
    CONTENT_DIR: str = "content/blog"
    SANITIZE_HTML: bool = False

    # Logging
    LOG_LEVEL: str = "INFO"

    # Branding
    USER_NAME: str = "Nostos Labs"
    USER_TITLE: str = "Technology Consulting"
    USER_DESCRIPTION: str = (
        "We are a forward-thinking technology consulting firm specializing in "
        "AI/ML solutions, data science & analytics, cloud architecture, and "
        "digital transformation. Our expertise spans machine learning model "
        "development, predictive analytics, data engineering pipelines, and "
        "intelligent automation systems that drive innovation and competitive "
        "advantage."
    )

    # Contact
    GITHUB_URL: str = "https://github.com/nostoslabs"
    LINKEDIN_URL: str = "https://linkedin.com/company/nostos-labs"
    TWITTER_URL: Optional[str] = None
    EMAIL: Optional[str] = "contact@nostoslabs.com"

    # Site
    SITE_TITLE: Optional[str] = None
    SITE_DESCRIPTION: Optional[str] = None
    CHAT_URL: str = "https://chat.nostoslabs.com"

    @property
    def content_path(self) -> Path:
        return Path(self.CONTENT_DIR)

    @property
    def site_title(self) -> str:
        return self.SITE_TITLE or f"{self.USER_NAME} - {self.USER_TITLE}"

    @property
    def site_description(self) -> str:
        return (
            self.SITE_DESCRIPTION
            or f"{self.USER_NAME} - Expert technology consulting for modern businesses"
        )


# Global settings instance (evaluated at import, but reads env on construction)
settings = Settings()
