from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from blog_home.logging_config import get_logger, log_with_context

logger = get_logger(__name__)

BASE_DIR = Path(__file__).resolve().parent.parent  # blog-home/


class Settings(BaseSettings):
    """Site settings passed to the home view renderer.

    Every field has a usable default so a renderer can be built without any
    environment. Values are read from BLOG_* environment variables or the .env
    file in the project root.

    Uses Pydantic v2 API:
    - model_config with SettingsConfigDict
    - @field_validator decorator
    """

    # Site identity
    site_title: str = Field(default="in Code", min_length=1, description="Site title shown in the banner")
    site_root: str = Field(default="/", description="URL root that logical paths are resolved against")

    # Static copy references handed to the CopyLoader
    banner_copy: str = Field(default="copy/static/home-banner.md", min_length=1, description="Banner copy file")
    sidebar_copy: str = Field(default="copy/static/home-links.md", min_length=1, description="Sidebar copy file")

    # Entry list
    entries_per_page: int = Field(default=5, ge=1, le=100, description="Entries shown on each home page")
    page_route: str = Field(default="/home/{page}", description="Route pattern for home pages after the first")
    comment_anchor: str = Field(default="#disqus_thread", description="Fragment appended to entry URLs for comments")

    template_dir: Path | None = Field(default=None, description="Directory overriding the bundled templates")

    # Logging, read by logging_config.setup_logging
    log_level: str = Field(default="INFO", description="Logging level")
    log_dir: Path | None = Field(default=None, description="Directory for the JSON log file (defaults to ./logs)")

    model_config = SettingsConfigDict(
        env_prefix="BLOG_",
        env_file=Path(BASE_DIR / ".env"),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        validate_default=True,  # Validate defaults too
    )

    @field_validator("site_title", mode="after")
    @classmethod
    def validate_site_title(cls, v: str) -> str:
        """Ensure site_title is not empty or whitespace."""
        v = v.strip()
        if not v:
            raise ValueError("site_title cannot be empty")
        return v

    @field_validator("site_root", mode="after")
    @classmethod
    def validate_site_root(cls, v: str) -> str:
        """Ensure site_root is root-relative or an http(s) URL, without a trailing slash."""
        v = v.strip()
        if not v.startswith(("/", "http://", "https://")):
            raise ValueError("site_root must start with '/', 'http://' or 'https://'")
        return v.rstrip("/")

    @field_validator("page_route", mode="after")
    @classmethod
    def validate_page_route(cls, v: str) -> str:
        """Ensure page_route is a root-relative pattern with a {page} placeholder."""
        if not v.startswith("/"):
            raise ValueError("page_route must start with '/'")
        if "{page}" not in v:
            raise ValueError("page_route must contain a '{page}' placeholder")
        return v

    @field_validator("comment_anchor", mode="after")
    @classmethod
    def validate_comment_anchor(cls, v: str) -> str:
        """Ensure comment_anchor is a URL fragment."""
        if not v.startswith("#"):
            raise ValueError("comment_anchor must start with '#'")
        return v

    @field_validator("log_level", mode="after")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalise and check the log level name."""
        v = v.strip().upper()
        if v not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"log_level must be a standard logging level, got {v!r}")
        return v


# Singleton settings instance (cached for performance)
_settings_instance: Settings | None = None


def get_settings() -> Settings:
    """Get singleton Settings instance.

    This function creates a singleton to avoid re-reading the .env file
    every time a renderer is built.

    Returns:
        Cached Settings instance

    Example:
        renderer = HomeViewRenderer(get_settings(), url_renderer, copy_loader)
    """
    global _settings_instance
    if _settings_instance is None:
        _settings_instance = Settings()
        log_with_context(
            logger,
            "debug",
            "Settings loaded",
            site_title=_settings_instance.site_title,
            site_root=_settings_instance.site_root,
            event_type="config_loaded",
        )
    return _settings_instance


def reset_settings() -> None:
    """Drop the cached Settings instance so the next get_settings() re-reads the environment."""
    global _settings_instance
    _settings_instance = None
