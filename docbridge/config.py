import functools
from typing import Literal, Optional

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_PDFJS_VERSION = "2.12.313"


class CallbackTimeouts(BaseModel):
    """Timeout configuration for the editor save callback transfers."""

    total: float = 60.0
    connect: float = 10.0

    @field_validator("total", "connect")
    @classmethod
    def validate_positive(cls, v: float, info) -> float:
        """Ensure timeout values are positive."""
        if v <= 0:
            raise ValueError(f"{info.field_name} must be positive, got {v}")
        return v


class EditorSettings(BaseModel):
    """Settings handed to the document editor widget."""

    title: Optional[str] = None
    server: Optional[str] = None
    jwt_secret: str = ""
    lang: str = "fr-FR"
    edit_extensions: tuple[str, ...] = ("docx", "xlsx", "pptx")

    @property
    def is_configured(self) -> bool:
        """Both a page title and a document server are required to open the editor."""
        return bool(self.title) and bool(self.server)


class LoaderSettings(BaseModel):
    """Settings for the UI framework web loader bootstrap."""

    service_worker_version: Optional[str] = None
    pdfjs_version: str = DEFAULT_PDFJS_VERSION


class Config(BaseSettings):
    """
    Application configuration loaded from multiple sources.

    Priority (highest to lowest):
    1. Init arguments
    2. Environment variables
    3. .env file
    4. Default values
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    # Public address
    # Read from MAIN_HOSTNAME: HOSTNAME is already set by most shells
    HOSTNAME: str = Field(default="atrium.io", alias="MAIN_HOSTNAME")
    DOMAIN: str = ""
    HTTP_PORT: int = 8080
    TLS_MODE: Literal["No", "BehindProxy", "Auto"] = "No"
    HOST: str = "0.0.0.0"

    # Document editor
    ONLYOFFICE_TITLE: Optional[str] = None
    ONLYOFFICE_SERVER: Optional[str] = None
    ONLYOFFICE_JWT_SECRET: str = ""
    EDITOR_LANG: str = "fr-FR"

    # Extensions opened in edit mode - stored as comma-separated string
    EDIT_EXTENSIONS_STR: str = Field(default="docx,xlsx,pptx", alias="EDIT_EXTENSIONS")

    # UI framework loader
    SERVICE_WORKER_VERSION: Optional[str] = None
    PDFJS_VERSION: str = DEFAULT_PDFJS_VERSION

    # Save callback timeout overrides from environment
    CALLBACK_TOTAL_TIMEOUT: float = 60.0
    CALLBACK_CONNECT_TIMEOUT: float = 10.0

    LOG_LEVEL: str = "INFO"

    @field_validator("HOSTNAME", "DOMAIN")
    @classmethod
    def strip_host(cls, v: str) -> str:
        """Surrounding whitespace in host names is ignored."""
        return v.strip()

    @property
    def EDIT_EXTENSIONS(self) -> tuple[str, ...]:
        """Parse EDIT_EXTENSIONS from comma-separated string."""
        return tuple(
            ext.strip().lstrip(".").lower()
            for ext in self.EDIT_EXTENSIONS_STR.split(",")
            if ext.strip()
        )

    @property
    def is_secure(self) -> bool:
        """TLS is terminated either by us or by a proxy in front of us."""
        return self.TLS_MODE != "No"

    @property
    def scheme(self) -> str:
        return "https" if self.is_secure else "http"

    @property
    def full_domain(self) -> str:
        """Public base URL, e.g. ``http://atrium.io:8080``."""
        domain = self.DOMAIN or self.HOSTNAME
        port = f":{self.HTTP_PORT}" if self.TLS_MODE == "No" else ""
        return f"{self.scheme}://{domain}{port}"

    @functools.cached_property
    def editor(self) -> EditorSettings:
        """Build EditorSettings from environment variables."""
        return EditorSettings(
            title=self.ONLYOFFICE_TITLE,
            server=self.ONLYOFFICE_SERVER.rstrip("/") if self.ONLYOFFICE_SERVER else None,
            jwt_secret=self.ONLYOFFICE_JWT_SECRET,
            lang=self.EDITOR_LANG,
            edit_extensions=self.EDIT_EXTENSIONS,
        )

    @functools.cached_property
    def loader(self) -> LoaderSettings:
        """Build LoaderSettings from environment variables."""
        return LoaderSettings(
            service_worker_version=self.SERVICE_WORKER_VERSION,
            pdfjs_version=self.PDFJS_VERSION,
        )

    @functools.cached_property
    def callback_timeouts(self) -> CallbackTimeouts:
        """Build CallbackTimeouts from environment variables."""
        return CallbackTimeouts(
            total=self.CALLBACK_TOTAL_TIMEOUT,
            connect=self.CALLBACK_CONNECT_TIMEOUT,
        )

    def validate_required(self) -> list[str]:
        """Validate configuration that prevents the server from starting."""
        errors = []
        if self.HTTP_PORT <= 0 or self.HTTP_PORT > 65535:
            errors.append(f"HTTP_PORT must be between 1 and 65535, got {self.HTTP_PORT}")
        if not (self.DOMAIN or self.HOSTNAME):
            errors.append("HOSTNAME is required")
        return errors

    def missing_editor_settings(self) -> list[str]:
        """List unset editor settings; the editor page is disabled until they are set."""
        missing = []
        if not self.ONLYOFFICE_TITLE:
            missing.append("ONLYOFFICE_TITLE")
        if not self.ONLYOFFICE_SERVER:
            missing.append("ONLYOFFICE_SERVER")
        return missing


config = Config()
