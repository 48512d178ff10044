"""
Application configuration with Pydantic Settings for validation and type safety.
Supports environment-specific configurations and .env file loading.
"""

from enum import Enum
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field, field_validator

# Marker used by sample .env files for credentials that were never filled in
PLACEHOLDER_MARKER = "placeholder"


class Environment(str, Enum):
    """Application environment types"""

    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"
    TESTING = "testing"


class LocalStorageBackend(str, Enum):
    """Where demo-mode collections are kept"""

    FILE = "file"
    MEMORY = "memory"


class Settings(BaseSettings):
    """
    Application settings with validation.
    Settings are loaded from environment variables or .env file.
    """

    # Application settings
    app_name: str = Field(default="Menufy", description="Application name")
    app_version: str = Field(default="1.0.0", description="Application version")
    environment: Environment = Field(
        default=Environment.DEVELOPMENT, description="Application environment"
    )
    debug: bool = Field(default=False, description="Debug mode")

    # Server settings
    host: str = Field(default="0.0.0.0", description="Server host")
    port: int = Field(default=8000, ge=1, le=65535, description="Server port")

    # Hosted backend settings
    database_url: str = Field(
        default="",
        description="SQLAlchemy URL of the hosted backend; empty means demo mode",
    )
    demo_mode: bool = Field(
        default=False, description="Force demo mode even when a backend is configured"
    )
    db_echo: bool = Field(default=False, description="SQLAlchemy echo SQL statements")
    db_init_attempts: int = Field(
        default=3, ge=1, description="Database initialization retry attempts"
    )
    db_init_delay_sec: float = Field(
        default=2.0, ge=0, description="Delay between DB init attempts"
    )

    # Local (demo mode) storage
    local_storage_backend: LocalStorageBackend = Field(
        default=LocalStorageBackend.FILE, description="Demo storage backend"
    )
    local_storage_dir: str = Field(
        default=".menufy", description="Directory holding demo-mode collections"
    )

    # Auth settings
    jwt_secret: str = Field(default="menufy-dev-secret-change-me-in-production", description="JWT signing key")
    jwt_algorithm: str = Field(default="HS256", description="JWT signing algorithm")
    demo_owner_id: str = Field(
        default="demo-user", description="Owner assigned to anonymous demo-mode writes"
    )

    # Menu settings
    default_color_scheme: str = Field(
        default="#ea580c", description="Brand colour for new restaurants"
    )
    currency_symbol: str = Field(default="₹", description="Display currency symbol")
    cart_ttl_sec: int = Field(
        default=3 * 60 * 60,
        gt=0,
        description="Carts untouched for this long are discarded",
    )
    public_base_url: str = Field(
        default="http://localhost:3000",
        description="Base URL of the public menu pages (QR code target)",
    )

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(
        default="%(asctime)s %(levelname)s %(name)s: %(message)s",
        description="Log format string",
    )

    # CORS settings
    cors_origins: list[str] = Field(
        default=["http://localhost:3000", "http://localhost:8000"],
        description="Allowed CORS origins",
    )
    cors_allow_credentials: bool = Field(
        default=True, description="Allow CORS credentials"
    )
    cors_allow_methods: list[str] = Field(
        default=["*"], description="Allowed HTTP methods"
    )
    cors_allow_headers: list[str] = Field(
        default=["*"], description="Allowed HTTP headers"
    )

    # API settings
    api_prefix: str = Field(default="/api", description="API route prefix")
    api_title: str = Field(default="Menufy API", description="API documentation title")
    api_description: str = Field(
        default="Digital restaurant menus with QR links, carts and a demo mode",
        description="API documentation description",
    )

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore"
    )

    @field_validator("environment", mode="before")
    @classmethod
    def validate_environment(cls, v):
        """Validate and normalize environment value"""
        if isinstance(v, str):
            return Environment(v.lower())
        return v

    def is_production(self) -> bool:
        """Check if running in production environment"""
        return self.environment == Environment.PRODUCTION

    def is_development(self) -> bool:
        """Check if running in development environment"""
        return self.environment == Environment.DEVELOPMENT

    def backend_configured(self) -> bool:
        """True when a real hosted backend URL is set and demo mode is not forced"""
        url = (self.database_url or "").strip()
        if self.demo_mode or not url:
            return False
        return PLACEHOLDER_MARKER not in url.lower()


# Global settings instance
settings = Settings()
