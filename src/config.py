"""Configuration management for the application."""

from functools import lru_cache

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Database
    database_url: str = Field(default="sqlite:///./storefront.db")

    # JWT
    jwt_secret: str = Field(default="change-me-in-production")
    jwt_algorithm: str = Field(default="HS256")
    jwt_expiration_minutes: int = Field(default=60)  # 1 hour

    # Server
    port: int = Field(default=4000)
    public_base_url: str | None = Field(default=None)
    cors_origins: list[str] = Field(default=["*"])
    log_level: str = Field(default="INFO")

    # Uploads
    upload_dir: str = Field(default="upload/images")

    # Shop
    cart_size: int = Field(default=300, ge=0)
    new_collection_limit: int = Field(default=8, ge=1)
    protect_catalog_writes: bool = Field(default=False)

    # API
    environment: str = Field(default="development")

    @model_validator(mode="after")
    def validate_production_settings(self) -> "Settings":
        """Validate that production has secure settings."""
        if self.environment == "production":
            if self.jwt_secret == "change-me-in-production":  # noqa: S105
                raise ValueError("JWT_SECRET must be changed in production")
            if self.database_url.startswith("sqlite"):
                raise ValueError("DATABASE_URL should not use SQLite in production")
        return self

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment == "development"

    @property
    def image_base_url(self) -> str:
        """Base URL that uploaded images are served from."""
        base = self.public_base_url or f"http://localhost:{self.port}"
        return f"{base.rstrip('/')}/images"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
