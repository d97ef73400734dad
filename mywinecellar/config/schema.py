"""Pydantic models for MyWineCellar configuration.

These models define the structure of the config.toml file.
"""

from typing import Literal

from pydantic import BaseModel, Field

# 5 MiB; an image of exactly this many bytes is rejected
DEFAULT_MAX_IMAGE_BYTES = 5 * 1024 * 1024


class ServerConfig(BaseModel):
    """Server configuration."""

    host: str = "127.0.0.1"
    port: int = 8000
    debug: bool = False
    log_level: Literal["critical", "error", "warning", "info", "debug"] = "info"
    enforce_https: bool = False
    image_rate_limit_per_minute: int = 30
    # CORS configuration - empty list means same-origin only
    cors_origins: list[str] = []


class DatabaseConfig(BaseModel):
    """MongoDB database configuration."""

    mongodb_url: str = "mongodb://localhost:27017"
    mongodb_database: str = "mywinecellar"
    # Connection pool settings
    min_pool_size: int = 1
    max_pool_size: int = 50


class StorageConfig(BaseModel):
    """Binary payload limits."""

    max_image_bytes: int = Field(default=DEFAULT_MAX_IMAGE_BYTES, gt=0)


class TaxonomyConfig(BaseModel):
    """Reference data defaults.

    ``default_id`` is the shape, color, type and closure used when a new wine
    does not name one.
    """

    default_id: int = Field(default=1, ge=1)
    seed_defaults: bool = True


class CellarConfig(BaseModel):
    """Main MyWineCellar configuration loaded from config.toml."""

    app_name: str = "MyWineCellar"
    server: ServerConfig = Field(default_factory=ServerConfig)
    database: DatabaseConfig = Field(default_factory=DatabaseConfig)
    storage: StorageConfig = Field(default_factory=StorageConfig)
    taxonomy: TaxonomyConfig = Field(default_factory=TaxonomyConfig)
