# photo_resizer/config.py
from pathlib import Path
from typing import List, Optional, Sequence, Union

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import (
    DEFAULT_JPEG_QUALITY,
    DEFAULT_LOG_FILENAME,
    DEFAULT_VARIANT_MAX_WORKERS,
    MAX_JPEG_QUALITY,
    MAX_VARIANT_WORKERS,
    MIN_JPEG_QUALITY,
)
from .enums import LogLevel, StorageBackendType
from .exceptions import (
    ConfigurationError,
    InvalidDimensionsError,
    UnknownSizeError,
)
from .services.variant_pipeline.size_catalog import (
    DEFAULT_SIZE_CATALOG,
    DEFAULT_VARIANT_SIZES,
    SizeCatalog,
)


class Settings(BaseSettings):
    environment: str = "development"

    # API
    api_host: str = Field(default="0.0.0.0", description="API host to bind to")
    api_port: int = Field(
        default=8000, ge=1, le=65535, description="API port to bind to"
    )

    # Storage
    storage_backend: StorageBackendType = Field(
        default=StorageBackendType.LOCAL,
        description="Blob storage backend (local filesystem or in-memory)",
    )
    data_directory: str = "./data"

    @property
    def data_path(self) -> Path:
        """Get data directory as Path object"""
        return Path(self.data_directory)

    @property
    def blobs_directory(self) -> str:
        """Root directory for blob containers"""
        return str(self.data_path / "blobs")

    @property
    def logs_directory(self) -> str:
        """Logs subdirectory path"""
        return str(self.data_path / "logs")

    def ensure_directories(self):
        """Create all required directories if they don't exist"""
        for directory in (
            self.data_path,
            Path(self.blobs_directory),
            Path(self.logs_directory),
        ):
            directory.mkdir(parents=True, exist_ok=True)

    # Variant generation
    # Can be set via VARIANT_SIZES env var as comma-separated string
    variant_sizes: Union[str, List[str]] = Field(
        default=list(DEFAULT_VARIANT_SIZES),
        description="Catalog size names published for every new photo",
    )
    variant_max_workers: int = Field(
        default=DEFAULT_VARIANT_MAX_WORKERS,
        ge=1,
        le=MAX_VARIANT_WORKERS,
        description="Concurrent size chains per photo",
    )
    jpeg_quality: int = Field(
        default=DEFAULT_JPEG_QUALITY,
        ge=MIN_JPEG_QUALITY,
        le=MAX_JPEG_QUALITY,
        description="JPEG quality used when re-encoding variants",
    )
    auto_generate_variants: bool = Field(
        default=True,
        description="Generate variants in the background after each upload",
    )

    @property
    def variant_size_list(self) -> List[str]:
        """Convert variant_sizes to a list of size names"""
        if isinstance(self.variant_sizes, str):
            return [name.strip() for name in self.variant_sizes.split(",") if name.strip()]
        return list(self.variant_sizes)

    # Logging
    log_level: LogLevel = Field(
        default=LogLevel.INFO,
        description="Logging level (TRACE, DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    log_file: Optional[str] = Field(
        default=None, description="Log file path (defaults to logs_directory)"
    )

    @property
    def log_file_path(self) -> str:
        """Log file used by the rotating file sink"""
        if self.log_file:
            return self.log_file
        return str(Path(self.logs_directory) / DEFAULT_LOG_FILENAME)

    @field_validator("variant_sizes")
    @classmethod
    def validate_variant_sizes(cls, v: Union[str, List[str]]) -> Union[str, List[str]]:
        """Every published size must exist in the compiled-in catalog"""
        names = v.split(",") if isinstance(v, str) else v
        names = [name.strip() for name in names if name.strip()]
        if not names:
            raise ValueError("At least one variant size must be configured")
        unknown = [name for name in names if name not in DEFAULT_SIZE_CATALOG]
        if unknown:
            raise ValueError(
                f"Unknown variant sizes {unknown}. "
                f"Must be one of: {', '.join(DEFAULT_SIZE_CATALOG.names)}"
            )
        return v

    @field_validator("log_level", mode="before")
    @classmethod
    def validate_log_level(cls, v) -> LogLevel:
        """Validate log level is one of the allowed values"""
        if isinstance(v, LogLevel):
            return v
        allowed_levels = LogLevel.__members__.keys()
        v_upper = str(v).upper()
        if v_upper not in allowed_levels:
            raise ValueError(
                f"Invalid log level '{v}'. Must be one of: {', '.join(allowed_levels)}"
            )
        return LogLevel[v_upper]

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        """Validate environment is one of the allowed values"""
        allowed_envs = ["development", "staging", "production", "test"]
        v_lower = v.lower()
        if v_lower not in allowed_envs:
            raise ValueError(
                f"Invalid environment '{v}'. Must be one of: {', '.join(allowed_envs)}"
            )
        return v_lower

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore"
    )


def validate_variant_configuration(
    catalog: SizeCatalog = DEFAULT_SIZE_CATALOG,
    size_names: Optional[Sequence[str]] = None,
) -> None:
    """
    Check the size catalog and the published sizes before serving requests.

    Raises:
        ConfigurationError: if a catalog entry is invalid or a published size
            is not in the catalog
    """
    try:
        catalog.validate()
        for name in size_names or ():
            catalog.get(name)
    except (InvalidDimensionsError, UnknownSizeError) as e:
        raise ConfigurationError(f"Invalid variant configuration: {e}") from e


# Global settings instance
settings = Settings()
