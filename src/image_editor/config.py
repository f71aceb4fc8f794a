"""
Configuration management using Pydantic for the Image Editor.
Provides type-safe configuration with validation and environment variable support.
"""

import logging
import os
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml
from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from image_editor.common.constants import (
    APIConstants,
    CodecConstants,
    SystemConstants,
    TransformConstants,
)
from image_editor.common.enums import BlurEdgeMode, ImageFormat

logger = logging.getLogger(__name__)


class TransformConfig(BaseSettings):
    """Pixel transform defaults."""

    default_blur_block_size: int = Field(
        default=TransformConstants.DEFAULT_BLUR_BLOCK_SIZE,
        ge=TransformConstants.MIN_BLUR_BLOCK_SIZE,
        description="Block size used by blur when the caller gives none",
    )
    blur_edge_mode: BlurEdgeMode = Field(
        default=BlurEdgeMode.SHRINK,
        description="Treatment of trailing rows/columns smaller than a blur block",
    )

    model_config = SettingsConfigDict(env_prefix="IE_TRANSFORM_", extra="ignore")


class CodecConfig(BaseSettings):
    """Image encoding configuration."""

    output_path: str = Field(
        default=CodecConstants.DEFAULT_OUTPUT_PATH,
        description="Where transformed images are written when no path is given",
    )
    output_format: Optional[ImageFormat] = Field(
        default=None, description="Output format; inferred from the output suffix when unset"
    )
    jpeg_quality: int = Field(
        default=CodecConstants.DEFAULT_JPEG_QUALITY,
        ge=CodecConstants.MIN_JPEG_QUALITY,
        le=CodecConstants.MAX_JPEG_QUALITY,
        description="JPEG quality for written images",
    )
    png_compression: int = Field(
        default=CodecConstants.DEFAULT_PNG_COMPRESSION,
        ge=CodecConstants.MIN_PNG_COMPRESSION,
        le=CodecConstants.MAX_PNG_COMPRESSION,
        description="PNG compression level",
    )

    model_config = SettingsConfigDict(env_prefix="IE_CODEC_", extra="ignore")


class APIConfig(BaseSettings):
    """API configuration."""

    host: str = Field(default=APIConstants.DEFAULT_HOST, description="API host address")
    port: int = Field(default=APIConstants.DEFAULT_PORT, ge=1, le=65535, description="API port")
    api_version: str = Field(default=APIConstants.API_VERSION, description="API version")
    cors_enabled: bool = Field(default=True, description="Enable CORS")
    cors_origins: List[str] = Field(default=["*"], description="CORS allowed origins")

    model_config = SettingsConfigDict(env_prefix="IE_API_", extra="ignore")


class SystemConfig(BaseSettings):
    """System configuration."""

    debug: bool = Field(default=False, description="Enable debug mode")
    log_level: str = Field(default=SystemConstants.LOG_LEVEL_DEFAULT, description="Logging level")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v):
        """Validate log level."""
        v_upper = v.upper()
        if v_upper not in SystemConstants.VALID_LOG_LEVELS:
            raise ValueError(
                f"Invalid log level: {v}. Must be one of {SystemConstants.VALID_LOG_LEVELS}"
            )
        return v_upper

    model_config = SettingsConfigDict(env_prefix="IE_SYSTEM_", extra="ignore")


class Settings(BaseSettings):
    """Main application settings."""

    # Sub-configurations
    transform: TransformConfig = Field(default_factory=TransformConfig)
    codec: CodecConfig = Field(default_factory=CodecConfig)
    api: APIConfig = Field(default_factory=APIConfig)
    system: SystemConfig = Field(default_factory=SystemConfig)

    # Environment
    environment: str = Field(
        default="production", description="Environment (development, staging, production)"
    )

    # Config file support
    config_file: Optional[str] = Field(default=None, description="Path to YAML config file")

    model_config = SettingsConfigDict(
        env_prefix="IE_",
        case_sensitive=False,
        env_nested_delimiter="__",
        extra="ignore",
    )

    @model_validator(mode="before")
    @classmethod
    def load_config_file(cls, values):
        """Load configuration from YAML file if specified."""
        if not isinstance(values, dict):
            return values

        config_file = values.get("config_file") or os.getenv("IE_CONFIG_FILE")

        if config_file and Path(config_file).exists():
            try:
                with open(config_file, "r") as f:
                    file_config = yaml.safe_load(f)
                if file_config:
                    # Merge file config with values (env vars take precedence)
                    for key, value in file_config.items():
                        if key not in values or values[key] is None:
                            values[key] = value
            except (OSError, yaml.YAMLError) as e:
                logger.warning(f"Failed to load config file {config_file}: {e}")

        return values

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v):
        """Validate environment value."""
        if v not in SystemConstants.VALID_ENVIRONMENTS:
            raise ValueError(
                f"Invalid environment: {v}. Must be one of {SystemConstants.VALID_ENVIRONMENTS}"
            )
        return v

    def to_dict(self) -> Dict[str, Any]:
        """Convert settings to dictionary."""
        return self.model_dump(mode="json", exclude_none=True)

    def save_to_file(self, path: str) -> None:
        """Save current configuration to YAML file."""
        config_dict = self.to_dict()
        with open(path, "w") as f:
            yaml.dump(config_dict, f, default_flow_style=False)


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Returns:
        Settings object with validated configuration
    """
    return Settings()


# Convenience function to reload settings (clears cache)
def reload_settings() -> Settings:
    """
    Reload settings, clearing the cache.

    Returns:
        Fresh Settings object
    """
    get_settings.cache_clear()
    return get_settings()
