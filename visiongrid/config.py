"""
Configuration for VisionGrid.

Settings are pydantic models grouped by section and populated from
VISIONGRID_* environment variables. Use get_settings() to obtain the
cached instance.
"""

import os
from functools import lru_cache
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, field_validator

from visiongrid.core.constants import ImageConstants

ENV_PREFIX = "VISIONGRID_"


class SystemSettings(BaseModel):
    """Process-wide settings"""

    log_level: str = "INFO"
    debug: bool = False

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        value = value.upper()
        if value not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Invalid log level: {value}")
        return value


class ImageSettings(BaseModel):
    """Encoding and transform limits"""

    default_format: str = ImageConstants.DEFAULT_FORMAT
    jpeg_quality: int = Field(default=ImageConstants.DEFAULT_JPEG_QUALITY, ge=1, le=100)
    max_resize_dimension: int = Field(default=ImageConstants.MAX_RESIZE_DIMENSION, ge=1)

    @field_validator("default_format")
    @classmethod
    def validate_format(cls, value: str) -> str:
        value = value.upper()
        if value not in ImageConstants.SUPPORTED_FORMATS:
            raise ValueError(f"Unsupported image format: {value}")
        return value


class APISettings(BaseModel):
    """HTTP server settings"""

    host: str = "0.0.0.0"
    port: int = Field(default=8000, ge=1, le=65535)
    cors_enabled: bool = True
    cors_origins: List[str] = ["*"]


class Settings(BaseModel):
    """Application settings"""

    environment: str = "development"
    system: SystemSettings = Field(default_factory=SystemSettings)
    image: ImageSettings = Field(default_factory=ImageSettings)
    api: APISettings = Field(default_factory=APISettings)

    @classmethod
    def from_env(cls, environ: Optional[Dict[str, str]] = None) -> "Settings":
        """
        Build settings from environment variables.

        VISIONGRID_ENVIRONMENT sets the environment; VISIONGRID_<SECTION>_<FIELD>
        (e.g. VISIONGRID_SYSTEM_LOG_LEVEL) sets a section field. List values
        are comma separated.
        """
        environ = os.environ if environ is None else environ
        data: Dict[str, Any] = {}

        if f"{ENV_PREFIX}ENVIRONMENT" in environ:
            data["environment"] = environ[f"{ENV_PREFIX}ENVIRONMENT"]

        for section, model in (
            ("system", SystemSettings),
            ("image", ImageSettings),
            ("api", APISettings),
        ):
            values: Dict[str, Any] = {}
            for field_name in model.model_fields:
                key = f"{ENV_PREFIX}{section.upper()}_{field_name.upper()}"
                if key not in environ:
                    continue
                raw = environ[key]
                if field_name == "cors_origins":
                    values[field_name] = [item.strip() for item in raw.split(",") if item.strip()]
                else:
                    values[field_name] = raw
            if values:
                data[section] = values

        return cls(**data)

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump()


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings"""
    return Settings.from_env()
