"""
Tests for environment-driven settings
"""

import pytest
from pydantic import ValidationError

from visiongrid.config import Settings


class TestSettings:
    """Test Settings.from_env"""

    def test_defaults(self):
        """Test defaults when no variables are set"""
        settings = Settings.from_env({})

        assert settings.environment == "development"
        assert settings.system.log_level == "INFO"
        assert settings.image.default_format == "PNG"
        assert settings.image.jpeg_quality == 85
        assert settings.api.port == 8000

    def test_overrides(self):
        """Test section fields are read from prefixed variables"""
        settings = Settings.from_env(
            {
                "VISIONGRID_ENVIRONMENT": "production",
                "VISIONGRID_SYSTEM_LOG_LEVEL": "debug",
                "VISIONGRID_SYSTEM_DEBUG": "true",
                "VISIONGRID_IMAGE_DEFAULT_FORMAT": "jpeg",
                "VISIONGRID_IMAGE_JPEG_QUALITY": "70",
                "VISIONGRID_API_PORT": "9000",
            }
        )

        assert settings.environment == "production"
        assert settings.system.log_level == "DEBUG"
        assert settings.system.debug is True
        assert settings.image.default_format == "JPEG"
        assert settings.image.jpeg_quality == 70
        assert settings.api.port == 9000

    def test_cors_origins_split(self):
        """Test list values are comma separated"""
        settings = Settings.from_env(
            {"VISIONGRID_API_CORS_ORIGINS": "http://a.example, http://b.example,"}
        )

        assert settings.api.cors_origins == ["http://a.example", "http://b.example"]

    def test_invalid_log_level(self):
        """Test unknown log levels are rejected"""
        with pytest.raises(ValidationError):
            Settings.from_env({"VISIONGRID_SYSTEM_LOG_LEVEL": "verbose"})

    @pytest.mark.parametrize("quality", ["0", "101"])
    def test_jpeg_quality_range(self, quality):
        """Test JPEG quality bounds"""
        with pytest.raises(ValidationError):
            Settings.from_env({"VISIONGRID_IMAGE_JPEG_QUALITY": quality})

    def test_unsupported_default_format(self):
        """Test default format must be supported"""
        with pytest.raises(ValidationError):
            Settings.from_env({"VISIONGRID_IMAGE_DEFAULT_FORMAT": "gif"})

    def test_to_dict(self):
        """Test settings serialize by section"""
        data = Settings().to_dict()

        assert set(data) == {"environment", "system", "image", "api"}
        assert data["image"]["max_resize_dimension"] == 8192
