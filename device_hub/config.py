"""
Configuration management for Device Hub.

Uses Pydantic settings for validation and environment variable support.
"""
from functools import lru_cache
from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class HubSettings(BaseSettings):
    """Device registry, log and alert configuration."""

    model_config = SettingsConfigDict(
        env_prefix='HUB_',
        env_file='.env',
        extra='ignore'
    )

    # Bounded buffers
    log_capacity: int = Field(default=100, ge=1, description='Log entries kept per device')
    alert_capacity: int = Field(default=50, ge=1, description='Alerts kept across all devices')

    # Alert rules
    low_battery_threshold: float = Field(default=20, description='Battery % below which a warning is raised')
    high_temperature_threshold: float = Field(default=80, description='Temperature (C) above which a critical alert is raised')

    # Registration defaults
    default_device_name: str = Field(default='Unnamed Device')
    default_device_type: str = Field(default='sensor')
    default_location: str = Field(default='Unknown')


class CORSSettings(BaseSettings):
    """CORS configuration."""

    model_config = SettingsConfigDict(
        env_prefix='CORS_',
        env_file='.env',
        extra='ignore'
    )

    allowed_origins: List[str] = Field(default=['*'], description='Allowed origins for CORS')
    allow_credentials: bool = Field(default=False)
    allowed_methods: List[str] = Field(default=['GET', 'POST', 'PUT', 'DELETE'])
    allowed_headers: List[str] = Field(default=['Content-Type'])


class AppSettings(BaseSettings):
    """Main application settings for Device Hub."""

    model_config = SettingsConfigDict(
        env_file='.env',
        env_file_encoding='utf-8',
        extra='ignore'
    )

    # Application
    app_name: str = Field(default='IoT Device Management Platform')
    app_version: str = Field(default='1.0.0')
    debug: bool = Field(default=False)
    environment: str = Field(default='development')

    # Server
    host: str = Field(default='0.0.0.0')
    port: int = Field(default=3000)
    reload: bool = Field(default=False)

    # API
    api_prefix: str = Field(default='/api')

    # Logging
    log_level: str = Field(default='INFO')

    # Sub-settings
    hub: HubSettings = Field(default_factory=HubSettings)
    cors: CORSSettings = Field(default_factory=CORSSettings)


@lru_cache()
def get_settings() -> AppSettings:
    """
    Get cached application settings.

    Uses LRU cache to avoid re-reading environment variables on every access.
    """
    return AppSettings()
