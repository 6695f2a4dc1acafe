"""Configuration management for data sources and runs."""

import os
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .exceptions import ConfigError
from .ingestion.carbon_intensity import DEFAULT_CARBON_INTENSITY_URL
from .ingestion.openvolt import DEFAULT_OPENVOLT_URL
from .ingestion.utils import DEFAULT_USER_AGENT


class OpenvoltConfig(BaseModel):
    """Configuration for the meter consumption API."""

    model_config = ConfigDict(validate_assignment=True)

    base_url: str = Field(default=DEFAULT_OPENVOLT_URL, description="API base URL")
    api_key: str = Field(default="", description="Static x-api-key credential")
    granularity: str = Field(default="hh", description="Interval granularity")


class CarbonIntensityConfig(BaseModel):
    """Configuration for the grid intensity and generation-mix API."""

    model_config = ConfigDict(validate_assignment=True)

    base_url: str = Field(
        default=DEFAULT_CARBON_INTENSITY_URL, description="API base URL"
    )


class HttpConfig(BaseModel):
    """HTTP client settings shared by all sources."""

    model_config = ConfigDict(validate_assignment=True)

    timeout: float = Field(default=30.0, gt=0, description="Request timeout (s)")
    user_agent: str = Field(default=DEFAULT_USER_AGENT, description="User-Agent")


class FootprintConfig(BaseModel):
    """Overall run configuration."""

    model_config = ConfigDict(validate_assignment=True)

    openvolt: OpenvoltConfig = Field(default_factory=OpenvoltConfig)
    carbon_intensity: CarbonIntensityConfig = Field(
        default_factory=CarbonIntensityConfig
    )
    http: HttpConfig = Field(default_factory=HttpConfig)
    log_level: str = Field(default="INFO", description="Logging level")


def load_config(config_path: Path | None = None) -> FootprintConfig:
    """Load configuration from file or create default."""
    if config_path and config_path.exists():
        with open(config_path) as f:
            config_dict = yaml.safe_load(f) or {}
        try:
            return FootprintConfig(**config_dict)
        except ValidationError as e:
            raise ConfigError(f"Invalid configuration in {config_path}: {e}") from e
    else:
        return FootprintConfig()


def get_config_from_env(config: FootprintConfig | None = None) -> FootprintConfig:
    """Override configuration from environment variables.

    Values are validated on assignment; a bad value raises ConfigError.
    """
    config = config or FootprintConfig()

    try:
        if os.getenv("OPENVOLT_API_KEY"):
            config.openvolt.api_key = os.getenv("OPENVOLT_API_KEY")

        if os.getenv("OPENVOLT_API_URL"):
            config.openvolt.base_url = os.getenv("OPENVOLT_API_URL")

        if os.getenv("CARBON_INTENSITY_API_URL"):
            config.carbon_intensity.base_url = os.getenv("CARBON_INTENSITY_API_URL")

        if os.getenv("GRIDFOOTPRINT_TIMEOUT"):
            config.http.timeout = os.getenv("GRIDFOOTPRINT_TIMEOUT")

        if os.getenv("GRIDFOOTPRINT_LOG_LEVEL"):
            config.log_level = os.getenv("GRIDFOOTPRINT_LOG_LEVEL").upper()
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration from environment: {e}") from e

    return config
