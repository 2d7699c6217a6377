"""
Configuration for graphql_helper.

This module defines the configuration models and a loader that merges a JSON
configuration file with ``GRAPHQL_HELPER_*`` environment variables.
"""

from __future__ import annotations

import json
import os
from enum import Enum
from pathlib import Path
from typing import Any, Callable, Dict, Optional, Union

from pydantic import BaseModel, Field, HttpUrl, TypeAdapter, ValidationError, field_validator

from .exceptions import ConfigurationError

DEFAULT_HEADERS = {"Content-Type": "application/json"}

_HTTP_URL = TypeAdapter(HttpUrl)


def no_client_mutation_id() -> str:
    """Placeholder generator used when none is configured."""
    return "No ID Provided"


class LogLevel(str, Enum):
    """Logging levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: LogLevel = Field(default=LogLevel.INFO, description="Logging level")
    format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Log message format",
    )
    enable_structured: bool = Field(default=False, description="Emit JSON log lines")
    use_colors: Optional[bool] = Field(
        default=None, description="Colorize console output (auto-detect if unset)"
    )


class GraphQLHelperConfig(BaseModel):
    """Endpoint and request settings shared by every built operation."""

    host: str = Field(description="GraphQL endpoint URL, posted to exactly as given")
    headers: Dict[str, str] = Field(
        default_factory=dict, description="Extra headers, merged over the JSON content type"
    )
    client_mutation_id: Callable[[], str] = Field(
        default=no_client_mutation_id,
        description="Generator for the clientMutationId of each mutation call",
    )
    timeout: float = Field(default=30.0, ge=1.0, description="Request timeout in seconds")
    encode_variables: bool = Field(
        default=True,
        description="Send variables as a JSON-encoded string instead of an object",
    )
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @field_validator("host")
    @classmethod
    def validate_host(cls, v: str) -> str:
        """Check the host is an http(s) URL without normalizing it."""
        try:
            _HTTP_URL.validate_python(v)
        except ValidationError as e:
            raise ValueError(f"Invalid GraphQL host URL: {v!r}") from e
        return v

    @property
    def endpoint(self) -> str:
        return self.host

    def request_headers(self) -> Dict[str, str]:
        """Default headers with the configured ones applied on top."""
        return {**DEFAULT_HEADERS, **self.headers}


class ConfigLoader:
    """Configuration loader with support for a JSON file and the environment."""

    def __init__(self) -> None:
        self.config_paths = [
            Path("graphql_helper.json"),
            Path("config/graphql_helper.json"),
            Path.home() / ".graphql_helper" / "config.json",
        ]
        self.env_prefix = "GRAPHQL_HELPER_"

    def load_config(
        self,
        config_file: Optional[Union[str, Path]] = None,
        **overrides: Any,
    ) -> GraphQLHelperConfig:
        """
        Load configuration from all available sources.

        Later sources win: file, then environment, then ``overrides``
        (entries whose value is None are ignored).

        Args:
            config_file: Specific JSON file to load instead of the search paths
            **overrides: Explicit field values

        Returns:
            GraphQLHelperConfig

        Raises:
            ConfigurationError: If the merged data is not a valid configuration
        """
        config_data: Dict[str, Any] = {}

        file_config = self._load_from_file(config_file)
        if file_config:
            config_data.update(file_config)

        config_data = self._deep_merge(config_data, self._load_from_environment())
        config_data.update({key: value for key, value in overrides.items() if value is not None})

        if "host" not in config_data:
            raise ConfigurationError("No GraphQL host configured")
        try:
            return GraphQLHelperConfig(**config_data)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid configuration: {e}") from e

    def _deep_merge(self, base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
        result = base.copy()
        for key, value in override.items():
            if isinstance(result.get(key), dict) and isinstance(value, dict):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value
        return result

    def _load_from_file(self, config_file: Optional[Union[str, Path]] = None) -> Optional[Dict[str, Any]]:
        if config_file:
            config_path = Path(config_file)
            if not config_path.exists():
                raise ConfigurationError(f"Configuration file not found: {config_path}")
            return self._parse_config_file(config_path)

        for config_path in self.config_paths:
            if config_path.exists():
                return self._parse_config_file(config_path)
        return None

    def _parse_config_file(self, config_path: Path) -> Dict[str, Any]:
        if config_path.suffix.lower() != ".json":
            raise ConfigurationError(f"Unsupported config file format: {config_path.suffix}")
        try:
            with open(config_path, "r", encoding="utf-8") as f:
                return json.load(f) or {}
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Failed to parse config file {config_path}: {e}") from e

    def _load_from_environment(self) -> Dict[str, Any]:
        """Load configuration from environment variables."""
        config: Dict[str, Any] = {}

        host = os.getenv(f"{self.env_prefix}HOST")
        if host:
            config["host"] = host

        headers = os.getenv(f"{self.env_prefix}HEADERS")
        if headers:
            try:
                config["headers"] = json.loads(headers)
            except json.JSONDecodeError as e:
                raise ConfigurationError(f"{self.env_prefix}HEADERS must be a JSON object") from e

        timeout = os.getenv(f"{self.env_prefix}TIMEOUT")
        if timeout:
            try:
                config["timeout"] = float(timeout)
            except ValueError as e:
                raise ConfigurationError(f"{self.env_prefix}TIMEOUT must be a number of seconds") from e

        encode_variables = os.getenv(f"{self.env_prefix}ENCODE_VARIABLES")
        if encode_variables:
            config["encode_variables"] = encode_variables.lower() in ("true", "yes", "1", "on")

        log_level = os.getenv(f"{self.env_prefix}LOG_LEVEL")
        if log_level:
            config["logging"] = {"level": log_level.upper()}

        return config
