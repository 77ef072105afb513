"""
Configuration system using Pydantic for type-safe settings management.

Settings come from keyword arguments, REPO_PERMALINK_* environment
variables, or a YAML file loaded with PermalinkSettings.from_yaml().
"""

from __future__ import annotations

import os
import re
from pathlib import Path

import yaml
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from repo_permalink.exceptions import ConfigurationError
from repo_permalink.git.inspector import DEFAULT_TRACKING_BRANCH
from repo_permalink.git.revision import DEFAULT_MAX_ANCESTOR_DEPTH

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class PermalinkSettings(BaseSettings):
    """Settings for remote and revision resolution."""

    model_config = SettingsConfigDict(
        env_prefix="REPO_PERMALINK_",
        case_sensitive=False,
    )

    remote: str | None = Field(
        default=None,
        description="Remote to use; when unset the remote is selected from the current branch",
    )
    repo_path: Path = Field(default=Path("."), description="Directory inside the git working tree")
    max_ancestor_depth: int = Field(
        default=DEFAULT_MAX_ANCESTOR_DEPTH,
        ge=0,
        le=10000,
        description="How many ancestors of HEAD to check for presence on the remote; 0 checks HEAD only",
    )
    fallback_tracking_branch: str = Field(
        default=DEFAULT_TRACKING_BRANCH,
        min_length=1,
        description="Revision reported when the current branch has no upstream on the remote",
    )
    log_level: str = Field(default="WARNING", description="Logging level")

    @field_validator("remote")
    @classmethod
    def validate_remote(cls, v: str | None) -> str | None:
        """Treat an empty remote name as unset."""
        if v is not None and not v.strip():
            return None
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}, got: {v}")
        return level

    @classmethod
    def from_yaml(cls, config_path: str) -> PermalinkSettings:
        """Load settings from YAML file with environment variable interpolation.

        Supports ${VAR_NAME} syntax for environment variable substitution.

        Args:
            config_path: Path to YAML configuration file

        Returns:
            PermalinkSettings instance

        Raises:
            ConfigurationError: If config file is invalid or missing
        """
        config_file = Path(config_path)
        if not config_file.exists():
            raise ConfigurationError(f"Configuration file not found: {config_path}")

        try:
            with open(config_file) as f:
                yaml_content = f.read()
        except OSError as e:
            raise ConfigurationError(f"Cannot read configuration file: {config_path}") from e

        try:
            yaml_content = cls._interpolate_env_vars(yaml_content)
        except ValueError as e:
            raise ConfigurationError(f"Invalid environment variable reference in config: {e}") from e

        try:
            config_dict = yaml.safe_load(yaml_content)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML syntax in {config_path}: {e}") from e

        if config_dict is None:
            config_dict = {}
        if not isinstance(config_dict, dict):
            raise ConfigurationError("Configuration must be a YAML object, not a list or scalar")

        try:
            return cls(**config_dict)
        except Exception as e:
            raise ConfigurationError(f"Failed to validate configuration: {e}") from e

    @staticmethod
    def _interpolate_env_vars(content: str) -> str:
        """Interpolate ${VAR_NAME} placeholders with environment variables.

        Supports two syntaxes:
        - ${VAR_NAME} - Required environment variable (raises if not set)
        - ${VAR_NAME:-default} - Optional with default value

        YAML comment lines are left unchanged.

        Raises:
            ValueError: If a required environment variable is not set
        """
        pattern = re.compile(r"\$\{([A-Z_][A-Z0-9_]*)(?::-([^}]*))?\}")

        def replace_var(match: re.Match[str]) -> str:
            var_name = match.group(1)
            default_value = match.group(2)
            value = os.getenv(var_name)

            if value is not None:
                return value
            elif default_value is not None:
                return default_value
            else:
                raise ValueError(f"Environment variable {var_name} is not set")

        def process_line(line: str) -> str:
            if line.lstrip().startswith("#"):
                return line
            return pattern.sub(replace_var, line)

        return "\n".join(process_line(line) for line in content.split("\n"))
