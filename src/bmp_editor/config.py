"""
BMP Editor Configuration
========================

This module handles configuration loading for the editor.

Configuration Sources (in order of precedence):
    1. Environment variables (highest priority)
    2. bmp_editor.yaml / config.yaml file
    3. Default values (lowest priority)

Environment Variable Mapping:
    BMP_EDITOR_CONFIG       -> path of the YAML file to load
    BMP_EDITOR_OUTPUT       -> editor.default_output
    BMP_EDITOR_INFO_FORMAT  -> editor.info_format
    BMP_EDITOR_LOG_LEVEL    -> logging.level
    BMP_EDITOR_LOG_FORMAT   -> logging.format

Example:
    from bmp_editor.config import load_config

    settings = load_config()
    print(settings.editor.default_output)
    print(settings.logging.level)
"""

import os
import logging
from pathlib import Path
from typing import Literal, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError

from bmp_editor.errors import OptionError


logger = logging.getLogger(__name__)


# =============================================================================
# Configuration Models
# =============================================================================

class EditorConfig(BaseModel):
    """Command defaults."""

    default_output: str = Field(
        default="output.bmp",
        min_length=1,
        description="Output path used when --output is not given",
    )
    info_format: Literal["text", "json"] = Field(
        default="text",
        description="Header report format: 'text' or 'json'",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default="WARNING", description="Log level")
    format: Literal["text", "json"] = Field(
        default="text",
        description="Log format: json or text",
    )


class Settings(BaseModel):
    """
    Main settings class for the editor.

    Loads configuration from YAML file and environment variables.
    Environment variables take precedence over file values.
    """

    editor: EditorConfig = Field(default_factory=EditorConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


# =============================================================================
# Configuration Loading
# =============================================================================

def load_config(config_path: Optional[str] = None) -> Settings:
    """
    Load configuration from YAML file and environment variables.

    Priority (highest to lowest):
        1. Environment variables
        2. YAML config file
        3. Default values

    Args:
        config_path: Path to the YAML file. If None, BMP_EDITOR_CONFIG
            and then the working directory are searched.

    Returns:
        Settings: Loaded configuration

    Raises:
        OptionError: If the file is not valid YAML or a value is rejected
    """
    if config_path is None:
        config_path = os.environ.get("BMP_EDITOR_CONFIG")

    if config_path is None:
        for path in (Path("bmp_editor.yaml"), Path("config.yaml")):
            if path.exists():
                config_path = str(path)
                break

    config_data = {}
    if config_path and Path(config_path).exists():
        logger.info(f"Loading config from: {config_path}")
        with open(config_path, "r") as f:
            try:
                config_data = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise OptionError(f"invalid config file {config_path}: {e}") from e
    else:
        logger.debug("No config file found, using defaults and environment variables")

    _apply_env_overrides(config_data)

    try:
        return Settings.model_validate(config_data)
    except ValidationError as e:
        raise OptionError(f"invalid configuration: {e}") from e


def _apply_env_overrides(config_data: dict) -> None:
    """Apply environment variable overrides to config data."""

    if env_output := os.environ.get("BMP_EDITOR_OUTPUT"):
        config_data.setdefault("editor", {})["default_output"] = env_output
    if env_info := os.environ.get("BMP_EDITOR_INFO_FORMAT"):
        config_data.setdefault("editor", {})["info_format"] = env_info.lower()

    if env_log := os.environ.get("BMP_EDITOR_LOG_LEVEL"):
        config_data.setdefault("logging", {})["level"] = env_log
    if env_fmt := os.environ.get("BMP_EDITOR_LOG_FORMAT"):
        config_data.setdefault("logging", {})["format"] = env_fmt.lower()


def setup_logging(settings: Settings) -> None:
    """Configure logging based on settings. Records go to stderr."""
    log_level = getattr(logging, settings.logging.level.upper(), logging.WARNING)

    if settings.logging.format == "json":
        log_format = '{"time": "%(asctime)s", "level": "%(levelname)s", "module": "%(name)s", "message": "%(message)s"}'
    else:
        log_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    logging.basicConfig(
        level=log_level,
        format=log_format,
        datefmt="%Y-%m-%dT%H:%M:%S",
    )

