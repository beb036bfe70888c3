# src/parser_utils/core/config.py

import logging
import os
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml
from pydantic import BaseModel, Field, field_validator, model_validator

logger = logging.getLogger(__name__)

# Canonical fields that can never act as a data source.
RESERVED_PROPS = ("path", "content", "orig")


class NormalizerConfig(BaseModel):
    """
    Main configuration model for parser-utils.
    """

    data_props: List[str] = Field(
        default_factory=lambda: ["locals", "data"],
        description="Properties merged into `data`, lowest precedence first",
    )
    flatten_key: str = Field(
        default="data", description="Nested key collapsed after merging data"
    )
    log_level: str = Field(default="INFO", description="CLI logging level")
    json_indent: int = Field(default=2, ge=0, description="CLI JSON indentation")

    @model_validator(mode="before")
    @classmethod
    def load_overrides_from_env(cls, values: Any) -> Dict[str, Any]:
        """Override config values with environment variables if present."""
        values = dict(values) if isinstance(values, dict) else {}

        if "PARSER_UTILS_DATA_PROPS" in os.environ:
            values["data_props"] = [
                prop.strip()
                for prop in os.environ["PARSER_UTILS_DATA_PROPS"].split(",")
                if prop.strip()
            ]
        if "PARSER_UTILS_LOG_LEVEL" in os.environ:
            values["log_level"] = os.environ["PARSER_UTILS_LOG_LEVEL"]

        return values

    @field_validator("data_props")
    @classmethod
    def validate_data_props(cls, v: List[str]) -> List[str]:
        if not v:
            raise ValueError("data_props must name at least one property")
        reserved = [prop for prop in v if prop in RESERVED_PROPS]
        if reserved:
            raise ValueError(f"data_props cannot include canonical fields: {reserved}")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v}")
        return level


def load_config(config_path: Optional[Union[str, Path]] = None) -> NormalizerConfig:
    """
    Load parser-utils configuration from YAML file.

    Args:
        config_path: Path to config.yaml (default: ./config/config.yaml)

    Returns:
        Validated NormalizerConfig instance.
    """
    if config_path is None:
        config_path = Path("config") / "config.yaml"
    else:
        config_path = Path(config_path)

    config_data = {}
    if config_path.exists():
        try:
            with open(config_path, "r", encoding="utf-8") as f:
                config_data = yaml.safe_load(f) or {}
            logger.info(f"Loaded configuration from {config_path}")
        except (OSError, yaml.YAMLError) as e:
            logger.warning(f"Failed to load config file {config_path}: {e}")
    else:
        logger.info(f"Config file not found at {config_path}, using defaults")

    if not isinstance(config_data, dict):
        logger.warning(f"Ignoring config file {config_path}: expected a mapping")
        config_data = {}

    # Create config instance (env vars override file)
    config = NormalizerConfig(**config_data)

    logger.debug("parser-utils configuration loaded with settings:")
    logger.debug(f"  Data props: {config.data_props}")
    logger.debug(f"  Flatten key: {config.flatten_key}")
    logger.debug(f"  Log level: {config.log_level}")

    return config
