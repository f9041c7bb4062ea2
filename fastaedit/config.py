"""
Handles loading and validation of the editor configuration.
"""
import json
import logging
from typing import Literal, Optional

from pydantic import BaseModel, Field, ValidationError

_logger = logging.getLogger(__name__)


class EditorConfig(BaseModel):
    """Settings for the output side of the command line tool."""
    line_width: int = Field(70, gt=0, description="FASTA body line width")
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        "WARNING", description="Logging level for messages written to stderr"
    )


def load_config(config_path: Optional[str] = None) -> EditorConfig:
    """
    Loads an editor configuration from a JSON file and validates it.

    Args:
        config_path: Path to the JSON configuration file, or None for defaults.

    Returns:
        A validated EditorConfig object.

    Raises:
        FileNotFoundError: If the config file does not exist.
        ValueError: If the config file is not valid JSON or fails validation.
    """
    if config_path is None:
        return EditorConfig()

    _logger.info(f"Loading editor configuration from {config_path}")
    try:
        with open(config_path, 'r') as f:
            config_data = json.load(f)
    except FileNotFoundError:
        _logger.error(f"Configuration file not found at {config_path}")
        raise
    except json.JSONDecodeError as e:
        _logger.error(f"Invalid JSON in configuration file: {config_path}")
        raise ValueError(f"Invalid JSON in {config_path}: {e}") from e

    try:
        config = EditorConfig.model_validate(config_data)
        _logger.info(f"Loaded configuration (line_width={config.line_width})")
        return config
    except ValidationError as e:
        _logger.error("Configuration validation failed.")
        raise ValueError(f"Configuration validation failed: {e}") from e
