"""Configuration loading utilities."""

import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

_FALSE_VALUES = {"0", "false", "no", "off"}


def load_config(config_path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load configuration from YAML file.

    Args:
        config_path: Path to config file. If None, uses default location.

    Returns:
        Configuration dictionary
    """
    if config_path is None:
        # Default config path relative to this file
        config_path = Path(__file__).parent / "docflow_config.yaml"
    else:
        config_path = Path(config_path)

    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    with open(config_path, "r", encoding="utf-8") as f:
        try:
            config = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid configuration file {config_path}: {e}") from e

    # Apply environment variable overrides
    config = _apply_env_overrides(config)

    return config


def get_pipeline_config(config: Dict[str, Any]) -> Dict[str, Any]:
    """
    Get the demonstration pipeline section.

    Raises:
        ValueError: If the docflow section is missing
    """
    section = config.get("docflow")
    if not isinstance(section, dict):
        raise ValueError("Configuration has no 'docflow' section")
    return section


def _apply_env_overrides(config: Dict[str, Any]) -> Dict[str, Any]:
    """Apply environment variable overrides to configuration."""
    if not isinstance(config, dict):
        raise ValueError("Configuration root must be a mapping")

    # An empty "docflow:" key loads as None
    section = config.get("docflow")
    if not isinstance(section, dict):
        section = config["docflow"] = {}

    if env_doc_type := os.environ.get("DOCFLOW_DOC_TYPE"):
        section["doc_type"] = env_doc_type

    if env_strategy := os.environ.get("DOCFLOW_STRATEGY"):
        section["strategy"] = env_strategy

    if env_wait := os.environ.get("DOCFLOW_WAIT_FOR_INPUT"):
        section["wait_for_input"] = env_wait.strip().lower() not in _FALSE_VALUES

    return config
