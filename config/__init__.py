"""Configuration module for DocFlow."""

from .settings import load_config, get_pipeline_config

__all__ = ["load_config", "get_pipeline_config"]
