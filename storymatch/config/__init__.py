"""Configuration management for storymatch."""

from .loader import CONFIG_ENV_VAR, Config, default_config_path, load_config, save_config
from .models import (
    ClusterThresholds,
    ConfigModel,
    DedupConfig,
    SectionConfig,
    TopicBoost,
    default_sections,
)

__all__ = [
    "CONFIG_ENV_VAR",
    "ClusterThresholds",
    "Config",
    "ConfigModel",
    "DedupConfig",
    "SectionConfig",
    "TopicBoost",
    "default_config_path",
    "default_sections",
    "load_config",
    "save_config",
]
