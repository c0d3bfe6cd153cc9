"""Configuration loaders."""

from tapyaml.loaders.config_loader import (
    DEFAULT_CONFIG,
    ConfigLoader,
    TapYamlConfig,
    get_config_loader,
    load,
)

__all__ = [
    "DEFAULT_CONFIG",
    "ConfigLoader",
    "TapYamlConfig",
    "get_config_loader",
    "load",
]
