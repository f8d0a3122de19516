"""Public interface for the keycloakify CLI configuration system."""

from __future__ import annotations

from .errors import ConfigurationError
from .loader import (
    get_config,
    load_config,
    locate_config_file,
    merge_configs,
    reload_config,
)
from .schema import KeycloakifyConfig

__all__ = [
    "ConfigurationError",
    "KeycloakifyConfig",
    "get_config",
    "load_config",
    "locate_config_file",
    "merge_configs",
    "reload_config",
]
