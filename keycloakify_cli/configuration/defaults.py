"""Built-in default configuration for the keycloakify CLI."""

from __future__ import annotations

DEFAULT_CONFIG_DICT = {
    "meta": {
        "version": "1.0",
    },
    "cli": {
        "debug": False,
    },
    "handlers": {
        "package": "keycloakify_handlers",
    },
    "fallback": {
        "command": None,
    },
}
