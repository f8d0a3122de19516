"""Exceptions raised while dispatching a CLI invocation."""

from __future__ import annotations

from typing import Union


class CliError(Exception):
    """Base class for dispatch failures reported by the CLI."""


class UnknownCommandError(CliError, KeyError):
    """Raised when a command name is not part of the catalog."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"Unknown command: {self.name}"


class UnrecognizedOptionError(CliError):
    """Raised when an option token is not accepted by the dispatched command."""

    def __init__(self, key: str, flag: str) -> None:
        self.key = key
        self.flag = flag
        super().__init__(f"Unrecognized option: {flag}")


class InvalidKeycloakVersionError(CliError):
    """Raised when ``--keycloak-version`` is not a semantic version."""

    def __init__(self, value: Union[str, int, float]) -> None:
        self.value = value
        super().__init__(
            f"Invalid Keycloak version: {value} "
            "It should be a valid semver version example: 26.0.4"
        )


class HandlerNotFoundError(CliError):
    """Raised when a command's handler module or attribute cannot be imported."""


class ProjectNotFoundError(CliError):
    """Raised when ``--project`` does not point to an existing directory."""
