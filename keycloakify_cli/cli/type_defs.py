"""Type definitions for the CLI module.

This module provides type aliases used throughout the CLI package to ensure
type safety and consistency across command registration and handling.
"""

from __future__ import annotations

from typing import Callable, Dict

from typer.models import CommandFunctionType

from keycloakify_cli.catalog import CommandDefinition

# Maps command names to their handler functions for registration
CommandMap = Dict[str, CommandFunctionType]

# Builds the Typer callback for one catalog command
CommandFactory = Callable[[CommandDefinition], Callable[..., None]]
