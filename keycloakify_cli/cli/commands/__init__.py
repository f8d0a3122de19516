"""Typer commands generated from the command catalog."""

from __future__ import annotations

import typer

from keycloakify_cli.catalog import CATALOG

from ..common import COMMAND_CONTEXT
from ..type_defs import CommandFactory, CommandMap
from . import eject_file, project, start_keycloak

COMMAND_FACTORIES: dict[str, CommandFactory] = {
    "start-keycloak": start_keycloak.make_command,
    "eject-file": eject_file.make_command,
}


def register(app: typer.Typer) -> CommandMap:
    """Register every catalog command on ``app``, in catalog order."""
    commands: CommandMap = {}
    for definition in CATALOG:
        factory = COMMAND_FACTORIES.get(definition.name, project.make_command)
        callback = factory(definition)
        app.command(
            name=definition.name,
            help=definition.description,
            context_settings=COMMAND_CONTEXT,
        )(callback)
        commands[definition.name] = callback
    return commands
