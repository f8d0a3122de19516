"""eject-file: take ownership of one theme source file."""

from __future__ import annotations

from typing import Optional

import typer

from keycloakify_cli.catalog import (
    CommandDefinition,
    EjectFileCommandOptions,
    ParsedInvocation,
)

from ..common import project_option, run_invocation, typer_option


def make_command(definition: CommandDefinition):
    def eject_file(
        ctx: typer.Context,
        project_dir_path: Optional[str] = project_option(),
        file: str = typer_option(definition.option("file")),
    ) -> None:
        run_invocation(
            ParsedInvocation(
                command=definition,
                project_dir_path=project_dir_path,
                cli_command_options=EjectFileCommandOptions(file=file),
                extra_args=tuple(ctx.args),
            )
        )

    eject_file.__doc__ = definition.description
    return eject_file
