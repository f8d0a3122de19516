"""Commands whose only option is the global ``--project``."""

from __future__ import annotations

from typing import Optional

import typer

from keycloakify_cli.catalog import CommandDefinition, ParsedInvocation

from ..common import project_option, run_invocation


def make_command(definition: CommandDefinition):
    def command(
        ctx: typer.Context,
        project_dir_path: Optional[str] = project_option(),
    ) -> None:
        run_invocation(
            ParsedInvocation(
                command=definition,
                project_dir_path=project_dir_path,
                extra_args=tuple(ctx.args),
            )
        )

    command.__name__ = definition.name.replace("-", "_")
    command.__doc__ = definition.description
    return command
