"""start-keycloak: run a Keycloak container preloaded with the theme."""

from __future__ import annotations

from typing import Optional

import typer

from keycloakify_cli.catalog import (
    CommandDefinition,
    ParsedInvocation,
    StartKeycloakCommandOptions,
)

from ..common import project_option, run_invocation, typer_option


def make_command(definition: CommandDefinition):
    def start_keycloak(
        ctx: typer.Context,
        project_dir_path: Optional[str] = project_option(),
        port: Optional[int] = typer_option(definition.option("port")),
        keycloak_version: Optional[str] = typer_option(
            definition.option("keycloak_version")
        ),
        realm_json_file_path: Optional[str] = typer_option(
            definition.option("realm_json_file_path")
        ),
    ) -> None:
        run_invocation(
            ParsedInvocation(
                command=definition,
                project_dir_path=project_dir_path,
                cli_command_options=StartKeycloakCommandOptions(
                    keycloak_version=keycloak_version,
                    port=port,
                    realm_json_file_path=realm_json_file_path,
                ),
                extra_args=tuple(ctx.args),
            )
        )

    start_keycloak.__doc__ = definition.description
    return start_keycloak
