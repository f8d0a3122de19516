"""Help text rendering and formatting for the CLI.

This module handles the root help page:
- Command table with the primary option of each command
- Root and global option tables
- Usage examples
"""

from __future__ import annotations

from typing import Iterable

import click
import typer
from rich.table import Table

from keycloakify_cli import PROG_NAME, __description__, __version__
from keycloakify_cli.catalog import CATALOG, OptionDefinition
from keycloakify_cli.logging import PALETTE, console

HELP_EXAMPLES = [
    ("keycloakify", "Build the theme (same as `keycloakify build`)."),
    (
        "keycloakify --project packages/keycloak-theme",
        "Build the theme of a monorepo package.",
    ),
    (
        "keycloakify start-keycloak --keycloak-version 26.0.4",
        "Test the theme against a specific Keycloak release.",
    ),
    ("keycloakify eject-page", "Eject a Keycloak page into your sources."),
]


def show_root_help(ctx: typer.Context) -> None:
    console.print(f"[bold]{PROG_NAME}[/bold] [accent]v{__version__}[/]")
    console.print(__description__)
    console.print()
    console.print("[section]Usage[/section]")
    console.print(f"  {PROG_NAME} [OPTIONS] COMMAND [ARGS]...\n")
    console.print("[section]Commands[/section]")
    console.print(build_command_table(ctx))
    console.print()
    console.print("[section]Options[/section]")
    console.print(build_option_table(ctx))
    console.print()
    console.print("[section]Global options[/section]")
    console.print(build_help_table(global_option_rows(CATALOG.global_options)))
    console.print()
    console.print("[section]Examples[/section]")
    console.print(build_examples_table())


def build_help_table(rows: Iterable[tuple[str, ...]]) -> Table:
    table = Table.grid(padding=(0, 3))
    styles = (
        {"style": f"bold {PALETTE['green']}", "no_wrap": True},
        {"style": f"bold {PALETTE['purple']}", "no_wrap": True},
        {"style": PALETTE["fg"]},
    )
    for column in styles:
        table.add_column(**column)
    for row in rows:
        table.add_row(*row)
    return table


def build_command_table(ctx: typer.Context) -> Table:
    return build_help_table(command_help_rows(ctx))


def build_option_table(ctx: typer.Context) -> Table:
    return build_help_table(option_help_rows(ctx))


def build_examples_table() -> Table:
    table = Table.grid(padding=(0, 3))
    table.add_column(style=PALETTE["cyan"], no_wrap=True)
    table.add_column()
    for command, description in HELP_EXAMPLES:
        table.add_row(f"[bold]{command}[/]", description)
    return table


def is_option(param: "click.Parameter") -> bool:
    # Typer's bundled click fork does not share click's classes.
    return getattr(param, "param_type_name", None) == "option"


def command_help_rows(ctx: typer.Context):
    command_group = ctx.command
    if command_group is None or not hasattr(command_group, "list_commands"):
        return []
    rows = []
    for name in command_group.list_commands(ctx):
        command = command_group.get_command(ctx, name)
        if not command or command.hidden:
            continue
        description = (command.help or command.short_help or "").strip()
        rows.append((name, command_param_hint(command), description))
    return rows


def option_help_rows(ctx: typer.Context):
    rows = []
    if ctx.command is None:
        return rows
    for param in ctx.command.params:
        if not is_option(param):
            continue
        name = primary_long_option(param)
        short_text = format_short_options(param)
        description = (param.help or "").strip()
        rows.append((name, short_text, description))
    return rows


def global_option_rows(options: Iterable[OptionDefinition]):
    rows = []
    for option in options:
        long_flag, *short_flags = option.flag_tokens
        rows.append((long_flag, ", ".join(short_flags), option.description))
    return rows


def command_param_hint(command: click.Command) -> str:
    # The first command-specific option; --project is shared by every command.
    shared = {
        token for option in CATALOG.global_options for token in option.flag_tokens
    }
    for param in command.params:
        if not is_option(param) or param.hidden:
            continue
        if shared.intersection(param.opts) or param.name == "help":
            continue
        return primary_long_option(param)
    return ""


def primary_long_option(param: "click.Option") -> str:
    for opt in param.opts:
        if opt.startswith("--"):
            return opt
    return param.opts[0] if param.opts else ""


def format_short_options(param: "click.Option") -> str:
    seen: list[str] = []
    for opt in list(param.opts) + list(param.secondary_opts):
        if not opt.startswith("-") or opt.startswith("--"):
            continue
        if opt not in seen:
            seen.append(opt)
    return ", ".join(seen)
