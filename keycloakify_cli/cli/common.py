from __future__ import annotations

from typing import Any, List, Optional

import typer
from rich.markup import escape
from rich.text import Text

from keycloakify_cli import PROG_NAME
from keycloakify_cli.catalog import (
    CATALOG,
    PROJECT_OPTION,
    OptionDefinition,
    ParsedInvocation,
)
from keycloakify_cli.configuration import ConfigurationError, get_config
from keycloakify_cli.configuration.loader import clear_config_cache
from keycloakify_cli.dispatcher import Dispatcher
from keycloakify_cli.errors import (
    InvalidKeycloakVersionError,
    UnrecognizedOptionError,
)
from keycloakify_cli.logging import console, error_console, print_plain_error

HELP_OPTION_NAMES = ["-h", "--help"]

# Leftover tokens reach the skip predicate instead of failing inside Click.
COMMAND_CONTEXT = {
    "help_option_names": HELP_OPTION_NAMES,
    "ignore_unknown_options": True,
    "allow_extra_args": True,
}

_DISPATCHER: Optional[Dispatcher] = None


def get_dispatcher() -> Dispatcher:
    """Return the dispatcher configured from the effective configuration."""
    global _DISPATCHER
    if _DISPATCHER is None:
        config = get_config()
        _DISPATCHER = Dispatcher(CATALOG, handlers_package=config.handlers.package)
    return _DISPATCHER


def refresh_cli_context() -> None:
    """Drop cached configuration and dispatcher so the next call reloads them."""
    global _DISPATCHER
    clear_config_cache()
    _DISPATCHER = None


def debug_enabled() -> bool:
    try:
        return get_config().cli.debug
    except ConfigurationError:
        return False


def fallback_command() -> Optional[List[str]]:
    try:
        return get_config().fallback.command
    except ConfigurationError as exc:
        error_console.print(
            f"[warn]{escape(str(exc))}; using the default command.[/]"
        )
        return None


def typer_option(option: OptionDefinition) -> Any:
    """Build the Typer option for a catalog option definition."""
    return typer.Option(
        ... if option.required else option.default,
        *option.flag_tokens,
        help=option.description,
        metavar=option.metavar,
        show_default=False,
    )


def project_option() -> Any:
    return typer_option(PROJECT_OPTION)


def report_exception(exc: BaseException) -> None:
    """Print an uncaught dispatch failure; full traceback in debug mode."""
    if debug_enabled():
        error_console.print_exception()
        return
    error_console.print(
        f"[error]{escape(type(exc).__name__)}: {escape(str(exc))}[/]", soft_wrap=True
    )


def run_invocation(invocation: ParsedInvocation) -> None:
    """Dispatch ``invocation``; every failure ends the process with code 1."""
    try:
        get_dispatcher().dispatch(invocation)
    except (typer.Exit, typer.Abort):
        raise
    except UnrecognizedOptionError as exc:
        print_plain_error(f"{PROG_NAME}: Unrecognized option: {exc.flag}")
        raise typer.Exit(code=1)
    except InvalidKeycloakVersionError as exc:
        console.print(Text(str(exc), style="red"), soft_wrap=True)
        raise typer.Exit(code=1)
    except Exception as exc:
        report_exception(exc)
        raise typer.Exit(code=1) from exc

