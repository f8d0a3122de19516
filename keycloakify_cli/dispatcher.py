"""Dispatch one parsed invocation to its command handler.

Handlers are external collaborators. Each command names a module relative
to the handler package (``keycloakify_handlers`` by default) and that
module exposes ``command(*, build_context, cli_command_options=None)``,
which may be a coroutine function. Modules are imported only once their
command has been selected and its options validated.
"""

from __future__ import annotations

import asyncio
import importlib
import inspect
from typing import Any, Awaitable, Callable, Optional

from keycloakify_cli.build_context import BuildContext, get_build_context
from keycloakify_cli.catalog import (
    CATALOG,
    CommandCatalog,
    HandlerRef,
    ParsedInvocation,
)
from keycloakify_cli.errors import HandlerNotFoundError
from keycloakify_cli.registry import OptionRegistry
from keycloakify_cli.validation import skip

DEFAULT_HANDLERS_PACKAGE = "keycloakify_handlers"

Handler = Callable[..., Any]
HandlerLoader = Callable[[HandlerRef], Handler]
ContextFactory = Callable[[Optional[str]], BuildContext]


def import_handler(
    ref: HandlerRef, package: str = DEFAULT_HANDLERS_PACKAGE
) -> Handler:
    """Import ``ref`` from ``package``; missing modules raise HandlerNotFoundError."""
    qualified = ref.qualified(package)
    try:
        module = importlib.import_module(qualified)
    except ModuleNotFoundError as exc:
        # Only the handler module (or one of its parents) being absent counts
        # as "not found"; errors raised inside the handler module propagate.
        missing = exc.name or ""
        if missing and (qualified == missing or qualified.startswith(f"{missing}.")):
            raise HandlerNotFoundError(
                f"No handler module {qualified!r} is installed"
            ) from exc
        raise
    handler = getattr(module, ref.attribute, None)
    if not callable(handler):
        raise HandlerNotFoundError(
            f"Handler module {qualified!r} does not define {ref.attribute}()"
        )
    return handler


async def _settle(awaitable: Awaitable[Any]) -> Any:
    return await awaitable


def run_handler(handler: Handler, **kwargs: Any) -> None:
    """Call ``handler`` and run any awaitable it returns to completion."""
    result = handler(**kwargs)
    if inspect.isawaitable(result):
        asyncio.run(_settle(result))


class Dispatcher:
    """Owns the catalog and option registry; runs exactly one command."""

    def __init__(
        self,
        catalog: CommandCatalog = CATALOG,
        registry: Optional[OptionRegistry] = None,
        *,
        loader: Optional[HandlerLoader] = None,
        context_factory: ContextFactory = get_build_context,
        handlers_package: str = DEFAULT_HANDLERS_PACKAGE,
    ) -> None:
        self.catalog = catalog
        self.registry = (
            registry if registry is not None else OptionRegistry.from_catalog(catalog)
        )
        self.handlers_package = handlers_package
        self.loader: HandlerLoader = loader or self._import_handler
        self.context_factory = context_factory

    def _import_handler(self, ref: HandlerRef) -> Handler:
        return import_handler(ref, self.handlers_package)

    def should_skip(self, invocation: ParsedInvocation) -> bool:
        command = invocation.command
        if skip(self.registry, command.name, invocation.extra_args):
            return True
        if command.validator is not None:
            command.validator(invocation.cli_command_options)
        return False

    def dispatch(self, invocation: ParsedInvocation) -> None:
        if self.should_skip(invocation):
            return
        handler = self.loader(invocation.command.handler_ref)
        build_context = self.context_factory(invocation.project_dir_path)
        if invocation.cli_command_options is None:
            run_handler(handler, build_context=build_context)
        else:
            run_handler(
                handler,
                build_context=build_context,
                cli_command_options=invocation.cli_command_options,
            )
