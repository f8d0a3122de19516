"""Option validation applied before a command's handler is resolved."""

from __future__ import annotations

from typing import TYPE_CHECKING, AbstractSet, Iterable, List, Optional, Sequence

from keycloakify_cli import semver
from keycloakify_cli.errors import InvalidKeycloakVersionError, UnrecognizedOptionError

if TYPE_CHECKING:
    from keycloakify_cli.catalog import StartKeycloakCommandOptions
    from keycloakify_cli.registry import OptionRegistry

OPTIONS_TERMINATOR = "--"


def option_keys(args: Sequence[str]) -> List[str]:
    """Return the option keys found in ``args``, in order of appearance.

    ``--name`` and ``--name=value`` yield ``name``; ``-abc`` yields ``a``,
    ``b`` and ``c``. Positional tokens are skipped and ``--`` ends the scan.
    """
    keys: List[str] = []
    for arg in args:
        if arg == OPTIONS_TERMINATOR:
            break
        if arg.startswith("--"):
            keys.append(arg[2:].split("=", 1)[0])
        elif arg.startswith("-") and len(arg) > 1:
            keys.extend(arg[1:])
    return keys


def format_option_key(key: str) -> str:
    return f"-{key}" if len(key) == 1 else f"--{key}"


def find_unrecognized_option(
    keys: Iterable[str], accepted: AbstractSet[str]
) -> Optional[str]:
    for key in keys:
        if key not in accepted:
            return key
    return None


def skip(registry: "OptionRegistry", command: str, args: Sequence[str]) -> bool:
    """Gate a command's task on its supplied options.

    Raises :class:`UnrecognizedOptionError` for the first option key the
    command does not accept; otherwise returns ``False`` so the task runs.
    """
    key = find_unrecognized_option(option_keys(args), registry.accepted_by(command))
    if key is not None:
        raise UnrecognizedOptionError(key, format_option_key(key))
    return False


def _is_numeric(value: object) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, (int, float)):
        return True
    try:
        float(str(value))
    except ValueError:
        return False
    return True


def is_valid_keycloak_version(value: object) -> bool:
    if value is None:
        return True
    if _is_numeric(value):
        return False
    return semver.is_valid(value)


def validate_start_keycloak_options(options: "StartKeycloakCommandOptions") -> None:
    if not is_valid_keycloak_version(options.keycloak_version):
        raise InvalidKeycloakVersionError(options.keycloak_version)
