"""The fixed catalog of keycloakify commands and their options.

Every command is declared once here. The Typer commands, the option
registry and the dispatcher are all derived from these definitions.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterator, Optional, Tuple, Union

from keycloakify_cli.errors import UnknownCommandError
from keycloakify_cli.validation import validate_start_keycloak_options

DEFAULT_COMMAND = "build"


@dataclass(frozen=True)
class OptionDefinition:
    key: str
    long: str
    description: str
    short: Optional[str] = None
    default: Any = None
    metavar: Optional[str] = None
    required: bool = False

    @property
    def names(self) -> Tuple[str, ...]:
        """Flag names without dashes, long form first."""
        return (self.long,) if self.short is None else (self.long, self.short)

    @property
    def flag_tokens(self) -> Tuple[str, ...]:
        tokens = [f"--{self.long}"]
        if self.short is not None:
            tokens.append(f"-{self.short}")
        return tuple(tokens)


@dataclass(frozen=True)
class HandlerRef:
    """Deferred ``module:attribute`` reference, relative to the handler package."""

    module: str
    attribute: str = "command"

    def qualified(self, package: str) -> str:
        return f"{package}.{self.module}" if package else self.module


@dataclass(frozen=True)
class StartKeycloakCommandOptions:
    keycloak_version: Union[str, int, float, None] = None
    port: Optional[int] = None
    realm_json_file_path: Optional[str] = None


@dataclass(frozen=True)
class EjectFileCommandOptions:
    file: str


CommandOptions = Union[StartKeycloakCommandOptions, EjectFileCommandOptions]


@dataclass(frozen=True)
class CommandDefinition:
    name: str
    description: str
    handler_ref: HandlerRef
    options: Tuple[OptionDefinition, ...] = ()
    validator: Optional[Callable[[Any], None]] = None

    def option(self, key: str) -> OptionDefinition:
        for option in self.options:
            if option.key == key:
                return option
        raise KeyError(key)


@dataclass(frozen=True)
class ParsedInvocation:
    """One resolved command plus the values parsed for it."""

    command: CommandDefinition
    project_dir_path: Optional[str] = None
    cli_command_options: Optional[CommandOptions] = None
    extra_args: Tuple[str, ...] = ()


class CommandCatalog:
    """Ordered, read-only collection of command definitions."""

    def __init__(
        self,
        commands: Tuple[CommandDefinition, ...],
        global_options: Tuple[OptionDefinition, ...] = (),
    ) -> None:
        names = [command.name for command in commands]
        duplicates = sorted({name for name in names if names.count(name) > 1})
        if duplicates:
            raise ValueError(f"Duplicate command names: {', '.join(duplicates)}")
        self._commands: Dict[str, CommandDefinition] = {c.name: c for c in commands}
        self.global_options = global_options

    def __iter__(self) -> Iterator[CommandDefinition]:
        return iter(self._commands.values())

    def __len__(self) -> int:
        return len(self._commands)

    def __contains__(self, name: object) -> bool:
        return name in self._commands

    def names(self) -> list[str]:
        return list(self._commands)

    def get(self, name: str) -> CommandDefinition:
        try:
            return self._commands[name]
        except KeyError:
            raise UnknownCommandError(name) from None


PROJECT_OPTION = OptionDefinition(
    key="project_dir_path",
    long="project",
    short="p",
    metavar="PATH",
    description=" ".join(
        [
            "For monorepos, path to the keycloakify project.",
            "Example: `keycloakify build --project packages/keycloak-theme`",
            "https://docs.keycloakify.dev/build-options#project-or-p-cli-option",
        ]
    ),
)


def _project_command(name: str, module: str, description: str) -> CommandDefinition:
    return CommandDefinition(
        name=name, description=description, handler_ref=HandlerRef(module)
    )


CATALOG = CommandCatalog(
    (
        _project_command(
            "build", "build", "Build the theme (default subcommand)."
        ),
        CommandDefinition(
            name="start-keycloak",
            description=(
                "Spin up a pre configured Docker image of Keycloak to test your theme."
            ),
            handler_ref=HandlerRef("start_keycloak"),
            options=(
                OptionDefinition(
                    key="port",
                    long="port",
                    metavar="PORT",
                    description="Keycloak server port. Example `--port 8085`",
                ),
                OptionDefinition(
                    key="keycloak_version",
                    long="keycloak-version",
                    metavar="VERSION",
                    description=" ".join(
                        [
                            "Use a specific version of Keycloak.",
                            "Example `--keycloak-version 21.1.1`",
                        ]
                    ),
                ),
                OptionDefinition(
                    key="realm_json_file_path",
                    long="import",
                    metavar="PATH",
                    description=" ".join(
                        [
                            "Import your own realm configuration file",
                            "Example `--import path/to/myrealm-realm.json`",
                        ]
                    ),
                ),
            ),
            validator=validate_start_keycloak_options,
        ),
        _project_command("eject-page", "eject_page", "Eject a Keycloak page."),
        _project_command(
            "add-story",
            "add_story",
            "Add *.stories.tsx file for a specific page to in your Storybook.",
        ),
        _project_command(
            "initialize-email-theme",
            "initialize_email_theme",
            "Initialize an email theme.",
        ),
        _project_command(
            "initialize-account-theme",
            "initialize_account_theme",
            "Initialize the account theme.",
        ),
        _project_command(
            "copy-keycloak-resources-to-public",
            "copy_keycloak_resources_to_public",
            "(Webpack/Create-React-App only) Copy Keycloak default theme "
            "resources to the public directory.",
        ),
        _project_command(
            "update-kc-gen",
            "update_kc_gen",
            "(Webpack/Create-React-App only) Create/update the kc.gen.ts file "
            "in your project.",
        ),
        _project_command(
            "postinstall",
            "postinstall",
            "Initialize all the Keycloakify UI modules installed in the project.",
        ),
        CommandDefinition(
            name="eject-file",
            description=" ".join(
                [
                    "WARNING: Not usable yet, will be used for future features",
                    "Take ownership over a given file",
                ]
            ),
            handler_ref=HandlerRef("eject_file"),
            options=(
                OptionDefinition(
                    key="file",
                    long="file",
                    metavar="RELPATH",
                    required=True,
                    description=" ".join(
                        [
                            "Relative path of the file relative to the directory "
                            "of your keycloak theme source",
                            "Example `--file src/login/page/Login.tsx`",
                        ]
                    ),
                ),
            ),
        ),
    ),
    global_options=(PROJECT_OPTION,),
)
