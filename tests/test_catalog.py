from __future__ import annotations

import pytest

from keycloakify_cli.catalog import (
    CATALOG,
    DEFAULT_COMMAND,
    PROJECT_OPTION,
    CommandCatalog,
    CommandDefinition,
    HandlerRef,
    OptionDefinition,
)
from keycloakify_cli.errors import UnknownCommandError


def test_catalog_order():
    assert CATALOG.names() == [
        "build",
        "start-keycloak",
        "eject-page",
        "add-story",
        "initialize-email-theme",
        "initialize-account-theme",
        "copy-keycloak-resources-to-public",
        "update-kc-gen",
        "postinstall",
        "eject-file",
    ]
    assert DEFAULT_COMMAND in CATALOG


def test_only_start_keycloak_and_eject_file_declare_options():
    names = [command.name for command in CATALOG if command.options]
    assert names == ["start-keycloak", "eject-file"]


def test_unknown_command():
    with pytest.raises(UnknownCommandError) as excinfo:
        CATALOG.get("deploy")
    assert str(excinfo.value) == "Unknown command: deploy"


def test_duplicate_command_names_are_rejected():
    command = CommandDefinition(name="x", description="", handler_ref=HandlerRef("x"))
    with pytest.raises(ValueError, match="Duplicate command names: x"):
        CommandCatalog((command, command))


def test_option_flags():
    assert PROJECT_OPTION.flag_tokens == ("--project", "-p")
    assert PROJECT_OPTION.names == ("project", "p")
    port = CATALOG.get("start-keycloak").option("port")
    assert port.flag_tokens == ("--port",)
    assert port.default is None


def test_option_lookup_by_key():
    start = CATALOG.get("start-keycloak")
    assert start.option("realm_json_file_path").long == "import"
    with pytest.raises(KeyError):
        start.option("file")


def test_eject_file_requires_file():
    assert CATALOG.get("eject-file").option("file").required is True


def test_handler_refs_are_distinct_modules():
    modules = [command.handler_ref.module for command in CATALOG]
    assert len(set(modules)) == len(modules)
    assert CATALOG.get("start-keycloak").handler_ref == HandlerRef("start_keycloak")


def test_handler_ref_qualified():
    assert HandlerRef("build").qualified("pkg.handlers") == "pkg.handlers.build"
    assert HandlerRef("build").qualified("") == "build"


def test_only_start_keycloak_has_a_validator():
    validated = [command.name for command in CATALOG if command.validator]
    assert validated == ["start-keycloak"]


def test_definitions_are_frozen():
    option = OptionDefinition(key="k", long="k", description="")
    with pytest.raises(AttributeError):
        option.long = "other"  # type: ignore[misc]
