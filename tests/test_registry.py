from __future__ import annotations

from collections import Counter

from keycloakify_cli.catalog import CATALOG
from keycloakify_cli.registry import OptionRegistry, OptionRegistryBuilder


def test_registry_from_catalog_preserves_registration_order():
    registry = OptionRegistry.from_catalog(CATALOG)

    assert registry.tokens == (
        "project",
        "p",
        "port",
        "keycloak-version",
        "import",
        "file",
    )


def test_catalog_flag_names_are_globally_unique():
    names = [name for option in CATALOG.global_options for name in option.names]
    names += [name for c in CATALOG for option in c.options for name in option.names]

    assert [name for name, count in Counter(names).items() if count > 1] == []


def test_has_checks_global_membership():
    registry = OptionRegistry.from_catalog(CATALOG)

    assert registry.has("project")
    assert registry.has("p")
    assert registry.has("file")
    assert not registry.has("verbose")
    assert "port" in registry
    assert "nope" not in registry


def test_accepts_is_scoped_to_the_declaring_command():
    registry = OptionRegistry.from_catalog(CATALOG)

    assert registry.accepts("eject-file", "file")
    assert not registry.accepts("eject-page", "file")
    assert registry.accepts("eject-page", "project")
    assert registry.accepts("start-keycloak", "keycloak-version")
    assert not registry.accepts("build", "port")


def test_accepted_by_combines_global_and_own_tokens():
    registry = OptionRegistry.from_catalog(CATALOG)

    assert registry.accepted_by("build") == {"project", "p"}
    assert registry.accepted_by("start-keycloak") == {
        "project",
        "p",
        "port",
        "keycloak-version",
        "import",
    }


def test_duplicate_registration_keeps_membership():
    builder = OptionRegistryBuilder()
    builder.register("project")
    builder.register("project")
    builder.register("file", command="eject-file")

    registry = builder.freeze()

    assert registry.tokens == ("project", "file")
    assert registry.has("project")
    assert len(registry) == 2


def test_frozen_registry_ignores_later_builder_changes():
    builder = OptionRegistryBuilder()
    builder.register("project")
    registry = builder.freeze()

    builder.register("late")

    assert not registry.has("late")
