from __future__ import annotations

import pytest

from keycloakify_cli.build_context import get_build_context
from keycloakify_cli.errors import ProjectNotFoundError


def test_defaults_to_working_directory(tmp_path):
    context = get_build_context(None, cwd=tmp_path)

    assert context.project_dir_path == tmp_path.resolve()
    assert context.package_json_file_path is None


def test_relative_project_is_resolved_against_cwd(tmp_path):
    theme = tmp_path / "packages" / "keycloak-theme"
    theme.mkdir(parents=True)
    (theme / "package.json").write_text("{}")

    context = get_build_context("packages/keycloak-theme", cwd=tmp_path)

    assert context.project_dir_path == theme.resolve()
    assert context.package_json_file_path == theme.resolve() / "package.json"


def test_absolute_project_path(tmp_path):
    context = get_build_context(str(tmp_path), cwd=tmp_path / "elsewhere")

    assert context.project_dir_path == tmp_path.resolve()


def test_missing_project_directory(tmp_path):
    with pytest.raises(ProjectNotFoundError, match="does not exist"):
        get_build_context("missing", cwd=tmp_path)


def test_file_is_not_a_project(tmp_path):
    (tmp_path / "file.txt").write_text("")

    with pytest.raises(ProjectNotFoundError):
        get_build_context("file.txt", cwd=tmp_path)
