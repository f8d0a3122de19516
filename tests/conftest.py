from __future__ import annotations

from pathlib import Path
from typing import Any, Optional

import pytest
from typer.testing import CliRunner

from keycloakify_cli.build_context import BuildContext
from keycloakify_cli.catalog import CATALOG, HandlerRef
from keycloakify_cli.cli import common as cli_common
from keycloakify_cli.cli.common import refresh_cli_context
from keycloakify_cli.dispatcher import Dispatcher


@pytest.fixture(autouse=True)
def isolate_config(tmp_path, monkeypatch):
    """Keep configuration lookup away from the developer's real files."""

    home = tmp_path / "home"
    home.mkdir()
    workdir = tmp_path / "work"
    workdir.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("XDG_CONFIG_HOME", str(home / ".config"))
    monkeypatch.delenv("KEYCLOAKIFY_CLI_CONFIG", raising=False)
    monkeypatch.delenv("KEYCLOAKIFY_CLI_DEBUG", raising=False)
    monkeypatch.chdir(workdir)

    refresh_cli_context()
    yield
    refresh_cli_context()


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


class RecordingLoader:
    """Handler loader that records which refs were resolved and how handlers ran."""

    def __init__(self, error: Optional[BaseException] = None) -> None:
        self.loaded: list[HandlerRef] = []
        self.calls: list[dict[str, Any]] = []
        self.error = error

    def __call__(self, ref: HandlerRef):
        self.loaded.append(ref)

        async def command(**kwargs: Any) -> None:
            self.calls.append(kwargs)
            if self.error is not None:
                raise self.error

        return command


@pytest.fixture
def project_root(tmp_path) -> Path:
    root = tmp_path / "project"
    root.mkdir()
    return root


@pytest.fixture
def install_dispatcher(monkeypatch, project_root):
    """Route CLI dispatch through a dispatcher using the given loader."""

    def _install(loader) -> Dispatcher:
        def context_factory(project_dir_path: Optional[str]) -> BuildContext:
            path = project_root if project_dir_path is None else Path(project_dir_path)
            return BuildContext(project_dir_path=path)

        dispatcher = Dispatcher(CATALOG, loader=loader, context_factory=context_factory)
        monkeypatch.setattr(cli_common, "_DISPATCHER", dispatcher)
        return dispatcher

    return _install


@pytest.fixture
def handlers(install_dispatcher) -> RecordingLoader:
    loader = RecordingLoader()
    install_dispatcher(loader)
    return loader


@pytest.fixture
def loader_factory():
    return RecordingLoader
