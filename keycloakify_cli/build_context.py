"""Project context handed to every command handler."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from keycloakify_cli.errors import ProjectNotFoundError

PACKAGE_JSON = "package.json"


@dataclass(frozen=True)
class BuildContext:
    project_dir_path: Path
    package_json_file_path: Optional[Path] = None


def get_build_context(
    project_dir_path: Optional[str], *, cwd: Optional[Path] = None
) -> BuildContext:
    """Resolve ``--project`` against ``cwd`` (default: the working directory).

    Without ``--project`` the working directory itself is the project.
    """
    base = (cwd or Path.cwd()).resolve()
    if project_dir_path is None:
        resolved = base
    else:
        candidate = Path(project_dir_path).expanduser()
        resolved = (candidate if candidate.is_absolute() else base / candidate).resolve()
    if not resolved.is_dir():
        raise ProjectNotFoundError(f"Project directory does not exist: {resolved}")
    package_json = resolved / PACKAGE_JSON
    return BuildContext(
        project_dir_path=resolved,
        package_json_file_path=package_json if package_json.is_file() else None,
    )
