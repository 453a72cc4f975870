from __future__ import annotations

from pathlib import Path


def repo_root() -> Path:
    # talenthub/core/paths.py -> core -> talenthub -> repo
    return Path(__file__).resolve().parents[2]


def resolve_repo_path(path_value: str) -> Path:
    """Locate a settings env file.

    Absolute paths are used untouched. A relative path that exists under the
    working directory wins; otherwise it is anchored at the project root, so
    ``.env`` files next to ``pyproject.toml`` are found when the app is
    started from elsewhere.
    """
    p = Path(path_value)
    if p.is_absolute():
        return p
    if p.exists():
        return p.resolve()
    return (repo_root() / path_value).resolve()
