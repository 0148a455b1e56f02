from __future__ import annotations

from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parent.parent


def load_pyproject() -> dict:
    tomllib = pytest.importorskip("tomllib")
    with (ROOT / "pyproject.toml").open("rb") as handle:
        return tomllib.load(handle)


def test_readme_points_at_user_docs() -> None:
    project = load_pyproject()["project"]

    readme = ROOT / project["readme"]
    assert readme.name == "README.md"
    assert readme.is_file()


def test_console_script_targets_app_main() -> None:
    scripts = load_pyproject()["project"]["scripts"]

    assert scripts["minedit"] == "minedit.adapters.textual.app:main"
