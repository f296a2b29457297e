"""Shared fixtures for cookbook scaffold tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from cookbook_scaffold.core import settings
from cookbook_scaffold.rendering.context import Context

SETTINGS_ENV = (
    "SCAFFOLD_COOKBOOK_PATH",
    "SCAFFOLD_TEMPLATE",
    "SCAFFOLD_COPYRIGHT",
    "SCAFFOLD_EMAIL",
    "SCAFFOLD_LICENSE",
    "SCAFFOLD_README_FORMAT",
)


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Keep the caller's environment and config file out of the tests."""
    for name in SETTINGS_ENV:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(
        settings, "default_config_file", lambda: tmp_path / "missing" / "config.env"
    )


@pytest.fixture
def template_root(tmp_path: Path) -> Path:
    """A small template tree with nested files, templates and an empty dir."""
    root = tmp_path / "template"
    files = root / "files"
    templates = root / "templates"

    (files / "recipes").mkdir(parents=True)
    (files / "attributes").mkdir()
    (files / "README.txt").write_text("hello")
    (files / "recipes" / "setup.rb").write_text("package 'ntp'\n")

    (templates / "recipes").mkdir(parents=True)
    (templates / "providers").mkdir()
    (templates / "metadata.rb.j2").write_text("name '{{ cookbook_name }}'\n")
    (templates / "recipes" / "default.rb.j2").write_text(
        "# Copyright (C) {{ copyright }}\n# {{ email }}\n"
    )
    (templates / "NOTES").write_text("license: {{ license }}\n")
    return root


@pytest.fixture
def context() -> Context:
    return Context(
        {
            "cookbook_name": "mycook",
            "copyright": "Example, Inc.",
            "email": "ops@example.com",
            "license": "mit",
            "readme_format": "md",
        }
    )
