"""Layered configuration: CLI flag > environment > config file > default."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

from pydantic import field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict
from typing_extensions import Annotated

from .models import CookbookOptions

logger = logging.getLogger(__name__)

DEFAULT_TEMPLATE_ROOT = Path(__file__).resolve().parents[1] / "template"
CONFIG_FILE_NAME = Path(".config") / "cookbook-scaffold" / "config.env"

DEFAULT_COPYRIGHT = "YOUR_COMPANY_NAME"
DEFAULT_EMAIL = "YOUR_EMAIL"
DEFAULT_LICENSE = "none"
DEFAULT_README_FORMAT = "md"


class ConfigurationError(ValueError):
    """Raised when the configuration cannot be resolved."""


def default_config_file() -> Path | None:
    """Return the per-user config file path, or None without a home directory."""
    try:
        return Path.home() / CONFIG_FILE_NAME
    except RuntimeError:
        return None


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="SCAFFOLD_", case_sensitive=False, extra="ignore"
    )

    cookbook_path: Annotated[list[Path], NoDecode] = []
    template: Path | None = None
    copyright: str | None = None
    email: str | None = None
    license: str | None = None
    readme_format: str | None = None

    @field_validator("cookbook_path", mode="before")
    @classmethod
    def _split_paths(cls, value: Any) -> Any:
        if isinstance(value, (str, os.PathLike)):
            return [item for item in str(value).split(os.pathsep) if item.strip()]
        return value

    @field_validator("template", mode="before")
    @classmethod
    def _empty_template(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value


def load_settings(config_file: Path | None = None, **overrides: Any) -> Settings:
    """Load settings, letting explicitly supplied values win.

    Args:
        config_file: Dotenv-style file with ``SCAFFOLD_*`` keys. Falls back to
            the per-user config file when it exists.
        **overrides: Values given on the command line; ``None`` means unset.

    Returns:
        Resolved settings
    """
    if config_file is None:
        candidate = default_config_file()
        if candidate is not None and candidate.is_file():
            config_file = candidate

    if config_file is not None and not config_file.is_file():
        raise ConfigurationError(f"Config file not found: {config_file}")

    explicit = {key: value for key, value in overrides.items() if value is not None}
    # A path given on the command line is a single directory, never a list
    flag_path = explicit.get("cookbook_path")
    if isinstance(flag_path, (str, os.PathLike)):
        if str(flag_path).strip():
            explicit["cookbook_path"] = [flag_path]
        else:
            del explicit["cookbook_path"]
    logger.debug(f"Loading settings (config file: {config_file})")

    return Settings(_env_file=config_file, **explicit)


def placeholder(value: str | None, default: str) -> str:
    """Return ``default`` when ``value`` is unset, empty or ``false``."""
    if value is None or not value.strip() or value.strip().lower() == "false":
        return default
    return value


def resolve_cookbook_path(settings: Settings) -> Path:
    """Return the absolute base directory new cookbooks are created in."""
    if not settings.cookbook_path:
        raise ConfigurationError(
            "No cookbook path is configured and none was given with "
            "--cookbook-path. Nowhere to write the new cookbook to."
        )
    first = settings.cookbook_path[0]
    return Path(os.path.abspath(os.path.expanduser(str(first))))


def resolve_template_root(settings: Settings) -> Path:
    """Return the template source tree, defaulting to the bundled one."""
    if settings.template is None:
        return DEFAULT_TEMPLATE_ROOT
    return Path(os.path.abspath(os.path.expanduser(str(settings.template))))


def build_options(cookbook_name: str, settings: Settings) -> CookbookOptions:
    """Build the template variables for ``cookbook_name``."""
    return CookbookOptions(
        cookbook_name=cookbook_name,
        copyright=placeholder(settings.copyright, DEFAULT_COPYRIGHT),
        email=placeholder(settings.email, DEFAULT_EMAIL),
        license=placeholder(settings.license, DEFAULT_LICENSE),
        readme_format=placeholder(settings.readme_format, DEFAULT_README_FORMAT),
    )
