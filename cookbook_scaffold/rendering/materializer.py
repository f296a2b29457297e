"""Mirror template source trees into a cookbook directory."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator

from ..core.models import TEMPLATE_SUFFIX, MaterializeConfig
from .context import Context, TemplateRenderError
from .io import atomic_write_text, copy_file, ensure_dir

logger = logging.getLogger(__name__)


def walk_tree(root: Path) -> Iterator[Path]:
    """Yield ``root`` and every entry below it, parents before children."""
    if not root.is_dir():
        raise FileNotFoundError(f"Source directory not found: {root}")
    yield root
    yield from sorted(root.rglob("*"))


def strip_suffix(path: Path, suffix: str = TEMPLATE_SUFFIX) -> Path:
    """Drop a trailing template marker from the file name, if present."""
    if suffix and path.name.endswith(suffix) and path.name != suffix:
        return path.with_name(path.name[: -len(suffix)])
    return path


def copy_tree(source_dir: Path, dest_dir: Path) -> list[Path]:
    """Copy every file under ``source_dir`` into ``dest_dir``.

    Existing destination files are overwritten.

    Args:
        source_dir: Directory holding verbatim files
        dest_dir: Directory mirroring ``source_dir``

    Returns:
        Paths of the files written
    """
    logger.debug(f"Copying files: {source_dir} → {dest_dir}")

    written: list[Path] = []
    for source_path in walk_tree(source_dir):
        destination = dest_dir / source_path.relative_to(source_dir)
        if source_path.is_dir():
            ensure_dir(destination)
            continue

        logger.info(f"Creating {destination}")
        copy_file(source_path, destination)
        written.append(destination)

    return written


def render_tree(
    source_dir: Path,
    dest_dir: Path,
    context: Context,
    *,
    file_mode: int = 0o644,
    suffix: str = TEMPLATE_SUFFIX,
) -> list[Path]:
    """Render every template under ``source_dir`` into ``dest_dir``.

    Destinations that already exist are left untouched, so user edits to
    previously generated files survive a re-run.

    Args:
        source_dir: Directory holding templates
        dest_dir: Directory mirroring ``source_dir``
        context: Variables available to the templates
        file_mode: Permissions for rendered files
        suffix: Template marker stripped from file names

    Returns:
        Paths of the files written
    """
    logger.debug(f"Rendering templates: {source_dir} → {dest_dir}")

    written: list[Path] = []
    for source_path in walk_tree(source_dir):
        relative = source_path.relative_to(source_dir)
        if source_path.is_dir():
            ensure_dir(dest_dir / relative)
            continue

        destination = strip_suffix(dest_dir / relative, suffix)
        if destination.exists():
            logger.debug(f"Skipping existing {destination}")
            continue

        logger.info(f"Creating {destination}")
        try:
            template_text = source_path.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            raise TemplateRenderError(
                f"{relative}: not valid UTF-8 ({e.reason})"
            ) from e
        rendered = context.evaluate(template_text, name=str(relative))
        atomic_write_text(destination, rendered, mode=file_mode)
        written.append(destination)

    return written


def materialize_cookbook(config: MaterializeConfig, context: Context) -> list[Path]:
    """Copy the files and render the templates of a template source tree.

    Args:
        config: Materialization configuration
        context: Template variables

    Returns:
        Paths of all files written
    """
    for required in (config.files_dir, config.templates_dir):
        if not required.is_dir():
            raise FileNotFoundError(f"Template directory not found: {required}")

    logger.debug(f"Materializing {config.template_root} into {config.destination}")

    outputs = copy_tree(config.files_dir, config.destination)
    outputs += render_tree(
        config.templates_dir,
        config.destination,
        context,
        file_mode=config.file_mode,
        suffix=config.template_suffix,
    )

    logger.debug(f"Wrote {len(outputs)} file(s)")
    return outputs
