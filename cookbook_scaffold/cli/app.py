"""Main CLI application."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer
from typing_extensions import Annotated

from ..core import settings as config
from ..core.models import MaterializeConfig
from ..rendering import materializer
from ..rendering.context import Context, ScaffoldError
from .parsers import parse_cookbook_name, parse_file_mode

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="cookbook-scaffold",
    help="Create a new Chef cookbook from a template tree.",
)


@app.command()
def create(
    ctx: typer.Context,
    cookbook_name: Annotated[
        Optional[str],
        typer.Argument(metavar="COOKBOOK", help="Name of the cookbook to create."),
    ] = None,
    cookbook_path: Annotated[
        Optional[str],
        typer.Option(
            "--cookbook-path",
            "-o",
            help="The directory where the cookbook will be created.",
            metavar="PATH",
        ),
    ] = None,
    readme_format: Annotated[
        Optional[str],
        typer.Option(
            "--readme-format",
            "-r",
            help="Format of the README file: 'md' (markdown) or 'rdoc'.",
            metavar="FORMAT",
        ),
    ] = None,
    cookbook_license: Annotated[
        Optional[str],
        typer.Option(
            "--license",
            "-I",
            help="License for the cookbook: apachev2, gplv2, gplv3, mit or none.",
            metavar="LICENSE",
        ),
    ] = None,
    cookbook_copyright: Annotated[
        Optional[str],
        typer.Option(
            "--copyright",
            "-C",
            help="Name of the copyright holder.",
            metavar="COPYRIGHT",
        ),
    ] = None,
    cookbook_email: Annotated[
        Optional[str],
        typer.Option(
            "--email",
            "-m",
            help="Email address of the cookbook maintainer.",
            metavar="EMAIL",
        ),
    ] = None,
    cookbook_template: Annotated[
        Optional[str],
        typer.Option(
            "--template",
            "-t",
            help="The directory containing a cookbook template.",
            metavar="TEMPLATE",
        ),
    ] = None,
    file_mode: Annotated[
        str,
        typer.Option(
            "--mode",
            help="Permissions of rendered files in octal (default: 0644).",
            metavar="OCTAL",
        ),
    ] = "0644",
    config_file: Annotated[
        Optional[Path],
        typer.Option(
            "--config",
            "-c",
            help="Config file with SCAFFOLD_* settings.",
            metavar="FILE",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable verbose logging.",
        ),
    ] = False,
) -> None:
    """Create COOKBOOK under the configured cookbook path."""
    # Configure logging
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="[%(levelname)s] %(message)s",
    )

    if cookbook_name is None:
        typer.echo(ctx.get_usage())
        logger.critical("You must specify a cookbook name")
        raise typer.Exit(code=1)

    name = parse_cookbook_name(cookbook_name)
    mode = parse_file_mode(file_mode)

    # Resolve configuration before touching the filesystem
    try:
        settings = config.load_settings(
            config_file,
            cookbook_path=cookbook_path,
            template=cookbook_template,
            copyright=cookbook_copyright,
            email=cookbook_email,
            license=cookbook_license,
            readme_format=readme_format,
        )
        base_path = config.resolve_cookbook_path(settings)
    except config.ConfigurationError as e:
        logger.error(str(e))
        raise typer.Exit(code=1) from e

    options = config.build_options(name, settings)
    materialize_config = MaterializeConfig(
        template_root=config.resolve_template_root(settings),
        destination=base_path / name,
        file_mode=mode,
    )
    logger.debug(f"Template root: {materialize_config.template_root}")

    try:
        outputs = materializer.materialize_cookbook(
            materialize_config, Context(options.variables())
        )
    except (ScaffoldError, OSError) as e:
        logger.error(f"Failed to create cookbook {name}: {e}")
        raise typer.Exit(code=1) from e

    logger.debug(f"Completed: {len(outputs)} file(s) written")


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
