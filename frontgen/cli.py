#!/usr/bin/env python3
"""frontgen CLI - Generate a new front-end project from the starter template."""
from typing import Optional

import pydantic
import typer

from frontgen import __version__
from frontgen.cli_support import (
    handle_cli_error,
    is_mock,
    print_banner,
    print_success,
    setup_file_logging,
)
from frontgen.core.config import get_config
from frontgen.core.errors import FrontgenError, ValidationError
from frontgen.core.logger import console, get_logger
from frontgen.core.params import ParameterResolver
from frontgen.models.params import validate_version
from frontgen.scaffold.core import ScaffoldManager
from frontgen.services.git_manager import GitManager
from frontgen.services.package_manager import PackageManager

app = typer.Typer(
    name="frontgen",
    help="""Generate a new front-end project from the starter template.

Missing options are asked for interactively.

Example:
  frontgen --app-name "My App" --package-license MIT
""",
    add_completion=False,
)

logger = get_logger(__name__)


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"frontgen {__version__}")
        raise typer.Exit()


def _check_version(value: Optional[str]) -> Optional[str]:
    if value:
        try:
            validate_version(value)
        except ValidationError as e:
            raise typer.BadParameter(str(e))
    return value


@app.command()
def main(
    app_name: Optional[str] = typer.Option(None, "--app-name", help="Application name"),
    package_name: Optional[str] = typer.Option(None, "--package-name", help="Package name"),
    author: Optional[str] = typer.Option(None, "--package-author", help="Package author"),
    version: Optional[str] = typer.Option(
        None, "--package-version", help="Package version", callback=_check_version
    ),
    description: Optional[str] = typer.Option(None, "--package-description", help="Package description"),
    license: Optional[str] = typer.Option(None, "--package-license", help="Package license (SPDX identifier)"),
    repository_url: Optional[str] = typer.Option(None, "--package-url", help="Package repository URL"),
    verbose: bool = typer.Option(False, "--verbose", help="Show debug output"),
    log_file: Optional[str] = typer.Option(None, "--log-file", help="Also write the log to this file"),
    show_version: bool = typer.Option(
        False, "--version", "-v", help="Show version and exit",
        callback=_version_callback, is_eager=True,
    ),
):
    """Clone the starter template and turn it into a new project."""
    setup_file_logging(log_file=log_file, verbose=verbose)
    print_banner(console, __version__)

    try:
        config = get_config()
        logger.debug(f"Using template {config.template_url}")
        params = ParameterResolver(config=config).resolve(
            app_name=app_name,
            package_name=package_name,
            author=author,
            description=description,
            version=version,
            license=license,
            repository_url=repository_url,
        )

        mock = is_mock()
        manager = ScaffoldManager(
            params,
            config=config,
            git=GitManager(mock=mock),
            packages=PackageManager(config.package_manager, mock=mock),
        )
        manager.run()
    except (FrontgenError, pydantic.ValidationError) as e:
        handle_cli_error(e, console, verbose)

    print_success(console, f"Done! New app ready at {manager.app_dir.resolve()}")


if __name__ == "__main__":
    app()
