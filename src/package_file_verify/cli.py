import json
import logging

import click
from rich.console import Console
from rich.logging import RichHandler

from package_file_verify.platform import detect_platform
from package_file_verify.verifiers import BACKENDS, VerifierError, get_backend, verify_file

logger = logging.getLogger(__name__)


def _setup_logging(verbose: bool, quiet: bool) -> None:
    level = logging.INFO
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


@click.group()
@click.version_option(package_name="package-file-verify")
@click.option("--verbose", "-v", is_flag=True, help="Show debug logging")
@click.option("--quiet", "-q", is_flag=True, help="Only log warnings and errors")
def main(verbose: bool, quiet: bool):
    """Verify installed files against package manager metadata."""
    _setup_logging(verbose, quiet)


@main.command()
@click.option(
    "--file-path",
    "-f",
    required=True,
    metavar="FULL_PATH",
    help="Absolute path of the file to verify",
)
@click.option(
    "--backend",
    type=click.Choice(["auto", *BACKENDS]),
    default="auto",
    show_default=True,
    envvar="PACKAGE_FILE_VERIFY_BACKEND",
    help="Package manager to query",
)
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.option("--table", is_flag=True, help="Show a per-check table")
@click.option("--strict", is_flag=True, help="Exit 1 if any check failed or none could be performed")
def verify(file_path: str, backend: str, as_json: bool, table: bool, strict: bool):
    """Verify one file against its owning package."""
    logger.debug("Verifying %s with backend %s", file_path, backend)
    try:
        result = verify_file(file_path, backend=None if backend == "auto" else backend)
    except VerifierError as e:
        raise click.ClickException(str(e)) from e

    if result is None:
        raise click.ClickException(f"No verification result for {file_path}")

    if as_json:
        data = {"file_path": file_path, **result.to_dict()}
        click.echo(json.dumps(data, indent=2))
    elif table:
        from package_file_verify.ui import render_result

        render_result(file_path, result)
    else:
        click.echo(f"{result} {file_path}")

    if strict and (not result.passed or result.is_unknown):
        raise SystemExit(1)


@main.command(name="backend")
def show_backend():
    """Show the detected platform and its package verifier."""
    platform = detect_platform()
    click.echo(f"Detected platform: {platform}")
    selected = get_backend(platform.os_family)
    if selected is None:
        raise click.ClickException(
            f"Unsupported OS family: {platform.os_family.name}. "
            "Only Debian and Red Hat families are supported."
        )
    click.echo(f"Backend: {selected.name}")


if __name__ == "__main__":
    main()
