"""Subprocess runner for package manager commands."""

import logging
import subprocess
from dataclasses import dataclass

from .types import CommandError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CommandOutput:
    """Captured result of a finished command."""

    args: list[str]
    returncode: int
    stdout: str
    stderr: str = ""

    @property
    def succeeded(self) -> bool:
        return self.returncode == 0


def run_command(args: list[str]) -> CommandOutput:
    """Run a command without a shell and capture its output.

    Args:
        args: Executable path followed by its arguments

    Returns:
        CommandOutput with stdout decoded as UTF-8

    Raises:
        CommandError: the command could not be started or its stdout is not
            valid UTF-8
    """
    logger.debug("Running %s", " ".join(args))
    try:
        result = subprocess.run(args, capture_output=True)
    except OSError as e:
        raise CommandError(f"Failed to run {args[0]}: {e}", args) from e

    try:
        stdout = result.stdout.decode("utf-8")
    except UnicodeDecodeError as e:
        raise CommandError(f"Output of {args[0]} is not valid UTF-8: {e}", args) from e

    stderr = result.stderr.decode("utf-8", errors="replace").strip()
    if result.returncode != 0:
        logger.debug("%s exited with %d: %s", args[0], result.returncode, stderr)

    return CommandOutput(
        args=list(args),
        returncode=result.returncode,
        stdout=stdout,
        stderr=stderr,
    )


def verify_output(output: CommandOutput) -> str:
    """Return stdout of a package verify command.

    rpm and dpkg exit non-zero when a file differs from its metadata, so the
    exit status alone is not an error. Empty output reads as "all passed",
    which only holds when the command succeeded.
    """
    if not output.stdout and not output.succeeded:
        message = output.stderr or f"exit status {output.returncode}"
        raise CommandError(f"{output.args[0]} verify failed: {message}", output.args)
    return output.stdout
