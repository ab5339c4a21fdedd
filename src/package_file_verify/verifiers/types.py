"""Verifier types and errors."""

from collections.abc import Callable
from dataclasses import dataclass

from package_file_verify.result import VerificationResult

Verifier = Callable[[str], VerificationResult | None]


class VerifierError(Exception):
    """Base error for a verification attempt that could not complete."""


class BackendUnavailableError(VerifierError):
    """No package verifier exists for the detected platform."""


class CommandError(VerifierError):
    """An external package manager command could not produce usable output."""

    def __init__(self, message: str, args: list[str] | None = None):
        super().__init__(message)
        self.command = list(args or [])


class MalformedVerificationLineError(VerifierError):
    """A verification line matched the file path but has no status token."""

    def __init__(self, line: str, file_path: str):
        super().__init__(f"Cannot split verification line for {file_path}: {line!r}")
        self.line = line
        self.file_path = file_path


@dataclass(frozen=True)
class Backend:
    """A package manager integration: owner lookup plus package verification."""

    name: str
    search: Callable[[str], str | None]
    verify_package: Callable[[str], str]
    verify: Verifier
