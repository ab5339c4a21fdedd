"""Package file verifiers and backend resolution."""

import logging

from package_file_verify.platform import OSFamily, detect_platform
from package_file_verify.result import VerificationResult

from . import dpkg, rpm
from .extract import get_verification_result_from_string, select_status_token
from .types import (
    Backend,
    BackendUnavailableError,
    CommandError,
    MalformedVerificationLineError,
    Verifier,
    VerifierError,
)

__all__ = [
    "BACKENDS",
    "Backend",
    "BackendUnavailableError",
    "CommandError",
    "MalformedVerificationLineError",
    "Verifier",
    "VerifierError",
    "get_backend",
    "get_verification_result_from_string",
    "get_verifier",
    "get_verifier_method",
    "select_status_token",
    "verify_file",
]

logger = logging.getLogger(__name__)

BACKENDS: dict[str, Backend] = {
    dpkg.BACKEND.name: dpkg.BACKEND,
    rpm.BACKEND.name: rpm.BACKEND,
}

FAMILY_BACKENDS: dict[OSFamily, Backend] = {
    OSFamily.DEBIAN: dpkg.BACKEND,
    OSFamily.REDHAT: rpm.BACKEND,
}


def get_backend(os_family: OSFamily) -> Backend | None:
    """Return the backend for an OS family, or None if there is none."""
    backend = FAMILY_BACKENDS.get(os_family)
    if backend is not None:
        logger.debug("Using %s verifier for %s", backend.name, os_family.name)
    return backend


def get_verifier_method(os_family: OSFamily) -> Verifier | None:
    backend = get_backend(os_family)
    return backend.verify if backend else None


def get_verifier() -> Verifier | None:
    """Get the verifier method for the current operating system."""
    return get_verifier_method(detect_platform().os_family)


def verify_file(file_path: str, backend: str | None = None) -> VerificationResult | None:
    """Verify ``file_path`` with the named backend, or the detected one.

    Returns None when no package owns the file.

    Raises:
        BackendUnavailableError: no backend matches the name or the platform
        VerifierError: the package manager could not be queried
    """
    if backend:
        selected = BACKENDS.get(backend)
        if selected is None:
            raise BackendUnavailableError(f"Unknown backend: {backend}")
    else:
        platform = detect_platform()
        selected = get_backend(platform.os_family)
        if selected is None:
            raise BackendUnavailableError(f"No package verifier for platform {platform}")
    return selected.verify(file_path)
