"""dpkg backend: ``dpkg -S`` to find the owner, ``dpkg -V`` to verify it."""

import logging

from package_file_verify.result import VerificationResult

from .extract import get_verification_result_from_string
from .runner import run_command, verify_output
from .types import Backend

logger = logging.getLogger(__name__)

DPKG_PATH = "/usr/bin/dpkg"


def search(file_path: str) -> str | None:
    """Return the package owning ``file_path``, or None if there is none.

    dpkg prints ``package: /path``. Diverted files are preceded by
    ``diversion by <pkg> from/to: ...`` lines, which are skipped. Shared
    directories may list several packages (``a, b: /path``), in which case
    the first wins.
    """
    output = run_command([DPKG_PATH, "-S", file_path])
    if not output.stdout.strip() or not output.succeeded:
        logger.warning("No package found for file %s", file_path)
        return None

    owner_lines = [
        line for line in output.stdout.splitlines()
        if line.strip() and not line.startswith("diversion by ")
    ]
    if not owner_lines:
        logger.warning("Only diversions found for file %s", file_path)
        return None

    packages, _, _ = owner_lines[0].partition(":")
    return packages.split(",")[0].strip()


def verify_package(package_name: str) -> str:
    """Return rpm-format verify output for every file in ``package_name``."""
    output = run_command([DPKG_PATH, "-V", "--verify-format=rpm", package_name])
    return verify_output(output)


def verify(file_path: str) -> VerificationResult | None:
    """Verify a file path using dpkg search/verify."""
    package_name = search(file_path)
    if package_name is None:
        return None
    logger.debug("File %s belongs to package %s", file_path, package_name)
    return get_verification_result_from_string(verify_package(package_name), file_path)


BACKEND = Backend(name="dpkg", search=search, verify_package=verify_package, verify=verify)
