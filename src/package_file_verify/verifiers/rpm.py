"""rpm backend: ``rpm -qf`` to find the owner, ``rpm -V`` to verify it."""

import logging

from package_file_verify.result import VerificationResult

from .extract import get_verification_result_from_string
from .runner import run_command, verify_output
from .types import Backend

logger = logging.getLogger(__name__)

RPM_PATH = "/usr/bin/rpm"


def search(file_path: str) -> str | None:
    """Return the package owning ``file_path``, or None if there is none."""
    # rpm prints "file ... is not owned by any package" and exits 1
    output = run_command([RPM_PATH, "-qf", file_path])
    if not output.stdout.strip() or not output.succeeded:
        logger.warning("No package found for file %s", file_path)
        return None
    return output.stdout.splitlines()[0].strip()


def verify_package(package_name: str) -> str:
    output = run_command([RPM_PATH, "-V", package_name])
    return verify_output(output)


def verify(file_path: str) -> VerificationResult | None:
    """Verify a file path using rpm search/verify."""
    package_name = search(file_path)
    if package_name is None:
        return None
    logger.debug("File %s belongs to package %s", file_path, package_name)
    return get_verification_result_from_string(verify_package(package_name), file_path)


BACKEND = Backend(name="rpm", search=search, verify_package=verify_package, verify=verify)
