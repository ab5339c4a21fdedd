"""Pick the status token for one file out of rpm-format verify output."""

import logging

from package_file_verify.result import VerificationResult

from .types import MalformedVerificationLineError

logger = logging.getLogger(__name__)

ALL_PASSED = "........"


def select_status_token(raw_output: str, file_path: str) -> str:
    """Return the status token of the last line ending with ``file_path``.

    Lines look like ``<status> <path>``; the token is everything before the
    last whitespace run. Returns an empty string when no line matches.

    Raises:
        MalformedVerificationLineError: a matching line has no whitespace
    """
    token = ""
    for line in raw_output.splitlines():
        if not line.endswith(file_path):
            continue
        parts = line.rsplit(maxsplit=1)
        if len(parts) != 2:
            raise MalformedVerificationLineError(line, file_path)
        token = parts[0]
    return token


def get_verification_result_from_string(
    raw_output: str, file_path: str
) -> VerificationResult:
    """Given verify output for a whole package, return the result for one file."""
    # Verifiers print nothing when every file matches its recorded metadata
    if not raw_output:
        logger.info("No output returned, all checks passed")
        return VerificationResult.from_string(ALL_PASSED)

    token = select_status_token(raw_output, file_path)
    if not token:
        logger.warning("No verification line found for %s", file_path)
    else:
        logger.debug("Verification string for %s: %r", file_path, token)

    return VerificationResult.from_string(token)
