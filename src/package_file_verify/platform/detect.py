"""Platform detection logic."""

import logging
from pathlib import Path

from .types import OSFamily, Platform

logger = logging.getLogger(__name__)

OS_RELEASE_PATH = "/etc/os-release"
ARMBIAN_RELEASE_PATH = "/etc/armbian-release"

DEBIAN_IDS = frozenset(
    {"debian", "ubuntu", "raspbian", "linuxmint", "pop", "kali", "armbian", "elementary"}
)
REDHAT_IDS = frozenset({"rhel", "centos", "fedora", "rocky", "almalinux", "ol", "amzn"})


def _read_file(path: str) -> str | None:
    """Read file contents, return None if missing or unreadable."""
    try:
        return Path(path).read_text().strip()
    except (OSError, UnicodeDecodeError):
        return None


def parse_os_release(content: str) -> dict[str, str]:
    """Parse os-release ``KEY=value`` lines into a dict."""
    fields: dict[str, str] = {}
    for line in content.splitlines():
        line = line.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        key, value = line.split("=", 1)
        fields[key.strip()] = value.strip().strip('"').strip("'")
    return fields


def classify_os(os_id: str, os_like: tuple[str, ...] = ()) -> OSFamily:
    """Map an os-release ID (falling back to ID_LIKE) to an OS family."""
    for candidate in (os_id, *os_like):
        candidate = candidate.lower()
        if candidate in DEBIAN_IDS:
            return OSFamily.DEBIAN
        if candidate in REDHAT_IDS:
            return OSFamily.REDHAT
    return OSFamily.UNKNOWN


def detect_platform(
    os_release_path: str = OS_RELEASE_PATH,
    armbian_release_path: str = ARMBIAN_RELEASE_PATH,
) -> Platform:
    """Detect the OS family of the running host."""
    # Armbian is Debian based but may carry a vendor os-release
    if Path(armbian_release_path).exists():
        logger.debug("Found %s, using Debian family", armbian_release_path)
        return Platform(os_family=OSFamily.DEBIAN, os_id="armbian")

    os_release = _read_file(os_release_path)
    if not os_release:
        logger.debug("No os-release found at %s", os_release_path)
        return Platform(os_family=OSFamily.UNKNOWN)

    fields = parse_os_release(os_release)
    os_id = fields.get("ID", "").lower()
    os_like = tuple(fields.get("ID_LIKE", "").lower().split())
    os_family = classify_os(os_id, os_like)
    logger.debug("Detected OS %r (like %r) as %s", os_id, os_like, os_family.name)

    return Platform(
        os_family=os_family,
        os_id=os_id,
        os_version=fields.get("VERSION_ID", ""),
        os_like=os_like,
    )
