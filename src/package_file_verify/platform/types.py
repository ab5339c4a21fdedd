"""Platform type definitions."""

from dataclasses import dataclass
from enum import Enum, auto


class OSFamily(Enum):
    """Operating system family, as far as package management goes."""

    DEBIAN = auto()
    REDHAT = auto()
    UNKNOWN = auto()


@dataclass(frozen=True)
class Platform:
    """Detected platform information."""

    os_family: OSFamily
    os_id: str = ""
    os_version: str = ""
    os_like: tuple[str, ...] = ()

    @property
    def is_debian(self) -> bool:
        return self.os_family == OSFamily.DEBIAN

    @property
    def is_redhat(self) -> bool:
        return self.os_family == OSFamily.REDHAT

    @property
    def is_supported(self) -> bool:
        """Check if a package verifier exists for this platform."""
        return self.is_debian or self.is_redhat

    def __str__(self) -> str:
        name = self.os_id or "unknown"
        if self.os_version:
            name += f" {self.os_version}"
        return f"{name} ({self.os_family.name})"
