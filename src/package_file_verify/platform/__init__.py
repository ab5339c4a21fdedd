"""Platform detection for package verification."""

from .detect import classify_os, detect_platform, parse_os_release
from .types import OSFamily, Platform

__all__ = ["classify_os", "detect_platform", "parse_os_release", "OSFamily", "Platform"]
