"""Verification result codec for rpm-format status strings.

Both ``rpm -V`` and ``dpkg -V --verify-format=rpm`` report one line per
file, starting with an eight column status string such as ``S.5....T c``.
Each column is one file attribute: ``.`` means the check passed, ``?``
means it could not be performed and any other character means it failed.
"""

from dataclasses import dataclass
from enum import Enum

PASSED_CHAR = "."
UNSUPPORTED_CHAR = "?"
CONFIGURATION_SUFFIX = " c"


class CheckResult(Enum):
    """Outcome of a single attribute check."""

    UNSUPPORTED = "unsupported"
    PASSED = "passed"
    FAILED = "failed"

    @classmethod
    def from_char(cls, char: str) -> "CheckResult":
        if char == UNSUPPORTED_CHAR:
            return cls.UNSUPPORTED
        if char == PASSED_CHAR:
            return cls.PASSED
        return cls.FAILED


class CheckFlag(Enum):
    """Status string columns, in order, valued by their failure character."""

    SIZE = "S"
    MODE = "M"
    CHECKSUM = "5"
    MAJOR_MINOR = "D"
    SYMBOLIC_LINK = "L"
    OWNER = "U"
    GROUP = "G"
    MODIFICATION_TIME = "T"

    @property
    def field_name(self) -> str:
        return self.name.lower()

    @property
    def label(self) -> str:
        return self.name.replace("_", " ").capitalize()

    def char_for(self, result: CheckResult) -> str:
        """Character representing ``result`` in this column."""
        if result == CheckResult.PASSED:
            return PASSED_CHAR
        if result == CheckResult.FAILED:
            return self.value
        return UNSUPPORTED_CHAR


COLUMNS: tuple[CheckFlag, ...] = tuple(CheckFlag)


@dataclass(frozen=True)
class VerificationResult:
    """Per-attribute verification outcome for one packaged file."""

    size: CheckResult = CheckResult.UNSUPPORTED
    mode: CheckResult = CheckResult.UNSUPPORTED
    checksum: CheckResult = CheckResult.UNSUPPORTED
    major_minor: CheckResult = CheckResult.UNSUPPORTED
    symbolic_link: CheckResult = CheckResult.UNSUPPORTED
    owner: CheckResult = CheckResult.UNSUPPORTED
    group: CheckResult = CheckResult.UNSUPPORTED
    modification_time: CheckResult = CheckResult.UNSUPPORTED
    is_configuration: bool = False

    @classmethod
    def unknown(cls) -> "VerificationResult":
        """Result with every check unsupported."""
        return cls()

    @classmethod
    def from_string(cls, status: str) -> "VerificationResult":
        """Parse an rpm-format status string.

        Characters past the eighth column are not mapped to checks, and
        missing columns stay unsupported. The configuration flag is set
        when the input is longer than eight characters and ends in ``c``.

        >>> result = VerificationResult.from_string(".?5????T c")
        >>> result.is_configuration, result.checksum.name, result.mode.name
        (True, 'FAILED', 'UNSUPPORTED')
        """
        checks = {
            flag.field_name: CheckResult.from_char(char)
            for flag, char in zip(COLUMNS, status)
        }
        is_configuration = len(status) > len(COLUMNS) and status.endswith("c")
        return cls(**checks, is_configuration=is_configuration)

    def get(self, flag: CheckFlag) -> CheckResult:
        return getattr(self, flag.field_name)

    def checks(self) -> list[tuple[CheckFlag, CheckResult]]:
        """Return (flag, result) pairs in column order."""
        return [(flag, self.get(flag)) for flag in COLUMNS]

    def failed_checks(self) -> list[CheckFlag]:
        return [flag for flag, result in self.checks() if result == CheckResult.FAILED]

    @property
    def passed(self) -> bool:
        """True when no check failed. Unsupported checks do not count."""
        return not self.failed_checks()

    @property
    def is_unknown(self) -> bool:
        """True when no check could be performed, e.g. no report line matched."""
        return all(result == CheckResult.UNSUPPORTED for _, result in self.checks())

    def to_string(self) -> str:
        """Return the rpm-format status string.

        >>> VerificationResult.unknown().to_string()
        '????????'
        """
        output = "".join(flag.char_for(result) for flag, result in self.checks())
        if self.is_configuration:
            output += CONFIGURATION_SUFFIX
        return output

    def to_dict(self) -> dict[str, str | bool]:
        data: dict[str, str | bool] = {
            flag.field_name: result.value for flag, result in self.checks()
        }
        data["is_configuration"] = self.is_configuration
        data["status"] = self.to_string()
        return data

    def __str__(self) -> str:
        return self.to_string()
