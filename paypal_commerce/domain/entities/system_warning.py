"""System warning records shown on the admin system warnings page."""

from dataclasses import dataclass
from enum import Enum


class SystemWarningLevel(Enum):
    """Severity of a system warning."""

    PASS = "pass"
    RECOMMENDATION = "recommendation"
    COPYRIGHT_REMOVAL_KEY = "copyright_removal_key"
    WARNING = "warning"
    FAIL = "fail"


@dataclass(frozen=True, kw_only=True)
class SystemWarning:
    """One line on the system warnings page.

    Attributes:
        level: Severity.
        text: Message text.
        dont_encode: Render text as-is (HTML allowed) instead of encoding it.
    """

    level: SystemWarningLevel
    text: str
    dont_encode: bool = False
