"""
Issues - findings tied to a place in the token graph.

Document validation and generation runs both report problems located at
``collection/mode/token``. Every finding carries a stable code, so tools
and callers match on codes instead of parsing messages.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class IssueSeverity(str, Enum):
    """How much of the generated output an issue affects."""

    ERROR = "error"  # Declarations are (or will be) dropped
    WARNING = "warning"  # Output is complete but may surprise
    INFO = "info"


@dataclass(frozen=True)
class Issue:
    """One finding."""

    severity: IssueSeverity
    code: str
    message: str
    location: str | None = None

    def __str__(self) -> str:
        where = f" ({self.location})" if self.location else ""
        return f"{self.severity.value}: {self.code} {self.message}{where}"

    def to_dict(self) -> dict[str, Any]:
        """Tool-facing shape, severity implied by the list it is in."""
        return {"code": self.code, "message": self.message, "location": self.location}


class IssueLog:
    """
    Findings in the order they were raised.

    Truthy when nothing is an error; warnings and info never make a
    log falsy.
    """

    empty_message = "No issues"

    def __init__(self) -> None:
        self.issues: list[Issue] = []

    def add(
        self,
        severity: IssueSeverity,
        code: str,
        message: str,
        location: str | None = None,
    ) -> Issue:
        issue = Issue(severity, code, message, location)
        self.issues.append(issue)
        return issue

    def of(self, severity: IssueSeverity) -> list[Issue]:
        """Findings of one severity."""
        return [i for i in self.issues if i.severity is severity]

    @property
    def errors(self) -> list[Issue]:
        return self.of(IssueSeverity.ERROR)

    @property
    def warnings(self) -> list[Issue]:
        return self.of(IssueSeverity.WARNING)

    def codes(self) -> list[str]:
        return [i.code for i in self.issues]

    def __bool__(self) -> bool:
        return not self.errors

    def __str__(self) -> str:
        if not self.issues:
            return self.empty_message
        return "\n".join(str(issue) for issue in self.issues)
