"""
Generation report - per-token failures recovered during a run.

Resolution failures never abort generation; each skipped declaration
is recorded here so callers can see what is missing from the output.
"""

from __future__ import annotations

from chuk_mcp_tokens.issues import IssueLog, IssueSeverity
from chuk_mcp_tokens.tokens.errors import ResolutionError


class GenerationReport(IssueLog):
    """Declarations dropped while generating one output."""

    empty_message = "Generation complete: nothing skipped"

    def record(self, error: ResolutionError, location: str) -> None:
        """Record a recovered resolution failure."""
        self.add(IssueSeverity.ERROR, error.code, str(error), location)

    def skip(self, code: str, message: str, location: str) -> None:
        """Record a block that was left out for a reason other than resolution."""
        self.add(IssueSeverity.ERROR, code, message, location)
