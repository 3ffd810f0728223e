"""
Name normalization - token names to CSS custom property identifiers.

Token names are hierarchical labels such as ``Color/Primary/On-Surface``.
The normalized form is a lower-case, dash-delimited ``--`` identifier.
"""

from __future__ import annotations

import re

_ON_PATTERN = re.compile(r"^.*-on-(.*)$")
_INTEGRATION_PATTERN = re.compile(r"^.*-integration-(.*)$")


def normalize_name(name: str) -> str:
    """
    Convert a token name to a CSS custom property identifier.

    Applies, in order: lower-casing, separator replacement, stripping of
    ``&``, ``(`` and ``)``, collapsing of doubled dashes, removal of the
    ``styles-`` prefix, the state-on-color contraction
    (``button-on-primary`` -> ``on-primary``, skipped for
    ``...-integration-...`` names) and dropping a leading ``color``
    segment.

    Not idempotent: apply once to a raw token name only.

    Args:
        name: Raw token name

    Returns:
        Identifier starting with ``--``

    Example:
        normalize_name("Color/Primary/On-Surface")  # "--on-surface"
    """
    normalized = (
        name.lower()
        .replace("/", "-")
        .replace(" ", "-")
        .replace("&", "")
        .replace("(", "")
        .replace(")", "")
        .replace("--", "-")
        .replace("styles-", "")
    )

    if _ON_PATTERN.match(normalized) and not _INTEGRATION_PATTERN.match(normalized):
        match = _ON_PATTERN.match(normalized)
        if match:
            normalized = "on-" + match.group(1)

    parts = normalized.split("-")
    if len(parts) > 1 and parts[0] == "color":
        parts.pop(0)

    return "--" + "-".join(parts)


def strip_custom_property_prefix(identifier: str) -> str:
    """Drop the first ``--`` from an identifier, for JSON name maps."""
    return identifier.replace("--", "", 1)
