"""
Mode selector - picks which mode of a collection an alias reads.

When a token aliases into another collection that has several live
modes, something has to decide which one applies. The policy is
layered and evaluated in order:

1. A single-mode collection always uses its only mode.
2. Suppressed collections (``Color-categorical``) never resolve.
3. An explicit per-collection override (collection id -> mode id).
4. A named default (collection name -> mode name) from configuration.
5. Otherwise the mode is not found.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping

from chuk_mcp_tokens.constants import CATEGORICAL_COLLECTION, SelectionOutcome
from chuk_mcp_tokens.models.token import Collection, Mode

logger = logging.getLogger(__name__)


class ModeSelector:
    """
    Applies the mode selection policy.

    The named defaults table is injected, so each config (and each test)
    can bring its own without touching global state.
    """

    def __init__(
        self,
        named_defaults: Mapping[str, str] | None = None,
        suppressed: Iterable[str] = (CATEGORICAL_COLLECTION,),
    ):
        """
        Initialize the selector.

        Args:
            named_defaults: Collection name to preferred mode name
            suppressed: Collection names that are never resolved
        """
        self.named_defaults = dict(named_defaults or {})
        self.suppressed = frozenset(suppressed)

    def select(
        self,
        collection: Collection,
        overrides: Mapping[str, str] | None = None,
    ) -> Mode | SelectionOutcome:
        """
        Select the mode to read from a collection.

        Args:
            collection: Target collection
            overrides: Collection id to mode id chosen explicitly

        Returns:
            The selected Mode, SelectionOutcome.SUPPRESSED, or
            SelectionOutcome.NOT_FOUND
        """
        if len(collection.modes) == 1:
            return collection.modes[0]

        if collection.name in self.suppressed:
            return SelectionOutcome.SUPPRESSED

        if overrides and collection.id in overrides:
            mode = collection.get_mode_by_id(overrides[collection.id])
        elif collection.name in self.named_defaults:
            mode = collection.get_mode_by_name(self.named_defaults[collection.name])
        else:
            logger.debug("No override or default for %s", collection.name)
            mode = None

        if mode is None:
            return SelectionOutcome.NOT_FOUND
        return mode
