"""Conditional action that gates another action on the record's state."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..value_objects import PredicateKind
from .protocol import ProcessingAction
from .registry import action_registry

if TYPE_CHECKING:
    from ..entities import WoodRecord

logger = logging.getLogger(__name__)


@action_registry.register("wood.conditional")
@dataclass
class ConditionalAction:
    """Apply an inner action only when a predicate holds for the record.

    The wrapper owns its inner action. Inner actions may themselves be
    conditional, in which case every gate in the chain has to pass before
    the innermost action runs.

    Predicate kinds other than ``MoistureAbove`` never pass. They are
    accepted rather than rejected so that unknown kinds behave as a no-op.

    Attributes:
        inner: Action to delegate to when the predicate passes.
        predicate_kind: Kind of check to run, as an enum member or its value.
        threshold: Value the record is compared against.
    """

    inner: ProcessingAction
    predicate_kind: PredicateKind | str
    threshold: float

    def applies_to(self, record: WoodRecord) -> bool:
        """Evaluate the predicate against the record.

        Args:
            record: The record to test.

        Returns:
            True if the inner action should run.
        """
        if self.predicate_kind == PredicateKind.MOISTURE_ABOVE:
            # Strict: a record sitting exactly on the threshold does not pass
            return record.moisture_content > self.threshold
        logger.debug(f"Unknown predicate kind {self.predicate_kind!r}, skipping step")
        return False

    def apply(self, record: WoodRecord) -> None:
        if self.applies_to(record):
            self.inner.apply(record)
