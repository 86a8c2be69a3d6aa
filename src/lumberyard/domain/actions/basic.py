"""Unconditional processing actions: cutting, drying and treating."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..value_objects import DRYING_RETENTION_FACTOR
from .registry import action_registry

if TYPE_CHECKING:
    from ..entities import WoodRecord


@action_registry.register("wood.cut")
@dataclass
class CutAction:
    """Cut a board to length.

    The length is stored but not yet applied: cutting leaves the record
    untouched, including its thickness.

    Attributes:
        length: Requested cut length. Any value is accepted.
    """

    length: float

    def apply(self, record: WoodRecord) -> None:
        """Leave the record unchanged."""


@action_registry.register("wood.dry")
@dataclass
class DryAction:
    """Kiln-dry a board, keeping 80% of its current moisture content."""

    def apply(self, record: WoodRecord) -> None:
        record.moisture_content = record.moisture_content * DRYING_RETENTION_FACTOR


@action_registry.register("wood.treat")
@dataclass
class TreatAction:
    """Mark a board as treated."""

    def apply(self, record: WoodRecord) -> None:
        record.is_treated = True
