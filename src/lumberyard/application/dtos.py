"""Data Transfer Objects for the application layer."""

from __future__ import annotations

from dataclasses import dataclass, field

from lumberyard.domain import WoodRecord


@dataclass(frozen=True)
class RecordSnapshot:
    """Point-in-time copy of a record's observable state."""

    species: str
    thickness: float
    moisture_content: float
    is_treated: bool
    step_count: int

    @classmethod
    def of(cls, record: WoodRecord) -> RecordSnapshot:
        return cls(
            species=record.species,
            thickness=record.thickness,
            moisture_content=record.moisture_content,
            is_treated=record.is_treated,
            step_count=len(record.steps),
        )


@dataclass
class InventoryOutput:
    """Output DTO for a processing run.

    Attributes:
        before: Snapshots taken before processing, in inventory order.
        after: Snapshots taken after processing, in inventory order.
    """

    before: list[RecordSnapshot] = field(default_factory=list)
    after: list[RecordSnapshot] = field(default_factory=list)

    @property
    def record_count(self) -> int:
        return len(self.after)

    @property
    def changed_records(self) -> list[str]:
        """Species of records whose moisture or treatment state changed."""
        return [
            after.species
            for before, after in zip(self.before, self.after)
            if before.moisture_content != after.moisture_content
            or before.is_treated != after.is_treated
        ]
