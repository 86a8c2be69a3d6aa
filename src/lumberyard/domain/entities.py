"""Domain entities for lumber inventory processing."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from .actions import ProcessingAction


class WoodRecord:
    """A unit of lumber and the processing steps it owns.

    Species and thickness are fixed at construction. Moisture content and
    treatment state change only when the record's steps are applied; their
    setters exist for the actions and are not meant for other callers.

    Attributes:
        species: Wood species, e.g. "Oak".
        thickness: Board thickness in millimeters.
        moisture_content: Moisture content as a percentage.
        is_treated: Whether the board has been treated.
        steps: The owned processing steps, in execution order.
    """

    def __init__(
        self,
        species: str,
        thickness: float,
        moisture_content: float,
        is_treated: bool = False,
        steps: Iterable[ProcessingAction] = (),
    ) -> None:
        self._species = species
        self._thickness = thickness
        self._moisture_content = moisture_content
        self._is_treated = is_treated
        # Copied so the caller's sequence cannot reorder or drop owned steps
        self._steps: list[ProcessingAction] = list(steps)

    @property
    def species(self) -> str:
        return self._species

    @property
    def thickness(self) -> float:
        return self._thickness

    @property
    def moisture_content(self) -> float:
        return self._moisture_content

    @moisture_content.setter
    def moisture_content(self, value: float) -> None:
        self._moisture_content = value

    @property
    def is_treated(self) -> bool:
        return self._is_treated

    @is_treated.setter
    def is_treated(self, value: bool) -> None:
        self._is_treated = value

    @property
    def steps(self) -> tuple[ProcessingAction, ...]:
        return tuple(self._steps)

    def process(self) -> None:
        """Apply every owned step to this record, in insertion order."""
        for step in self._steps:
            step.apply(self)

    def __repr__(self) -> str:
        return (
            f"WoodRecord(species={self._species!r}, thickness={self._thickness!r}, "
            f"moisture_content={self._moisture_content!r}, "
            f"is_treated={self._is_treated!r}, steps={self._steps!r})"
        )


class Inventory:
    """Ordered collection of wood records that are processed in bulk.

    Records are kept in insertion order and never removed.
    """

    def __init__(self) -> None:
        self._items: list[WoodRecord] = []

    def add_item(self, record: WoodRecord) -> None:
        """Take ownership of a record, appending it after existing items."""
        self._items.append(record)

    def get_items(self) -> tuple[WoodRecord, ...]:
        """Return the records in insertion order.

        The returned tuple is a snapshot for inspection; changing it does not
        add or remove records from the inventory.
        """
        return tuple(self._items)

    def process_all(self) -> None:
        """Process each record in insertion order."""
        for record in self._items:
            record.process()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[WoodRecord]:
        return iter(tuple(self._items))
