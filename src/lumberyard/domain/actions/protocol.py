"""Protocol definition for processing actions."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ..entities import WoodRecord


class ProcessingAction(Protocol):
    """Protocol for a single processing step applied to a wood record.

    Actions mutate the record they are handed and nothing else. They have no
    error channel: ``apply`` must not raise for any record it is given.

    Actions are registered with the ActionRegistry using an action ID
    that follows the format 'category.type' or 'category.type.variant'.

    Example:
        @action_registry.register("wood.sand")
        class SandAction:
            def apply(self, record: WoodRecord) -> None:
                ...
    """

    def apply(self, record: WoodRecord) -> None:
        """Apply this step to the record in place.

        Args:
            record: The record to mutate.
        """
        ...
