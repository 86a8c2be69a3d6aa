"""Application commands (use cases) for inventory processing."""

from __future__ import annotations

import logging

from lumberyard.domain import Inventory

from .dtos import InventoryOutput, RecordSnapshot

logger = logging.getLogger(__name__)


class ProcessInventoryCommand:
    """Command to run every record's processing steps.

    Captures the state of each record before and after processing so the
    caller can report what changed without holding on to the inventory.
    """

    def execute(self, inventory: Inventory) -> InventoryOutput:
        """Process all records in the inventory.

        Args:
            inventory: The inventory to process in place.

        Returns:
            InventoryOutput with before and after snapshots in inventory order.
        """
        before = [RecordSnapshot.of(record) for record in inventory.get_items()]
        logger.debug(f"Processing {len(before)} records")

        inventory.process_all()

        after = [RecordSnapshot.of(record) for record in inventory.get_items()]
        output = InventoryOutput(before=before, after=after)
        logger.info(
            f"Processed {output.record_count} records, "
            f"{len(output.changed_records)} changed"
        )
        return output
