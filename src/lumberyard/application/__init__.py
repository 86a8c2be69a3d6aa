"""Application layer - use cases and orchestration."""

from .commands import ProcessInventoryCommand
from .dtos import InventoryOutput, RecordSnapshot

__all__ = [
    "InventoryOutput",
    "ProcessInventoryCommand",
    "RecordSnapshot",
]
