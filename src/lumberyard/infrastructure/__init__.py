"""Infrastructure layer - output formatting."""

from .formatters import InventoryJsonFormatter, InventoryReportFormatter

__all__ = [
    "InventoryJsonFormatter",
    "InventoryReportFormatter",
]
