"""Output formatters for inventory processing results."""

from __future__ import annotations

import json
from dataclasses import asdict

from lumberyard.application.dtos import InventoryOutput


class InventoryReportFormatter:
    """Formats a processing run as a fixed-width text table."""

    def format(self, output: InventoryOutput) -> str:
        """Format the after-state of every record, with moisture before and after."""
        if not output.after:
            return "No records in inventory."

        lines = [
            "INVENTORY",
            "=" * 72,
            f"{'Species':<16} {'Thickness':<10} {'Moisture (%)':<22} {'Treated':<8} {'Steps'}",
            "-" * 72,
        ]
        for before, after in zip(output.before, output.after):
            moisture = f"{before.moisture_content:.2f} -> {after.moisture_content:.2f}"
            treated = "yes" if after.is_treated else "no"
            lines.append(
                f"{after.species:<16} {after.thickness:<10.2f} {moisture:<22} "
                f"{treated:<8} {after.step_count}"
            )
        lines.append("-" * 72)
        lines.append(
            f"{output.record_count} record(s), {len(output.changed_records)} changed"
        )
        return "\n".join(lines)


class InventoryJsonFormatter:
    """Formats a processing run as JSON."""

    def format(self, output: InventoryOutput) -> str:
        data = {
            "records": [
                {"before": asdict(before), "after": asdict(after)}
                for before, after in zip(output.before, output.after)
            ],
            "changed": output.changed_records,
        }
        return json.dumps(data, indent=2)
