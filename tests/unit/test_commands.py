"""Unit tests for ProcessInventoryCommand and its output DTO."""

from __future__ import annotations

import logging

import pytest

from lumberyard.application import InventoryOutput, ProcessInventoryCommand, RecordSnapshot
from lumberyard.domain import Inventory, WoodRecord


class TestProcessInventoryCommand:
    """Tests for ProcessInventoryCommand.execute()."""

    def test_snapshots_before_and_after(self, mixed_inventory: Inventory) -> None:
        output = ProcessInventoryCommand().execute(mixed_inventory)
        assert [s.species for s in output.before] == ["Teak", "Walnut", "Pine"]
        assert [s.species for s in output.after] == ["Teak", "Walnut", "Pine"]
        assert output.before[0].moisture_content == 15.0
        assert output.after[0].moisture_content == pytest.approx(12.0)
        assert output.before[1].is_treated is False
        assert output.after[1].is_treated is True

    def test_processes_inventory_in_place(self, mixed_inventory: Inventory) -> None:
        ProcessInventoryCommand().execute(mixed_inventory)
        assert mixed_inventory.get_items()[1].is_treated is True

    def test_changed_records(self, mixed_inventory: Inventory) -> None:
        output = ProcessInventoryCommand().execute(mixed_inventory)
        assert output.changed_records == ["Teak", "Walnut"]
        assert output.record_count == 3

    def test_empty_inventory(self) -> None:
        output = ProcessInventoryCommand().execute(Inventory())
        assert output.record_count == 0
        assert output.changed_records == []

    def test_logs_summary(
        self, mixed_inventory: Inventory, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.INFO, logger="lumberyard.application.commands"):
            ProcessInventoryCommand().execute(mixed_inventory)
        assert "Processed 3 records, 2 changed" in caplog.text


class TestRecordSnapshot:
    """Tests for RecordSnapshot."""

    def test_of_copies_state(self) -> None:
        record = WoodRecord("Oak", 25.0, 12.5, True)
        snapshot = RecordSnapshot.of(record)
        assert snapshot == RecordSnapshot("Oak", 25.0, 12.5, True, 0)

    def test_snapshot_is_detached(self) -> None:
        record = WoodRecord("Oak", 25.0, 12.5, False)
        snapshot = RecordSnapshot.of(record)
        record.is_treated = True
        assert snapshot.is_treated is False


class TestInventoryOutput:
    """Tests for InventoryOutput."""

    def test_defaults(self) -> None:
        output = InventoryOutput()
        assert output.before == []
        assert output.after == []
        assert output.record_count == 0
