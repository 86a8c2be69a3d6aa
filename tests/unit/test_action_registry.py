"""Tests for ActionRegistry and built-in action registration."""

from __future__ import annotations

import pytest

from lumberyard.domain import (
    ActionRegistry,
    ConditionalAction,
    CutAction,
    DryAction,
    TreatAction,
    WoodRecord,
    action_registry,
)


class TestBuiltinRegistrations:
    """The shared registry knows every built-in action."""

    def test_lists_builtin_ids(self) -> None:
        assert action_registry.list() == [
            "wood.conditional",
            "wood.cut",
            "wood.dry",
            "wood.treat",
        ]

    @pytest.mark.parametrize(
        ("action_id", "cls"),
        [
            ("wood.cut", CutAction),
            ("wood.dry", DryAction),
            ("wood.treat", TreatAction),
            ("wood.conditional", ConditionalAction),
        ],
    )
    def test_get_returns_class(self, action_id: str, cls: type) -> None:
        assert action_registry.get(action_id) is cls

    def test_contains(self) -> None:
        assert "wood.dry" in action_registry
        assert "wood.sand" not in action_registry


class TestRegistration:
    """Tests for registering actions on a fresh registry."""

    @pytest.fixture
    def registry(self) -> ActionRegistry:
        return ActionRegistry()

    def test_register_with_decorator(self, registry: ActionRegistry) -> None:
        """Decorated classes are returned unchanged and become retrievable."""

        @registry.register("wood.sand")
        class SandAction:
            def apply(self, record: WoodRecord) -> None:
                pass

        assert registry.get("wood.sand") is SandAction
        assert registry.list() == ["wood.sand"]

    def test_three_part_id_allowed(self, registry: ActionRegistry) -> None:
        """IDs may carry a variant suffix."""
        registry.register("wood.dry.air")(DryAction)
        assert registry.get("wood.dry.air") is DryAction

    def test_duplicate_id_rejected(self, registry: ActionRegistry) -> None:
        registry.register("wood.dry")(DryAction)
        with pytest.raises(ValueError, match="already registered"):
            registry.register("wood.dry")(DryAction)

    @pytest.mark.parametrize("bad_id", ["dry", "a.b.c.d", ""])
    def test_invalid_id_rejected(self, registry: ActionRegistry, bad_id: str) -> None:
        with pytest.raises(ValueError, match="Invalid action ID"):
            registry.register(bad_id)(DryAction)

    def test_unknown_id_raises_key_error(self, registry: ActionRegistry) -> None:
        with pytest.raises(KeyError, match="Unknown action"):
            registry.get("wood.plane")

    def test_fresh_registry_is_independent(self, registry: ActionRegistry) -> None:
        """Registering on a new instance leaves the shared registry alone."""
        registry.register("wood.oil")(TreatAction)
        assert "wood.oil" not in action_registry
