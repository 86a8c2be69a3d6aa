"""Action registry for looking up processing action types by ID."""

from __future__ import annotations

from typing import Callable, TypeVar

T = TypeVar("T", bound=type)


class ActionRegistry:
    """Registry of processing action types.

    Maps action IDs to the classes implementing them, so that declarative
    configuration can name an action without importing it. Action IDs must
    follow the format 'category.type' or 'category.type.variant':
    - 'wood.dry' - Kiln drying
    - 'wood.conditional' - A step gated on the record's state

    Example:
        @action_registry.register("wood.treat")
        class TreatAction:
            def apply(self, record):
                ...

        # Later, retrieve the action class
        treat_cls = action_registry.get("wood.treat")
        action = treat_cls()
    """

    def __init__(self) -> None:
        self._actions: dict[str, type] = {}

    def register(self, action_id: str) -> Callable[[T], T]:
        """Decorator to register an action class.

        Args:
            action_id: Unique identifier for the action type.

        Returns:
            A decorator function that registers the class and returns it unchanged.

        Raises:
            ValueError: If action_id is already registered or has invalid format.
        """

        def decorator(cls: T) -> T:
            if action_id in self._actions:
                raise ValueError(f"Action '{action_id}' already registered")
            self._validate_id(action_id)
            self._actions[action_id] = cls
            return cls

        return decorator

    def get(self, action_id: str) -> type:
        """Get an action class by ID.

        Raises:
            KeyError: If no action is registered with the given ID.
        """
        if action_id not in self._actions:
            raise KeyError(f"Unknown action: {action_id}")
        return self._actions[action_id]

    def list(self) -> list[str]:
        """List all registered action IDs, sorted."""
        return sorted(self._actions.keys())

    def __contains__(self, action_id: object) -> bool:
        return action_id in self._actions

    def _validate_id(self, action_id: str) -> None:
        parts = action_id.split(".")
        if len(parts) < 2 or len(parts) > 3:
            raise ValueError(
                f"Invalid action ID '{action_id}': "
                "must be 'category.type' or 'category.type.variant'"
            )


# Shared instance holding the built-in actions
action_registry = ActionRegistry()
