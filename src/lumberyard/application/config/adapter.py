"""Adapter converting validated configuration into domain objects."""

from __future__ import annotations

from lumberyard.application.config.schema import (
    ConditionalStepConfig,
    CutStepConfig,
    DryStepConfig,
    InventoryConfiguration,
    StepConfig,
    TreatStepConfig,
    WoodRecordConfig,
)
from lumberyard.domain import (
    ActionRegistry,
    Inventory,
    PredicateKind,
    ProcessingAction,
    WoodRecord,
    action_registry,
)


def config_to_inventory(
    config: InventoryConfiguration,
    registry: ActionRegistry = action_registry,
) -> Inventory:
    """Build an Inventory owning one record per configured item.

    Args:
        config: A validated inventory configuration.
        registry: Registry used to resolve action classes.

    Returns:
        An Inventory with records in configuration order.
    """
    inventory = Inventory()
    for item in config.items:
        inventory.add_item(config_to_record(item, registry))
    return inventory


def config_to_record(
    item: WoodRecordConfig,
    registry: ActionRegistry = action_registry,
) -> WoodRecord:
    """Convert a single WoodRecordConfig to a WoodRecord with its steps."""
    return WoodRecord(
        species=item.species,
        thickness=item.thickness,
        moisture_content=item.moisture_content,
        is_treated=item.is_treated,
        steps=[config_to_action(step, registry) for step in item.steps],
    )


def config_to_action(
    step: StepConfig,
    registry: ActionRegistry = action_registry,
) -> ProcessingAction:
    """Convert a step configuration to a processing action.

    Conditional steps are converted recursively, so every wrapper owns a
    freshly built inner action.
    """
    if isinstance(step, CutStepConfig):
        return registry.get("wood.cut")(length=step.length)
    if isinstance(step, DryStepConfig):
        return registry.get("wood.dry")()
    if isinstance(step, TreatStepConfig):
        return registry.get("wood.treat")()
    if isinstance(step, ConditionalStepConfig):
        return registry.get("wood.conditional")(
            inner=config_to_action(step.action, registry),
            predicate_kind=_to_predicate_kind(step.predicate),
            threshold=step.threshold,
        )
    raise TypeError(f"Unsupported step configuration: {type(step).__name__}")


def _to_predicate_kind(value: str) -> PredicateKind | str:
    # Unknown kinds are passed through as-is and never trigger
    try:
        return PredicateKind(value)
    except ValueError:
        return value
