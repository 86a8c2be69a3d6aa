"""Domain layer - wood records, processing actions and the inventory."""

from .actions import (
    ActionRegistry,
    ConditionalAction,
    CutAction,
    DryAction,
    ProcessingAction,
    TreatAction,
    action_registry,
)
from .entities import Inventory, WoodRecord
from .value_objects import DRYING_RETENTION_FACTOR, PredicateKind

__all__ = [
    "ActionRegistry",
    "ConditionalAction",
    "CutAction",
    "DRYING_RETENTION_FACTOR",
    "DryAction",
    "Inventory",
    "PredicateKind",
    "ProcessingAction",
    "TreatAction",
    "WoodRecord",
    "action_registry",
]
