"""Processing actions applied to wood records.

Importing this package registers the built-in actions with
``action_registry``.
"""

from .basic import CutAction, DryAction, TreatAction
from .conditional import ConditionalAction
from .protocol import ProcessingAction
from .registry import ActionRegistry, action_registry

__all__ = [
    "ActionRegistry",
    "ConditionalAction",
    "CutAction",
    "DryAction",
    "ProcessingAction",
    "TreatAction",
    "action_registry",
]
