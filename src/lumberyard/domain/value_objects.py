"""Value objects and constants for lumber processing."""

from enum import Enum

# Share of the current moisture content a board keeps after one drying pass
DRYING_RETENTION_FACTOR = 0.8


class PredicateKind(str, Enum):
    """Kinds of runtime checks a conditional step can gate on.

    Attributes:
        MOISTURE_ABOVE: Passes when the record's moisture content is strictly
            greater than the step's threshold.
    """

    MOISTURE_ABOVE = "MoistureAbove"
