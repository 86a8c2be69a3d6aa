"""Pydantic models for inventory configuration files.

A configuration file lists wood records and the processing steps each one
owns. Steps are a discriminated union keyed on ``type``; conditional steps
wrap another step and may be nested.

Numeric fields are not range-checked and predicate kinds are not restricted
to the known set: an unknown predicate loads fine and simply never passes.
"""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Version 1.0: Initial schema with cut, dry, treat and conditional steps
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0"})


class CutStepConfig(BaseModel):
    """Configuration for a cut step.

    Attributes:
        type: Discriminator, always "cut".
        length: Requested cut length. Stored on the action, not applied.
    """

    model_config = ConfigDict(extra="forbid")

    type: Literal["cut"] = "cut"
    length: float


class DryStepConfig(BaseModel):
    """Configuration for a kiln drying step."""

    model_config = ConfigDict(extra="forbid")

    type: Literal["dry"] = "dry"


class TreatStepConfig(BaseModel):
    """Configuration for a treatment step."""

    model_config = ConfigDict(extra="forbid")

    type: Literal["treat"] = "treat"


class ConditionalStepConfig(BaseModel):
    """Configuration for a step gated on the record's state.

    Attributes:
        type: Discriminator, always "conditional".
        predicate: Predicate kind, e.g. "MoistureAbove".
        threshold: Value the record is compared against.
        action: The wrapped step, which may itself be conditional.
    """

    model_config = ConfigDict(extra="forbid")

    type: Literal["conditional"] = "conditional"
    predicate: str
    threshold: float
    action: StepConfig


StepConfig = Annotated[
    Union[CutStepConfig, DryStepConfig, TreatStepConfig, ConditionalStepConfig],
    Field(discriminator="type"),
]

ConditionalStepConfig.model_rebuild()


class WoodRecordConfig(BaseModel):
    """Configuration for a single wood record.

    Attributes:
        species: Wood species name.
        thickness: Board thickness in millimeters.
        moisture_content: Moisture content as a percentage.
        is_treated: Initial treatment state.
        steps: Processing steps in execution order.
    """

    model_config = ConfigDict(extra="forbid")

    species: str
    thickness: float
    moisture_content: float
    is_treated: bool = False
    steps: list[StepConfig] = Field(default_factory=list)


class InventoryConfiguration(BaseModel):
    """Root model of an inventory configuration file."""

    model_config = ConfigDict(extra="forbid")

    schema_version: str = "1.0"
    items: list[WoodRecordConfig] = Field(default_factory=list)

    @field_validator("schema_version")
    @classmethod
    def validate_schema_version(cls, v: str) -> str:
        if v not in SUPPORTED_VERSIONS:
            supported = ", ".join(sorted(SUPPORTED_VERSIONS))
            raise ValueError(
                f"Unsupported schema version '{v}'. Supported versions: {supported}"
            )
        return v
