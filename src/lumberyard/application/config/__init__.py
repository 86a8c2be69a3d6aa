"""Configuration schema and loading for inventory files.

Public API:
    - InventoryConfiguration: Root configuration model
    - WoodRecordConfig: Single record configuration model
    - CutStepConfig, DryStepConfig, TreatStepConfig, ConditionalStepConfig:
      Processing step models
    - load_config: Load configuration from a JSON file
    - load_config_from_dict: Load configuration from a dictionary
    - ConfigError: Exception for configuration errors
    - ConfigErrorType: Categories of ConfigError
    - config_to_inventory: Convert configuration to a domain Inventory

Example:
    >>> from pathlib import Path
    >>> from lumberyard.application.config import load_config, ConfigError
    >>>
    >>> try:
    ...     config = load_config(Path("yard.json"))
    ...     print(f"{len(config.items)} records")
    ... except ConfigError as e:
    ...     print(f"Error: {e}")
"""

from lumberyard.application.config.adapter import (
    config_to_action,
    config_to_inventory,
    config_to_record,
)
from lumberyard.application.config.loader import (
    ConfigError,
    ConfigErrorType,
    load_config,
    load_config_from_dict,
)
from lumberyard.application.config.schema import (
    SUPPORTED_VERSIONS,
    ConditionalStepConfig,
    CutStepConfig,
    DryStepConfig,
    InventoryConfiguration,
    StepConfig,
    TreatStepConfig,
    WoodRecordConfig,
)

__all__ = [
    "ConditionalStepConfig",
    "ConfigError",
    "ConfigErrorType",
    "CutStepConfig",
    "DryStepConfig",
    "InventoryConfiguration",
    "StepConfig",
    "SUPPORTED_VERSIONS",
    "TreatStepConfig",
    "WoodRecordConfig",
    "config_to_action",
    "config_to_inventory",
    "config_to_record",
    "load_config",
    "load_config_from_dict",
]
