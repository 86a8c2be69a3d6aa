"""Loading of inventory configuration files.

Every way a configuration can fail to load, from a missing file to a step
with the wrong fields, is reported as a ConfigError. Validation details name
the record they belong to by species, so a message reads
``items[1] (Walnut).steps[0].conditional.threshold`` rather than a bare index.
"""

import json
from enum import Enum
from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from lumberyard.application.config.schema import InventoryConfiguration

ROOT_LABEL = "(root)"


class ConfigErrorType(str, Enum):
    """Categories of configuration loading failures."""

    FILE_NOT_FOUND = "file_not_found"
    PERMISSION_DENIED = "permission_denied"
    FILE_READ_ERROR = "file_read_error"
    ENCODING = "encoding"
    JSON_PARSE = "json_parse"
    VALIDATION = "validation"


class ConfigError(Exception):
    """Raised when an inventory configuration cannot be loaded.

    Attributes:
        message: Human-readable summary.
        error_type: One of the ConfigErrorType values.
        path: Configuration file, when loading from disk.
        details: Structured detail dicts. Validation details carry ``path``,
            ``message``, ``value``, ``error_type`` and, where the failing
            location is inside a record, ``species``.
    """

    def __init__(
        self,
        message: str,
        error_type: ConfigErrorType,
        path: Path | None = None,
        details: list[dict[str, Any]] | None = None,
    ) -> None:
        self.message = message
        self.error_type = error_type
        self.path = path
        self.details = details or []
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


def _format_json_path(loc: tuple[str | int, ...]) -> str:
    """Format a Pydantic location tuple as a JSON path string.

    Examples:
        >>> _format_json_path(("items", 0, "species"))
        'items[0].species'
        >>> _format_json_path(())
        '(root)'
    """
    parts: list[str] = []
    for segment in loc:
        if isinstance(segment, int) and parts:
            parts[-1] = f"{parts[-1]}[{segment}]"
        elif isinstance(segment, int):
            parts.append(f"[{segment}]")
        else:
            parts.append(str(segment))
    return ".".join(parts) or ROOT_LABEL


def _species_at(data: Any, loc: tuple[str | int, ...]) -> str | None:
    """Return the species of the record a location points into, if known."""
    if len(loc) < 2 or loc[0] != "items" or not isinstance(loc[1], int):
        return None
    if not isinstance(data, dict) or not isinstance(data.get("items"), list):
        return None
    items = data["items"]
    if loc[1] >= len(items) or not isinstance(items[loc[1]], dict):
        return None
    species = items[loc[1]].get("species")
    return species if isinstance(species, str) else None


def _validation_details(
    error: PydanticValidationError, data: Any
) -> list[dict[str, Any]]:
    details: list[dict[str, Any]] = []
    for err in error.errors():
        detail: dict[str, Any] = {
            "path": _format_json_path(err["loc"]),
            "message": err["msg"],
            "value": err.get("input"),
            "error_type": err["type"],
        }
        species = _species_at(data, err["loc"])
        if species is not None:
            detail["species"] = species
        details.append(detail)
    return details


def _describe(detail: dict[str, Any]) -> str:
    location = detail["path"]
    if "species" in detail:
        head, _, rest = location.partition("]")
        location = f"{head}] ({detail['species']}){rest}"
    return location


def _validate(data: Any, path: Path | None = None) -> InventoryConfiguration:
    """Validate parsed data, wrapping pydantic errors in a ConfigError."""
    try:
        return InventoryConfiguration.model_validate(data)
    except PydanticValidationError as e:
        details = _validation_details(e, data)
        lines = ["Configuration validation failed:"]
        lines.extend(f"  - {_describe(d)}: {d['message']}" for d in details)
        raise ConfigError(
            message="\n".join(lines),
            error_type=ConfigErrorType.VALIDATION,
            path=path,
            details=details,
        ) from e


def _read_text(path: Path) -> str:
    """Read a configuration file as UTF-8 text."""
    if not path.exists():
        raise ConfigError(
            f"Config file not found: {path}", ConfigErrorType.FILE_NOT_FOUND, path
        )
    try:
        return path.read_text(encoding="utf-8")
    except PermissionError as e:
        raise ConfigError(
            f"Permission denied reading config file: {path}",
            ConfigErrorType.PERMISSION_DENIED,
            path,
        ) from e
    except UnicodeDecodeError as e:
        raise ConfigError(
            f"Config file is not valid UTF-8: {path} (byte {e.start}): {e.reason}",
            ConfigErrorType.ENCODING,
            path,
            details=[{"position": e.start, "message": e.reason}],
        ) from e
    except OSError as e:
        raise ConfigError(
            f"Error reading config file: {path}: {e}",
            ConfigErrorType.FILE_READ_ERROR,
            path,
        ) from e


def load_config(path: Path) -> InventoryConfiguration:
    """Load and validate an inventory configuration from a JSON file.

    Raises:
        ConfigError: If the file cannot be read, decoded, parsed or validated.
            ``error_type`` tells which of these steps failed.
    """
    content = _read_text(path)
    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise ConfigError(
            f"Invalid JSON in config file: {path} (line {e.lineno}, column {e.colno}): {e.msg}",
            ConfigErrorType.JSON_PARSE,
            path,
            details=[{"line": e.lineno, "column": e.colno, "message": e.msg}],
        ) from e
    return _validate(data, path)


def load_config_from_dict(data: dict[str, Any]) -> InventoryConfiguration:
    """Load and validate an inventory configuration from a dictionary.

    Raises:
        ConfigError: If the data fails validation.
    """
    return _validate(data)
