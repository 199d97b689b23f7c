"""
Table definition validation split into focused validators.

``validate_*`` functions collect warnings without raising; ``parse_*``
functions raise on structural errors.
"""

from typing import Any

from ..api.models import TableConfig
from ..engine.selection import check_weight
from .defaults import DEFAULT_TABLE_NAME

ALLOWED_TOP_LEVEL = {"metadata", "entries"}
ALLOWED_METADATA = {"name", "seed", "description"}
ALLOWED_ENTRY = {"value", "weight"}


def validate_metadata(metadata: dict[str, Any]) -> list[str]:
    """Validate metadata section of a table definition.

    Args:
        metadata: The metadata dictionary from config

    Returns:
        List of warning messages
    """
    warnings = []

    for key in sorted(set(metadata) - ALLOWED_METADATA):
        warnings.append(f"metadata.{key} is not a recognized key")

    name = metadata.get("name")
    if name is not None and (not isinstance(name, str) or not name.strip()):
        warnings.append("metadata.name must be a non-empty string")

    seed = metadata.get("seed")
    if seed is not None:
        try:
            int(seed)
        except (TypeError, ValueError):
            warnings.append("metadata.seed must be an integer")

    return warnings


def validate_entries(entries: list[Any]) -> list[str]:
    """Validate the entries list without raising.

    Args:
        entries: Raw entry mappings from config

    Returns:
        List of warning messages
    """
    warnings = []
    seen = []

    for idx, entry in enumerate(entries):
        if not isinstance(entry, dict):
            warnings.append(f"entries[{idx}] must be a mapping")
            continue
        for key in sorted(set(entry) - ALLOWED_ENTRY):
            warnings.append(f"entries[{idx}].{key} is not a recognized key")

        value = entry.get("value")
        if value in seen:
            warnings.append(
                f"entries[{idx}] repeats value {value!r}; the later weight wins"
            )
        else:
            seen.append(value)

        if entry.get("weight") == 0:
            warnings.append(
                f"entries[{idx}] has weight 0 and is never picked by weighted draws"
            )

    return warnings


def parse_weight(value: Any, where: str) -> int:
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    try:
        return check_weight(value)
    except (TypeError, ValueError) as exc:
        raise type(exc)(f"{where}: {exc}") from None


def parse_table_config(config: dict[str, Any]) -> TableConfig:
    """Turn a loaded config mapping into a ``TableConfig``.

    Raises:
        ValueError: when required sections are missing or malformed
        TypeError: when a weight is not an integer
    """
    if not isinstance(config, dict):
        raise ValueError("Table config must be a mapping")

    warnings = [
        f"{key} is not a recognized top-level key"
        for key in sorted(set(config) - ALLOWED_TOP_LEVEL)
    ]

    metadata = config.get("metadata")
    if metadata is None:
        metadata = {}
    if not isinstance(metadata, dict):
        raise ValueError("metadata must be a mapping")
    warnings.extend(validate_metadata(metadata))

    entries = config.get("entries")
    if entries is None:
        raise ValueError("Table config requires an 'entries' list")
    if not isinstance(entries, list):
        raise ValueError("entries must be a list")
    warnings.extend(validate_entries(entries))

    pairs = []
    for idx, entry in enumerate(entries):
        if not isinstance(entry, dict):
            raise ValueError(f"entries[{idx}] must be a mapping")
        if "value" not in entry:
            raise ValueError(f"entries[{idx}] is missing 'value'")
        if "weight" not in entry:
            raise ValueError(f"entries[{idx}] is missing 'weight'")
        pairs.append(
            (entry["value"], parse_weight(entry["weight"], f"entries[{idx}].weight"))
        )

    name = metadata.get("name")
    if not isinstance(name, str) or not name.strip():
        name = DEFAULT_TABLE_NAME

    seed = metadata.get("seed")
    try:
        seed = None if seed is None else int(seed)
    except (TypeError, ValueError):
        seed = None

    return TableConfig(
        name=name.strip(),
        seed=seed,
        entries=tuple(pairs),
        warnings=tuple(warnings),
    )
