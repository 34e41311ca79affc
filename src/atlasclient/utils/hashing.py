"""Serialization and hashing utilities for cache key generation."""

import hashlib
import json
from collections.abc import Mapping
from enum import Enum
from typing import Any


def normalize_value(value: Any) -> Any:
    """Reduce a parameter value to plain JSON structures.

    Sets become sorted lists, tuples become lists and enums their values,
    recursively. Everything else is left for ``json.dumps``.
    """
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, Mapping):
        return {str(k): normalize_value(v) for k, v in value.items()}
    if isinstance(value, (set, frozenset)):
        return sorted((normalize_value(v) for v in value), key=repr)
    if isinstance(value, (list, tuple)):
        return [normalize_value(v) for v in value]
    return value


def serialize_params(params: Mapping[str, Any] | None, sort_keys: bool = True) -> str:
    """Serialize a parameter bag to a compact, deterministic JSON string.

    Top-level ``None`` values are dropped so an omitted option and an
    explicit ``None`` produce the same string.

    Args:
        params: Shallow mapping of primitives, lists and nested mappings.
        sort_keys: Sort mapping keys at every level.

    Returns:
        The JSON text; ``{}`` for a missing or empty bag.
    """
    pruned = {k: v for k, v in (params or {}).items() if v is not None}
    return json.dumps(
        normalize_value(pruned),
        sort_keys=sort_keys,
        separators=(",", ":"),
        default=str,
    )


def hash_value(value: Any) -> str:
    """Create a deterministic hash of a value.

    Args:
        value: Any JSON-serializable value.

    Returns:
        A hexadecimal hash string (first 16 chars of SHA-256).
    """
    if value is None:
        return "none"

    # Normalize to JSON with sorted keys for determinism
    normalized = json.dumps(normalize_value(value), sort_keys=True, default=str)
    return hashlib.sha256(normalized.encode()).hexdigest()[:16]
