"""Query string helpers."""

from collections.abc import Mapping
from typing import Any


def _render(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def build_query_params(params: Mapping[str, Any] | None) -> list[tuple[str, str]]:
    """Flatten a parameter bag into query string pairs.

    ``None`` values are skipped and lists/tuples are expanded into one
    pair per item, e.g. ``{"tags": ["a", "b"]}`` becomes
    ``tags=a&tags=b``.

    Args:
        params: Mapping of parameter names to values.

    Returns:
        Ordered ``(name, value)`` pairs accepted by httpx.
    """
    pairs: list[tuple[str, str]] = []
    for key, value in (params or {}).items():
        if value is None:
            continue
        if isinstance(value, (list, tuple)):
            pairs.extend((key, _render(item)) for item in value if item is not None)
        else:
            pairs.append((key, _render(value)))
    return pairs
