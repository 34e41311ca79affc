"""Default key builder implementation."""

import glob
from collections.abc import Mapping
from typing import Any

from atlasclient.utils.hashing import hash_value, serialize_params


class DefaultKeyBuilder:
    """Default key builder: operation name plus serialized parameters.

    Produces ``[prefix:]operation:<json>``. Parameter keys are sorted by
    default so logically identical queries share a key whatever order
    their options were given in.
    """

    def __init__(
        self,
        prefix: str | None = None,
        sort_keys: bool = True,
        hash_params: bool = False,
    ) -> None:
        """Initialize the key builder.

        Args:
            prefix: Optional namespace prepended to every key.
            sort_keys: Sort parameter keys before serializing. False keeps
                insertion order, so reordered bags miss the cache.
            hash_params: Replace the serialized bag with a short SHA-256
                digest to bound key length.
        """
        self._prefix = prefix
        self._sort_keys = sort_keys
        self._hash_params = hash_params

    def build(
        self,
        operation: str,
        params: Mapping[str, Any] | None = None,
    ) -> str:
        """Build unique cache key for one call of ``operation``.

        Args:
            operation: Logical operation name.
            params: The call's parameter bag.

        Returns:
            A unique string key for caching the operation result.
        """
        serialized = serialize_params(params, sort_keys=self._sort_keys)
        if self._hash_params:
            serialized = f"h:{hash_value(serialized)}"
        return f"{self._namespace(operation)}:{serialized}"

    def family_pattern(self, operation: str) -> str:
        """Return a glob matching every key built for ``operation``."""
        return f"{glob.escape(self._namespace(operation))}:*"

    def _namespace(self, operation: str) -> str:
        if self._prefix:
            return f"{self._prefix}:{operation}"
        return operation
