"""Serializer interface."""

from typing import Any, Protocol


class ISerializer(Protocol):
    """Turns decoded API responses into bytes for the cache and back.

    Decoding must build new objects each time; callers are allowed to
    mutate what they get from the cache.
    """

    def serialize(self, value: Any) -> bytes:
        """Encode a response for storage; raises SerializationError."""
        ...

    def deserialize(self, data: bytes) -> Any:
        """Rebuild a stored response; raises SerializationError."""
        ...
