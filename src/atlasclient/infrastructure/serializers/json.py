"""JSON serializer for cached API responses."""

import json
from dataclasses import asdict, is_dataclass
from datetime import date, datetime
from typing import Any

from atlasclient.errors import AtlasError


class SerializationError(AtlasError):
    """A response could not be written to or read back from the cache."""

    default_code = "SERIALIZATION_ERROR"


def _encode_extra(obj: Any) -> Any:
    # Dates go out as ISO strings, the form the API itself returns.
    if isinstance(obj, (datetime, date)):
        return obj.isoformat()
    if is_dataclass(obj) and not isinstance(obj, type):
        return asdict(obj)
    raise TypeError(f"{type(obj).__name__} cannot be cached as JSON")


class JsonSerializer:
    """Stores responses as compact JSON.

    API responses are JSON on the wire already, so this loses nothing,
    and decoding gives every cache hit its own copy.
    """

    def __init__(self, encoding: str = "utf-8") -> None:
        self._encoding = encoding

    def serialize(self, value: Any) -> bytes:
        try:
            text = json.dumps(
                value,
                default=_encode_extra,
                ensure_ascii=False,
                separators=(",", ":"),
            )
        except (TypeError, ValueError) as e:
            raise SerializationError(
                f"Cannot cache response: {e}", details={"type": type(value).__name__}
            ) from e
        return text.encode(self._encoding)

    def deserialize(self, data: bytes) -> Any:
        try:
            return json.loads(data.decode(self._encoding))
        except (UnicodeDecodeError, json.JSONDecodeError) as e:
            raise SerializationError(f"Corrupt cache entry: {e}") from e
