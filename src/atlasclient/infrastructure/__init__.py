"""Infrastructure layer implementations for atlasclient."""

from atlasclient.infrastructure.backends import InMemoryCacheBackend
from atlasclient.infrastructure.executors import HttpRequestExecutor
from atlasclient.infrastructure.key_builders import DefaultKeyBuilder
from atlasclient.infrastructure.serializers import JsonSerializer, SerializationError

__all__ = [
    "InMemoryCacheBackend",
    "HttpRequestExecutor",
    "DefaultKeyBuilder",
    "JsonSerializer",
    "SerializationError",
]
