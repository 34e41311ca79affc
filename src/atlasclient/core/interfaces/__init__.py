"""Core interfaces (Protocol classes) for atlasclient."""

from atlasclient.core.interfaces.cache_backend import ICacheBackend
from atlasclient.core.interfaces.key_builder import IKeyBuilder
from atlasclient.core.interfaces.request_executor import IRequestExecutor
from atlasclient.core.interfaces.serializer import ISerializer

__all__ = [
    "ICacheBackend",
    "IKeyBuilder",
    "IRequestExecutor",
    "ISerializer",
]
