"""Cache backend implementations."""

from atlasclient.infrastructure.backends.memory import InMemoryCacheBackend

__all__ = ["InMemoryCacheBackend"]
