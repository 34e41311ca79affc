"""Cache key builder implementations."""

from atlasclient.infrastructure.key_builders.default import DefaultKeyBuilder

__all__ = ["DefaultKeyBuilder"]
