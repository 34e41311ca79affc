"""Request executor implementations."""

from atlasclient.infrastructure.executors.http import HttpRequestExecutor

__all__ = ["HttpRequestExecutor"]
