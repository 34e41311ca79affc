"""Client facade and the process-wide client instance."""

from dataclasses import fields
from typing import Any

from atlasclient.client.atlas_client import AtlasClient
from atlasclient.core.entities.client_config import ClientConfig

_client: AtlasClient | None = None


def create_atlas_client(config: ClientConfig | None = None, **kwargs: Any) -> AtlasClient:
    """Return the process-wide client, creating it on first use.

    Later calls update the existing client's configuration instead of
    building a second cache.

    Args:
        config: Client configuration; read from ``ATLAS_*`` environment
            variables when omitted.
        **kwargs: Passed to ``AtlasClient`` on creation.

    Returns:
        The shared AtlasClient.
    """
    global _client
    if config is None:
        config = ClientConfig.from_env()

    if _client is None:
        _client = AtlasClient(config, **kwargs)
    else:
        _client.update_config(**{f.name: getattr(config, f.name) for f in fields(config)})
    return _client


def get_atlas_client() -> AtlasClient | None:
    """Return the process-wide client, or None if not created yet."""
    return _client


def reset_atlas_client() -> None:
    """Forget the process-wide client."""
    global _client
    _client = None


__all__ = [
    "AtlasClient",
    "create_atlas_client",
    "get_atlas_client",
    "reset_atlas_client",
]
