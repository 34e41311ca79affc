"""Request executor interface."""

import asyncio
from typing import Any, Protocol

from atlasclient.core.entities.request import RequestDescriptor


class IRequestExecutor(Protocol):
    """Contract for performing one logical network operation.

    Implementations bound each attempt by a timeout, retry failures
    according to their policy and raise ``AtlasNetworkError`` once
    every attempt has failed.
    """

    async def execute(
        self,
        request: RequestDescriptor,
        *,
        cancel_event: asyncio.Event | None = None,
    ) -> Any:
        """Perform ``request`` and return the decoded JSON body.

        Args:
            request: The operation to perform.
            cancel_event: When set, aborts the whole retry loop.

        Returns:
            The parsed response body, or None for an empty body.
        """
        ...

    async def aclose(self) -> None:
        """Release network resources."""
        ...
