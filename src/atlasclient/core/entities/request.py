"""Request descriptor entity."""

from dataclasses import dataclass, field
from typing import Any

IDEMPOTENT_METHODS = frozenset({"GET", "HEAD", "OPTIONS"})


@dataclass(frozen=True)
class RequestDescriptor:
    """One logical HTTP operation.

    Attributes:
        method: HTTP verb, upper-cased on creation.
        url: Absolute address of the endpoint.
        params: Query parameters; ``None`` values are dropped.
        json: Optional JSON body.
        files: Optional multipart files in httpx's ``files`` form,
            e.g. ``{"file": ("cv.pdf", data, "application/pdf")}``.
        headers: Extra headers merged over the executor defaults.
        retry: Force (True) or forbid (False) retries. None means
            retry only idempotent methods unless the policy allows writes.
    """

    method: str
    url: str
    params: dict[str, Any] | None = None
    json: Any | None = None
    files: dict[str, Any] | None = None
    headers: dict[str, str] = field(default_factory=dict)
    retry: bool | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "method", self.method.upper())

    @property
    def is_idempotent(self) -> bool:
        return self.method in IDEMPOTENT_METHODS

    @classmethod
    def get(cls, url: str, params: dict[str, Any] | None = None) -> "RequestDescriptor":
        return cls("GET", url, params=params)

    @classmethod
    def post(cls, url: str, json: Any | None = None) -> "RequestDescriptor":
        return cls("POST", url, json=json)

    @classmethod
    def put(cls, url: str, json: Any | None = None) -> "RequestDescriptor":
        return cls("PUT", url, json=json)

    @classmethod
    def delete(cls, url: str) -> "RequestDescriptor":
        return cls("DELETE", url)

    @classmethod
    def upload(cls, url: str, files: dict[str, Any]) -> "RequestDescriptor":
        """Multipart POST."""
        return cls("POST", url, files=files)
