"""
Type definitions for fetch_param_encoding.
"""
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Callable, Mapping, Optional, Protocol, Union

import httpx


# Boundary token factory used by multipart encoding
BoundaryFactory = Callable[[], str]

URLTypes = Union[str, httpx.URL]
BodyTypes = Union[str, bytes]


class Serializer(Protocol):
    """Serializer protocol for custom JSON handling."""

    def serialize(self, data: Any) -> bytes:
        """Serialize data to compact JSON bytes."""
        ...

    def serialize_pretty(self, data: Any, indent: int = 2) -> str:
        """Serialize data to indented JSON text."""
        ...

    def deserialize(self, text: Union[str, bytes]) -> Any:
        """Deserialize JSON to data."""
        ...


class ParameterEncodingErrorCode(str, Enum):
    """Error kinds raised while encoding parameters."""

    MULTIPART_NAME_MISSING = "multipart_name_missing"


class ParameterEncodingError(Exception):
    """Raised when parameters cannot be encoded into a request."""

    def __init__(self, code: ParameterEncodingErrorCode, message: Optional[str] = None):
        self.code = code
        super().__init__(message or code.value)

    @classmethod
    def multipart_name_missing(cls, part: Optional[str] = None) -> "ParameterEncodingError":
        message = "multipart part has no name for Content-Disposition"
        if part:
            message = f"{message}: {part}"
        return cls(ParameterEncodingErrorCode.MULTIPART_NAME_MISSING, message)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ParameterEncodingError):
            return NotImplemented
        return self.code is other.code

    def __hash__(self) -> int:
        return hash(self.code)

    def __repr__(self) -> str:
        return f"ParameterEncodingError(code={self.code.value!r})"


@dataclass(frozen=True)
class OutboundRequest:
    """Outbound request representation: URL, headers and body.

    Instances are never mutated. Every ``with_*`` method returns a new
    request with its own copy of the headers.
    """

    url: Optional[httpx.URL] = None
    headers: httpx.Headers = field(default_factory=httpx.Headers)
    body: Optional[bytes] = None

    @classmethod
    def create(
        cls,
        url: Optional[URLTypes] = None,
        headers: Optional[Mapping[str, str]] = None,
        body: Optional[BodyTypes] = None,
    ) -> "OutboundRequest":
        """Create a request, normalizing URL, headers and body types."""
        if isinstance(body, str):
            body = body.encode("utf-8")
        return cls(
            url=httpx.URL(url) if url is not None else None,
            headers=httpx.Headers(headers or {}),
            body=body,
        )

    def header(self, name: str) -> Optional[str]:
        """Get a header value (case-insensitive)."""
        return self.headers.get(name)

    def with_url(self, url: Optional[URLTypes]) -> "OutboundRequest":
        return replace(
            self,
            url=httpx.URL(url) if url is not None else None,
            headers=self.headers.copy(),
        )

    def with_header(self, name: str, value: str) -> "OutboundRequest":
        headers = self.headers.copy()
        headers[name] = value
        return replace(self, headers=headers)

    def with_headers(self, headers: Mapping[str, str]) -> "OutboundRequest":
        merged = self.headers.copy()
        for name, value in headers.items():
            merged[name] = value
        return replace(self, headers=merged)

    def with_body(self, body: Optional[BodyTypes]) -> "OutboundRequest":
        if isinstance(body, str):
            body = body.encode("utf-8")
        return replace(self, headers=self.headers.copy(), body=body)
