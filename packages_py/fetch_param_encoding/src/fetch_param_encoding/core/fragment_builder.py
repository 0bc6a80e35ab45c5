"""
Binary fragment builder for multipart/form-data payloads.
"""
from typing import Optional

from ..config import CRLF


def content_disposition(name: str, filename: Optional[str] = None) -> str:
    """Build a form-data Content-Disposition header value."""
    value = f'form-data; name="{name}"'
    if filename is not None:
        value = f'{value}; filename="{filename}"'
    return value


class MultipartFragmentBuilder:
    """
    Accumulates multipart framing and payload bytes.

    Every ``append_*`` method returns the builder so calls can be chained:

        fragment = (
            MultipartFragmentBuilder()
            .append_header("Content-Type", "text/plain")
            .append_blank_line()
            .append_payload(b"hi")
            .build()
        )
    """

    def __init__(self) -> None:
        self._buffer = bytearray()

    def __len__(self) -> int:
        return len(self._buffer)

    def append_boundary(self, boundary: str) -> "MultipartFragmentBuilder":
        """Append a delimiter line: ``--<boundary>\\r\\n``."""
        self._buffer += b"--" + boundary.encode("utf-8") + CRLF
        return self

    def append_header(self, name: str, value: str) -> "MultipartFragmentBuilder":
        """Append a ``Name: value\\r\\n`` header line."""
        self._buffer += f"{name}: {value}".encode("utf-8") + CRLF
        return self

    def append_blank_line(self) -> "MultipartFragmentBuilder":
        """Terminate a header block."""
        self._buffer += CRLF
        return self

    def append_payload(self, payload: bytes) -> "MultipartFragmentBuilder":
        self._buffer += payload
        return self

    def append_crlf(self) -> "MultipartFragmentBuilder":
        self._buffer += CRLF
        return self

    def append_part(self, boundary: str, part: bytes) -> "MultipartFragmentBuilder":
        """Append one framed section: delimiter, rendered part, trailing CRLF."""
        return self.append_boundary(boundary).append_payload(part).append_crlf()

    def build(self) -> bytes:
        """Return the accumulated bytes."""
        return bytes(self._buffer)
