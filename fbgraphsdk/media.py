"""Media payloads for upload to the Graph API."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class FBMediaObject:
    """In-memory media: raw bytes with a content type and file name."""

    content_type: str | None = None
    file_name: str | None = None
    value: bytes | None = field(default=None)

    def with_value(self, value: bytes | bytearray | memoryview) -> FBMediaObject:
        """Store a copy of ``value`` and return self for chaining."""
        self.value = bytes(value)
        return self


@dataclass(frozen=True)
class FBMediaStream:
    """Media supplied as a readable stream with a file name."""

    file_name: str
    stream: Any