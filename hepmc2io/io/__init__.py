from __future__ import annotations

from .reader import AsyncReader, EventAssembler, Reader
from .writer import DEFAULT_HEADER, FOOTER, AsyncWriter, Writer, format_event

__all__ = [
    "AsyncReader",
    "AsyncWriter",
    "DEFAULT_HEADER",
    "EventAssembler",
    "FOOTER",
    "Reader",
    "Writer",
    "format_event",
]
