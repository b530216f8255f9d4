"""hepmc2io: reader and writer for HepMC2 (IO_GenEvent) event files."""

from __future__ import annotations

__version__ = "0.1.0"

from .convert import convert, info, iter_events, read, write
from .errors import ErrorKind, LineParseError, ParseError
from .io import AsyncReader, AsyncWriter, Reader, Writer
from .models import (
    CrossSection,
    EnergyUnit,
    Event,
    FourVector,
    HeavyIonInfo,
    LengthUnit,
    Particle,
    PdfInfo,
    Vertex,
)

__all__ = [
    "__version__",
    "convert",
    "info",
    "iter_events",
    "read",
    "write",
    "ErrorKind",
    "LineParseError",
    "ParseError",
    "AsyncReader",
    "AsyncWriter",
    "Reader",
    "Writer",
    "CrossSection",
    "EnergyUnit",
    "Event",
    "FourVector",
    "HeavyIonInfo",
    "LengthUnit",
    "Particle",
    "PdfInfo",
    "Vertex",
]
