"""HepMC2 writer.

Records are rendered by plain functions returning text, shared by the
blocking :class:`Writer` and the asyncio :class:`AsyncWriter`. Floats are
written with :func:`~hepmc2io.numeric.format_float`, so reading the output
back gives bit-identical values.

Example:
    >>> with open("events.hepmc2", "wb") as f, Writer(f) as writer:
    ...     for event in events:
    ...         writer.write(event)
"""

from __future__ import annotations

import io
import logging
from typing import Any, Iterable

from ..models import CrossSection, Event, HeavyIonInfo, Particle, PdfInfo, Vertex
from ..numeric import format_float

logger = logging.getLogger(__name__)

DEFAULT_HEADER = "HepMC::Version 2.06.09\nHepMC::IO_GenEvent-START_EVENT_LISTING\n"
FOOTER = "HepMC::IO_GenEvent-END_EVENT_LISTING\n"


def _record(prefix: str, *fields: Any) -> str:
    parts = [prefix]
    for value in fields:
        parts.append(format_float(value) if isinstance(value, float) else str(value))
    return " ".join(parts) + "\n"


def _floats(values: Iterable[float]) -> list[float]:
    return [float(v) for v in values]


def format_event_line(event: Event) -> str:
    # the two zeros stand in for the beam particle barcodes
    return _record(
        "E",
        event.number,
        event.mpi,
        float(event.scale),
        float(event.alpha_qcd),
        float(event.alpha_qed),
        event.signal_process_id,
        event.signal_process_vertex,
        len(event.vertices),
        0,
        0,
        len(event.random_states),
        *event.random_states,
        len(event.weights),
        *_floats(event.weights),
    )


def format_weight_names_line(names: list[str]) -> str:
    return _record("N", len(names), *(f'"{name}"' for name in names))


def format_units_line(event: Event) -> str:
    return _record("U", event.energy_unit.value, event.length_unit.value)


def format_cross_section_line(xs: CrossSection) -> str:
    return _record("C", float(xs.cross_section), float(xs.cross_section_error))


def format_pdf_info_line(pdf: PdfInfo) -> str:
    return _record(
        "F",
        *pdf.parton_id,
        *_floats(pdf.x),
        float(pdf.scale),
        *_floats(pdf.xf),
        *pdf.pdf_id,
    )


def format_heavy_ion_line(hi: HeavyIonInfo) -> str:
    return _record(
        "H",
        hi.ncoll_hard,
        hi.npart_proj,
        hi.npart_targ,
        hi.ncoll,
        hi.spectator_neutrons,
        hi.spectator_protons,
        hi.n_nwounded_collisions,
        hi.nwounded_n_collisions,
        hi.nwounded_nwounded_collisions,
        float(hi.impact_parameter),
        float(hi.event_plane_angle),
        float(hi.eccentricity),
        float(hi.sigma_inel_nn),
    )


def format_vertex_line(vertex: Vertex) -> str:
    return _record(
        "V",
        vertex.barcode,
        vertex.status,
        *_floats((vertex.x, vertex.y, vertex.z, vertex.t)),
        len(vertex.particles_in),
        len(vertex.particles_out),
        len(vertex.weights),
        *_floats(vertex.weights),
    )


def format_particle_line(particle: Particle) -> str:
    p = particle.p
    flows = []
    for idx in sorted(particle.flows):
        flows += [idx, particle.flows[idx]]
    return _record(
        "P",
        particle.barcode,
        particle.id,
        *_floats((p[1], p[2], p[3], p[0], particle.m)),
        particle.status,
        float(particle.theta),
        float(particle.phi),
        particle.end_vtx,
        len(particle.flows),
        *flows,
    )


def format_event(event: Event) -> str:
    """All records of one event, in file order."""
    lines = [format_event_line(event)]
    if event.weight_names:
        lines.append(format_weight_names_line(event.weight_names))
    lines.append(format_units_line(event))
    lines.append(format_cross_section_line(event.xs))
    lines.append(format_pdf_info_line(event.pdf_info))
    if event.heavy_ion_info is not None:
        lines.append(format_heavy_ion_line(event.heavy_ion_info))
    for vertex in event.vertices:
        lines.append(format_vertex_line(vertex))
        for particle in vertex.particles_in:
            lines.append(format_particle_line(particle))
        for particle in vertex.particles_out:
            lines.append(format_particle_line(particle))
    return "".join(lines)


class _BaseWriter:
    def __init__(self, stream: Any):
        self.stream = stream
        # no footer is owed until the header is out
        self._finished = True

    @property
    def finished(self) -> bool:
        return self._finished

    def into_inner(self) -> Any:
        return self.stream

    def _check_open(self) -> None:
        if self._finished:
            raise ValueError("write to a finished HepMC2 writer")

    def _encode(self, text: str) -> Any:
        return text.encode("utf-8")

    def _write_footer_now(self) -> None:
        raise NotImplementedError

    def _finish_quietly(self, context: str) -> None:
        if self._finished:
            return
        try:
            self._write_footer_now()
        except (OSError, ValueError):
            logger.exception("Failed to write HepMC2 footer on %s", context)

    def __del__(self):
        if not getattr(self, "_finished", True):
            self._finish_quietly("garbage collection")


class Writer(_BaseWriter):
    """Write events to a stream opened for writing.

    The header is written immediately. :meth:`finish` writes the footer;
    leaving a ``with`` block (or dropping the writer) does it for you, but
    then failures are only logged.

    ``stream`` may be binary or text (``io.TextIOBase``). It is flushed by
    :meth:`finish` and never closed.
    """

    def __init__(self, stream: Any, header: str = DEFAULT_HEADER):
        super().__init__(stream)
        self._text = isinstance(stream, io.TextIOBase)
        self._emit(str(header))
        self._finished = False

    def _encode(self, text: str) -> Any:
        return text if self._text else text.encode("utf-8")

    def _emit(self, text: str) -> None:
        self.stream.write(self._encode(text))

    def write(self, event: Event) -> None:
        self._check_open()
        self._emit(format_event(event))

    def finish(self) -> None:
        """Write the footer. Later calls do nothing."""
        if self._finished:
            return
        self._write_footer_now()

    def _write_footer_now(self) -> None:
        self._finished = True
        self._emit(FOOTER)
        flush = getattr(self.stream, "flush", None)
        if flush is not None:
            flush()

    def __enter__(self) -> "Writer":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self._finish_quietly("scope exit")


class AsyncWriter(_BaseWriter):
    """asyncio counterpart of :class:`Writer`.

    Create it with ``await AsyncWriter.open(stream)``. ``stream`` needs a
    synchronous ``write(bytes)`` and optionally an awaitable ``drain()``,
    which is what ``asyncio.StreamWriter`` offers. ``async with`` finishes
    the writer on exit; a writer collected without being finished still
    gets its footer queued on the stream, without draining.
    """

    @classmethod
    async def open(cls, stream: Any, header: str = DEFAULT_HEADER) -> "AsyncWriter":
        writer = cls(stream)
        await writer._emit(str(header))
        writer._finished = False
        return writer

    async def _emit(self, text: str) -> None:
        self.stream.write(self._encode(text))
        drain = getattr(self.stream, "drain", None)
        if drain is not None:
            await drain()

    async def write(self, event: Event) -> None:
        self._check_open()
        await self._emit(format_event(event))

    async def finish(self) -> None:
        if self._finished:
            return
        self._finished = True
        await self._emit(FOOTER)

    def _write_footer_now(self) -> None:
        self._finished = True
        self.stream.write(self._encode(FOOTER))

    async def __aenter__(self) -> "AsyncWriter":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        if self._finished:
            return
        try:
            await self.finish()
        except (OSError, ValueError):
            logger.exception("Failed to write HepMC2 footer on scope exit")
