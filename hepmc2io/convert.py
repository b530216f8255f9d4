"""High-level read/write/convert/info API working on file paths."""

from __future__ import annotations

import itertools
import sys
from pathlib import Path
from typing import Iterable, Iterator, Optional, Union

from .io.reader import Reader
from .io.writer import DEFAULT_HEADER, Writer
from .models import Event


def iter_events(filepath: Union[str, Path]) -> Iterator[Event]:
    """Stream events from a HepMC2 file."""
    with open(filepath, "rb") as f:
        yield from Reader(f)


def read(filepath: Union[str, Path]) -> list[Event]:
    return list(iter_events(filepath))


def write(
    filepath: Union[str, Path],
    events: Iterable[Event],
    header: Optional[str] = None,
) -> int:
    """Write events to a HepMC2 file and return how many were written.

    If ``events`` raises, the events written so far are still closed off
    with the footer before the error propagates.
    """
    n = 0
    with open(filepath, "wb") as f, Writer(f, header=DEFAULT_HEADER if header is None else header) as writer:
        for event in events:
            writer.write(event)
            n += 1
        writer.finish()
    return n


def convert(
    input_path: Union[str, Path],
    output_path: Union[str, Path],
    *,
    max_events: int = -1,
    quiet: bool = False,
) -> dict:
    """Re-emit a HepMC2 file through the reader and writer.

    Events are streamed, never materialised into a list. The output uses
    canonical formatting (shortest round-trip floats, uppercase units).
    """
    if not quiet:
        print(f"Reading hepmc2: {input_path}", file=sys.stderr)

    ev_iter = iter_events(input_path)
    if max_events >= 0:
        ev_iter = itertools.islice(ev_iter, max_events)

    if not quiet:
        print(f"Writing hepmc2: {output_path}", file=sys.stderr)

    n_output = write(output_path, ev_iter)

    if not quiet:
        print(f"  Wrote {n_output} events", file=sys.stderr)

    return {
        "n_input": n_output,
        "n_output": n_output,
    }


def info(filepath: Union[str, Path]) -> dict:
    n_events = 0
    n_vertices = 0
    total_particles = 0
    pdg_counts: dict[int, int] = {}
    status_counts: dict[int, int] = {}
    first: Optional[Event] = None
    last: Optional[Event] = None

    for ev in iter_events(filepath):
        if first is None:
            first = ev
        last = ev
        n_events += 1
        n_vertices += len(ev.vertices)
        for p in ev.particles():
            total_particles += 1
            pdg_counts[p.id] = pdg_counts.get(p.id, 0) + 1
            status_counts[p.status] = status_counts.get(p.status, 0) + 1

    from .pdg import name as pdg_name

    top_pdg = sorted(pdg_counts.items(), key=lambda x: -x[1])[:20]
    top_named = [(pdg_name(pid), count) for pid, count in top_pdg]

    units = {}
    weight_names: list[str] = []
    if first is not None:
        units = {"energy": first.energy_unit.value, "length": first.length_unit.value}
        weight_names = list(first.weight_names)
    cross_section = None
    if last is not None:
        # generators refine the estimate as they go, the last one is the best
        cross_section = {"value": last.xs.cross_section, "error": last.xs.cross_section_error}

    return {
        "format": "hepmc2",
        "n_events": n_events,
        "n_vertices": n_vertices,
        "total_particles": total_particles,
        "avg_particles_per_event": total_particles / max(1, n_events),
        "units": units,
        "weight_names": weight_names,
        "cross_section": cross_section,
        "top_particles": top_named,
        "status_counts": dict(sorted(status_counts.items())),
    }
