"""Parsers for the individual HepMC2 record types.

Record layouts (one record per line, fields separated by spaces):

    E <number> <mpi> <scale> <alpha_qcd> <alpha_qed> <process_id>
      <process_vertex> <n_vertices> <beam1> <beam2>
      <n_random> <random...> <n_weights> <weight...>
    N <n> "<name>"...
    U <energy_unit> <length_unit>
    C <cross_section> <error>
    F <id1> <id2> <x1> <x2> <scale> <xf1> <xf2> [<pdf_id1> [<pdf_id2>]]
    H <9 integers> <impact_parameter> <event_plane_angle> <eccentricity>
      <sigma_inel_nn>
    V <barcode> <status> <x> <y> <z> <t> <n_orphans> <n_out>
      <n_weights> <weight...>
    P <barcode> <id> <px> <py> <pz> <e> <m> <status> <theta> <phi>
      <end_vtx> <n_flows> (<flow_idx> <flow_val>)...

Each parser consumes exactly one line and never looks at any other.
"""

from __future__ import annotations

from typing import Callable

from ..errors import UnitError
from ..models import (
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
from .builder import EventBuilder
from .grammar import LineCursor

RecordParser = Callable[[str, EventBuilder], None]


def parse_event_line(line: str) -> Event:
    c = LineCursor(line)
    number = c.int()
    mpi = c.int()
    scale = c.float()
    alpha_qcd = c.float()
    alpha_qed = c.float()
    signal_process_id = c.int()
    signal_process_vertex = c.int()
    c.count()  # number of vertices
    c.token()  # beam particle barcodes, not kept
    c.token()
    random_states = c.int_list()
    weights = c.float_list()
    c.end()
    return Event(
        number=number,
        mpi=mpi,
        scale=scale,
        alpha_qcd=alpha_qcd,
        alpha_qed=alpha_qed,
        signal_process_id=signal_process_id,
        signal_process_vertex=signal_process_vertex,
        random_states=random_states,
        weights=weights,
    )


def parse_vertex_line(line: str, builder: EventBuilder) -> None:
    c = LineCursor(line)
    barcode = c.int()
    status = c.int()
    x, y, z, t = c.floats(4)
    c.count()  # orphans
    c.count()  # outgoing particles
    weights = c.float_list()
    c.end()
    builder.add_vertex(Vertex(barcode=barcode, status=status, x=x, y=y, z=z, t=t, weights=weights))


def parse_particle_line(line: str, builder: EventBuilder) -> None:
    c = LineCursor(line)
    barcode = c.int()
    pdg_id = c.int()
    px, py, pz, e, m = c.floats(5)
    status = c.int()
    theta = c.float()
    phi = c.float()
    end_vtx = c.int()
    flows: dict[int, int] = {}
    for _ in range(c.count()):
        idx = c.int()
        flows[idx] = c.int()
    c.end()
    builder.add_particle(
        Particle(
            id=pdg_id,
            p=FourVector.txyz(e, px, py, pz),
            m=m,
            status=status,
            theta=theta,
            phi=phi,
            flows=dict(sorted(flows.items())),
            end_vtx=end_vtx,
            barcode=barcode,
        )
    )


def parse_units_line(line: str, builder: EventBuilder) -> None:
    c = LineCursor(line)
    energy_token = c.token()
    length_token = c.token()
    c.end()
    try:
        energy = EnergyUnit.parse(energy_token)
    except ValueError:
        raise UnitError(f"unknown energy unit {energy_token!r}") from None
    try:
        length = LengthUnit.parse(length_token)
    except ValueError:
        raise UnitError(f"unknown length unit {length_token!r}") from None
    builder.set_units(energy, length)


def parse_pdf_info_line(line: str, builder: EventBuilder) -> None:
    c = LineCursor(line)
    id1, id2 = c.ints(2)
    x1, x2 = c.floats(2)
    scale = c.float()
    xf1, xf2 = c.floats(2)
    # older files stop after xf2
    pdf_id1 = c.optional_int()
    pdf_id2 = c.optional_int()
    c.end()
    builder.set_pdf_info(
        PdfInfo(
            parton_id=(id1, id2),
            x=(x1, x2),
            scale=scale,
            xf=(xf1, xf2),
            pdf_id=(pdf_id1 or 0, pdf_id2 or 0),
        )
    )


def parse_heavy_ion_line(line: str, builder: EventBuilder) -> None:
    if line.startswith("HepMC"):
        return
    c = LineCursor(line)
    ints = c.ints(9)
    floats = c.floats(4)
    c.end()
    builder.set_heavy_ion_info(HeavyIonInfo(*ints, *floats))


def parse_weight_names_line(line: str, builder: EventBuilder) -> None:
    c = LineCursor(line)
    names = c.string_list()
    c.end()
    builder.set_weight_names(names)


def parse_cross_section_line(line: str, builder: EventBuilder) -> None:
    c = LineCursor(line)
    cross_section = c.float()
    error = c.float()
    c.end()
    builder.set_cross_section(CrossSection(cross_section=cross_section, cross_section_error=error))


# Body records, keyed by their first character. "E" is handled by the reader
# since it starts a new event.
RECORD_PARSERS: dict[str, RecordParser] = {
    "V": parse_vertex_line,
    "P": parse_particle_line,
    "U": parse_units_line,
    "F": parse_pdf_info_line,
    "H": parse_heavy_ion_line,
    "N": parse_weight_names_line,
    "C": parse_cross_section_line,
}
