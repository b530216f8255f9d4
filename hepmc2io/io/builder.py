from __future__ import annotations

from typing import Optional

from ..errors import NoVertexError
from ..models import CrossSection, EnergyUnit, Event, HeavyIonInfo, LengthUnit, Particle, PdfInfo, Vertex


class EventBuilder:
    """Accumulates the records of one event.

    Particles are attached to the most recently added vertex: a particle
    whose ``end_vtx`` equals that vertex's barcode is incoming, any other
    particle is outgoing. Barcodes are never looked up, so duplicate or
    unordered vertex barcodes are fine.
    """

    def __init__(self, event: Event):
        self.event = event
        self.current_vertex: Optional[Vertex] = None

    def add_vertex(self, vertex: Vertex) -> None:
        self.event.vertices.append(vertex)
        self.current_vertex = vertex

    def add_particle(self, particle: Particle) -> None:
        vertex = self.current_vertex
        if vertex is None:
            raise NoVertexError()
        if particle.end_vtx == vertex.barcode:
            vertex.particles_in.append(particle)
        else:
            vertex.particles_out.append(particle)

    def set_units(self, energy: EnergyUnit, length: LengthUnit) -> None:
        self.event.energy_unit = energy
        self.event.length_unit = length

    def set_pdf_info(self, pdf_info: PdfInfo) -> None:
        self.event.pdf_info = pdf_info

    def set_heavy_ion_info(self, info: HeavyIonInfo) -> None:
        self.event.heavy_ion_info = info

    def set_weight_names(self, names: list[str]) -> None:
        self.event.weight_names = names

    def set_cross_section(self, xs: CrossSection) -> None:
        self.event.xs = xs

    def build(self) -> Event:
        return self.event
