"""
Core event data model for hepmc2io.

An event is a list of vertices, each owning the particles that flow into
and out of it. Particles point at the vertex they end in only through the
``end_vtx`` barcode; nothing is shared between vertices and no object holds
a reference to another one. This mirrors how HepMC2 (IO_GenEvent) files
flatten the event graph.
"""

from __future__ import annotations

import enum
import math
from dataclasses import asdict, dataclass, field
from typing import Iterator, Optional


class EnergyUnit(enum.Enum):
    MEV = "MEV"
    GEV = "GEV"

    @classmethod
    def parse(cls, token: str) -> "EnergyUnit":
        """Look up a unit token case-insensitively ("GeV" -> GEV)."""
        return cls(token.upper())


class LengthUnit(enum.Enum):
    MM = "MM"
    CM = "CM"

    @classmethod
    def parse(cls, token: str) -> "LengthUnit":
        return cls(token.upper())


@dataclass
class FourVector:
    """Four components indexed 0..3.

    Index 0 is the energy (or time) component, 1..3 the spatial part.
    Momenta are stored as (E, px, py, pz) while the file lists them as
    px py pz E.
    """

    t: float = 0.0
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    _FIELDS = ("t", "x", "y", "z")

    @classmethod
    def txyz(cls, t: float, x: float, y: float, z: float) -> "FourVector":
        return cls(t, x, y, z)

    def __getitem__(self, idx: int) -> float:
        return getattr(self, self._FIELDS[idx])

    def __setitem__(self, idx: int, value: float) -> None:
        setattr(self, self._FIELDS[idx], value)

    def __iter__(self) -> Iterator[float]:
        return iter((self.t, self.x, self.y, self.z))

    def __len__(self) -> int:
        return 4

    def to_list(self) -> list[float]:
        return [self.t, self.x, self.y, self.z]


@dataclass
class Particle:
    """A single particle record.

    Attributes:
        id: PDG Monte Carlo particle ID.
        p: Four-momentum, component 0 is the energy.
        m: Generated mass.
        status: Generator status code.
        theta, phi: Polarization angles.
        flows: Flow index -> flow value (colour flow codes).
        end_vtx: Barcode of the vertex this particle flows into,
            0 for final-state particles.
        barcode: Particle barcode as found in the file.
    """

    id: int = 0
    p: FourVector = field(default_factory=FourVector)
    m: float = 0.0
    status: int = 0
    theta: float = 0.0
    phi: float = 0.0
    flows: dict[int, int] = field(default_factory=dict)
    end_vtx: int = 0
    barcode: int = 0

    @property
    def energy(self) -> float:
        return self.p[0]

    @property
    def px(self) -> float:
        return self.p[1]

    @property
    def py(self) -> float:
        return self.p[2]

    @property
    def pz(self) -> float:
        return self.p[3]

    @property
    def pt(self) -> float:
        """Transverse momentum."""
        return math.sqrt(self.px**2 + self.py**2)

    @property
    def is_final(self) -> bool:
        return self.end_vtx == 0

    def to_dict(self) -> dict:
        """Convert to a plain dictionary that json can serialize."""
        return {
            "id": self.id,
            "p": self.p.to_list(),
            "m": self.m,
            "status": self.status,
            "theta": self.theta,
            "phi": self.phi,
            "flows": {str(k): v for k, v in self.flows.items()},
            "end_vtx": self.end_vtx,
            "barcode": self.barcode,
        }

    @classmethod
    def from_dict(cls, d: dict) -> "Particle":
        return cls(
            id=d["id"],
            p=FourVector(*d["p"]),
            m=d["m"],
            status=d["status"],
            theta=d["theta"],
            phi=d["phi"],
            flows={int(k): v for k, v in d["flows"].items()},
            end_vtx=d["end_vtx"],
            barcode=d["barcode"],
        )


@dataclass
class Vertex:
    """An interaction vertex.

    Attributes:
        barcode: Vertex identifier (negative by convention, not unique).
        status: Vertex status code.
        x, y, z, t: Spacetime position.
        weights: Vertex-level weights.
        particles_in: Particles ending at this vertex.
        particles_out: Particles originating from this vertex.
    """

    barcode: int = 0
    status: int = 0
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    t: float = 0.0
    weights: list[float] = field(default_factory=list)
    particles_in: list[Particle] = field(default_factory=list)
    particles_out: list[Particle] = field(default_factory=list)

    @property
    def position(self) -> FourVector:
        return FourVector.txyz(self.t, self.x, self.y, self.z)

    def to_dict(self) -> dict:
        return {
            "barcode": self.barcode,
            "status": self.status,
            "x": self.x,
            "y": self.y,
            "z": self.z,
            "t": self.t,
            "weights": list(self.weights),
            "particles_in": [p.to_dict() for p in self.particles_in],
            "particles_out": [p.to_dict() for p in self.particles_out],
        }

    @classmethod
    def from_dict(cls, d: dict) -> "Vertex":
        return cls(
            barcode=d["barcode"],
            status=d["status"],
            x=d["x"],
            y=d["y"],
            z=d["z"],
            t=d["t"],
            weights=list(d["weights"]),
            particles_in=[Particle.from_dict(p) for p in d["particles_in"]],
            particles_out=[Particle.from_dict(p) for p in d["particles_out"]],
        )


@dataclass
class CrossSection:
    cross_section: float = 0.0
    cross_section_error: float = 0.0

    def __str__(self) -> str:
        return f"{self.cross_section} ± {self.cross_section_error}"

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, d: dict) -> "CrossSection":
        return cls(**d)


@dataclass
class PdfInfo:
    """Parton distribution information for the hard process.

    Attributes:
        parton_id: PDG IDs of the two incoming partons.
        x: Momentum fractions of the two partons.
        scale: Factorization scale.
        xf: x * f(x) for each parton.
        pdf_id: LHAPDF set IDs, 0 when unknown.
    """

    parton_id: tuple[int, int] = (0, 0)
    x: tuple[float, float] = (0.0, 0.0)
    scale: float = 0.0
    xf: tuple[float, float] = (0.0, 0.0)
    pdf_id: tuple[int, int] = (0, 0)

    def to_dict(self) -> dict:
        return {name: list(value) if isinstance(value, tuple) else value for name, value in asdict(self).items()}

    @classmethod
    def from_dict(cls, d: dict) -> "PdfInfo":
        return cls(
            parton_id=tuple(d["parton_id"]),
            x=tuple(d["x"]),
            scale=d["scale"],
            xf=tuple(d["xf"]),
            pdf_id=tuple(d["pdf_id"]),
        )


@dataclass
class HeavyIonInfo:
    """Collision geometry of a nucleus-nucleus event.

    Field order matches the ``H`` record.
    """

    ncoll_hard: int = 0
    npart_proj: int = 0
    npart_targ: int = 0
    ncoll: int = 0
    spectator_neutrons: int = 0
    spectator_protons: int = 0
    n_nwounded_collisions: int = 0
    nwounded_n_collisions: int = 0
    nwounded_nwounded_collisions: int = 0
    impact_parameter: float = 0.0
    event_plane_angle: float = 0.0
    eccentricity: float = 0.0
    sigma_inel_nn: float = 0.0

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, d: dict) -> "HeavyIonInfo":
        return cls(**d)


@dataclass
class Event:
    """A single scattering event.

    Attributes:
        number: Event number.
        mpi: Number of multi-parton interactions.
        scale: Event scale.
        alpha_qcd, alpha_qed: Couplings at the event scale.
        signal_process_id: Signal process identifier.
        signal_process_vertex: Barcode of the signal process vertex.
        random_states: Random generator state integers.
        weights: Event weights.
        weight_names: Names of the weights, possibly empty.
        vertices: Vertices in declaration order.
        xs: Cross section and its error.
        pdf_info: PDF information.
        energy_unit, length_unit: Units of momenta and positions.
        heavy_ion_info: Heavy ion geometry, None for other events.
    """

    number: int = 0
    mpi: int = 0
    scale: float = 0.0
    alpha_qcd: float = 0.0
    alpha_qed: float = 0.0
    signal_process_id: int = 0
    signal_process_vertex: int = 0
    random_states: list[int] = field(default_factory=list)
    weights: list[float] = field(default_factory=list)
    weight_names: list[str] = field(default_factory=list)
    vertices: list[Vertex] = field(default_factory=list)
    xs: CrossSection = field(default_factory=CrossSection)
    pdf_info: PdfInfo = field(default_factory=PdfInfo)
    energy_unit: EnergyUnit = EnergyUnit.GEV
    length_unit: LengthUnit = LengthUnit.MM
    heavy_ion_info: Optional[HeavyIonInfo] = None

    @property
    def weight(self) -> float:
        """Primary event weight."""
        return self.weights[0] if self.weights else 1.0

    def particles(self) -> Iterator[Particle]:
        """All particles in record order."""
        for vertex in self.vertices:
            yield from vertex.particles_in
            yield from vertex.particles_out

    @property
    def n_particles(self) -> int:
        return sum(len(v.particles_in) + len(v.particles_out) for v in self.vertices)

    def named_weights(self) -> dict[str, float]:
        return dict(zip(self.weight_names, self.weights))

    def to_dict(self) -> dict:
        """Convert to nested plain containers, e.g. for ``json.dumps``.

        Units become their names, four-vectors ``[t, x, y, z]`` lists and
        flow indices strings. :meth:`from_dict` reverses the conversion.
        """
        return {
            "number": self.number,
            "mpi": self.mpi,
            "scale": self.scale,
            "alpha_qcd": self.alpha_qcd,
            "alpha_qed": self.alpha_qed,
            "signal_process_id": self.signal_process_id,
            "signal_process_vertex": self.signal_process_vertex,
            "random_states": list(self.random_states),
            "weights": list(self.weights),
            "weight_names": list(self.weight_names),
            "vertices": [v.to_dict() for v in self.vertices],
            "xs": self.xs.to_dict(),
            "pdf_info": self.pdf_info.to_dict(),
            "energy_unit": self.energy_unit.value,
            "length_unit": self.length_unit.value,
            "heavy_ion_info": None if self.heavy_ion_info is None else self.heavy_ion_info.to_dict(),
        }

    @classmethod
    def from_dict(cls, d: dict) -> "Event":
        heavy_ion = d.get("heavy_ion_info")
        return cls(
            number=d["number"],
            mpi=d["mpi"],
            scale=d["scale"],
            alpha_qcd=d["alpha_qcd"],
            alpha_qed=d["alpha_qed"],
            signal_process_id=d["signal_process_id"],
            signal_process_vertex=d["signal_process_vertex"],
            random_states=list(d["random_states"]),
            weights=list(d["weights"]),
            weight_names=list(d["weight_names"]),
            vertices=[Vertex.from_dict(v) for v in d["vertices"]],
            xs=CrossSection.from_dict(d["xs"]),
            pdf_info=PdfInfo.from_dict(d["pdf_info"]),
            energy_unit=EnergyUnit.parse(d["energy_unit"]),
            length_unit=LengthUnit.parse(d["length_unit"]),
            heavy_ion_info=None if heavy_ion is None else HeavyIonInfo.from_dict(heavy_ion),
        )
