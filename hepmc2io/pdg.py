"""PDG helpers backed by scikit-hep ``particle``."""

from __future__ import annotations

from functools import lru_cache

from particle import InvalidParticle, ParticleNotFound
from particle import Particle as _Particle


@lru_cache(maxsize=None)
def name(pdg_id: int) -> str:
    """Particle name for a PDG ID, or the ID itself if it is unknown."""
    try:
        return _Particle.from_pdgid(pdg_id).name
    except (InvalidParticle, ParticleNotFound):
        return str(pdg_id)
