"""Four-vectors, reconstructed vertices and helix track parameters."""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass

__all__ = ["LorentzVector", "Vertex", "Track", "first_good_vertex"]

# Quality requirements on the primary vertex.
_MIN_VERTEX_NDOF = 4.0
_MAX_VERTEX_RHO = 2.0
_MAX_VERTEX_ABS_Z = 24.0


def _eta(px: float, py: float, pz: float) -> float:
    pt = math.hypot(px, py)
    if pt == 0.0:
        return 0.0 if pz == 0.0 else math.copysign(math.inf, pz)
    return math.asinh(pz / pt)


@dataclass(frozen=True)
class LorentzVector:
    """A four-vector in (px, py, pz, E) components."""

    px: float = 0.0
    py: float = 0.0
    pz: float = 0.0
    e: float = 0.0

    def pt(self) -> float:
        """Transverse momentum."""
        return math.hypot(self.px, self.py)

    def p(self) -> float:
        """Magnitude of the three-momentum."""
        return math.sqrt(self.px * self.px + self.py * self.py + self.pz * self.pz)

    def eta(self) -> float:
        """Pseudorapidity; zero for a null vector, infinite along the beam."""
        return _eta(self.px, self.py, self.pz)

    def phi(self) -> float:
        """Azimuthal angle in (-pi, pi]."""
        return math.atan2(self.py, self.px)


@dataclass(frozen=True)
class Vertex:
    """A reconstructed interaction vertex."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    ndof: float = 0.0
    is_fake: bool = False

    @property
    def rho(self) -> float:
        """Transverse distance from the beam line."""
        return math.hypot(self.x, self.y)

    def is_good(self) -> bool:
        """Whether the vertex passes the primary-vertex quality requirements."""
        return (
            not self.is_fake
            and self.ndof >= _MIN_VERTEX_NDOF
            and self.rho <= _MAX_VERTEX_RHO
            and abs(self.z) <= _MAX_VERTEX_ABS_Z
        )


@dataclass(frozen=True)
class Track:
    """A track given by its momentum and reference point, with fit errors."""

    px: float
    py: float
    pz: float
    vx: float = 0.0
    vy: float = 0.0
    vz: float = 0.0
    charge: int = 0
    chi2: float = 0.0
    ndof: float = 0.0
    d0_error: float = 0.0
    dz_error: float = 0.0
    eta_error: float = 0.0
    phi_error: float = 0.0
    phi_dxy_cov: float = 0.0

    def pt(self) -> float:
        """Transverse momentum."""
        return math.hypot(self.px, self.py)

    def p(self) -> float:
        """Magnitude of the momentum."""
        return math.sqrt(self.px * self.px + self.py * self.py + self.pz * self.pz)

    def eta(self) -> float:
        """Pseudorapidity of the momentum."""
        return _eta(self.px, self.py, self.pz)

    def phi(self) -> float:
        """Azimuthal angle of the momentum."""
        return math.atan2(self.py, self.px)

    def p4(self) -> LorentzVector:
        """Four-vector with the momentum magnitude as energy."""
        return LorentzVector(self.px, self.py, self.pz, self.p())

    def vertex_p4(self) -> LorentzVector:
        """Reference point packed as a four-vector with zero time."""
        return LorentzVector(self.vx, self.vy, self.vz, 0.0)

    def _require_pt(self) -> float:
        pt = self.pt()
        if pt == 0.0:
            raise ValueError("impact parameters are undefined for a track with zero pt")
        return pt

    def dxy(self, x: float = 0.0, y: float = 0.0) -> float:
        """Signed transverse impact parameter with respect to (x, y)."""
        pt = self._require_pt()
        return (-(self.vx - x) * self.py + (self.vy - y) * self.px) / pt

    def d0(self) -> float:
        """Transverse impact parameter with respect to the origin, sign-flipped."""
        return -self.dxy(0.0, 0.0)

    def dz(self, x: float = 0.0, y: float = 0.0, z: float = 0.0) -> float:
        """Longitudinal impact parameter with respect to (x, y, z)."""
        pt = self._require_pt()
        transverse = ((self.vx - x) * self.px + (self.vy - y) * self.py) / pt
        return (self.vz - z) - transverse * self.pz / pt


def first_good_vertex(vertices: Iterable[Vertex]) -> tuple[int, Vertex] | None:
    """Return ``(index, vertex)`` of the first good vertex, or ``None``."""
    return next(
        ((index, vertex) for index, vertex in enumerate(vertices) if vertex.is_good()),
        None,
    )