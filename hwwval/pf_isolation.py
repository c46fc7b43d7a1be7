"""Particle-flow isolation sums around an electron."""

from __future__ import annotations

import enum
import math
from collections.abc import Iterable
from dataclasses import dataclass

from .tracks import Track, Vertex

__all__ = [
    "ParticleId",
    "PFCandidate",
    "IsolationElectron",
    "NO_TRACK_ISOLATION",
    "delta_phi",
    "delta_r",
    "electron_iso_value_pf",
    "pf_isolation_2012",
]

# Returned by electron_iso_value_pf when the electron has no track at all.
NO_TRACK_ISOLATION = -9999.0

# Endcap vetoes of the 2012 isolation, as cone radii around the electron.
_ENDCAP_CHARGED_VETO = 0.015
_ENDCAP_PHOTON_VETO = 0.08

_PDG_ELECTRON = 11
_PDG_PHOTON = 22
_PDG_NEUTRAL_HADRON = 130


class ParticleId(enum.IntEnum):
    """Particle-flow candidate categories."""

    X = 0
    H = 1
    E = 2
    MU = 3
    GAMMA = 4
    H0 = 5
    H_HF = 6
    EGAMMA_HF = 7


@dataclass(frozen=True)
class PFCandidate:
    """A particle-flow candidate.

    ``track`` and ``gsf_track`` are the attached tracks, if any; their keys
    identify them within their collections. ``vertex_index`` is the vertex
    a charged hadron is associated with, or -1 when there is none.
    """

    eta: float
    phi: float
    pt: float
    pdg_id: int = 0
    charge: int = 0
    particle_id: ParticleId = ParticleId.X
    track: Track | None = None
    track_key: int | None = None
    gsf_track: Track | None = None
    gsf_track_key: int | None = None
    vertex_index: int = -1


@dataclass(frozen=True)
class IsolationElectron:
    """The parts of an electron that its isolation depends on."""

    eta: float
    phi: float
    is_eb: bool = True
    gsf_track: Track | None = None
    gsf_track_key: int | None = None
    track: Track | None = None
    track_key: int | None = None


def delta_phi(phi1: float, phi2: float) -> float:
    """Return ``phi1 - phi2`` wrapped into [-pi, pi]."""
    return math.remainder(phi1 - phi2, 2.0 * math.pi)


def delta_r(eta1: float, phi1: float, eta2: float, phi2: float) -> float:
    """Return the distance in the (eta, phi) plane."""
    return math.hypot(eta1 - eta2, delta_phi(phi1, phi2))


def _same_track(
    track_a: Track | None, key_a: int | None, track_b: Track | None, key_b: int | None
) -> bool:
    if track_a is None or track_b is None:
        return False
    if key_a is not None and key_b is not None:
        return key_a == key_b
    return track_a is track_b


def _dz(track: Track, vertex: Vertex) -> float:
    return track.dz(vertex.x, vertex.y, vertex.z)


def electron_iso_value_pf(
    electron: IsolationElectron,
    candidates: Iterable[PFCandidate],
    vertex: Vertex,
    cone: float,
    min_pt_neutral: float,
    dz_cut: float,
    footprint_dr: float,
    gamma_strip_veto: float,
    electron_strip_veto: float,
    filter_id: int = 0,
) -> float:
    """Return the particle-flow isolation sum in a cone around ``electron``.

    Charged candidates count when compatible in z with the electron track,
    neutral ones above ``min_pt_neutral``; the neutral-hadron footprint and
    the photon and electron eta strips are subtracted. A non-zero
    ``filter_id`` restricts the sum to candidates of that absolute PDG id.
    """
    if electron.gsf_track is not None:
        electron_dz = _dz(electron.gsf_track, vertex)
    elif electron.track is not None:
        electron_dz = _dz(electron.track, vertex)
    else:
        return NO_TRACK_ISOLATION

    charged = neutral = footprint = photon_veto = electron_veto = 0.0

    for pf in candidates:
        dr = delta_r(pf.eta, pf.phi, electron.eta, electron.phi)
        if dr > cone:
            continue
        deta = abs(pf.eta - electron.eta)
        pfid = abs(pf.pdg_id)
        if filter_id != 0 and filter_id != pfid:
            continue

        if pf.charge == 0:
            if pf.pt > min_pt_neutral:
                neutral += pf.pt
                if dr < footprint_dr and pfid == _PDG_NEUTRAL_HADRON:
                    footprint += pf.pt
                if deta < gamma_strip_veto and pfid == _PDG_PHOTON:
                    photon_veto += pf.pt
            continue

        # Skip the electron itself: either of its tracks shared with the candidate.
        if _same_track(electron.track, electron.track_key, pf.track, pf.track_key):
            continue
        if _same_track(
            electron.gsf_track, electron.gsf_track_key, pf.gsf_track, pf.gsf_track_key
        ):
            continue

        if pfid == _PDG_ELECTRON and pf.gsf_track is not None:
            if abs(_dz(pf.gsf_track, vertex) - electron_dz) < dz_cut:
                charged += pf.pt
                if deta < electron_strip_veto:
                    electron_veto += pf.pt
            continue

        if pf.track is not None and abs(_dz(pf.track, vertex) - electron_dz) < dz_cut:
            charged += pf.pt
            if deta < electron_strip_veto and pfid == _PDG_ELECTRON:
                electron_veto += pf.pt

    return charged + neutral - footprint - photon_veto - electron_veto


def pf_isolation_2012(
    electron: IsolationElectron,
    candidates: Iterable[PFCandidate],
    vertex_index: int,
    cone: float,
) -> tuple[float, float, float]:
    """Return the (charged, photon, neutral hadron) isolation sums.

    Electrons and muons are ignored; charged hadrons count only when they
    belong to vertex ``vertex_index``. Outside the barrel, candidates very
    close to the electron are vetoed.
    """
    charged = photons = neutral = 0.0
    for pf in candidates:
        if pf.particle_id in (ParticleId.E, ParticleId.MU):
            continue
        dr = delta_r(pf.eta, pf.phi, electron.eta, electron.phi)
        if dr > cone:
            continue
        if pf.particle_id is ParticleId.H and pf.vertex_index != vertex_index:
            continue
        if not electron.is_eb:
            if pf.particle_id is ParticleId.H and dr <= _ENDCAP_CHARGED_VETO:
                continue
            if pf.particle_id is ParticleId.GAMMA and dr <= _ENDCAP_PHOTON_VETO:
                continue
        if pf.particle_id is ParticleId.H:
            charged += pf.pt
        elif pf.particle_id is ParticleId.GAMMA:
            photons += pf.pt
        elif pf.particle_id is ParticleId.H0:
            neutral += pf.pt
    return charged, photons, neutral