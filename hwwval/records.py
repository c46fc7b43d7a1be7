"""Event identification and GSF track records."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from .tracks import LorentzVector, Track

__all__ = [
    "EventRecord",
    "GsfTrackRecord",
    "make_event_record",
    "make_gsf_track_record",
    "make_gsf_track_records",
]


@dataclass(frozen=True)
class EventRecord:
    """Identification of one event."""

    run: int
    event: int
    lumi_block: int
    is_real_data: bool


@dataclass(frozen=True)
class GsfTrackRecord:
    """Stored quantities of one GSF track."""

    p4: LorentzVector
    vertex_p4: LorentzVector
    d0: float
    z0: float
    d0_err: float
    z0_err: float
    eta_err: float
    phi_err: float
    d0phi_cov: float


def make_event_record(run: int, event: int, lumi_block: int, is_real_data: bool) -> EventRecord:
    """Return the record of an event; the numbers must be non-negative."""
    for name, value in (("run", run), ("event", event), ("lumi_block", lumi_block)):
        if value < 0:
            raise ValueError(f"{name} must be non-negative, got {value}")
    return EventRecord(int(run), int(event), int(lumi_block), bool(is_real_data))


def make_gsf_track_record(track: Track) -> GsfTrackRecord:
    """Return the stored quantities of ``track``."""
    return GsfTrackRecord(
        p4=track.p4(),
        vertex_p4=track.vertex_p4(),
        d0=track.d0(),
        z0=track.dz(),
        d0_err=track.d0_error,
        z0_err=track.dz_error,
        eta_err=track.eta_error,
        phi_err=track.phi_error,
        d0phi_cov=-track.phi_dxy_cov,
    )


def make_gsf_track_records(tracks: Iterable[Track]) -> list[GsfTrackRecord]:
    """Return the records of all ``tracks`` in order."""
    return [make_gsf_track_record(track) for track in tracks]