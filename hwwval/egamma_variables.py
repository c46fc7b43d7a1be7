"""Inputs, binning and reader layouts of the e/gamma electron classifier."""

from __future__ import annotations

import enum
import math
from bisect import bisect_right
from dataclasses import dataclass, replace

from .mva import InvalidInputError, ReaderSpec

__all__ = [
    "MVAType",
    "ElectronMVAVariables",
    "BIN_COUNTS",
    "INPUT_NAMES",
    "bind_variables",
    "electron_d0_pv",
    "reader_layout",
    "mva_bin_for",
]


class MVAType(enum.Enum):
    """Flavour of trained classifier."""

    TRIG = "trig"
    NON_TRIG = "non_trig"
    ISO_RINGS = "iso_rings"


# Number of bins of the binned version of each classifier.
BIN_COUNTS: dict[MVAType, int] = {
    MVAType.TRIG: 6,
    MVAType.NON_TRIG: 6,
    MVAType.ISO_RINGS: 4,
}

# Value returned for the transverse impact parameter when there is no vertex.
NO_VERTEX_D0 = 9999.0


@dataclass(frozen=True)
class ElectronMVAVariables:
    """Per-electron quantities fed to the e/gamma classifier."""

    fbrem: float = 0.0
    kfchi2: float = 0.0
    kfhits: int = 0
    gsfchi2: float = 0.0
    deta: float = 0.0
    dphi: float = 0.0
    detacalo: float = 0.0
    see: float = 0.0
    spp: float = 0.0
    etawidth: float = 0.0
    phiwidth: float = 0.0
    e1x5e5x5: float = 0.0
    r9: float = 0.0
    hoe: float = 0.0
    eop: float = 0.0
    ioemiop: float = 0.0
    ele_eopout: float = 0.0
    preshower_over_raw: float = 0.0
    d0: float = 0.0
    ip3d: float = 0.0
    eta: float = 0.0
    pt: float = 0.0
    charged_iso_dr_0p0_to_0p1: float = 0.0
    charged_iso_dr_0p1_to_0p2: float = 0.0
    charged_iso_dr_0p2_to_0p3: float = 0.0
    charged_iso_dr_0p3_to_0p4: float = 0.0
    charged_iso_dr_0p4_to_0p5: float = 0.0
    gamma_iso_dr_0p0_to_0p1: float = 0.0
    gamma_iso_dr_0p1_to_0p2: float = 0.0
    gamma_iso_dr_0p2_to_0p3: float = 0.0
    gamma_iso_dr_0p3_to_0p4: float = 0.0
    gamma_iso_dr_0p4_to_0p5: float = 0.0
    neutral_hadron_iso_dr_0p0_to_0p1: float = 0.0
    neutral_hadron_iso_dr_0p1_to_0p2: float = 0.0
    neutral_hadron_iso_dr_0p2_to_0p3: float = 0.0
    neutral_hadron_iso_dr_0p3_to_0p4: float = 0.0
    neutral_hadron_iso_dr_0p4_to_0p5: float = 0.0


_RINGS = ("0p0To0p1", "0p1To0p2", "0p2To0p3", "0p3To0p4", "0p4To0p5")
_RING_KINDS = (
    ("ChargedIso", "charged_iso"),
    ("GammaIso", "gamma_iso"),
    ("NeutralHadronIso", "neutral_hadron_iso"),
)
_ISO_RING_NAMES = tuple(f"{kind}_DR{ring}" for kind, _ in _RING_KINDS for ring in _RINGS)

# Classifier input name -> attribute of ElectronMVAVariables.
INPUT_NAMES: dict[str, str] = {
    "fbrem": "fbrem",
    "kfchi2": "kfchi2",
    "kfhits": "kfhits",
    "gsfchi2": "gsfchi2",
    "deta": "deta",
    "dphi": "dphi",
    "detacalo": "detacalo",
    "see": "see",
    "spp": "spp",
    "etawidth": "etawidth",
    "phiwidth": "phiwidth",
    "e1x5e5x5": "e1x5e5x5",
    "R9": "r9",
    "HoE": "hoe",
    "EoP": "eop",
    "IoEmIoP": "ioemiop",
    "eleEoPout": "ele_eopout",
    "PreShowerOverRaw": "preshower_over_raw",
    "d0": "d0",
    "ip3d": "ip3d",
    "eta": "eta",
    "pt": "pt",
}
INPUT_NAMES.update(
    {
        f"{kind}_DR{ring}": f"{attr}_dr_{ring.lower().replace('to', '_to_')}"
        for kind, attr in _RING_KINDS
        for ring in _RINGS
    }
)

_ID_VARIABLES = (
    "fbrem",
    "kfchi2",
    "kfhits",
    "gsfchi2",
    "deta",
    "dphi",
    "detacalo",
    "see",
    "spp",
    "etawidth",
    "phiwidth",
    "e1x5e5x5",
    "R9",
    "HoE",
    "EoP",
    "IoEmIoP",
    "eleEoPout",
)
_PRESHOWER_BINS = frozenset({2, 5})

# (pt threshold, upper |eta| edges) of each classifier's binning.
_BINNING: dict[MVAType, tuple[float, tuple[float, ...]]] = {
    MVAType.ISO_RINGS: (10.0, (1.479,)),
    MVAType.NON_TRIG: (10.0, (0.8, 1.479)),
    MVAType.TRIG: (20.0, (0.8, 1.479)),
}


def bind_variables(variables: ElectronMVAVariables) -> ElectronMVAVariables:
    """Return a copy with diverging inputs clipped to their trained range."""
    v = variables
    fbrem = -1.0 if v.fbrem < -1.0 else v.fbrem

    deta = abs(v.deta)
    if deta > 0.06:
        deta = 0.06
    dphi = abs(v.dphi)
    if dphi > 0.6:
        dphi = 0.6
    eop = 20.0 if v.eop > 20.0 else v.eop
    ele_eopout = 20.0 if v.ele_eopout > 20.0 else v.ele_eopout
    detacalo = abs(v.detacalo)
    if detacalo > 0.2:
        detacalo = 0.2

    e1x5e5x5 = v.e1x5e5x5
    if e1x5e5x5 < -1.0:
        e1x5e5x5 = -1.0
    if e1x5e5x5 > 2.0:
        e1x5e5x5 = 2.0

    r9 = 5.0 if v.r9 > 5.0 else v.r9
    gsfchi2 = 200.0 if v.gsfchi2 > 200.0 else v.gsfchi2
    kfchi2 = 10.0 if v.kfchi2 > 10.0 else v.kfchi2
    spp = 0.0 if math.isnan(v.spp) else v.spp

    return replace(
        v,
        fbrem=fbrem,
        deta=deta,
        dphi=dphi,
        eop=eop,
        ele_eopout=ele_eopout,
        detacalo=detacalo,
        e1x5e5x5=e1x5e5x5,
        r9=r9,
        gsfchi2=gsfchi2,
        kfchi2=kfchi2,
        spp=spp,
    )


def electron_d0_pv(
    d0: float,
    vertex_x: float | None,
    vertex_y: float | None,
    track_phi: float,
) -> float:
    """Return the transverse impact parameter relative to a vertex.

    With no vertex (``None`` coordinates) the sentinel 9999 is returned.
    """
    if vertex_x is None or vertex_y is None:
        return NO_VERTEX_D0
    return d0 - vertex_x * math.sin(track_phi) + vertex_y * math.cos(track_phi)


def _bin_count(mva_type: MVAType, use_binned_version: bool) -> int:
    return BIN_COUNTS[mva_type] if use_binned_version else 1


def reader_layout(mva_type: MVAType, bin_index: int, use_binned_version: bool = True) -> ReaderSpec:
    """Return the ordered inputs of classifier ``mva_type`` in ``bin_index``."""
    mva_type = MVAType(mva_type)
    count = _bin_count(mva_type, use_binned_version)
    if isinstance(bin_index, bool) or not 0 <= bin_index < count:
        raise InvalidInputError(f"bin index must be in 0..{count - 1}, got {bin_index!r}")

    spec = ReaderSpec()
    if mva_type is MVAType.ISO_RINGS:
        names: tuple[str, ...] = _ISO_RING_NAMES
    else:
        names = _ID_VARIABLES
        if bin_index in _PRESHOWER_BINS or not use_binned_version:
            names += ("PreShowerOverRaw",)
        if mva_type is MVAType.TRIG:
            names += ("d0", "ip3d")
    for name in names:
        spec.add_variable(name)
    spec.add_spectator("eta")
    spec.add_spectator("pt")
    return spec


def mva_bin_for(mva_type: MVAType, eta: float, pt: float) -> int:
    """Return the bin of classifier ``mva_type`` for an electron at ``eta``, ``pt``.

    Undefined (NaN) inputs fall in the first bin.
    """
    pt_threshold, edges = _BINNING[MVAType(mva_type)]
    abs_eta = abs(eta)
    if math.isnan(abs_eta) or math.isnan(pt):
        return 0
    eta_bin = bisect_right(edges, abs_eta)
    pt_bin = 0 if pt < pt_threshold else 1
    return pt_bin * (len(edges) + 1) + eta_bin