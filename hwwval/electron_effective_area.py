"""Effective areas used for pile-up correction of electron isolation."""

from __future__ import annotations

import enum
import math
from bisect import bisect_right

__all__ = ["ElectronEffectiveAreaType", "electron_effective_area"]


class ElectronEffectiveAreaType(enum.IntEnum):
    """Kinds of electron quantities for which an effective area is defined."""

    CHARGED_ISO_03 = 0
    NEUTRAL_HADRON_ISO_03 = 1
    GAMMA_ISO_03 = 2
    GAMMA_ISO_VETO_ETA_STRIP_03 = 3
    CHARGED_ISO_04 = 4
    NEUTRAL_HADRON_ISO_04 = 5
    GAMMA_ISO_04 = 6
    GAMMA_ISO_VETO_ETA_STRIP_04 = 7
    NEUTRAL_HADRON_ISO_007 = 8
    HOVER_E = 9
    HCAL_DEPTH1_OVER_ECAL = 10
    HCAL_DEPTH2_OVER_ECAL = 11


# Upper edges of the |eta| bins; beyond the last edge no area is defined.
_ETA_EDGES = (1.0, 1.479, 2.0, 2.25, 2.5)

_T = ElectronEffectiveAreaType

_TABLE: dict[ElectronEffectiveAreaType, tuple[float, ...]] = {
    _T.CHARGED_ISO_03: (0.000, 0.000, 0.000, 0.000, 0.000),
    _T.NEUTRAL_HADRON_ISO_03: (0.017, 0.025, 0.030, 0.022, 0.018),
    _T.GAMMA_ISO_03: (0.045, 0.052, 0.170, 0.623, 1.198),
    _T.GAMMA_ISO_VETO_ETA_STRIP_03: (0.014, 0.030, 0.134, 0.516, 1.049),
    _T.CHARGED_ISO_04: (0.000, 0.000, 0.000, 0.000, 0.000),
    _T.NEUTRAL_HADRON_ISO_04: (0.034, 0.050, 0.060, 0.055, 0.073),
    _T.GAMMA_ISO_04: (0.079, 0.073, 0.187, 0.659, 1.258),
    _T.GAMMA_ISO_VETO_ETA_STRIP_04: (0.014, 0.030, 0.134, 0.517, 1.051),
    _T.NEUTRAL_HADRON_ISO_007: (0.000, 0.000, 0.000, 0.000, 0.000),
    _T.HOVER_E: (0.00016, 0.00022, 0.00030, 0.00054, 0.00082),
    _T.HCAL_DEPTH1_OVER_ECAL: (0.00016, 0.00022, 0.00026, 0.00045, 0.00066),
    _T.HCAL_DEPTH2_OVER_ECAL: (0.00000, 0.00000, 0.00002, 0.00003, 0.00004),
}


def electron_effective_area(area_type: ElectronEffectiveAreaType, eta: float) -> float:
    """Return the effective area for ``area_type`` at pseudorapidity ``eta``.

    Outside ``|eta| < 2.5`` and for a NaN eta the area is zero.
    """
    values = _TABLE[ElectronEffectiveAreaType(area_type)]
    abs_eta = abs(eta)
    if math.isnan(abs_eta):
        return 0.0
    index = bisect_right(_ETA_EDGES, abs_eta)
    if index >= len(values):
        return 0.0
    return values[index]