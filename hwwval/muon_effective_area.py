"""Effective areas used for pile-up correction of muon isolation."""

from __future__ import annotations

import enum
import math
from bisect import bisect_right

__all__ = [
    "MuonEffectiveAreaType",
    "MuonEffectiveAreaTarget",
    "muon_effective_area",
]


class MuonEffectiveAreaType(enum.IntEnum):
    """Kinds of isolation sums for which an effective area may be defined."""

    TRK_ISO_03 = 0
    ECAL_ISO_03 = 1
    HCAL_ISO_03 = 2
    TRK_ISO_05 = 3
    ECAL_ISO_05 = 4
    HCAL_ISO_05 = 5
    CHARGED_ISO_03 = 6
    GAMMA_ISO_03 = 7
    NEUTRAL_HADRON_ISO_03 = 8
    GAMMA_AND_NEUTRAL_HADRON_ISO_03 = 9
    CHARGED_ISO_04 = 10
    GAMMA_ISO_04 = 11
    NEUTRAL_HADRON_ISO_04 = 12
    GAMMA_AND_NEUTRAL_HADRON_ISO_04 = 13
    GAMMA_ISO_DR_0P0_TO_0P1 = 14
    GAMMA_ISO_DR_0P1_TO_0P2 = 15
    GAMMA_ISO_DR_0P2_TO_0P3 = 16
    GAMMA_ISO_DR_0P3_TO_0P4 = 17
    GAMMA_ISO_DR_0P4_TO_0P5 = 18
    NEUTRAL_HADRON_ISO_DR_0P0_TO_0P1 = 19
    NEUTRAL_HADRON_ISO_DR_0P1_TO_0P2 = 20
    NEUTRAL_HADRON_ISO_DR_0P2_TO_0P3 = 21
    NEUTRAL_HADRON_ISO_DR_0P3_TO_0P4 = 22
    NEUTRAL_HADRON_ISO_DR_0P4_TO_0P5 = 23
    GAMMA_ISO_05 = 24
    NEUTRAL_ISO_05 = 25


class MuonEffectiveAreaTarget(enum.IntEnum):
    """Data-taking period or simulation the effective areas were derived for."""

    NO_CORR = 0
    DATA_2011 = 1
    SUMMER11_MC = 2
    FALL11_MC = 3
    DATA_2012 = 4


# Upper edges of the |eta| bins; the last bin is open-ended.
_ETA_EDGES = (1.0, 1.479, 2.0, 2.2, 2.3)

_T = MuonEffectiveAreaType

_TABLES: dict[MuonEffectiveAreaTarget, dict[MuonEffectiveAreaType, tuple[float, ...]]] = {
    MuonEffectiveAreaTarget.DATA_2012: {
        _T.GAMMA_ISO_04: (0.50419, 0.30582, 0.19765, 0.28723, 0.52529, 0.48818),
        _T.NEUTRAL_HADRON_ISO_04: (0.16580, 0.25904, 0.24695, 0.22021, 0.34045, 0.21592),
    },
    MuonEffectiveAreaTarget.DATA_2011: {
        _T.GAMMA_ISO_DR_0P0_TO_0P1: (0.004, 0.002, 0.002, 0.000, 0.000, 0.005),
        _T.GAMMA_ISO_DR_0P1_TO_0P2: (0.011, 0.008, 0.005, 0.008, 0.008, 0.011),
        _T.GAMMA_ISO_DR_0P2_TO_0P3: (0.023, 0.016, 0.010, 0.014, 0.017, 0.021),
        _T.GAMMA_ISO_DR_0P3_TO_0P4: (0.036, 0.026, 0.017, 0.023, 0.028, 0.032),
        _T.GAMMA_ISO_DR_0P4_TO_0P5: (0.051, 0.037, 0.028, 0.033, 0.042, 0.052),
        _T.NEUTRAL_HADRON_ISO_DR_0P0_TO_0P1: (0.002, 0.001, 0.001, 0.001, 0.005, 0.007),
        _T.NEUTRAL_HADRON_ISO_DR_0P1_TO_0P2: (0.005, 0.008, 0.009, 0.009, 0.010, 0.014),
        _T.NEUTRAL_HADRON_ISO_DR_0P2_TO_0P3: (0.010, 0.015, 0.017, 0.017, 0.019, 0.024),
        _T.NEUTRAL_HADRON_ISO_DR_0P3_TO_0P4: (0.015, 0.021, 0.024, 0.032, 0.038, 0.038),
        _T.NEUTRAL_HADRON_ISO_DR_0P4_TO_0P5: (0.020, 0.026, 0.033, 0.045, 0.051, 0.114),
        _T.GAMMA_ISO_05: (0.05317, 0.03502, 0.03689, 0.05221, 0.06668, 0.0744),
        _T.NEUTRAL_ISO_05: (0.06408, 0.07557, 0.08864, 0.11492, 0.13784, 0.18745),
    },
    MuonEffectiveAreaTarget.SUMMER11_MC: {
        _T.GAMMA_ISO_DR_0P0_TO_0P1: (0.000, 0.000, 0.000, 0.000, 0.000, 0.006),
        _T.GAMMA_ISO_DR_0P1_TO_0P2: (0.012, 0.007, 0.006, 0.008, 0.019, 0.015),
        _T.GAMMA_ISO_DR_0P2_TO_0P3: (0.023, 0.018, 0.013, 0.016, 0.024, 0.036),
        _T.GAMMA_ISO_DR_0P3_TO_0P4: (0.038, 0.027, 0.019, 0.033, 0.041, 0.062),
        _T.GAMMA_ISO_DR_0P4_TO_0P5: (0.055, 0.038, 0.032, 0.052, 0.066, 0.093),
        _T.NEUTRAL_HADRON_ISO_DR_0P0_TO_0P1: (0.002, 0.005, 0.000, 0.000, 0.000, 0.003),
        _T.NEUTRAL_HADRON_ISO_DR_0P1_TO_0P2: (0.005, 0.006, 0.009, 0.008, 0.009, 0.013),
        _T.NEUTRAL_HADRON_ISO_DR_0P2_TO_0P3: (0.009, 0.013, 0.015, 0.016, 0.020, 0.024),
        _T.NEUTRAL_HADRON_ISO_DR_0P3_TO_0P4: (0.012, 0.019, 0.021, 0.025, 0.030, 0.044),
        _T.NEUTRAL_HADRON_ISO_DR_0P4_TO_0P5: (0.016, 0.026, 0.030, 0.038, 0.048, 0.118),
    },
    MuonEffectiveAreaTarget.FALL11_MC: {
        _T.GAMMA_ISO_DR_0P0_TO_0P1: (0.004, 0.002, 0.003, 0.009, 0.003, 0.011),
        _T.GAMMA_ISO_DR_0P1_TO_0P2: (0.012, 0.008, 0.006, 0.012, 0.019, 0.024),
        _T.GAMMA_ISO_DR_0P2_TO_0P3: (0.026, 0.020, 0.012, 0.022, 0.027, 0.034),
        _T.GAMMA_ISO_DR_0P3_TO_0P4: (0.042, 0.033, 0.022, 0.036, 0.059, 0.068),
        _T.GAMMA_ISO_DR_0P4_TO_0P5: (0.060, 0.043, 0.036, 0.055, 0.092, 0.115),
        _T.NEUTRAL_HADRON_ISO_DR_0P0_TO_0P1: (0.002, 0.004, 0.004, 0.004, 0.010, 0.014),
        _T.NEUTRAL_HADRON_ISO_DR_0P1_TO_0P2: (0.005, 0.007, 0.009, 0.009, 0.015, 0.017),
        _T.NEUTRAL_HADRON_ISO_DR_0P2_TO_0P3: (0.009, 0.015, 0.016, 0.018, 0.022, 0.026),
        _T.NEUTRAL_HADRON_ISO_DR_0P3_TO_0P4: (0.013, 0.021, 0.026, 0.032, 0.037, 0.042),
        _T.NEUTRAL_HADRON_ISO_DR_0P4_TO_0P5: (0.017, 0.026, 0.035, 0.046, 0.063, 0.135),
    },
}


def muon_effective_area(
    area_type: MuonEffectiveAreaType,
    sc_eta: float,
    target: MuonEffectiveAreaTarget = MuonEffectiveAreaTarget.DATA_2011,
) -> float:
    """Return the effective area for ``area_type`` at ``sc_eta`` for ``target``.

    Types without a table for the chosen target, a NaN eta and the
    ``NO_CORR`` target all give zero.
    """
    area_type = MuonEffectiveAreaType(area_type)
    target = MuonEffectiveAreaTarget(target)
    table = _TABLES.get(target, {}).get(area_type)
    abs_eta = abs(sc_eta)
    if table is None or math.isnan(abs_eta):
        return 0.0
    return table[bisect_right(_ETA_EDGES, abs_eta)]