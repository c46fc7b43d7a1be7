"""Inputs, binning and reader layouts of the electron identification classifier."""

from __future__ import annotations

import math
from dataclasses import dataclass

from .electron_effective_area import ElectronEffectiveAreaType, electron_effective_area
from .mva import InvalidInputError, ReaderSpec

__all__ = [
    "ElectronIDVariables",
    "INPUT_NAMES",
    "ISOLATION_NAMES",
    "N_BINS",
    "SUPPORTED_VERSIONS",
    "mva_bin",
    "reader_variables",
    "isolation_inputs",
]

N_BINS = 6
SUPPORTED_VERSIONS = (1, 2, 3)

# Sub-detector boundaries in |eta| and the transverse momentum threshold.
_SUBDET_EDGES = (1.0, 1.479)
_PT_THRESHOLD = 20.0


@dataclass(frozen=True)
class ElectronIDVariables:
    """Per-electron quantities fed to the identification classifier.

    Isolation sums are raw (not divided by pt and not pile-up corrected);
    :func:`isolation_inputs` turns them into classifier inputs.
    """

    pt: float
    eta: float
    sigma_ieta_ieta: float = 0.0
    deta_in: float = 0.0
    dphi_in: float = 0.0
    hover_e: float = 0.0
    d0: float = 0.0
    dz: float = 0.0
    fbrem: float = 0.0
    e_over_p: float = 0.0
    eseed_cluster_over_pout: float = 0.0
    sigma_iphi_iphi: float = 0.0
    nbrem: float = 0.0
    one_over_e_minus_one_over_p: float = 0.0
    eseed_cluster_over_pin: float = 0.0
    ip3d: float = 0.0
    ip3d_sig: float = 0.0
    gsf_track_chi2_over_ndof: float = 0.0
    deta_calo: float = 0.0
    dphi_calo: float = 0.0
    r9: float = 0.0
    sc_eta_width: float = 0.0
    sc_phi_width: float = 0.0
    cov_ieta_iphi: float = 0.0
    preshower_over_raw: float = 0.0
    charged_iso_03: float = 0.0
    neutral_hadron_iso_03: float = 0.0
    gamma_iso_03: float = 0.0
    charged_iso_04: float = 0.0
    neutral_hadron_iso_04: float = 0.0
    gamma_iso_04: float = 0.0


# Classifier input name -> attribute of ElectronIDVariables, for the
# inputs that are taken over unchanged.
INPUT_NAMES: dict[str, str] = {
    "SigmaIEtaIEta": "sigma_ieta_ieta",
    "DEtaIn": "deta_in",
    "DPhiIn": "dphi_in",
    "HoverE": "hover_e",
    "D0": "d0",
    "FBrem": "fbrem",
    "EOverP": "e_over_p",
    "ESeedClusterOverPout": "eseed_cluster_over_pout",
    "SigmaIPhiIPhi": "sigma_iphi_iphi",
    "NBrem": "nbrem",
    "OneOverEMinusOneOverP": "one_over_e_minus_one_over_p",
    "ESeedClusterOverPIn": "eseed_cluster_over_pin",
    "IP3d": "ip3d",
    "IP3dSig": "ip3d_sig",
    "GsfTrackChi2OverNdof": "gsf_track_chi2_over_ndof",
    "dEtaCalo": "deta_calo",
    "dPhiCalo": "dphi_calo",
    "R9": "r9",
    "SCEtaWidth": "sc_eta_width",
    "SCPhiWidth": "sc_phi_width",
    "CovIEtaIPhi": "cov_ieta_iphi",
    "PreShowerOverRaw": "preshower_over_raw",
}

ISOLATION_NAMES = (
    "ChargedIso03",
    "NeutralHadronIso03",
    "GammaIso03",
    "ChargedIso04",
    "NeutralHadronIso04",
    "GammaIso04",
)

_VERSION_1 = (
    "SigmaIEtaIEta",
    "DEtaIn",
    "DPhiIn",
    "FBrem",
    "EOverP",
    "ESeedClusterOverPout",
    "SigmaIPhiIPhi",
    "NBrem",
    "OneOverEMinusOneOverP",
    "ESeedClusterOverPIn",
)

_VERSION_2 = (
    "SigmaIEtaIEta",
    "DEtaIn",
    "DPhiIn",
    "D0",
    "FBrem",
    "EOverP",
    "ESeedClusterOverPout",
    "SigmaIPhiIPhi",
    "NBrem",
    "OneOverEMinusOneOverP",
    "ESeedClusterOverPIn",
    "IP3d",
    "IP3dSig",
)

_VERSION_3_HEAD = (
    "SigmaIEtaIEta",
    "DEtaIn",
    "DPhiIn",
    "D0",
    "FBrem",
    "EOverP",
    "ESeedClusterOverPout",
    "SigmaIPhiIPhi",
    "OneOverEMinusOneOverP",
    "ESeedClusterOverPIn",
    "IP3d",
    "IP3dSig",
    "GsfTrackChi2OverNdof",
    "dEtaCalo",
    "dPhiCalo",
    "R9",
    "SCEtaWidth",
    "SCPhiWidth",
    "CovIEtaIPhi",
)

# Bins covering the endcap, which also take the preshower fraction.
_PRESHOWER_BINS = frozenset({2, 5})


def mva_bin(eta: float, pt: float) -> int:
    """Return the classifier bin (0-5) for an electron at ``eta`` and ``pt``.

    Bins 0-2 hold electrons with pt up to 20 and bins 3-5 those above it;
    within each, the sub-detector is barrel (|eta| < 1.0), outer barrel
    (|eta| < 1.479) or endcap.
    """
    abs_eta = abs(eta)
    if abs_eta < _SUBDET_EDGES[0]:
        subdet = 0
    elif abs_eta < _SUBDET_EDGES[1]:
        subdet = 1
    else:
        subdet = 2
    pt_bin = 1 if pt > _PT_THRESHOLD else 0
    return subdet + 3 * pt_bin


def _check_version(version: int) -> int:
    if isinstance(version, bool) or version not in SUPPORTED_VERSIONS:
        raise InvalidInputError(f"version must be 1, 2 or 3, got {version!r}")
    return int(version)


def _check_bin(bin_index: int) -> int:
    if isinstance(bin_index, bool) or not 0 <= bin_index < N_BINS:
        raise InvalidInputError(f"bin index must be in 0..{N_BINS - 1}, got {bin_index!r}")
    return int(bin_index)


def reader_variables(version: int, bin_index: int) -> ReaderSpec:
    """Return the ordered classifier inputs for ``version`` in ``bin_index``."""
    version = _check_version(version)
    bin_index = _check_bin(bin_index)
    if version == 1:
        names: tuple[str, ...] = _VERSION_1
    elif version == 2:
        names = _VERSION_2
    else:
        names = _VERSION_3_HEAD
        if bin_index in _PRESHOWER_BINS:
            names += ("PreShowerOverRaw",)
        names += ISOLATION_NAMES
    spec = ReaderSpec()
    for name in names:
        spec.add_variable(name)
    return spec


def isolation_inputs(variables: ElectronIDVariables, rho: float) -> dict[str, float]:
    """Return the pile-up corrected, pt-relative isolation inputs.

    ``rho`` is the event energy density used with the effective areas.
    """
    pt = variables.pt
    if pt == 0 or math.isnan(pt):
        raise InvalidInputError(f"electron pt must be non-zero, got {pt!r}")
    eta = variables.eta
    area = ElectronEffectiveAreaType

    def correction(area_type: ElectronEffectiveAreaType) -> float:
        return rho * electron_effective_area(area_type, eta)

    return {
        "ChargedIso03": (variables.charged_iso_03 - correction(area.CHARGED_ISO_03)) / pt,
        "NeutralHadronIso03": (
            variables.neutral_hadron_iso_03
            - correction(area.NEUTRAL_HADRON_ISO_03)
            + correction(area.NEUTRAL_HADRON_ISO_007)
        )
        / pt,
        "GammaIso03": (
            variables.gamma_iso_03
            - correction(area.GAMMA_ISO_03)
            + correction(area.GAMMA_ISO_VETO_ETA_STRIP_03)
        )
        / pt,
        "ChargedIso04": (variables.charged_iso_04 - correction(area.CHARGED_ISO_04)) / pt,
        "NeutralHadronIso04": (
            variables.neutral_hadron_iso_04
            - correction(area.NEUTRAL_HADRON_ISO_04)
            + correction(area.NEUTRAL_HADRON_ISO_007)
        )
        / pt,
        "GammaIso04": (
            variables.gamma_iso_04
            - correction(area.GAMMA_ISO_04)
            + correction(area.GAMMA_ISO_VETO_ETA_STRIP_04)
        )
        / pt,
    }