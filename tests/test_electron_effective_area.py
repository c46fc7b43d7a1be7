import math

import pytest

from hwwval.electron_effective_area import (
    ElectronEffectiveAreaType,
    electron_effective_area,
)

T = ElectronEffectiveAreaType


def test_barrel_gamma_iso_03():
    assert electron_effective_area(T.GAMMA_ISO_03, 0.5) == pytest.approx(0.045)


def test_forward_gamma_iso_04():
    assert electron_effective_area(T.GAMMA_ISO_04, 2.4) == pytest.approx(1.258)


def test_hover_e_in_second_bin():
    assert electron_effective_area(T.HOVER_E, 1.2) == pytest.approx(0.00022)


@pytest.mark.parametrize("area_type", list(T))
@pytest.mark.parametrize("eta", [0.3, 1.1, 1.7, 2.1, 2.4])
def test_symmetric_in_eta(area_type, eta):
    assert electron_effective_area(area_type, eta) == electron_effective_area(area_type, -eta)


@pytest.mark.parametrize("area_type", list(T))
@pytest.mark.parametrize("eta", [2.5, 3.0, -4.0])
def test_zero_outside_acceptance(area_type, eta):
    assert electron_effective_area(area_type, eta) == 0.0


@pytest.mark.parametrize(
    "area_type", [T.CHARGED_ISO_03, T.CHARGED_ISO_04, T.NEUTRAL_HADRON_ISO_007]
)
@pytest.mark.parametrize("eta", [0.0, 1.2, 1.8, 2.1, 2.3])
def test_charged_and_inner_neutral_are_zero(area_type, eta):
    assert electron_effective_area(area_type, eta) == 0.0


@pytest.mark.parametrize(
    "edge, inside, below",
    [(1.0, 1.2, 0.9), (1.479, 1.7, 1.4), (2.0, 2.1, 1.9), (2.25, 2.4, 2.2)],
)
def test_lower_edges_belong_to_upper_bin(edge, inside, below):
    value = electron_effective_area(T.GAMMA_ISO_03, edge)
    assert value == electron_effective_area(T.GAMMA_ISO_03, inside)
    assert value != electron_effective_area(T.GAMMA_ISO_03, below)


def test_gamma_iso_grows_towards_forward_region():
    values = [electron_effective_area(T.GAMMA_ISO_03, eta) for eta in (0.5, 1.2, 1.7, 2.1, 2.4)]
    assert values == sorted(values)


def test_nan_eta_gives_zero():
    assert electron_effective_area(T.GAMMA_ISO_04, math.nan) == 0.0


def test_accepts_plain_integer_type():
    assert electron_effective_area(2, 0.5) == electron_effective_area(T.GAMMA_ISO_03, 0.5)


def test_unknown_type_raises():
    with pytest.raises(ValueError):
        electron_effective_area(42, 0.5)