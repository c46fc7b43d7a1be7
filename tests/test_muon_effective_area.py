import math

import pytest

from hwwval.muon_effective_area import (
    MuonEffectiveAreaTarget as Target,
    MuonEffectiveAreaType as AreaType,
    muon_effective_area,
)


def test_pinned_values_from_tables():
    assert muon_effective_area(AreaType.GAMMA_ISO_04, 0.5, Target.DATA_2012) == pytest.approx(0.50419)
    assert muon_effective_area(AreaType.NEUTRAL_ISO_05, 3.0, Target.DATA_2011) == pytest.approx(0.18745)
    assert muon_effective_area(
        AreaType.NEUTRAL_HADRON_ISO_DR_0P4_TO_0P5, 2.4, Target.FALL11_MC
    ) == pytest.approx(0.135)


def test_default_target_is_data_2011():
    for eta in (0.1, 1.2, 1.7, 2.1, 2.25, 2.4):
        assert muon_effective_area(AreaType.GAMMA_ISO_05, eta) == muon_effective_area(
            AreaType.GAMMA_ISO_05, eta, Target.DATA_2011
        )


@pytest.mark.parametrize("area_type", list(AreaType))
def test_no_correction_is_zero(area_type):
    for eta in (0.0, 1.3, 2.5):
        assert muon_effective_area(area_type, eta, Target.NO_CORR) == 0.0


@pytest.mark.parametrize("target", list(Target))
@pytest.mark.parametrize("eta", [0.3, 1.1, 1.6, 2.05, 2.25, 2.8])
def test_symmetric_in_eta(target, eta):
    for area_type in AreaType:
        assert muon_effective_area(area_type, eta, target) == muon_effective_area(
            area_type, -eta, target
        )


def test_types_without_table_are_zero():
    assert muon_effective_area(AreaType.TRK_ISO_03, 0.5, Target.DATA_2011) == 0.0
    assert muon_effective_area(AreaType.GAMMA_ISO_05, 0.5, Target.DATA_2012) == 0.0
    assert muon_effective_area(AreaType.GAMMA_ISO_04, 0.5, Target.FALL11_MC) == 0.0


def test_bin_lower_edges_are_inclusive():
    area = AreaType.GAMMA_ISO_04
    assert muon_effective_area(area, 1.0, Target.DATA_2012) == muon_effective_area(
        area, 1.2, Target.DATA_2012
    )
    assert muon_effective_area(area, 1.479, Target.DATA_2012) == muon_effective_area(
        area, 1.7, Target.DATA_2012
    )
    assert muon_effective_area(area, 2.3, Target.DATA_2012) == muon_effective_area(
        area, 5.0, Target.DATA_2012
    )
    assert muon_effective_area(area, 0.999, Target.DATA_2012) == muon_effective_area(
        area, 0.0, Target.DATA_2012
    )


def test_nan_eta_gives_zero():
    assert muon_effective_area(AreaType.GAMMA_ISO_04, math.nan, Target.DATA_2012) == 0.0


def test_values_never_negative():
    for target in Target:
        for area_type in AreaType:
            for eta in (0.0, 1.2, 1.6, 2.1, 2.25, 3.0):
                assert muon_effective_area(area_type, eta, target) >= 0.0


def test_invalid_target_rejected():
    with pytest.raises(ValueError):
        muon_effective_area(AreaType.GAMMA_ISO_04, 0.5, 99)


def test_invalid_type_rejected():
    with pytest.raises(ValueError):
        muon_effective_area(99, 0.5, Target.DATA_2012)