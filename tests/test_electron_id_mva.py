import logging

import pytest

from hwwval.electron_id_inputs import ElectronIDVariables, isolation_inputs, reader_variables
from hwwval.electron_id_mva import DEFAULT_METHOD_NAME, ElectronIDMVA
from hwwval.mva import InvalidInputError, NotInitializedError

FILES = [f"bin{i}.xml" for i in range(6)]


class Recorder:
    """Reader factory that records bookings and evaluations."""

    def __init__(self):
        self.booked = []
        self.evaluated = []

    def __call__(self, method_name, weights_file, spec):
        index = len(self.booked)
        self.booked.append((method_name, weights_file, spec))

        def evaluate(inputs):
            self.evaluated.append((index, inputs))
            return float(index)

        return evaluate


def make(version=1):
    recorder = Recorder()
    mva = ElectronIDMVA()
    mva.initialize("BDTG method", version, FILES, recorder)
    return mva, recorder


def test_fresh_instance_is_not_initialized():
    mva = ElectronIDMVA()
    assert mva.is_initialized() is False
    assert mva.method_name == DEFAULT_METHOD_NAME
    with pytest.raises(NotInitializedError):
        mva.mva_value(ElectronIDVariables(pt=25.0, eta=0.1))


@pytest.mark.parametrize("version", [0, 4, True])
def test_invalid_version_rejected(version):
    mva = ElectronIDMVA()
    with pytest.raises(InvalidInputError):
        mva.initialize("m", version, FILES, Recorder())
    assert mva.is_initialized() is False


def test_wrong_number_of_weight_files_rejected():
    mva = ElectronIDMVA()
    with pytest.raises(InvalidInputError):
        mva.initialize("m", 2, FILES[:5], Recorder())
    assert mva.is_initialized() is False


@pytest.mark.parametrize("version", [1, 2, 3])
def test_books_one_reader_per_bin_in_order(version):
    mva, recorder = make(version)
    assert mva.is_initialized() is True
    assert mva.version == version
    assert [b[1] for b in recorder.booked] == FILES
    for index, (method, _, spec) in enumerate(recorder.booked):
        assert method == "BDTG method"
        assert spec.variables == reader_variables(version, index).variables


@pytest.mark.parametrize(
    "eta, pt, expected",
    [(0.5, 10.0, 0), (1.2, 15.0, 1), (2.0, 20.0, 2), (-0.3, 25.0, 3), (1.2, 25.0, 4), (-2.0, 30.0, 5)],
)
def test_routes_to_bin_reader(eta, pt, expected):
    mva, recorder = make(2)
    assert mva.mva_value(ElectronIDVariables(pt=pt, eta=eta)) == float(expected)
    assert recorder.evaluated[-1][0] == expected


def test_version_one_inputs_in_declared_order():
    mva, recorder = make(1)
    variables = ElectronIDVariables(
        pt=12.0,
        eta=0.2,
        sigma_ieta_ieta=1.0,
        deta_in=2.0,
        dphi_in=3.0,
        fbrem=4.0,
        e_over_p=5.0,
        eseed_cluster_over_pout=6.0,
        sigma_iphi_iphi=7.0,
        nbrem=8.0,
        one_over_e_minus_one_over_p=9.0,
        eseed_cluster_over_pin=10.0,
        d0=99.0,
    )
    mva.mva_value(variables)
    assert recorder.evaluated[-1] == (0, (1.0, 2.0, 3.0, 4.0, 5.0, 6.0, 7.0, 8.0, 9.0, 10.0))


def test_version_three_uses_corrected_isolation():
    mva, recorder = make(3)
    variables = ElectronIDVariables(
        pt=30.0,
        eta=1.7,
        preshower_over_raw=0.25,
        charged_iso_03=3.0,
        gamma_iso_03=2.0,
        neutral_hadron_iso_04=1.5,
    )
    mva.mva_value(variables, rho=7.0)
    index, inputs = recorder.evaluated[-1]
    assert index == 5
    spec = reader_variables(3, 5)
    received = dict(zip(spec.variables, inputs))
    expected = isolation_inputs(variables, 7.0)
    for name, value in expected.items():
        assert received[name] == pytest.approx(value)
    assert received["PreShowerOverRaw"] == 0.25


def test_version_three_zero_pt_rejected():
    mva, _ = make(3)
    with pytest.raises(InvalidInputError):
        mva.mva_value(ElectronIDVariables(pt=0.0, eta=0.1))


def test_reinitialize_replaces_readers():
    mva, _ = make(1)
    second = Recorder()
    mva.initialize("other", 2, FILES, second)
    assert mva.method_name == "other"
    assert mva.version == 2
    mva.mva_value(ElectronIDVariables(pt=25.0, eta=0.1))
    assert second.evaluated[-1][0] == 3
    assert len(second.evaluated[-1][1]) == len(reader_variables(2, 3).variables)


def test_print_debug_logs_response(caplog):
    mva, _ = make(2)
    with caplog.at_level(logging.DEBUG, logger="hwwval.electron_id_mva"):
        mva.mva_value(ElectronIDVariables(pt=25.0, eta=1.2), print_debug=True)
    assert any("MVABin 4" in record.getMessage() for record in caplog.records)


def test_no_debug_log_by_default(caplog):
    mva, _ = make(2)
    with caplog.at_level(logging.DEBUG, logger="hwwval.electron_id_mva"):
        mva.mva_value(ElectronIDVariables(pt=25.0, eta=1.2))
    assert not any("MVABin" in record.getMessage() for record in caplog.records)