import pytest

from hwwval.mva import InvalidInputError, MVAError, NotInitializedError, ReaderSpec


def test_variables_keep_declaration_order():
    spec = ReaderSpec()
    spec.add_variable("fbrem").add_variable("kfchi2").add_variable("deta")
    assert spec.variables == ["fbrem", "kfchi2", "deta"]


def test_spectators_are_separate_from_variables():
    spec = ReaderSpec().add_variable("fbrem").add_spectator("eta").add_spectator("pt")
    assert spec.variables == ["fbrem"]
    assert spec.spectators == ["eta", "pt"]


def test_inputs_follow_variable_order_not_mapping_order():
    spec = ReaderSpec().add_variable("b").add_variable("a")
    assert spec.inputs({"a": 1.0, "b": 2.0}) == (2.0, 1.0)


def test_inputs_ignore_spectators_and_extra_values():
    spec = ReaderSpec().add_variable("x").add_spectator("eta")
    assert spec.inputs({"x": 3.5, "eta": 1.2, "unused": 9.0}) == (3.5,)


def test_inputs_convert_to_float():
    spec = ReaderSpec().add_variable("kfhits")
    result = spec.inputs({"kfhits": 7})
    assert result == (7.0,)
    assert isinstance(result[0], float)


def test_missing_value_raises():
    spec = ReaderSpec().add_variable("x").add_variable("y")
    with pytest.raises(InvalidInputError, match="y"):
        spec.inputs({"x": 1.0})


def test_duplicate_variable_raises():
    spec = ReaderSpec().add_variable("R9")
    with pytest.raises(InvalidInputError):
        spec.add_variable("R9")


def test_variable_clashing_with_spectator_raises():
    spec = ReaderSpec().add_spectator("pt")
    with pytest.raises(InvalidInputError):
        spec.add_variable("pt")


def test_empty_name_raises():
    with pytest.raises(InvalidInputError):
        ReaderSpec().add_spectator("")


def test_error_hierarchy():
    with pytest.raises(MVAError):
        raise NotInitializedError("not ready")
    with pytest.raises(MVAError):
        ReaderSpec().inputs({}) if False else ReaderSpec().add_variable("a").inputs({})