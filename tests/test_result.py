import pytest

from conduit.errors import Unexpected
from conduit.result import Err, Ok, UnwrapError


def test_ok_maps_value_and_ignores_map_err():
    result = Ok(2).map(lambda v: v * 10).map_err(lambda e: "never")
    assert result == Ok(20)
    assert result.is_ok() and not result.is_err()
    assert result.unwrap() == 20


def test_err_ignores_map_and_maps_error():
    cause = RuntimeError("down")
    result = Err("raw").map(lambda v: v * 10).map_err(lambda e: Unexpected(e, cause))
    assert result == Err(Unexpected("raw", cause))
    assert result.is_err() and not result.is_ok()


def test_err_unwrap_raises_with_error_attached():
    error = Unexpected("Failed to check existence of x")
    with pytest.raises(UnwrapError) as excinfo:
        Err(error).unwrap()
    assert excinfo.value.error is error


def test_unexpected_str_includes_cause():
    assert str(Unexpected("Failed")) == "Failed"
    assert str(Unexpected("Failed", ValueError("bad"))) == "Failed: ValueError('bad')"
