"""Tests for mesostic.core.result module."""

import pytest

from mesostic.core.errors import EmptySpineError
from mesostic.core.result import Err, Ok


class TestOk:
    def test_inspection(self):
        ok = Ok(42)
        assert ok.is_ok()
        assert not ok.is_err()
        assert ok.unwrap() == 42
        assert ok.unwrap_or(0) == 42

    def test_map(self):
        assert Ok(10).map(lambda x: x * 2).unwrap() == 20

    def test_map_err_is_noop(self):
        ok = Ok(1)
        assert ok.map_err(lambda e: RuntimeError("x")) is ok

    def test_to_dict(self):
        assert Ok(3).to_dict() == {"ok": True, "value": 3}

    def test_pattern_matching(self):
        match Ok("value"):
            case Ok(value):
                assert value == "value"
            case _:
                pytest.fail("expected Ok")


class TestErr:
    def test_inspection(self):
        err = Err(EmptySpineError())
        assert err.is_err()
        assert not err.is_ok()
        assert err.unwrap_or("default") == "default"

    def test_unwrap_raises_carried_error(self):
        with pytest.raises(EmptySpineError):
            Err(EmptySpineError()).unwrap()

    def test_map_is_noop(self):
        assert Err(ValueError("oops")).map(lambda x: x * 2).unwrap_or(0) == 0

    def test_map_err(self):
        result = Err(ValueError("oops")).map_err(lambda e: RuntimeError(str(e)))
        assert isinstance(result.error, RuntimeError)

    def test_inspect_err(self):
        seen = []
        Err(ValueError("oops")).inspect_err(seen.append)
        Ok(1).inspect_err(seen.append)
        assert len(seen) == 1

    def test_to_dict_with_mesostic_error(self):
        data = Err(EmptySpineError()).to_dict()
        assert data["ok"] is False
        assert data["error"]["code"] == "EMPTY_SPINE"

    def test_to_dict_with_plain_exception(self):
        data = Err(ValueError("oops")).to_dict()
        assert data["error"] == {"error_type": "ValueError", "message": "oops"}
