"""Unit tests for kernel error hierarchy."""

from __future__ import annotations

import json
import pickle

import pytest

from nullsafe.kernel.errors import (
    AbsentValueError,
    BaseError,
    DomainError,
    NoSuchElementError,
    NullValueError,
)


class TestBaseError:
    def test_message_is_stored(self) -> None:
        err = BaseError("something went wrong")
        assert err.message == "something went wrong"

    def test_default_message(self) -> None:
        assert BaseError().message == BaseError.default_message

    def test_default_code(self) -> None:
        assert BaseError("m").code == "base_error"

    def test_custom_code(self) -> None:
        err = BaseError("m", code="custom")
        assert err.code == "custom"

    def test_to_dict_basic(self) -> None:
        err = BaseError("m", code="my_code", detail={"key": "val"})
        assert err.to_dict() == {"code": "my_code", "message": "m", "detail": {"key": "val"}}

    def test_to_dict_includes_cause_repr(self) -> None:
        err = BaseError("wrapper", cause=ValueError("original"))
        d = err.to_dict()
        assert "original" in d["cause"]

    def test_cause_sets_dunder_cause(self) -> None:
        cause = RuntimeError("root")
        err = BaseError("wrap", cause=cause)
        assert err.__cause__ is cause

    def test_str_is_valid_json(self) -> None:
        err = BaseError("oops", code="oops", detail={"x": 1})
        parsed = json.loads(str(err))
        assert parsed["code"] == "oops"
        assert parsed["message"] == "oops"

    def test_repr_contains_code_and_message(self) -> None:
        r = repr(BaseError("hello", code="hi"))
        assert r == "BaseError(code='hi', message='hello')"


# ---------------------------------------------------------------------------
# AbsentValueError
# ---------------------------------------------------------------------------


class TestAbsentValueError:
    def test_no_argument_form(self) -> None:
        err = AbsentValueError()
        assert err.message == "No value present"
        assert err.code == "no_such_element"
        assert err.cause is None

    def test_message_form(self) -> None:
        assert AbsentValueError("user not loaded").message == "user not loaded"

    def test_message_and_cause_form(self) -> None:
        cause = KeyError("id")
        err = AbsentValueError("lookup failed", cause=cause)
        assert err.cause is cause
        assert err.__cause__ is cause

    def test_hierarchy(self) -> None:
        err = AbsentValueError()
        assert isinstance(err, DomainError)
        assert isinstance(err, BaseError)
        assert isinstance(err, LookupError)

    def test_alias(self) -> None:
        assert NoSuchElementError is AbsentValueError

    def test_from_dict_reconstructs(self) -> None:
        original = AbsentValueError("gone", detail={"key": "k1"}, cause=KeyError("k1"))
        rebuilt = AbsentValueError.from_dict(original.to_dict())
        assert isinstance(rebuilt, AbsentValueError)
        assert rebuilt.message == "gone"
        assert rebuilt.code == "no_such_element"
        assert rebuilt.detail == {"key": "k1"}
        assert rebuilt.cause is None

    def test_pickle_round_trip(self) -> None:
        err = AbsentValueError("gone", detail={"n": 1})
        clone = pickle.loads(pickle.dumps(err))
        assert isinstance(clone, AbsentValueError)
        assert clone.message == "gone"
        assert clone.code == "no_such_element"
        assert clone.detail == {"n": 1}

    def test_is_raisable(self) -> None:
        with pytest.raises(AbsentValueError):
            raise AbsentValueError()


class TestNullValueError:
    def test_defaults(self) -> None:
        err = NullValueError()
        assert err.code == "null_value"
        assert err.message == "Value must not be None"

    def test_is_value_error(self) -> None:
        assert isinstance(NullValueError(), ValueError)
        assert isinstance(NullValueError(), DomainError)
