"""
Tests for leaf schemas.
"""

from datetime import date, datetime, timezone
from enum import Enum

import pytest

from warden import (
    MISSING,
    Any,
    AsBoolean,
    AsDate,
    AsNumber,
    AsString,
    Boolean,
    Date,
    EnumMember,
    Err,
    Literal,
    Number,
    Ok,
    String,
    Unknown,
    ValidationError,
)

SAMPLES = {
    "string": "hello",
    "number": 42,
    "boolean": True,
    "null": None,
    "undefined": MISSING,
    "array": [1, 2],
    "object": {"a": 1},
}


class Color(Enum):
    RED = "red"
    GREEN = "green"


class TestString:
    @pytest.mark.parametrize("kind, value", SAMPLES.items())
    def test_only_strings_pass(self, kind, value):
        result = String()(value)
        assert result.is_ok() == (kind == "string")

    def test_mismatch_message(self):
        result = String()(1)
        assert result == Err((ValidationError("Expecting type 'string'. Got type 'number'."),))

    def test_custom_message(self):
        assert String("Name must be text")(None).errors[0].message == "Name must be text"


class TestNumber:
    @pytest.mark.parametrize("kind, value", SAMPLES.items())
    def test_only_numbers_pass(self, kind, value):
        result = Number()(value)
        assert result.is_ok() == (kind == "number")

    def test_accepts_int_and_float(self):
        assert Number()(1) == Ok(1)
        assert Number()(1.5) == Ok(1.5)
        assert Number()(10**400) == Ok(10**400)

    def test_bool_is_not_a_number(self):
        result = Number()(True)
        assert result.errors[0].message == "Expecting type 'number'. Got type 'boolean'."

    @pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
    def test_rejects_non_finite(self, value):
        result = Number()(value)
        assert isinstance(result, Err)
        message = result.errors[0].message
        assert message == "Expecting value to be a finite 'number'."
        assert message != Number()("x").errors[0].message


class TestBoolean:
    @pytest.mark.parametrize("kind, value", SAMPLES.items())
    def test_only_booleans_pass(self, kind, value):
        result = Boolean()(value)
        assert result.is_ok() == (kind == "boolean")

    def test_zero_is_not_false(self):
        assert isinstance(Boolean()(0), Err)


class TestDate:
    def test_accepts_dates(self):
        day = date(2020, 1, 1)
        moment = datetime(2020, 1, 1, 12, tzinfo=timezone.utc)
        assert Date()(day) == Ok(day)
        assert Date()(moment) == Ok(moment)

    def test_rejects_strings(self):
        result = Date()("2020-01-01")
        assert result.errors[0].message == "Expecting type 'date'. Got type 'string'."


class TestLiteral:
    def test_matches_constant(self):
        assert Literal("admin")("admin") == Ok("admin")
        assert Literal(None)(None) == Ok(None)
        assert Literal(False)(False) == Ok(False)

    def test_rejects_other_values(self):
        result = Literal("admin")("user")
        assert result.errors[0].message == "Expecting literal 'admin'. Got 'user'."

    def test_does_not_cross_kinds(self):
        assert isinstance(Literal(1)(True), Err)
        assert isinstance(Literal(True)(1), Err)
        assert isinstance(Literal(None)(MISSING), Err)
        assert Literal(1)(1.0) == Ok(1.0)

    @pytest.mark.parametrize("constant", [[1], {"a": 1}, date(2020, 1, 1), MISSING])
    def test_rejects_non_scalar_constant(self, constant):
        with pytest.raises(TypeError):
            Literal(constant)

    def test_rejects_nan_constant(self):
        with pytest.raises(TypeError):
            Literal(float("nan"))


class TestEnumMember:
    def test_enum_class(self):
        schema = EnumMember(Color)
        assert schema("red") == Ok("red")
        assert isinstance(schema("blue"), Err)

    def test_iterable(self):
        schema = EnumMember(["active", "inactive", 3])
        assert schema(3) == Ok(3)
        assert isinstance(schema("pending"), Err)

    def test_message_lists_values(self):
        result = EnumMember(Color)("blue")
        assert result.errors[0].message == "Expecting value to be one of 'red' | 'green'. Got 'blue'."

    def test_does_not_cross_kinds(self):
        assert isinstance(EnumMember([1, 2])(True), Err)

    def test_values_frozen_at_construction(self):
        allowed = ["a"]
        schema = EnumMember(allowed)
        allowed.append("b")
        assert isinstance(schema("b"), Err)

    def test_construction_errors(self):
        with pytest.raises(ValueError):
            EnumMember([])
        with pytest.raises(TypeError):
            EnumMember([[1]])

    def test_rejects_nan_member(self):
        with pytest.raises(TypeError):
            EnumMember(["a", float("nan")])

    def test_rejects_bare_string(self):
        with pytest.raises(TypeError):
            EnumMember("abc")
        with pytest.raises(TypeError):
            EnumMember(b"abc")


class TestPassThrough:
    @pytest.mark.parametrize("value", list(SAMPLES.values()))
    def test_any(self, value):
        result = Any()(value)
        assert isinstance(result, Ok)
        assert result.value is value

    @pytest.mark.parametrize("value", list(SAMPLES.values()))
    def test_unknown(self, value):
        result = Unknown()(value)
        assert isinstance(result, Ok)
        assert result.value is value


class TestCoercedPrimitives:
    def test_as_number(self):
        assert AsNumber()("42") == Ok(42)
        assert AsNumber()("4.5") == Ok(4.5)
        assert AsNumber()(3) == Ok(3)

    def test_as_number_rejects_unparsable(self):
        result = AsNumber()("abc")
        assert result.errors[0].message == "Expecting value to be a finite 'number'."
        assert isinstance(AsNumber()("1_000"), Err)

    def test_as_string(self):
        assert AsString()(1) == Ok("1")
        assert AsString()(True) == Ok("true")
        assert isinstance(AsString()(MISSING), Err)

    def test_as_boolean(self):
        assert AsBoolean()("yes") == Ok(True)
        assert AsBoolean()("no") == Ok(False)
        assert AsBoolean()(0) == Ok(False)

    def test_as_date(self):
        assert AsDate()("2020-01-01T00:00:00Z") == Ok(datetime(2020, 1, 1, tzinfo=timezone.utc))
        assert AsDate()(0) == Ok(datetime(1970, 1, 1, tzinfo=timezone.utc))

    def test_as_date_rejects_unparsable(self):
        result = AsDate()("tomorrow")
        assert result.errors[0].message == "Expecting type 'date'. Got type 'string'."
