"""
Tests for derived validators.
"""

from datetime import date

import pytest

from warden import (
    Between,
    Chain,
    Clamp,
    Date,
    Email,
    Err,
    Int,
    Matches,
    Max,
    Min,
    Negative,
    Number,
    Ok,
    Positive,
    String,
    Uuid,
    failure,
)


class TestEmail:
    @pytest.mark.parametrize("value", ["john@doe.com", "a.b+c@sub.example.org"])
    def test_valid(self, value):
        assert Email()(value) == Ok(value)

    @pytest.mark.parametrize("value", ["john", "john@doe", "@doe.com", "john@doe.c"])
    def test_invalid(self, value):
        assert Email()(value) == failure("Expected valid email address")

    def test_type_mismatch_first(self):
        result = Email()(1)
        assert result.errors[0].message == "Expecting type 'string'. Got type 'number'."

    def test_custom_base(self):
        schema = Email(Chain(String(), str.strip))
        assert schema("  john@doe.com ") == Ok("john@doe.com")


class TestUuid:
    def test_valid(self):
        value = "123e4567-e89b-12d3-a456-426614174000"
        assert Uuid()(value) == Ok(value)

    @pytest.mark.parametrize(
        "value", ["123e4567e89b12d3a456426614174000", "not-a-uuid", "123e4567-e89b-12d3-a456-42661417400g"]
    )
    def test_invalid(self, value):
        assert Uuid()(value) == failure("Expected valid uuid")


class TestMatches:
    def test_pattern(self):
        schema = Matches(String(), r"^[a-z]+$")
        assert schema("hello") == Ok("hello")
        assert schema("Hello") == failure("Must match pattern: ^[a-z]+$")

    def test_custom_message(self):
        schema = Matches(String(), r"^\d{3}-\d{4}$", "Expected a phone number")
        assert schema("12-34") == failure("Expected a phone number")


class TestNumbers:
    def test_int(self):
        assert Int(Number())(3) == Ok(3)
        assert Int(Number())(3.0) == Ok(3.0)
        assert Int(Number())(10**400) == Ok(10**400)
        assert Int(Number())(3.5) == failure("Expected number to be an integer")

    def test_positive_negative(self):
        assert Positive(Number())(1) == Ok(1)
        assert isinstance(Positive(Number())(0), Err)
        assert Negative(Number())(-1) == Ok(-1)
        assert isinstance(Negative(Number())(0), Err)

    def test_clamp(self):
        schema = Clamp(Number(), 0, 10)
        assert schema(-5) == Ok(0)
        assert schema(5) == Ok(5)
        assert schema(50) == Ok(10)
        assert isinstance(schema("5"), Err)


class TestBounds:
    def test_number(self):
        assert Min(Number(), 0)(0) == Ok(0)
        assert Min(Number(), 0)(-1) == failure("Expected value to be at least 0")
        assert Max(Number(), 10)(11) == failure("Expected value to be at most 10")

    def test_string_length(self):
        assert Min(String(), 3)("abc") == Ok("abc")
        assert isinstance(Min(String(), 3)("ab"), Err)
        assert isinstance(Max(String(), 2)("abc"), Err)

    def test_date(self):
        schema = Min(Date(), date(2020, 1, 1))
        assert schema(date(2021, 1, 1)) == Ok(date(2021, 1, 1))
        assert isinstance(schema(date(2019, 1, 1)), Err)

    def test_between(self):
        schema = Between(Number(), 0, 10)
        assert schema(0) == Ok(0)
        assert schema(10) == Ok(10)
        assert schema(11) == failure("Must be between 0 and 10")

    def test_between_exclusive(self):
        schema = Between(Number(), 0, 10, inclusive=False)
        assert schema(5) == Ok(5)
        assert isinstance(schema(0), Err)
        assert isinstance(schema(10), Err)
