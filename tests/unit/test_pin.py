"""
Unit tests for PIN value object.
"""

import pytest
from lemonqwest_auth.domain.pin import PIN
from lemonqwest_auth.domain.errors import InvalidPinFormatError


def test_pin_creation():
    pin = PIN.create("0420")
    assert pin.value == "0420"


@pytest.mark.parametrize("value", ["", "123", "12345", "12a4", "１２３４", None, 1234])
def test_pin_rejects_bad_format(value):
    """Test format validation."""
    with pytest.raises(InvalidPinFormatError):
        PIN.create(value)
    assert PIN.is_valid_format(value) is False


def test_invalid_pin_format_is_value_error():
    with pytest.raises(ValueError):
        PIN.create("abc")


def test_pin_matches_exactly():
    """Test exact match only, no normalization."""
    pin = PIN.create("1234")

    assert pin.matches("1234")
    assert not pin.matches("4321")
    assert not pin.matches(" 1234")
    assert not pin.matches("12345")
    assert not pin.matches(None)


def test_pin_equality():
    assert PIN.create("1234") == PIN.create("1234")
    assert PIN.create("1234") != PIN.create("1235")


def test_pin_is_masked():
    """Test the secret never appears in repr/str."""
    pin = PIN.create("1234")

    assert "1234" not in repr(pin)
    assert "1234" not in str(pin)


def test_pin_is_immutable():
    pin = PIN.create("1234")
    with pytest.raises(AttributeError):
        pin.value = "0000"
