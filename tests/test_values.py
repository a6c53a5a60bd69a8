"""
Contract tests for field value parsing
"""

import pytest

from procinfo.errors import MalformedValue, UnrecognizedUnit
from procinfo.values import UINT64_MAX, parse_bool, parse_bytes_or_number, parse_uint


def test_kb_suffix_scales_to_bytes() -> None:
    """
    "<N> kB" parses to N * 1024
    """
    assert parse_bytes_or_number("16384 kB") == 16384 * 1024
    assert parse_bytes_or_number("0 kB") == 0


def test_bare_number_is_unchanged() -> None:
    """
    No suffix means a raw count, not bytes
    """
    assert parse_bytes_or_number("1") == 1
    assert parse_bytes_or_number("  512  ") == 512


def test_extra_tokens_after_unit_are_ignored() -> None:
    assert parse_bytes_or_number("2 kB trailing") == 2048


def test_unsupported_unit_reports_suffix() -> None:
    """
    Only kB is a unit; the offending suffix is kept for diagnostics
    """
    with pytest.raises(UnrecognizedUnit) as excinfo:
        parse_bytes_or_number("5 MB")

    assert excinfo.value.unit == "MB"
    assert "MB" in str(excinfo.value)


@pytest.mark.parametrize("value", ["", "   ", "\t"])
def test_empty_value_is_malformed(value: str) -> None:
    with pytest.raises(MalformedValue, match="empty value"):
        parse_bytes_or_number(value)


@pytest.mark.parametrize("value", ["abc kB", "-5", "+5", "1_000", "1.5 kB", "0x10"])
def test_non_unsigned_leading_token_is_malformed(value: str) -> None:
    """
    Signs, separators, decimals and hex are all rejected
    """
    with pytest.raises(MalformedValue):
        parse_bytes_or_number(value)


def test_leading_token_must_fit_uint64() -> None:
    assert parse_bytes_or_number(str(UINT64_MAX)) == UINT64_MAX
    with pytest.raises(MalformedValue):
        parse_bytes_or_number(str(UINT64_MAX + 1))


def test_scaled_overflow_is_malformed() -> None:
    """
    Scaling past 64 bits is an error rather than a silent wrap
    """
    with pytest.raises(MalformedValue, match="overflows"):
        parse_bytes_or_number(f"{UINT64_MAX} kB")


def test_parse_uint_respects_bit_width() -> None:
    assert parse_uint("255", bits=8) == 255
    with pytest.raises(MalformedValue, match="out of range"):
        parse_uint("256", bits=8)


@pytest.mark.parametrize("value", ["1", "t", "T", "true", "TRUE", "True"])
def test_parse_bool_truthy(value: str) -> None:
    assert parse_bool(value) is True


@pytest.mark.parametrize("value", ["0", "f", "F", "false", "FALSE", "False"])
def test_parse_bool_falsy(value: str) -> None:
    assert parse_bool(value) is False


def test_parse_bool_rejects_other_text() -> None:
    with pytest.raises(MalformedValue, match="invalid boolean"):
        parse_bool("yes")
