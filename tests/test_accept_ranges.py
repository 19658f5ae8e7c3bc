import pytest

from typedheaders.accept_ranges import AcceptRanges, RangeUnit
from typedheaders.core import to_header_line


def _normalised(text):
    return "".join(text.lower().split(" "))


@pytest.mark.parametrize("value", [b"bytes", b"none", b"unknown-unit", b"bytes, unknown-unit"])
def test_round_trip(value):
    header = AcceptRanges.parse_header([value])
    assert _normalised(header.fmt_header()) == _normalised(value.decode())


def test_parse_items():
    header = AcceptRanges.parse_header([b"bytes, unknown-unit"])
    assert header.items == [RangeUnit.BYTES, RangeUnit.unregistered("unknown-unit")]


def test_parse_none():
    assert AcceptRanges.parse_header([b"none"]).items == [RangeUnit.NONE]


def test_range_unit_parse():
    assert RangeUnit.parse("bytes") is RangeUnit.BYTES
    assert RangeUnit.parse("none") is RangeUnit.NONE
    assert RangeUnit.parse("nibbles") == RangeUnit.unregistered("nibbles")


def test_format_example():
    header = AcceptRanges(
        [
            RangeUnit.unregistered("nibbles"),
            RangeUnit.BYTES,
            RangeUnit.unregistered("doublets"),
            RangeUnit.unregistered("quadlets"),
        ]
    )
    assert header.fmt_header() == "nibbles, bytes, doublets, quadlets"


def test_header_line():
    assert to_header_line(AcceptRanges([RangeUnit.BYTES])) == "Accept-Ranges: bytes\r\n"


def test_unregistered_needs_name():
    with pytest.raises(ValueError):
        RangeUnit(RangeUnit.Kind.UNREGISTERED)