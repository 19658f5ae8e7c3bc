import pytest

from typedheaders.core import HeaderError
from typedheaders.pragma import Pragma


def test_parse_header():
    assert Pragma.parse_header([b"no-cache"]) == Pragma.NO_CACHE
    assert Pragma.parse_header([b"FoObar"]) == Pragma("FoObar")
    with pytest.raises(HeaderError):
        Pragma.parse_header([b""])


def test_no_cache_any_case():
    header = Pragma.parse_header([b"NO-Cache"])
    assert header.is_no_cache
    assert header.fmt_header() == "no-cache"


def test_extension_round_trip():
    header = Pragma.parse_header([b"foobar"])
    assert not header.is_no_cache
    assert Pragma.parse_header([header.fmt_header()]) == header


def test_multiple_lines_rejected():
    with pytest.raises(HeaderError):
        Pragma.parse_header([b"no-cache", b"no-cache"])