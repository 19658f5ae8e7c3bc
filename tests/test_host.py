import pytest

from typedheaders.core import HeaderError, to_header_line
from typedheaders.host import Host


def test_host_without_port():
    assert Host.parse_header([b"foo.com"]) == Host("foo.com", None)


def test_host_with_port():
    assert Host.parse_header([b"foo.com:8080"]) == Host("foo.com", 8080)


def test_bench_value():
    host = Host.parse_header([b"foo.com:3000"])
    assert host.hostname == "foo.com"
    assert host.port == 3000
    assert host.fmt_header() == "foo.com:3000"


def test_non_numeric_port_is_dropped():
    assert Host.parse_header([b"foo.com:abc"]) == Host("foo.com", None)


def test_default_ports_are_not_written():
    assert Host("foo.com", 80).fmt_header() == "foo.com"
    assert Host("foo.com", 443).fmt_header() == "foo.com"
    assert Host("foo.com").fmt_header() == "foo.com"


def test_round_trip_with_port():
    host = Host("foo.com", 8080)
    assert Host.parse_header([host.fmt_header()]) == host


def test_header_line():
    assert to_header_line(Host("foo.com", 8080)) == "Host: foo.com:8080\r\n"


@pytest.mark.parametrize("raw", [[], [b""], [b"foo.com", b"bar.com"]])
def test_invalid(raw):
    with pytest.raises(HeaderError):
        Host.parse_header(raw)