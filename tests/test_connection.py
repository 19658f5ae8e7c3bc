import pytest

from typedheaders.connection import Connection, ConnectionOption
from typedheaders.core import to_header_line


def _normalise(text):
    return text.lower().replace(" ", "")


@pytest.mark.parametrize("value", [b"close", b"keep-alive", b"upgrade"])
def test_roundtrip(value):
    parsed = Connection.parse_header([value])
    assert _normalise(str(parsed)) == _normalise(value.decode())


def test_parse():
    assert Connection.parse_header([b"close"]) == Connection.close()
    assert Connection.parse_header([b"keep-alive"]) == Connection.keep_alive()
    expected = Connection([ConnectionOption(ConnectionOption.Kind.HEADER, "upgrade")])
    assert Connection.parse_header([b"upgrade"]) == expected


def test_keywords_are_case_sensitive():
    option = ConnectionOption.parse("Close")
    assert option.kind is ConnectionOption.Kind.HEADER
    assert option != ConnectionOption.CLOSE
    assert str(option) == "Close"


def test_header_option_is_caseless():
    assert ConnectionOption.parse("Upgrade") == ConnectionOption.parse("upgrade")


def test_multiple_options_and_lines():
    parsed = Connection.parse_header([b"keep-alive, upgrade", b"close"])
    assert parsed.items == [
        ConnectionOption.KEEP_ALIVE,
        ConnectionOption(ConnectionOption.Kind.HEADER, "upgrade"),
        ConnectionOption.CLOSE,
    ]


def test_header_line():
    assert to_header_line(Connection.close()) == "Connection: close\r\n"


def test_option_validation():
    with pytest.raises(ValueError):
        ConnectionOption(ConnectionOption.Kind.HEADER)
    with pytest.raises(ValueError):
        ConnectionOption(ConnectionOption.Kind.CLOSE, "upgrade")