import pytest

from typedheaders.core import to_header_line
from typedheaders.upgrade import Protocol, ProtocolName, Upgrade


def _unregistered(name):
    return ProtocolName(ProtocolName.Kind.UNREGISTERED, name)


def test_rfc_example():
    raw = b"HTTP/2.0, SHTTP/1.3, IRC/6.9, RTA/x11"
    expected = Upgrade([
        Protocol(ProtocolName.HTTP, "2.0"),
        Protocol(_unregistered("SHTTP"), "1.3"),
        Protocol(_unregistered("IRC"), "6.9"),
        Protocol(_unregistered("RTA"), "x11"),
    ])
    assert Upgrade.parse_header([raw]) == expected
    assert str(expected) == raw.decode()


def test_websocket():
    expected = Upgrade([Protocol(ProtocolName.WEBSOCKET, None)])
    assert Upgrade.parse_header([b"websocket"]) == expected
    assert str(expected) == "websocket"


def test_websocket_is_caseless():
    expected = Upgrade([Protocol(ProtocolName.WEBSOCKET, None)])
    assert Upgrade.parse_header([b"WEbSOCKet"]) == expected


def test_other_names_are_case_sensitive():
    name = ProtocolName.parse("http")
    assert name == _unregistered("http")
    assert name != ProtocolName.HTTP


@pytest.mark.parametrize("text", ["HTTP", "TLS", "h2c", "websocket", "IRC"])
def test_protocol_name_roundtrip(text):
    assert str(ProtocolName.parse(text)) == text


@pytest.mark.parametrize("text", ["HTTP/2.0", "h2c", "RTA/x11", "TLS/1.0"])
def test_protocol_roundtrip(text):
    assert str(Protocol.parse(text)) == text


def test_protocol_splits_at_first_slash():
    protocol = Protocol.parse("IRC/6.9/extra")
    assert protocol.name == _unregistered("IRC")
    assert protocol.version == "6.9/extra"


def test_header_line():
    header = Upgrade([Protocol(ProtocolName.WEBSOCKET)])
    assert to_header_line(header) == "Upgrade: websocket\r\n"


def test_name_validation():
    with pytest.raises(ValueError):
        ProtocolName(ProtocolName.Kind.UNREGISTERED)
    with pytest.raises(ValueError):
        ProtocolName(ProtocolName.Kind.HTTP, "HTTP")