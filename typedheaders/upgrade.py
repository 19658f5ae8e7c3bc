"""The `Upgrade` header and the protocols it names."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar

from typedheaders.core import CaselessStr, ListHeader


@dataclass(frozen=True)
class ProtocolName:
    """A protocol identifier; case-sensitive except for ``websocket``."""

    class Kind(Enum):
        HTTP = "HTTP"
        TLS = "TLS"
        WEBSOCKET = "websocket"
        H2C = "h2c"
        UNREGISTERED = "unregistered"

    kind: ProtocolName.Kind
    text: str | None = None

    HTTP: ClassVar[ProtocolName]
    TLS: ClassVar[ProtocolName]
    WEBSOCKET: ClassVar[ProtocolName]
    H2C: ClassVar[ProtocolName]

    def __post_init__(self) -> None:
        if self.kind is ProtocolName.Kind.UNREGISTERED:
            if self.text is None:
                raise ValueError("an unregistered protocol needs a name")
        elif self.text is not None:
            raise ValueError(f"{self.kind.value} takes no name")

    @classmethod
    def parse(cls, text: str) -> ProtocolName:
        """Parse a protocol name."""
        if text == "HTTP":
            return cls.HTTP
        if text == "TLS":
            return cls.TLS
        if text == "h2c":
            return cls.H2C
        if CaselessStr(text) == "websocket":
            return cls.WEBSOCKET
        return cls(cls.Kind.UNREGISTERED, text)

    def __str__(self) -> str:
        if self.kind is ProtocolName.Kind.UNREGISTERED:
            return self.text
        return self.kind.value


ProtocolName.HTTP = ProtocolName(ProtocolName.Kind.HTTP)
ProtocolName.TLS = ProtocolName(ProtocolName.Kind.TLS)
ProtocolName.WEBSOCKET = ProtocolName(ProtocolName.Kind.WEBSOCKET)
ProtocolName.H2C = ProtocolName(ProtocolName.Kind.H2C)


@dataclass(frozen=True)
class Protocol:
    """A protocol named in the `Upgrade` header, with an optional version."""

    name: ProtocolName
    version: str | None = None

    @classmethod
    def parse(cls, text: str) -> Protocol:
        """Parse ``name[/version]``."""
        name, sep, version = text.partition("/")
        return cls(ProtocolName.parse(name), version if sep else None)

    def __str__(self) -> str:
        if self.version is None:
            return str(self.name)
        return f"{self.name}/{self.version}"


class Upgrade(ListHeader):
    """`Upgrade` header: protocols to switch to, in order of preference."""

    header_name = "Upgrade"

    @classmethod
    def parse_item(cls, text: str) -> Protocol:
        return Protocol.parse(text)