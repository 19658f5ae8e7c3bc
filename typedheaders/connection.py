"""The `Connection` header and its options."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar

from typedheaders.core import CaselessStr, ListHeader


@dataclass(frozen=True)
class ConnectionOption:
    """One option of the `Connection` header.

    Besides ``keep-alive`` and ``close`` an option may name another header,
    compared without regard to ASCII case.
    """

    class Kind(Enum):
        KEEP_ALIVE = "keep-alive"
        CLOSE = "close"
        HEADER = "header"

    kind: ConnectionOption.Kind
    header: str | None = None

    KEEP_ALIVE: ClassVar[ConnectionOption]
    CLOSE: ClassVar[ConnectionOption]

    def __post_init__(self) -> None:
        if self.kind is ConnectionOption.Kind.HEADER:
            if self.header is None:
                raise ValueError("a header option needs a header name")
            object.__setattr__(self, "header", CaselessStr(self.header))
        elif self.header is not None:
            raise ValueError(f"{self.kind.value} takes no header name")

    @classmethod
    def parse(cls, text: str) -> ConnectionOption:
        """Parse one option; the keywords match exactly, anything else is a header name."""
        if text == "keep-alive":
            return cls.KEEP_ALIVE
        if text == "close":
            return cls.CLOSE
        return cls(cls.Kind.HEADER, text)

    def __str__(self) -> str:
        if self.kind is ConnectionOption.Kind.HEADER:
            return str.__str__(self.header)
        return self.kind.value


ConnectionOption.KEEP_ALIVE = ConnectionOption(ConnectionOption.Kind.KEEP_ALIVE)
ConnectionOption.CLOSE = ConnectionOption(ConnectionOption.Kind.CLOSE)


class Connection(ListHeader):
    """`Connection` header: control options for the current connection."""

    header_name = "Connection"

    @classmethod
    def parse_item(cls, text: str) -> ConnectionOption:
        return ConnectionOption.parse(text)

    @classmethod
    def close(cls) -> Connection:
        """A `Connection: close` header."""
        return cls([ConnectionOption.CLOSE])

    @classmethod
    def keep_alive(cls) -> Connection:
        """A `Connection: keep-alive` header."""
        return cls([ConnectionOption.KEEP_ALIVE])