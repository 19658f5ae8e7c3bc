"""The `Host` header."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from typedheaders.core import Header, HeaderError, RawValue, from_one_raw_str

_U16_MAX = 0xFFFF
_DEFAULT_PORTS = frozenset({80, 443})


def _parse_port(text: str) -> int | None:
    digits = text[1:] if text.startswith("+") else text
    if not digits or not (digits.isascii() and digits.isdigit()):
        return None
    number = int(digits)
    if number > _U16_MAX:
        return None
    return number


@dataclass(frozen=True)
class Host(Header):
    """`Host` header: a host name with an optional port."""

    header_name = "Host"

    hostname: str
    port: int | None = None

    @classmethod
    def parse_header(cls, raw: Sequence[RawValue]) -> Host:
        """Split ``host[:port]``; a port that is not a number is dropped."""
        text = from_one_raw_str(raw, str)
        if text[1:2] == "[":
            close = text.rfind("]")
            if close < 0:
                raise HeaderError(f"unterminated IPv6 address: {text!r}")
            split_at = close + 1 if len(text) > close + 2 else None
        else:
            colon = text.rfind(":")
            split_at = colon if colon >= 0 else None
        if split_at is None:
            return cls(text)
        return cls(text[:split_at], _parse_port(text[split_at + 1:]))

    def fmt_header(self) -> str:
        if self.port is None or self.port in _DEFAULT_PORTS:
            return self.hostname
        return f"{self.hostname}:{self.port}"