"""The `Strict-Transport-Security` header."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from typedheaders.core import (
    CaselessStr,
    Header,
    HeaderError,
    RawValue,
    from_one_raw_str,
)

_U64_MAX = 0xFFFFFFFFFFFFFFFF


def _parse_u64(text: str) -> int:
    digits = text[1:] if text.startswith("+") else text
    if not digits or not (digits.isascii() and digits.isdigit()):
        raise HeaderError(f"not an unsigned integer: {text!r}")
    number = int(digits)
    if number > _U64_MAX:
        raise HeaderError(f"number out of range: {text!r}")
    return number


@dataclass(frozen=True)
class StrictTransportSecurity(Header):
    """`Strict-Transport-Security` header: an HSTS policy."""

    header_name = "Strict-Transport-Security"

    max_age: int
    include_subdomains: bool = False

    @classmethod
    def including_subdomains(cls, max_age: int) -> StrictTransportSecurity:
        """A policy that covers subdomains too."""
        return cls(max_age, True)

    @classmethod
    def excluding_subdomains(cls, max_age: int) -> StrictTransportSecurity:
        """A policy for this host only."""
        return cls(max_age, False)

    @classmethod
    def parse(cls, text: str) -> StrictTransportSecurity:
        """Parse the directives; ``max-age`` is required and none may repeat."""
        max_age: int | None = None
        include_subdomains = False
        for directive in text.split(";"):
            directive = directive.strip()
            if CaselessStr(directive) == "includeSubdomains":
                if include_subdomains:
                    raise HeaderError("includeSubdomains given twice")
                include_subdomains = True
                continue
            name, sep, value = directive.partition("=")
            if sep and CaselessStr(name.strip()) == "max-age":
                age = _parse_u64(value.strip().strip('"'))
                if max_age is not None:
                    raise HeaderError("max-age given twice")
                max_age = age
        if max_age is None:
            raise HeaderError("max-age is missing")
        return cls(max_age, include_subdomains)

    @classmethod
    def parse_header(cls, raw: Sequence[RawValue]) -> StrictTransportSecurity:
        return from_one_raw_str(raw, cls.parse)

    def fmt_header(self) -> str:
        if self.include_subdomains:
            return f"max-age={self.max_age}; includeSubdomains"
        return f"max-age={self.max_age}"