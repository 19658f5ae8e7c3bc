"""CORS headers: allowed origin, preflight cache age and header name lists."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from typedheaders.core import (
    CaselessStr,
    Header,
    HeaderError,
    ListHeader,
    RawValue,
    SingleValueHeader,
)

_U32_MAX = 0xFFFFFFFF


def _parse_u32(text: str) -> int:
    digits = text[1:] if text.startswith("+") else text
    if not digits or not (digits.isascii() and digits.isdigit()):
        raise HeaderError(f"not an unsigned integer: {text!r}")
    number = int(digits)
    if number > _U32_MAX:
        raise HeaderError(f"number out of range: {text!r}")
    return number


@dataclass
class AccessControlAllowOrigin(Header):
    """`Access-Control-Allow-Origin` header: ``*``, ``null`` or one origin."""

    header_name = "Access-Control-Allow-Origin"

    origin: str

    @property
    def is_any(self) -> bool:
        """True when every origin is allowed (``*``)."""
        return self.origin == "*"

    @property
    def is_null(self) -> bool:
        """True for the hidden ``null`` origin."""
        return self.origin == "null"

    @classmethod
    def parse_header(cls, raw: Sequence[RawValue]) -> AccessControlAllowOrigin:
        if isinstance(raw, (bytes, bytearray, str)):
            raise TypeError("raw header values must be a sequence of lines")
        if len(raw) != 1:
            raise HeaderError("expected exactly one header line")
        value = raw[0]
        if isinstance(value, str):
            return cls(value)
        try:
            return cls(bytes(value).decode("utf-8"))
        except UnicodeDecodeError as exc:
            raise HeaderError("header value is not valid UTF-8") from exc

    def fmt_header(self) -> str:
        return self.origin

    def __str__(self) -> str:
        return self.fmt_header()


class AccessControlMaxAge(SingleValueHeader):
    """`Access-Control-Max-Age` header: seconds a preflight may be cached."""

    header_name = "Access-Control-Max-Age"

    @classmethod
    def parse_value(cls, text: str) -> int:
        return _parse_u32(text)


class AccessControlAllowHeaders(ListHeader):
    """`Access-Control-Allow-Headers` header: header names usable in the request."""

    header_name = "Access-Control-Allow-Headers"

    @classmethod
    def parse_item(cls, text: str) -> CaselessStr:
        return CaselessStr(text)


class AccessControlRequestHeaders(ListHeader):
    """`Access-Control-Request-Headers` header: header names the request will use."""

    header_name = "Access-Control-Request-Headers"

    @classmethod
    def parse_item(cls, text: str) -> CaselessStr:
        return CaselessStr(text)