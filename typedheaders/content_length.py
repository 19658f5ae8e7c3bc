"""The `Content-Length` header."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from typedheaders.core import Header, HeaderError, RawValue

_U64_MAX = 0xFFFFFFFFFFFFFFFF


def _parse_u64(value: RawValue) -> int:
    if isinstance(value, str):
        text = value
    else:
        try:
            text = bytes(value).decode("utf-8")
        except UnicodeDecodeError as exc:
            raise HeaderError("header value is not valid UTF-8") from exc
    digits = text[1:] if text.startswith("+") else text
    if not digits or not (digits.isascii() and digits.isdigit()):
        raise HeaderError(f"not an unsigned integer: {text!r}")
    number = int(digits)
    if number > _U64_MAX:
        raise HeaderError(f"number out of range: {text!r}")
    return number


@dataclass(frozen=True)
class ContentLength(Header):
    """`Content-Length` header: the size of the payload in octets."""

    header_name = "Content-Length"

    length: int

    def __post_init__(self) -> None:
        if (
            not isinstance(self.length, int)
            or isinstance(self.length, bool)
            or not 0 <= self.length <= _U64_MAX
        ):
            raise ValueError(f"content length out of range: {self.length!r}")

    @classmethod
    def parse_header(cls, raw: Sequence[RawValue]) -> ContentLength:
        """Parse the header; repeated lines are accepted only if they all agree."""
        if isinstance(raw, (bytes, bytearray, str)):
            raise TypeError("raw header values must be a sequence of lines")
        if not raw:
            raise HeaderError("no Content-Length value")
        first: int | None = None
        for line in raw:
            value = _parse_u64(line)
            if first is None:
                first = value
            elif value != first:
                raise HeaderError("conflicting Content-Length values")
        return cls(first)

    def fmt_header(self) -> str:
        return str(self.length)

    def __int__(self) -> int:
        return self.length