"""The `Content-Range` header."""

from __future__ import annotations

from dataclasses import dataclass

from typedheaders.core import HeaderError, SingleValueHeader

_U64_MAX = 0xFFFFFFFFFFFFFFFF
_BYTES = "bytes"


def _parse_u64(text: str) -> int:
    digits = text[1:] if text.startswith("+") else text
    if not digits or not (digits.isascii() and digits.isdigit()):
        raise HeaderError(f"not an unsigned integer: {text!r}")
    number = int(digits)
    if number > _U64_MAX:
        raise HeaderError(f"number out of range: {text!r}")
    return number


def _split_in_two(text: str, separator: str) -> tuple[str, str]:
    left, sep, right = text.partition(separator)
    if not sep:
        raise HeaderError(f"missing {separator!r} in {text!r}")
    return left, right


@dataclass(frozen=True)
class ContentRangeSpec:
    """A content range: a byte range, or a range in an unregistered unit.

    For bytes, ``range`` is the first and last byte (None when the request
    could not be satisfied) and ``instance_length`` the total length (None
    when unknown). For any other unit, ``resp`` holds the range text as is.
    """

    unit: str = _BYTES
    range: tuple[int, int] | None = None
    instance_length: int | None = None
    resp: str | None = None

    def __post_init__(self) -> None:
        if self.unit == _BYTES:
            if self.resp is not None:
                raise ValueError("a byte range takes no free-form response")
            if self.range is not None:
                object.__setattr__(self, "range", tuple(self.range))
        else:
            if self.range is not None or self.instance_length is not None:
                raise ValueError("only byte ranges carry positions and lengths")
            if self.resp is None:
                raise ValueError("an unregistered range needs a response")

    @classmethod
    def unregistered(cls, unit: str, resp: str) -> ContentRangeSpec:
        """A range in a unit not registered at IANA."""
        return cls(unit, resp=resp)

    @property
    def is_bytes(self) -> bool:
        return self.unit == _BYTES

    @classmethod
    def parse(cls, text: str) -> ContentRangeSpec:
        """Parse ``unit range``, raising HeaderError when it is malformed."""
        unit, resp = _split_in_two(text, " ")
        if unit != _BYTES:
            return cls.unregistered(unit, resp)
        range_text, length_text = _split_in_two(resp, "/")
        instance_length = None if length_text == "*" else _parse_u64(length_text)
        if range_text == "*":
            byte_range = None
        else:
            first_text, last_text = _split_in_two(range_text, "-")
            first = _parse_u64(first_text)
            last = _parse_u64(last_text)
            if last < first:
                raise HeaderError("last byte comes before first byte")
            byte_range = (first, last)
        return cls(range=byte_range, instance_length=instance_length)

    def __str__(self) -> str:
        if not self.is_bytes:
            return f"{self.unit} {self.resp}"
        if self.range is None:
            positions = "*"
        else:
            first, last = self.range
            positions = f"{first}-{last}"
        length = "*" if self.instance_length is None else str(self.instance_length)
        return f"{_BYTES} {positions}/{length}"


class ContentRange(SingleValueHeader):
    """`Content-Range` header: the part of the representation being sent."""

    header_name = "Content-Range"

    @classmethod
    def parse_value(cls, text: str) -> ContentRangeSpec:
        return ContentRangeSpec.parse(text)