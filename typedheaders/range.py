"""The `Range` header and its byte range specs."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from enum import Enum

from typedheaders.core import (
    Header,
    HeaderError,
    RawValue,
    from_one_comma_delimited,
    from_one_raw_str,
)

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


@dataclass(frozen=True)
class ByteRangeSpec:
    """One byte range: ``start-end``, ``start-`` or ``-count``."""

    class Kind(Enum):
        FROM_TO = "from-to"
        ALL_FROM = "all-from"
        LAST = "last"

    kind: ByteRangeSpec.Kind
    start: int | None = None
    end: int | None = None

    @classmethod
    def from_to(cls, start: int, end: int) -> ByteRangeSpec:
        """All bytes from ``start`` to ``end`` inclusive."""
        return cls(cls.Kind.FROM_TO, start, end)

    @classmethod
    def all_from(cls, start: int) -> ByteRangeSpec:
        """All bytes from ``start`` on."""
        return cls(cls.Kind.ALL_FROM, start=start)

    @classmethod
    def last(cls, count: int) -> ByteRangeSpec:
        """The last ``count`` bytes."""
        return cls(cls.Kind.LAST, end=count)

    @classmethod
    def parse(cls, text: str) -> ByteRangeSpec:
        """Parse one range spec, raising HeaderError when it is malformed."""
        start, sep, end = text.partition("-")
        if not sep:
            raise HeaderError(f"missing '-' in byte range: {text!r}")
        if not start:
            return cls.last(_parse_u64(end))
        if not end:
            return cls.all_from(_parse_u64(start))
        first = _parse_u64(start)
        last = _parse_u64(end)
        if first > last:
            raise HeaderError(f"byte range ends before it starts: {text!r}")
        return cls.from_to(first, last)

    def __str__(self) -> str:
        if self.kind is ByteRangeSpec.Kind.FROM_TO:
            return f"{self.start}-{self.end}"
        if self.kind is ByteRangeSpec.Kind.ALL_FROM:
            return f"{self.start}-"
        return f"-{self.end}"


@dataclass(frozen=True)
class Range(Header):
    """`Range` header: byte ranges, or a range set in an unregistered unit."""

    header_name = "Range"

    unit: str = _BYTES
    ranges: tuple[ByteRangeSpec, ...] = ()
    range_set: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "ranges", tuple(self.ranges))
        if self.unit == _BYTES:
            if self.range_set is not None:
                raise ValueError("a byte range takes no free-form range set")
        else:
            if self.ranges:
                raise ValueError("only byte ranges carry byte range specs")
            if self.range_set is None:
                raise ValueError("an unregistered range needs a range set")

    @property
    def is_bytes(self) -> bool:
        return self.unit == _BYTES

    @classmethod
    def bytes(cls, start: int, end: int) -> Range:
        """The common ``bytes=start-end`` range."""
        return cls(ranges=(ByteRangeSpec.from_to(start, end),))

    @classmethod
    def bytes_multi(cls, ranges: Iterable[tuple[int, int]]) -> Range:
        """Several ``start-end`` byte ranges."""
        return cls(ranges=tuple(ByteRangeSpec.from_to(start, end) for start, end in ranges))

    @classmethod
    def unregistered(cls, unit: str, range_set: str) -> Range:
        """A range in a unit not registered at IANA."""
        return cls(unit, range_set=range_set)

    @classmethod
    def parse(cls, text: str) -> Range:
        """Parse ``unit=set``; unparseable byte range specs are skipped."""
        unit, sep, rest = text.partition("=")
        if not sep:
            raise HeaderError(f"missing '=' in range: {text!r}")
        if unit == _BYTES:
            specs = from_one_comma_delimited(rest, ByteRangeSpec.parse)
            if not specs:
                raise HeaderError("no valid byte range")
            return cls(ranges=tuple(specs))
        if unit and rest:
            return cls.unregistered(unit, rest)
        raise HeaderError(f"malformed range: {text!r}")

    @classmethod
    def parse_header(cls, raw: Sequence[RawValue]) -> Range:
        return from_one_raw_str(raw, cls.parse)

    def fmt_header(self) -> str:
        if self.is_bytes:
            return f"{_BYTES}=" + ",".join(str(spec) for spec in self.ranges)
        return f"{self.unit}={self.range_set}"