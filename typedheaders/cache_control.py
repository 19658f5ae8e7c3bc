"""The `Cache-Control` header and its directives."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar

from typedheaders.core import (
    HeaderError,
    ListHeader,
    RawValue,
    fmt_comma_delimited,
    from_one_comma_delimited,
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


@dataclass(frozen=True)
class CacheDirective:
    """One directive of the `Cache-Control` header.

    Flag directives carry nothing, the timed ones (``max-age`` and friends)
    carry a number of seconds, and extensions carry a name and an optional
    argument.
    """

    class Kind(Enum):
        NO_CACHE = "no-cache"
        NO_STORE = "no-store"
        NO_TRANSFORM = "no-transform"
        ONLY_IF_CACHED = "only-if-cached"
        MAX_AGE = "max-age"
        MAX_STALE = "max-stale"
        MIN_FRESH = "min-fresh"
        MUST_REVALIDATE = "must-revalidate"
        PUBLIC = "public"
        PRIVATE = "private"
        PROXY_REVALIDATE = "proxy-revalidate"
        S_MAXAGE = "s-maxage"
        EXTENSION = "extension"

    kind: CacheDirective.Kind
    seconds: int | None = None
    name: str | None = None
    argument: str | None = None

    NO_CACHE: ClassVar[CacheDirective]
    NO_STORE: ClassVar[CacheDirective]
    NO_TRANSFORM: ClassVar[CacheDirective]
    ONLY_IF_CACHED: ClassVar[CacheDirective]
    MUST_REVALIDATE: ClassVar[CacheDirective]
    PUBLIC: ClassVar[CacheDirective]
    PRIVATE: ClassVar[CacheDirective]
    PROXY_REVALIDATE: ClassVar[CacheDirective]

    def __post_init__(self) -> None:
        if self.kind in _TIMED_KINDS:
            if self.name is not None or self.argument is not None:
                raise ValueError(f"{self.kind.value} takes only seconds")
            if (
                not isinstance(self.seconds, int)
                or isinstance(self.seconds, bool)
                or not 0 <= self.seconds <= _U32_MAX
            ):
                raise ValueError(f"{self.kind.value} needs seconds between 0 and {_U32_MAX}")
        elif self.kind is CacheDirective.Kind.EXTENSION:
            if self.name is None:
                raise ValueError("an extension directive needs a name")
            if self.seconds is not None:
                raise ValueError("an extension directive takes no seconds")
        elif self.seconds is not None or self.name is not None or self.argument is not None:
            raise ValueError(f"{self.kind.value} takes no value")

    @classmethod
    def max_age(cls, seconds: int) -> CacheDirective:
        """``max-age=seconds``."""
        return cls(cls.Kind.MAX_AGE, seconds=seconds)

    @classmethod
    def max_stale(cls, seconds: int) -> CacheDirective:
        """``max-stale=seconds``."""
        return cls(cls.Kind.MAX_STALE, seconds=seconds)

    @classmethod
    def min_fresh(cls, seconds: int) -> CacheDirective:
        """``min-fresh=seconds``."""
        return cls(cls.Kind.MIN_FRESH, seconds=seconds)

    @classmethod
    def s_maxage(cls, seconds: int) -> CacheDirective:
        """``s-maxage=seconds``."""
        return cls(cls.Kind.S_MAXAGE, seconds=seconds)

    @classmethod
    def extension(cls, name: str, argument: str | None = None) -> CacheDirective:
        """An extension directive with an optional argument."""
        return cls(cls.Kind.EXTENSION, name=name, argument=argument)

    @classmethod
    def parse(cls, text: str) -> CacheDirective:
        """Parse one directive, raising HeaderError when it is malformed."""
        flag = _FLAGS_BY_TEXT.get(text)
        if flag is not None:
            return flag
        if not text:
            raise HeaderError("empty cache directive")
        name, sep, value = text.partition("=")
        if not sep:
            return cls.extension(text)
        if not value:
            raise HeaderError(f"cache directive without argument: {text!r}")
        value = value.strip('"')
        timed = _TIMED_BY_TEXT.get(name)
        if timed is not None:
            return cls(timed, seconds=_parse_u32(value))
        return cls.extension(name, value)

    def __str__(self) -> str:
        if self.kind in _TIMED_KINDS:
            return f"{self.kind.value}={self.seconds}"
        if self.kind is CacheDirective.Kind.EXTENSION:
            if self.argument is None:
                return self.name
            return f"{self.name}={self.argument}"
        return self.kind.value


_TIMED_KINDS = frozenset(
    {
        CacheDirective.Kind.MAX_AGE,
        CacheDirective.Kind.MAX_STALE,
        CacheDirective.Kind.MIN_FRESH,
        CacheDirective.Kind.S_MAXAGE,
    }
)
_TIMED_BY_TEXT = {kind.value: kind for kind in _TIMED_KINDS}

CacheDirective.NO_CACHE = CacheDirective(CacheDirective.Kind.NO_CACHE)
CacheDirective.NO_STORE = CacheDirective(CacheDirective.Kind.NO_STORE)
CacheDirective.NO_TRANSFORM = CacheDirective(CacheDirective.Kind.NO_TRANSFORM)
CacheDirective.ONLY_IF_CACHED = CacheDirective(CacheDirective.Kind.ONLY_IF_CACHED)
CacheDirective.MUST_REVALIDATE = CacheDirective(CacheDirective.Kind.MUST_REVALIDATE)
CacheDirective.PUBLIC = CacheDirective(CacheDirective.Kind.PUBLIC)
CacheDirective.PRIVATE = CacheDirective(CacheDirective.Kind.PRIVATE)
CacheDirective.PROXY_REVALIDATE = CacheDirective(CacheDirective.Kind.PROXY_REVALIDATE)

_FLAGS_BY_TEXT = {
    directive.kind.value: directive
    for directive in (
        CacheDirective.NO_CACHE,
        CacheDirective.NO_STORE,
        CacheDirective.NO_TRANSFORM,
        CacheDirective.ONLY_IF_CACHED,
        CacheDirective.MUST_REVALIDATE,
        CacheDirective.PUBLIC,
        CacheDirective.PRIVATE,
        CacheDirective.PROXY_REVALIDATE,
    )
}


class CacheControl(ListHeader):
    """`Cache-Control` header: directives for caches along the chain."""

    header_name = "Cache-Control"

    @classmethod
    def parse_item(cls, text: str) -> CacheDirective:
        return CacheDirective.parse(text)

    @classmethod
    def parse_header(cls, raw: Sequence[RawValue]) -> CacheControl:
        """Collect the directives of every line; lines that fail to decode are skipped."""
        if isinstance(raw, (bytes, bytearray, str)):
            raise TypeError("raw header values must be a sequence of lines")
        directives: list[CacheDirective] = []
        for line in raw:
            try:
                directives.extend(from_one_comma_delimited(line, CacheDirective.parse))
            except HeaderError:
                continue
        if not directives:
            raise HeaderError("no cache directive found")
        return cls(directives)

    def fmt_header(self) -> str:
        return fmt_comma_delimited(self.items)