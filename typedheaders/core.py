"""Building blocks shared by all typed HTTP headers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable, Iterator, Sequence
from dataclasses import dataclass, field
from typing import Any, ClassVar, TypeVar

T = TypeVar("T")

RawValue = bytes | str

_ASCII_FOLD = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz"
)


class HeaderError(ValueError):
    """Raised when a raw header value cannot be parsed."""


class CaselessStr(str):
    """A string that compares and hashes ignoring ASCII case."""

    __slots__ = ()

    def _folded(self) -> str:
        return str.translate(self, _ASCII_FOLD)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, str):
            return self._folded() == str.translate(other, _ASCII_FOLD)
        return NotImplemented

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self) -> int:
        return hash(self._folded())

    def __repr__(self) -> str:
        return f"CaselessStr({str.__repr__(self)})"


def _decode(value: RawValue) -> str:
    if isinstance(value, str):
        return value
    try:
        return bytes(value).decode("utf-8")
    except UnicodeDecodeError as exc:
        raise HeaderError("header value is not valid UTF-8") from exc


def _check_raw(raw: Sequence[RawValue]) -> None:
    if isinstance(raw, (bytes, bytearray, str)):
        raise TypeError("raw header values must be a sequence of lines")


def from_one_raw_str(raw: Sequence[RawValue], parse: Callable[[str], T]) -> T:
    """Parse a header that must arrive as exactly one non-empty line."""
    _check_raw(raw)
    if len(raw) != 1:
        raise HeaderError("expected exactly one header line")
    text = _decode(raw[0])
    if not text:
        raise HeaderError("empty header value")
    try:
        return parse(text)
    except HeaderError:
        raise
    except ValueError as exc:
        raise HeaderError(str(exc)) from exc


def from_one_comma_delimited(
    value: RawValue, parse: Callable[[str], T]
) -> list[T]:
    """Parse one comma separated line, skipping blank and unparseable items."""
    text = _decode(value)
    items: list[T] = []
    for part in text.split(","):
        part = part.strip()
        if not part:
            continue
        try:
            items.append(parse(part))
        except ValueError:
            continue
    return items


def from_comma_delimited(
    raw: Sequence[RawValue], parse: Callable[[str], T]
) -> list[T]:
    """Parse every line as a comma separated list and join the results."""
    _check_raw(raw)
    items: list[T] = []
    for line in raw:
        items.extend(from_one_comma_delimited(line, parse))
    return items


def fmt_comma_delimited(items: Iterable[Any]) -> str:
    """Format items as a comma separated list."""
    return ", ".join(str(item) for item in items)


def to_header_line(header: Header) -> str:
    """Render a header as a full ``Name: value`` line ending in CRLF."""
    return f"{header.header_name}: {header.fmt_header()}\r\n"


class Header(ABC):
    """A typed HTTP header that can be parsed from and formatted to text."""

    header_name: ClassVar[str]

    @classmethod
    @abstractmethod
    def parse_header(cls, raw: Sequence[RawValue]) -> Header:
        """Build the header from its raw lines, raising HeaderError on failure."""

    @abstractmethod
    def fmt_header(self) -> str:
        """Return the header value as it is sent on the wire."""

    def __str__(self) -> str:
        return self.fmt_header()


@dataclass
class SingleValueHeader(Header):
    """A header carrying a single value parsed from one line."""

    value: Any

    @classmethod
    def parse_value(cls, text: str) -> Any:
        """Turn the raw text into the header's value."""
        return text

    @classmethod
    def parse_header(cls, raw: Sequence[RawValue]) -> SingleValueHeader:
        return cls(from_one_raw_str(raw, cls.parse_value))

    def fmt_header(self) -> str:
        return str(self.value)

    def __str__(self) -> str:
        return self.fmt_header()


@dataclass
class ListHeader(Header):
    """A header carrying a comma separated list of items."""

    items: list = field(default_factory=list)

    def __post_init__(self) -> None:
        self.items = list(self.items)

    @classmethod
    def parse_item(cls, text: str) -> Any:
        """Turn one list element into an item."""
        return text

    @classmethod
    def parse_header(cls, raw: Sequence[RawValue]) -> ListHeader:
        return cls(from_comma_delimited(raw, cls.parse_item))

    def fmt_header(self) -> str:
        return fmt_comma_delimited(self.items)

    def __str__(self) -> str:
        return self.fmt_header()

    def __iter__(self) -> Iterator[Any]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def __getitem__(self, index: Any) -> Any:
        return self.items[index]


@dataclass
class AnyOrListHeader(Header):
    """A header that is either ``*`` (any) or a list of items."""

    items: list | None = None

    def __post_init__(self) -> None:
        if self.items is not None:
            self.items = list(self.items)

    @classmethod
    def any(cls) -> AnyOrListHeader:
        """The ``*`` form, matching anything."""
        return cls(None)

    @property
    def is_any(self) -> bool:
        return self.items is None

    @classmethod
    def parse_item(cls, text: str) -> Any:
        """Turn one list element into an item."""
        return text

    @classmethod
    def parse_header(cls, raw: Sequence[RawValue]) -> AnyOrListHeader:
        _check_raw(raw)
        if len(raw) == 1 and _decode(raw[0]) == "*":
            return cls(None)
        return cls(from_comma_delimited(raw, cls.parse_item))

    def fmt_header(self) -> str:
        if self.items is None:
            return "*"
        return fmt_comma_delimited(self.items)

    def __str__(self) -> str:
        return self.fmt_header()