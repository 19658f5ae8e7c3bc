"""The `Accept-Ranges` header and range units."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar

from typedheaders.core import ListHeader


@dataclass(frozen=True)
class RangeUnit:
    """A range unit: ``bytes``, the keyword ``none``, or an unregistered unit."""

    class Kind(Enum):
        BYTES = "bytes"
        NONE = "none"
        UNREGISTERED = "unregistered"

    kind: RangeUnit.Kind
    text: str | None = None

    BYTES: ClassVar[RangeUnit]
    NONE: ClassVar[RangeUnit]

    def __post_init__(self) -> None:
        if self.kind is RangeUnit.Kind.UNREGISTERED:
            if self.text is None:
                raise ValueError("an unregistered unit needs a name")
        elif self.text is not None:
            raise ValueError(f"{self.kind.value} takes no name")

    @classmethod
    def unregistered(cls, text: str) -> RangeUnit:
        """A unit not registered at IANA."""
        return cls(cls.Kind.UNREGISTERED, text)

    @classmethod
    def parse(cls, text: str) -> RangeUnit:
        """Parse a range unit; unknown names become unregistered units."""
        if text == "bytes":
            return cls.BYTES
        if text == "none":
            return cls.NONE
        return cls.unregistered(text)

    def __str__(self) -> str:
        if self.kind is RangeUnit.Kind.UNREGISTERED:
            return self.text
        return self.kind.value


RangeUnit.BYTES = RangeUnit(RangeUnit.Kind.BYTES)
RangeUnit.NONE = RangeUnit(RangeUnit.Kind.NONE)


class AcceptRanges(ListHeader):
    """`Accept-Ranges` header: the range units a server supports."""

    header_name = "Accept-Ranges"

    @classmethod
    def parse_item(cls, text: str) -> RangeUnit:
        return RangeUnit.parse(text)