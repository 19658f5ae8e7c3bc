"""The HTTP/1.0 `Pragma` header."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import ClassVar

from typedheaders.core import CaselessStr, Header, RawValue, from_one_raw_str

_NO_CACHE = "no-cache"


@dataclass(frozen=True)
class Pragma(Header):
    """`Pragma` header: ``no-cache`` or any other value kept as given.

    ``extension`` is None for ``no-cache``.
    """

    header_name = "Pragma"

    extension: str | None = None

    NO_CACHE: ClassVar[Pragma]

    @property
    def is_no_cache(self) -> bool:
        return self.extension is None

    @classmethod
    def parse_header(cls, raw: Sequence[RawValue]) -> Pragma:
        """Parse one non-empty line; ``no-cache`` matches in any ASCII case."""
        text = from_one_raw_str(raw, str)
        if CaselessStr(text) == _NO_CACHE:
            return cls.NO_CACHE
        return cls(text)

    def fmt_header(self) -> str:
        return _NO_CACHE if self.extension is None else self.extension


Pragma.NO_CACHE = Pragma()