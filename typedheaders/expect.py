"""The `Expect` header."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import ClassVar

from typedheaders.core import CaselessStr, Header, HeaderError, RawValue

_CONTINUE = "100-continue"


@dataclass(frozen=True)
class Expect(Header):
    """`Expect` header; the only expectation defined is ``100-continue``."""

    header_name = "Expect"

    CONTINUE: ClassVar[Expect]

    @classmethod
    def parse_header(cls, raw: Sequence[RawValue]) -> Expect:
        """Accept a single ``100-continue`` line, in any ASCII case."""
        if isinstance(raw, (bytes, bytearray, str)):
            raise TypeError("raw header values must be a sequence of lines")
        if len(raw) != 1:
            raise HeaderError("expected exactly one header line")
        value = raw[0]
        if isinstance(value, str):
            text = value
        else:
            try:
                text = bytes(value).decode("utf-8")
            except UnicodeDecodeError as exc:
                raise HeaderError("unknown expectation") from exc
        if CaselessStr(text) != _CONTINUE:
            raise HeaderError(f"unknown expectation: {text!r}")
        return cls.CONTINUE

    def fmt_header(self) -> str:
        return _CONTINUE


Expect.CONTINUE = Expect()