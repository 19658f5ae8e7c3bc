"""The `Vary` header."""

from __future__ import annotations

from typedheaders.core import AnyOrListHeader, CaselessStr


class Vary(AnyOrListHeader):
    """`Vary` header: ``*`` or the request header names a response depends on."""

    header_name = "Vary"

    @classmethod
    def parse_item(cls, text: str) -> CaselessStr:
        return CaselessStr(text)