"""Headers whose value is free-form text."""

from __future__ import annotations

from typedheaders.core import SingleValueHeader


class From(SingleValueHeader):
    """`From` header: the e-mail address of the user behind the request."""

    header_name = "From"


class Location(SingleValueHeader):
    """`Location` header: a URI reference the response refers to."""

    header_name = "Location"


class Referer(SingleValueHeader):
    """`Referer` header: the URI the target was obtained from."""

    header_name = "Referer"


class Server(SingleValueHeader):
    """`Server` header: software used by the origin server."""

    header_name = "Server"


class UserAgent(SingleValueHeader):
    """`User-Agent` header: the originating user agent, not split further."""

    header_name = "User-Agent"