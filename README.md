# typedheaders

Typed values for common HTTP header fields. Each header class parses the raw
field values received on the wire into a Python object, and formats that
object back into a field value.

## Installation

```
pip install typedheaders
```

## Parsing

Every header class has a `parse_header(raw)` class method. `raw` is a
sequence of lines, one for each time the field appeared in a message; each
line may be `bytes` or `str` (bytes are decoded as UTF-8). A value that
cannot be parsed raises `HeaderError`, a subclass of `ValueError`.
`fmt_header()` (and `str()`) gives the value back as it is sent.

```python
from typedheaders.cache_control import CacheControl
from typedheaders.content_length import ContentLength
from typedheaders.core import HeaderError

cc = CacheControl.parse_header([b"max-age=100, private"])
print(cc.fmt_header())          # max-age=100, private

length = ContentLength.parse_header([b"5", b"5"])
print(length.fmt_header())      # 5

try:
    ContentLength.parse_header([b"5", b"6"])
except HeaderError:
    print("conflicting Content-Length values")
```

## Building headers

```python
from typedheaders.connection import Connection
from typedheaders.core import to_header_line
from typedheaders.range import Range
from typedheaders.strict_transport_security import StrictTransportSecurity

print(repr(to_header_line(Connection.keep_alive())))
# 'Connection: keep-alive\r\n'

print(Range.bytes_multi([(1, 100), (200, 300)]).fmt_header())
# bytes=1-100,200-300

print(StrictTransportSecurity.including_subdomains(31536000).fmt_header())
# max-age=31536000; includeSubdomains
```

## Available headers

- Text values: `From`, `Location`, `Referer`, `Server`, `UserAgent`
  (`typedheaders.text`). The value is kept as given and not split further.
- CORS (`typedheaders.access_control`): `AccessControlAllowOrigin` (one
  origin string, with `is_any` for `*` and `is_null` for `null`),
  `AccessControlMaxAge` (seconds, up to 2**32 - 1),
  `AccessControlAllowHeaders` and `AccessControlRequestHeaders` (lists of
  header names).
- `Connection` and `ConnectionOption` (`typedheaders.connection`), with
  `Connection.close()` and `Connection.keep_alive()`.
- `Upgrade`, `Protocol` and `ProtocolName` (`typedheaders.upgrade`);
  `websocket` is matched in any case, other names exactly.
- `Vary` (`typedheaders.vary`): `*` (`Vary.any()`, `is_any`) or a list of
  header names.
- `CacheControl` and `CacheDirective` (`typedheaders.cache_control`).
  Directives that cannot be parsed are skipped; a header with none left is an
  error.
- `ContentLength` (`typedheaders.content_length`); repeated lines are
  accepted only when they all agree.
- `ContentRange` and `ContentRangeSpec` (`typedheaders.content_range`), for
  `bytes` ranges and ranges in other units.
- `Expect` (`typedheaders.expect`): only `100-continue`, `Expect.CONTINUE`.
- `Pragma` (`typedheaders.pragma`): `Pragma.NO_CACHE` or any other value.
- `Host` (`typedheaders.host`): host name and optional port; ports 80 and
  443 are left out when formatting.
- `Range` and `ByteRangeSpec` (`typedheaders.range`), with `Range.bytes`,
  `Range.bytes_multi` and `Range.unregistered`. Byte range specs that cannot
  be parsed are skipped.
- `StrictTransportSecurity` (`typedheaders.strict_transport_security`);
  `max-age` is required and no directive may repeat.
- `AcceptRanges` and `RangeUnit` (`typedheaders.accept_ranges`).

Header names such as those in `Vary` and `Connection` are held as
`CaselessStr`, a `str` that compares and hashes without regard to ASCII case.

## Defining more headers

`typedheaders.core` holds the building blocks: the base classes `Header`,
`SingleValueHeader` (override `parse_value`), `ListHeader` and
`AnyOrListHeader` (override `parse_item`), and the helpers
`from_one_raw_str`, `from_one_comma_delimited`, `from_comma_delimited`,
`fmt_comma_delimited` and `to_header_line`. A subclass sets the class
attribute `header_name`.

## What this package does not do

It works on one header field at a time. There is no collection type holding
all headers of a message, no reading or writing of whole HTTP messages, and
no networking. Headers that need dates, media types, language tags, entity
tags, quality values or cookies (such as `Date`, `Content-Type`, `Accept`,
`ETag` or `Cookie`) are not provided.