import pytest

from typedheaders.core import (
    AnyOrListHeader,
    CaselessStr,
    HeaderError,
    ListHeader,
    SingleValueHeader,
    fmt_comma_delimited,
    from_comma_delimited,
    from_one_comma_delimited,
    from_one_raw_str,
    to_header_line,
)


class Numbers(ListHeader):
    header_name = "X-Numbers"

    @classmethod
    def parse_item(cls, text):
        return int(text)


class Names(AnyOrListHeader):
    header_name = "X-Names"

    @classmethod
    def parse_item(cls, text):
        return CaselessStr(text)


class Count(SingleValueHeader):
    header_name = "X-Count"

    @classmethod
    def parse_value(cls, text):
        return int(text)


class Label(SingleValueHeader):
    header_name = "X-Label"


def test_caseless_str_equality_and_hash():
    a = CaselessStr("Accept-Language")
    assert a == "accept-language"
    assert a == CaselessStr("ACCEPT-LANGUAGE")
    assert hash(a) == hash(CaselessStr("accept-LANGUAGE"))
    assert str(a) == "Accept-Language"
    assert not (a != "ACCEPT-language")
    assert a != "date"


def test_from_one_raw_str_parses_single_line():
    assert from_one_raw_str([b"531"], int) == 531
    assert from_one_raw_str(["hello"], str) == "hello"


@pytest.mark.parametrize("raw", [[], [b""], [b"1", b"2"], [b"\xff"]])
def test_from_one_raw_str_rejects(raw):
    with pytest.raises(HeaderError):
        from_one_raw_str(raw, str)


def test_from_one_raw_str_wraps_value_errors():
    with pytest.raises(HeaderError):
        from_one_raw_str([b"34v95"], int)


def test_from_one_comma_delimited_skips_blank_and_bad():
    assert from_one_comma_delimited(b" 1 , ,,x, 3", int) == [1, 3]


def test_from_comma_delimited_concatenates_lines():
    assert from_comma_delimited([b"1, 2", b"3"], int) == [1, 2, 3]
    assert from_comma_delimited([b""], int) == []


def test_fmt_comma_delimited_round_trip():
    items = ["compress", "gzip"]
    text = fmt_comma_delimited(items)
    assert from_one_comma_delimited(text, str) == items


def test_list_header_parse_and_format():
    header = Numbers.parse_header([b"1, 2,3"])
    assert header == Numbers([1, 2, 3])
    assert list(header) == [1, 2, 3]
    assert len(header) == 3
    assert header[1] == 2
    assert from_comma_delimited([header.fmt_header()], int) == [1, 2, 3]
    assert Numbers.parse_header([header.fmt_header()]) == header


def test_any_or_list_header_star():
    header = Names.parse_header([b"*"])
    assert header.is_any
    assert header == Names.any()
    assert str(header) == "*"
    assert to_header_line(header) == "X-Names: *\r\n"


def test_any_or_list_header_items_caseless():
    header = Names.parse_header([b"etag,cookie,allow"])
    assert header == Names(["eTag", "cookIE", "AlLOw"])
    assert not header.is_any
    assert from_comma_delimited([header.fmt_header()], CaselessStr) == [
        "etag",
        "cookie",
        "allow",
    ]


def test_single_value_header():
    assert Count.parse_header([b"531"]) == Count(531)
    assert str(Count(531)) == "531"
    assert to_header_line(Count(531)) == "X-Count: 531\r\n"
    with pytest.raises(HeaderError):
        Count.parse_header([b"nope"])


def test_headers_of_different_classes_are_unequal():
    assert (Label("5") == Count(5)) is False
    assert to_header_line(Label("5")) == "X-Label: 5\r\n"
    assert to_header_line(Count(5)) == "X-Count: 5\r\n"


def test_to_header_line():
    assert to_header_line(Label("abc")) == "X-Label: abc\r\n"


def test_raw_must_be_sequence_of_lines():
    assert to_header_line(Label.parse_header([b"abc"])) == "X-Label: abc\r\n"
    with pytest.raises(TypeError):
        Label.parse_header(b"abc")