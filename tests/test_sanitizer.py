import pytest

from hexconv.core.errors import InvalidLength, ParseError
from hexconv.shared.sanitizer import clean_hex, parse_channel_list


@pytest.mark.parametrize("raw, cleaned", [
    ("228B22", "228B22"),
    ("#228B22", "228B22"),
    ("0x228B22", "228B22"),
    ("  '0X228b22' ", "228b22"),
    ("228B2", "228B2"),
])
def test_clean_hex(raw, cleaned):
    assert clean_hex(raw) == cleaned


def test_parse_channel_list():
    assert parse_channel_list("34,139,34", 3, 255, "rgb") == (34, 139, 34)
    assert parse_channel_list(" 76, 0 ,76,45 ", 4, 100, "cmyk") == (76, 0, 76, 45)


@pytest.mark.parametrize("raw", ["300,0,0", "0,-1,0", "a,0,0", "1.5,0,0", "0,,0"])
def test_parse_channel_list_parse_errors(raw):
    with pytest.raises(ParseError):
        parse_channel_list(raw, 3, 255, "rgb")


@pytest.mark.parametrize("raw", ["1,2", "1,2,3,4", "5"])
def test_parse_channel_list_wrong_count(raw):
    with pytest.raises(InvalidLength):
        parse_channel_list(raw, 3, 255, "rgb")


def test_cmyk_percentage_range():
    with pytest.raises(ParseError):
        parse_channel_list("0,0,0,101", 4, 100, "cmyk")
