"""Unit tests for sesx field extraction."""

import pytest
from sesx2pl.sesx import fields
from sesx2pl.sesx.fields import extract, parse_number

CLIP = ('<audioClip clipAutoCrossfade="true" endPoint="132300" fileID="3" hue="-1" id="7" '
        'name="Art &amp; Co - Song" startPoint="88200" zOrder="0">')


def test_extract_clip_attributes():
    assert extract(fields.START_POINT, CLIP) == "88200"
    assert extract(fields.END_POINT, CLIP) == "132300"
    assert extract(fields.FILE_ID, CLIP) == "3"
    assert extract(fields.NAME, CLIP) == "Art &amp; Co - Song"


def test_extract_missing_field_returns_none():
    assert extract(fields.ABSOLUTE_PATH, CLIP) is None


def test_id_pattern_does_not_match_inside_file_id():
    line = '<audioClip fileID="3" name="a">'
    assert extract(fields.ID, line) is None


def test_display_name_between_tags():
    assert extract(fields.DISPLAY_NAME, '<name>Voice Over</name>') == "Voice Over"
    assert extract(fields.DISPLAY_NAME, '<name></name>') == ""


def test_repeated_extraction_has_no_cursor_state():
    """The same pattern applied to many lines finds the field on each of them."""
    lines = [f'<file absolutePath="C:\\a{i}.wav" id="{i}"/>' for i in range(5)]
    found = [extract(fields.ID, line) for line in lines]
    assert found == ["0", "1", "2", "3", "4"]
    # and again on the first line after the others
    assert extract(fields.ID, lines[0]) == "0"


def test_parse_number_prefers_int():
    assert parse_number("44100") == 44100
    assert isinstance(parse_number("44100"), int)
    assert parse_number(" 48000.5 ") == 48000.5


@pytest.mark.parametrize("value", [None, "", "abc"])
def test_parse_number_rejects_non_numeric(value):
    with pytest.raises(ValueError):
        parse_number(value)
