#!/usr/bin/env python3

import pytest

from indisoluble.osm_timestamp.tools.is_valid_iso_layout import is_valid_iso_layout


@pytest.mark.parametrize(
    "text",
    [
        "2016-07-25T09:30:00Z",
        "1970-01-01T00:00:01Z",
        "0000-00-00T00:00:00Z",  # layout only, values are not checked here
        "9999-99-99T99:99:99Z",
    ],
)
def test_valid_layouts(text):
    result, message = is_valid_iso_layout(text)
    assert result is True
    assert message == ""


@pytest.mark.parametrize(
    "text",
    [
        "",
        "2016-07-25T09:30:00",
        "2016-07-25T09:30:00Z ",
        "2016-07-25T09:30:00ZZ",
        "16-07-25T09:30:00Z",
    ],
)
def test_invalid_length(text):
    result, message = is_valid_iso_layout(text)
    assert result is False
    assert message == "It must be exactly 20 characters long"


@pytest.mark.parametrize(
    "text,expected_message",
    [
        ("2015/01/01T00:00:00Z", "Expected '-' at position 4"),
        ("2015-01/01T00:00:00Z", "Expected '-' at position 7"),
        ("2015-01-01 00:00:00Z", "Expected 'T' at position 10"),
        ("2015-01-01t00:00:00Z", "Expected 'T' at position 10"),
        ("2015-01-01T00.00:00Z", "Expected ':' at position 13"),
        ("2015-01-01T00:00.00Z", "Expected ':' at position 16"),
        ("2015-01-01T00:00:00z", "Expected 'Z' at position 19"),
        ("2015-01-01T00:00:00+", "Expected 'Z' at position 19"),
        ("a015-01-01T00:00:00Z", "Expected a digit at position 0"),
        ("2015-0a-01T00:00:00Z", "Expected a digit at position 6"),
        ("2015-01-01T00:00:0 Z", "Expected a digit at position 18"),
        ("2015-01-01T٠٠:00:00Z", "Expected a digit at position 11"),
    ],
)
def test_invalid_characters(text, expected_message):
    result, message = is_valid_iso_layout(text)
    assert result is False
    assert message == expected_message
