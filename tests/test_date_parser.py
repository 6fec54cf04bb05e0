"""Tests for date parsing."""

from datetime import date

import pytest

from reckon.utils.date_parser import looks_like_date, parse_date


def test_parse_iso_date():
    assert parse_date("2024-01-15") == date(2024, 1, 15)


def test_parse_compact_date():
    assert parse_date("20240115") == date(2024, 1, 15)


def test_parse_written_date():
    assert parse_date("January 15, 2024") == date(2024, 1, 15)


def test_parse_with_format():
    assert parse_date("15/01/2024", "%d/%m/%Y") == date(2024, 1, 15)


def test_parse_with_format_mismatch():
    with pytest.raises(ValueError):
        parse_date("2024-01-15", "%d/%m/%Y")


@pytest.mark.parametrize("text", ["", "not a date", "2024-13-45"])
def test_parse_invalid(text):
    with pytest.raises(ValueError):
        parse_date(text)


@pytest.mark.parametrize("text", ["2024-01-15", "01/15/2024", "20240115", "Jan 15, 2024"])
def test_looks_like_date(text):
    assert looks_like_date(text)


@pytest.mark.parametrize("text", ["-12.50", "12.50", "1234", "Coffee Shop", ""])
def test_does_not_look_like_date(text):
    assert not looks_like_date(text)
