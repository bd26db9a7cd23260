"""Unit tests for utils/reference_validator.py."""

from __future__ import annotations

import pytest

from models import Name, Reference
from parsers.acl.acl_parser import parse_reference
from utils.reference_validator import (
    AUTHOR_MISSING,
    TITLE_MISSING,
    YEAR_FORMAT,
    YEAR_MISSING,
    validate_reference,
    validate_reference_list,
)


def _ref(year: str | None = "2020", title: str | None = "A Title", authors: tuple[Name, ...] = (Name(last="Smith"),)) -> Reference:
    return Reference(authors=authors, year=year, title=title)


def test_valid_reference() -> None:
    assert validate_reference(_ref()) == (True, [])


@pytest.mark.parametrize("year", ["2015a", "2014–2015", "1999", "2003-2004b"])
def test_valid_year_variants(year: str) -> None:
    assert validate_reference(_ref(year=year))[0] is True


@pytest.mark.parametrize("year", ["1200", "2150", "20x5"])
def test_year_out_of_format(year: str) -> None:
    assert validate_reference(_ref(year=year)) == (False, [YEAR_FORMAT])


def test_unparsed_reference_reports_every_missing_field() -> None:
    ref = parse_reference("garbage line")
    assert validate_reference(ref) == (False, [AUTHOR_MISSING, YEAR_MISSING, TITLE_MISSING])


def test_validate_reference_list_only_reports_invalid_entries() -> None:
    refs = [
        parse_reference("Smith, J. 2020. A Paper Title."),
        parse_reference("garbage line"),
        _ref(title=None),
    ]
    all_valid, results = validate_reference_list(refs)
    assert all_valid is False
    assert results == [
        {"index": 1, "errors": [AUTHOR_MISSING, YEAR_MISSING, TITLE_MISSING], "source": "garbage line"},
        {"index": 2, "errors": [TITLE_MISSING], "source": ""},
    ]


def test_validate_empty_list() -> None:
    assert validate_reference_list([]) == (True, [])
