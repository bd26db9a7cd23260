"""Unit tests for report.py."""

from __future__ import annotations

import pytest

from checker import link_paper
from models import Paper, Section
from report import (
    CITE_COLUMNS,
    REFERENCE_COLUMNS,
    cites_frame,
    linking_summary,
    references_frame,
    unused_references,
)


@pytest.fixture
def linked_paper() -> Paper:
    paper = Paper(sections=(
        Section(title="1 Introduction", paragraphs=(
            "Brown (2015) and Brown (2015) again, plus Lee (2019).",
            "Also Zhao et al. (2018) disagree.",
        )),
        Section(title="References", paragraphs=(
            "Brown, P. 2015. First.",
            "Zhao, W., Li, X., and Sun, Y. 2018. Second.",
            "Zhao, W., Li, X., and Sun, Y. 2018. Second, reprinted.",
            "Kim, Y. 2014. Never cited.",
        )),
    ))
    return link_paper(paper)


def test_linking_summary(linked_paper: Paper) -> None:
    assert linking_summary(linked_paper) == {
        "references": 4,
        "cites": 4,
        "linked": 3,
        "ambiguous": 1,
        "unlinked": 1,
        "linking_success": "75%",
    }


def test_linking_summary_without_cites() -> None:
    paper = link_paper(Paper(sections=(Section(title="Body", paragraphs=("No cites.",)),)))
    summary = linking_summary(paper)
    assert summary["cites"] == 0
    assert summary["linking_success"] == "0%"


def test_unused_references(linked_paper: Paper) -> None:
    unused = unused_references(linked_paper)
    assert [index for index, _ in unused] == [3]
    assert unused[0][1].title == "Never cited"


def test_cites_frame(linked_paper: Paper) -> None:
    frame = cites_frame(linked_paper)
    assert list(frame.columns) == CITE_COLUMNS
    assert len(frame) == 4
    assert list(frame["status"]) == ["linked", "linked", "unlinked", "ambiguous"]
    assert frame.loc[3, "authors"] == "Zhao et al."
    assert frame.loc[3, "references"] == "/references/1, /references/2"


def test_references_frame(linked_paper: Paper) -> None:
    frame = references_frame(linked_paper)
    assert list(frame.columns) == REFERENCE_COLUMNS
    assert list(frame["cited_by"]) == [2, 1, 1, 0]
    assert frame.loc[1, "authors"] == "W. Zhao, X. Li, and Y Sun"


@pytest.mark.parametrize("func", [linking_summary, unused_references, cites_frame, references_frame])
def test_report_requires_linked_paper(func) -> None:
    with pytest.raises(ValueError, match="not been linked"):
        func(Paper(sections=()))
