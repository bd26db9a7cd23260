"""Unit tests for checker.py (author matching and paper linking)."""

from __future__ import annotations

import pytest

from checker import authors_match, link_cites, link_paper
from citation.in_text_extractor import find_cites
from models import AuthorYearCite, CiteStyle, LinkedCite, Name, Paper, Reference, Section, resolve_pointer


def _last(*names: str) -> list[Name]:
    return [Name(last=n) for n in names]


def _ref(year: str, *lasts: str) -> Reference:
    return Reference(authors=tuple(_last(*lasts)), year=year, title=f"Title {year}")


def _cite(year: str, *lasts: str) -> AuthorYearCite:
    return AuthorYearCite(style=CiteStyle.Textual, authors=tuple(_last(*lasts)), year=year)


def _paper(body: list[str], references: list[str], references_title: str = "References") -> Paper:
    return Paper(sections=(
        Section(title="1 Introduction", paragraphs=tuple(body)),
        Section(title=references_title, paragraphs=tuple(references)),
    ))


# ─────────────────────────────────────────────────────────────────────────────
# authors_match
# ─────────────────────────────────────────────────────────────────────────────

def test_surname_only_cite_matches_full_name() -> None:
    assert authors_match([Name(last="Joshi")], [Name(first="Aravind", middle="K", last="Joshi")]) is True


def test_two_authors_match_in_order() -> None:
    reference = [Name(first="Mona", last="Diab"), Name(first="Ankit", last="Kamboj")]
    assert authors_match(_last("Diab", "Kamboj"), reference) is True
    assert authors_match(_last("Kamboj", "Diab"), reference) is False


def test_et_al_covers_two_or_more_remaining_authors() -> None:
    assert authors_match(_last("Blei", "et al."), _last("Blei", "Ng", "Jordan")) is True


def test_et_al_cannot_stand_in_for_exactly_one_author() -> None:
    assert authors_match(_last("Blei", "et al."), _last("Blei", "Ng")) is False


def test_et_al_cannot_stand_in_for_zero_authors() -> None:
    assert authors_match(_last("Blei", "et al."), _last("Blei")) is False


def test_et_al_requires_leading_surnames_to_match() -> None:
    assert authors_match(_last("Ng", "et al."), _last("Blei", "Ng", "Jordan")) is False


@pytest.mark.parametrize("cite, reference", [
    (_last("Blei"), _last("Blei", "Ng")),
    (_last("Blei", "Ng"), _last("Blei")),
    ([], _last("Blei")),
    (_last("Blei"), []),
])
def test_length_mismatch_is_false(cite: list[Name], reference: list[Name]) -> None:
    assert authors_match(cite, reference) is False


def test_empty_lists_match() -> None:
    assert authors_match([], []) is True


def test_configurable_et_al_sentinel() -> None:
    assert authors_match(_last("Blei", "al."), _last("Blei", "Ng", "Jordan"), et_al="al.") is True
    assert authors_match(_last("Blei", "al."), _last("Blei", "Ng", "Jordan")) is False


# ─────────────────────────────────────────────────────────────────────────────
# link_cites
# ─────────────────────────────────────────────────────────────────────────────

def test_link_cites_year_is_string_equality() -> None:
    references = [_ref("2015", "Brown"), _ref("2015a", "Brown")]
    linked = link_cites([_cite("2015", "Brown"), _cite("2015a", "Brown"), _cite("2016", "Brown")], references)
    assert [c.references for c in linked] == [("/references/0",), ("/references/1",), ()]


def test_link_cites_keeps_every_candidate() -> None:
    references = [_ref("2015", "Brown", "Lee"), _ref("2015", "Brown", "Lee")]
    (linked,) = link_cites([_cite("2015", "Brown", "Lee")], references)
    assert linked.references == ("/references/0", "/references/1")
    assert linked.is_linked and linked.is_ambiguous


def test_link_cites_returns_new_records() -> None:
    cite = _cite("2015", "Brown")
    (linked,) = link_cites([cite], [_ref("2015", "Brown")])
    assert isinstance(linked, LinkedCite)
    assert not isinstance(cite, LinkedCite)
    assert (linked.authors, linked.year, linked.style) == (cite.authors, cite.year, cite.style)


def test_link_cites_ignores_unparsed_references() -> None:
    unparsed = Reference(authors=(), year=None, title=None, source="garbage")
    (linked,) = link_cites([_cite("2015", "Brown")], [unparsed])
    assert linked.references == ()
    assert not linked.is_linked


def test_link_cites_accepts_already_linked_cites() -> None:
    (first,) = link_cites([_cite("2015", "Brown")], [_ref("2015", "Brown")])
    (second,) = link_cites([first], [_ref("2015", "Brown"), _ref("2015", "Brown")])
    assert second.references == ("/references/0", "/references/1")


# ─────────────────────────────────────────────────────────────────────────────
# link_paper
# ─────────────────────────────────────────────────────────────────────────────

def test_end_to_end_single_link() -> None:
    paper = _paper(["Prior work (Smith, 2020) differs."], ["Smith, J. 2020. A Paper Title."])
    linked = link_paper(paper)

    assert len(linked.references) == 1
    assert linked.references[0].authors[0].last == "Smith"
    assert len(linked.cites) == 1
    cite = linked.cites[0]
    assert cite.references == ("/references/0",)
    assert cite.origin.pointer == "/sections/0/paragraphs/0"
    assert resolve_pointer(linked, cite.references[0]) is linked.references[0]


def test_link_paper_does_not_mutate_input() -> None:
    paper = _paper(["Prior work (Smith, 2020) differs."], ["Smith, J. 2020. A Paper Title."])
    linked = link_paper(paper)
    assert paper.references is None and paper.cites is None
    assert linked.sections == paper.sections
    assert linked is not paper


def test_link_paper_is_idempotent() -> None:
    paper = _paper(
        ["Brown (2015) and Blei et al. (2003) disagree.", "See (Diab and Kamboj, 2011)."],
        [
            "Brown, P. 2015. First.",
            "David M. Blei, Andrew Y. Ng, and Michael I. Jordan. 2003. Latent Dirichlet allocation.",
            "Mona Diab and Ankit Kamboj. 2011. Third.",
        ],
    )
    first = link_paper(paper)
    second = link_paper(paper)
    assert first.cites == second.cites
    assert first.references == second.references
    assert link_paper(first).cites == first.cites
    assert [c.references for c in first.cites] == [
        ("/references/0",),
        ("/references/1",),
        ("/references/2",),
    ]


def test_link_paper_preserves_document_order_across_sections() -> None:
    paper = Paper(sections=(
        Section(title="Abstract", paragraphs=("Smith (2020) started.",)),
        Section(title="References", paragraphs=("Smith, J. 2020. A Paper Title.", "Lee, K. 2019. Other.")),
        Section(title="Discussion", paragraphs=("Nothing here.", "Lee (2019) ended.")),
    ))
    linked = link_paper(paper)
    assert [c.source for c in linked.cites] == ["Smith (2020)", "Lee (2019)"]
    assert [c.origin.pointer for c in linked.cites] == ["/sections/0/paragraphs/0", "/sections/2/paragraphs/1"]
    assert [r.year for r in linked.references] == ["2020", "2019"]
    assert resolve_pointer(linked, linked.cites[1].origin.pointer) == "Lee (2019) ended."


def test_references_title_is_case_sensitive_and_whole_title() -> None:
    lower = link_paper(_paper(["(Smith, 2020)"], ["Smith, J. 2020. A Paper Title."], references_title="references"))
    assert lower.references == ()
    assert len(lower.cites) == 1

    singular = link_paper(_paper(["(Smith, 2020)"], ["Smith, J. 2020. A Paper Title."], references_title="Reference"))
    assert len(singular.references) == 1


def test_custom_references_title_pattern() -> None:
    paper = _paper(["(Smith, 2020)"], ["Smith, J. 2020. A Paper Title."], references_title="Bibliography")
    assert link_paper(paper).references == ()
    linked = link_paper(paper, references_title=r"^Bibliography$")
    assert len(linked.references) == 1
    assert linked.cites[0].is_linked


def test_unparseable_bibliography_entry_does_not_abort() -> None:
    paper = _paper(["(Smith, 2020)"], ["garbage line", "Smith, J. 2020. A Paper Title."])
    linked = link_paper(paper)
    assert linked.references[0].year is None
    assert linked.cites[0].references == ("/references/1",)


def test_find_cites_output_links_like_link_paper() -> None:
    cites = find_cites("Prior work (Smith, 2020) differs.")
    (linked,) = link_cites(cites, [_ref("2020", "Smith")])
    assert linked.references == ("/references/0",)


def test_decomposed_accent_links_body_cite_to_reference() -> None:
    paper = _paper(
        ["As Dau\u0301me (2007) showed."],
        ["Hal Dau\u0301me. 2007. Frustratingly easy domain adaptation."],
    )
    linked = link_paper(paper)
    assert linked.cites[0].authors == (Name(last="Dau\u0301me"),)
    assert linked.cites[0].references == ("/references/0",)


def test_surnames_compare_under_canonical_composition() -> None:
    assert authors_match([Name(last="Dau\u0301me")], [Name(first="Hal", last="Da\u00fame")]) is True
