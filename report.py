"""
連結結果報表：統計數字與 pandas DataFrame
"""
from typing import Dict, List, Tuple

import pandas as pd

from models import Paper, Reference
from parsers.acl.acl_parser import format_pages_display
from parsers.names import format_names

CITE_COLUMNS = ["pointer", "offset", "source", "authors", "year", "status", "references"]
REFERENCE_COLUMNS = ["index", "authors", "year", "title", "venue", "publisher", "pages", "cited_by"]


def _require_linked(paper: Paper):
    if paper.references is None or paper.cites is None:
        raise ValueError("Paper has not been linked; call checker.link_paper first")


def _cite_status(cite) -> str:
    if cite.is_ambiguous:
        return "ambiguous"
    if cite.is_linked:
        return "linked"
    return "unlinked"


def linking_summary(paper: Paper) -> Dict:
    """
    {'references': 參考文獻數, 'cites': 引用數, 'linked': 有連結的引用數,
     'ambiguous': 多筆符合, 'unlinked': 找不到, 'linking_success': 'NN%'}
    """
    _require_linked(paper)
    linked = sum(1 for cite in paper.cites if cite.is_linked)
    ambiguous = sum(1 for cite in paper.cites if cite.is_ambiguous)
    total = len(paper.cites)
    success = f"{100 * linked / total:.0f}%" if total else "0%"
    return {
        "references": len(paper.references),
        "cites": total,
        "linked": linked,
        "ambiguous": ambiguous,
        "unlinked": total - linked,
        "linking_success": success,
    }


def _cited_counts(paper: Paper) -> Dict[str, int]:
    counts = {}
    for cite in paper.cites:
        for pointer in cite.references:
            counts[pointer] = counts.get(pointer, 0) + 1
    return counts


def unused_references(paper: Paper) -> List[Tuple[int, Reference]]:
    """列在參考文獻中，但沒有任何引用指向的文獻"""
    _require_linked(paper)
    counts = _cited_counts(paper)
    return [
        (index, reference)
        for index, reference in enumerate(paper.references)
        if counts.get(f"/references/{index}", 0) == 0
    ]


def cites_frame(paper: Paper) -> pd.DataFrame:
    _require_linked(paper)
    rows = []
    for cite in paper.cites:
        rows.append({
            "pointer": cite.origin.pointer if cite.origin else None,
            "offset": cite.origin.offset if cite.origin else None,
            "source": cite.source,
            "authors": format_names(cite.authors),
            "year": cite.year,
            "status": _cite_status(cite),
            "references": ", ".join(cite.references),
        })
    return pd.DataFrame(rows, columns=CITE_COLUMNS)


def references_frame(paper: Paper) -> pd.DataFrame:
    _require_linked(paper)
    counts = _cited_counts(paper)
    rows = []
    for index, reference in enumerate(paper.references):
        rows.append({
            "index": index,
            "authors": format_names(reference.authors),
            "year": reference.year,
            "title": reference.title,
            "venue": reference.venue,
            "publisher": reference.publisher,
            "pages": format_pages_display(reference.pages),
            "cited_by": counts.get(f"/references/{index}", 0),
        })
    return pd.DataFrame(rows, columns=REFERENCE_COLUMNS)
