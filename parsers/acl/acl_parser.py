import logging
import re
from typing import Optional, Tuple

from citation.in_text_extractor import YEAR
from models import Reference
from parsers.names import format_names, parse_name_list

logger = logging.getLogger(__name__)

# 作者列表 (以句號或逗號結束) + 年份 (可加括號) + 句號 + 標題 + 句號
REFERENCE_PATTERN = re.compile(rf'^(.+?)[.,]?\s*\(?({YEAR})\)?\.\s*(.+?)\.')

# 頁碼：pages 1–10 / pp. 1-10 / 3:993–1022
_PAGES_PATTERN = re.compile(r'(?:\bpages?\s+|\bpp\.\s*|:\s*)(\d+)\s*[-–—]+\s*(\d+)')


def _parse_pages(tail: str) -> Optional[Tuple[int, int]]:
    match = _PAGES_PATTERN.search(tail)
    if not match:
        return None
    return (int(match.group(1)), int(match.group(2)))


def _parse_venue(tail: str) -> Optional[str]:
    """標題後第一個子句：'In Proceedings of ACL, pages 1–10.' -> 'Proceedings of ACL'"""
    first_clause = re.split(r',|\.\s|\.$|:\s*\d', tail, maxsplit=1)[0].strip()
    first_clause = re.sub(r'^In\s+', '', first_clause)
    # 只有數字 / 卷期的片段不算出處
    if not first_clause or not re.search(r'[A-Za-z]{2,}', first_clause):
        return None
    if re.match(r'^(?:pages?|pp\.)\s', first_clause):
        return None
    return first_clause


def _parse_publisher(tail: str) -> Optional[str]:
    """最後一句不含數字時視為出版者：'... pages 1–10. Association for Computational Linguistics.'"""
    sentences = [s.strip() for s in re.split(r'\.\s+', tail.rstrip('. ')) if s.strip()]
    if len(sentences) < 2:
        return None
    last = sentences[-1]
    if re.search(r'\d', last) or not re.search(r'[A-Za-z]{2,}', last):
        return None
    return last


def parse_reference(text: str) -> Reference:
    """
    將參考文獻列表中的一筆文字解析成 Reference。

    'Smith, J. 2020. A Paper Title.' -> Reference(authors=(J Smith,), year='2020', title='A Paper Title')

    格式不符時回傳空的 authors 與 None 的 year/title，不拋出例外。
    """
    match = REFERENCE_PATTERN.match(text)
    if not match:
        logger.warning("Could not parse reference: %r", text[:80])
        return Reference(authors=(), year=None, title=None, source=text)

    tail = text[match.end():].strip()
    return Reference(
        authors=tuple(parse_name_list(match.group(1))),
        year=match.group(2),
        title=match.group(3),
        venue=_parse_venue(tail) if tail else None,
        publisher=_parse_publisher(tail) if tail else None,
        pages=_parse_pages(tail) if tail else None,
        source=text,
    )


def format_pages_display(pages: Optional[Tuple[int, int]]) -> Optional[str]:
    if not pages:
        return None
    return f"pp. {pages[0]}–{pages[1]}"


def format_reference(reference: Reference) -> str:
    """
    將 Reference 組回一行文字：作者. 年份. 標題. 出處. 出版者. 頁碼.
    缺少的欄位會被略過。
    """
    authors = format_names(reference.authors) if reference.authors else None
    parts = [
        authors,
        reference.year,
        reference.title,
        reference.venue,
        reference.publisher,
        format_pages_display(reference.pages),
    ]
    return '. '.join(part for part in parts if part) + '.'
