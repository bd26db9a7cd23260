import logging
import re
from typing import Iterator, List, Optional, Tuple

from models import AuthorYearCite, CiteStyle, Origin
from parsers.names import parse_name_list

logger = logging.getLogger(__name__)

# 作者：一個大寫開頭的字詞，可帶世代後綴 (Daumé III)
NAME = r'[A-Z][^()\s]+(?: [IV]+)?'
# 年份：2015 / 2015a / 2014–2015
YEAR = r'[0-9]{4}(?:[-–—][0-9]{4})?[a-z]?'

_CITE_SOURCES = [
    # --- 年份在括號內: Brown et al. (2015) / Diab and Kamboj (2011) / Brown (2015) ---
    rf'{NAME}\s+et\s+al\.\s+\({YEAR}\)',
    rf'{NAME}\s+(?:and|&)\s+{NAME}\s+\({YEAR}\)',
    rf'{NAME}\s+\({YEAR}\)',
    # --- 年份前面是逗號: Brown et al., 2015 / Diab and Kamboj, 2011 / Brown, 2015 ---
    rf'{NAME}\s+et\s+al\.,\s+{YEAR}\b',
    rf'{NAME}\s+(?:and|&)\s+{NAME},\s+{YEAR}\b',
    rf'{NAME},\s+{YEAR}\b',
]

CITE_PATTERN = re.compile('|'.join(_CITE_SOURCES))
YEAR_PATTERN = re.compile(YEAR)
_CITE_CLEAN_PATTERN = re.compile(rf'[(),]|{YEAR}')


class MatchSpans:
    """
    text 中所有不重疊符合 pattern 的 (offset, length)。
    每次迭代都重新掃描，可以重複迭代。
    """

    def __init__(self, text: str, pattern: re.Pattern = CITE_PATTERN):
        self.text = text
        self.pattern = pattern

    def __iter__(self) -> Iterator[Tuple[int, int]]:
        for match in self.pattern.finditer(self.text):
            yield match.start(), match.end() - match.start()


def match_spans(text: str, pattern: re.Pattern = CITE_PATTERN) -> MatchSpans:
    return MatchSpans(text, pattern)


def find_cites(text: str, pointer: Optional[str] = None) -> List[AuthorYearCite]:
    """
    用 regex 擷取一段文字中的作者-年份引用。

    'Brown (2015) showed...' -> [AuthorYearCite(authors=(Brown,), year='2015')]
    """
    cites = []
    for offset, length in match_spans(text):
        source = text[offset:offset + length]
        year_match = YEAR_PATTERN.search(source)
        # 去掉括號、逗號與年份，剩下的就是作者列表
        names_text = _CITE_CLEAN_PATTERN.sub('', source).strip()
        cites.append(AuthorYearCite(
            style=CiteStyle.Textual,
            authors=tuple(parse_name_list(names_text)),
            year=year_match.group(0) if year_match else None,
            source=source,
            origin=Origin(offset=offset, length=length, pointer=pointer),
        ))

    logger.debug("Found %d cites in %s", len(cites), pointer or "text")
    return cites


def classify_cite_style(text: str, offset: int, length: int) -> CiteStyle:
    """
    依周圍字元判斷引用型式：
    - 整段被括號包住 (Brown, 2015) / (see Brown, 2015; ...) -> Parenthetical
    - 年份在括號內 Brown (2015) -> Textual
    - 其他 Brown, 2015 -> Alternate
    """
    source = text[offset:offset + length]
    if source.endswith(')'):
        return CiteStyle.Textual

    before = text[:offset]
    after = text[offset + length:]
    open_index = before.rfind('(')
    if open_index != -1 and ')' not in before[open_index:]:
        close_index = after.find(')')
        if close_index != -1 and '(' not in after[:close_index]:
            return CiteStyle.Parenthetical
    return CiteStyle.Alternate


def highlight_cites(text: str, template: str = "**{}**") -> str:
    """把每個引用套上 template，例如 Markdown 粗體"""
    return CITE_PATTERN.sub(lambda match: template.format(match.group(0)), text)
