"""
論文、參考文獻與內文引用的資料結構

所有紀錄都是 frozen dataclass：解析後就不再修改，連結結果以新物件回傳。
"""
import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple


@dataclass(frozen=True)
class Name:
    """一位作者。單一字詞的姓名或 "et al." 只會有 last"""
    last: str
    first: Optional[str] = None
    middle: Optional[str] = None


@dataclass(frozen=True)
class Reference:
    """
    參考文獻列表中的一筆資料。

    作者可能被截斷（以 et al. 結尾），年份可能帶有區分用的字母（2015a），
    其他欄位可能是縮寫。year/title 為 None 代表整筆無法解析。
    """
    authors: Tuple[Name, ...]
    year: Optional[str]
    title: Optional[str]
    venue: Optional[str] = None
    publisher: Optional[str] = None
    pages: Optional[Tuple[int, int]] = None
    source: Optional[str] = None


class CiteStyle(Enum):
    """
    Textual: Brown (2015)
    Parenthetical: (Brown 2015)
    Alternate: Brown 2015
    """
    Textual = "Textual"
    Parenthetical = "Parenthetical"
    Alternate = "Alternate"


@dataclass(frozen=True)
class Origin:
    """引用在段落中的位置；pointer 指向 /sections/<i>/paragraphs/<j>"""
    offset: int
    length: int
    pointer: Optional[str] = None


@dataclass(frozen=True)
class AuthorYearCite:
    """尚未連結的內文引用。authors 通常只有姓氏，最後一位可能是 et al."""
    style: CiteStyle
    authors: Tuple[Name, ...]
    year: Optional[str]
    source: Optional[str] = None
    origin: Optional[Origin] = None

    @property
    def range(self) -> Optional[Tuple[int, int]]:
        if self.origin is None:
            return None
        return (self.origin.offset, self.origin.length)


@dataclass(frozen=True)
class LinkedCite(AuthorYearCite):
    """
    連結後的內文引用。references 是所有符合的 /references/<k> 指標，
    可能為空（找不到）、一筆，或多筆（無法判斷，交給呼叫端處理）。
    """
    references: Tuple[str, ...] = ()

    @property
    def is_linked(self) -> bool:
        return len(self.references) > 0

    @property
    def is_ambiguous(self) -> bool:
        return len(self.references) > 1


@dataclass(frozen=True)
class Section:
    title: str
    paragraphs: Tuple[str, ...]


@dataclass(frozen=True)
class Paper:
    """
    任何學術論文 / 會議簡報 / 手稿。只保留章節與段落，不保留排版。

    sections 是平的列表：摘要、子章節、參考文獻都在同一層。
    references 與 cites 由 checker.link_paper 產生，連結前為 None。
    """
    sections: Tuple[Section, ...]
    title: Optional[str] = None
    authors: Optional[Tuple[Name, ...]] = None
    year: Optional[int] = None
    references: Optional[Tuple[Reference, ...]] = None
    cites: Optional[Tuple[LinkedCite, ...]] = None


_POINTER_PATTERN = re.compile(r'^/(sections|references|cites)/(\d+)(?:/paragraphs/(\d+))?$')


def resolve_pointer(paper: Paper, pointer: str):
    """
    取得指標所指的物件，例如 '/references/3' 或 '/sections/1/paragraphs/0'。
    格式錯誤或索引超出範圍時拋出 ValueError。
    """
    match = _POINTER_PATTERN.match(pointer)
    if not match:
        raise ValueError(f"Unsupported pointer: {pointer!r}")
    collection_name, index, paragraph_index = match.group(1), int(match.group(2)), match.group(3)

    collection = getattr(paper, collection_name)
    if collection is None or index >= len(collection):
        raise ValueError(f"Pointer out of range: {pointer!r}")
    target = collection[index]

    if paragraph_index is not None:
        if collection_name != 'sections' or int(paragraph_index) >= len(target.paragraphs):
            raise ValueError(f"Pointer out of range: {pointer!r}")
        return target.paragraphs[int(paragraph_index)]
    return target
