import dataclasses
import logging
import re
import unicodedata
from typing import List, Optional, Sequence, Union

from citation.in_text_extractor import find_cites
from models import AuthorYearCite, LinkedCite, Name, Paper, Reference
from reference_router import process_single_reference
from settings import get_settings

logger = logging.getLogger(__name__)


def _surname_key(name: Name) -> str:
    # 分解形式 (u + 組合重音) 與組合形式視為同一個姓氏
    return unicodedata.normalize("NFC", name.last)


# ===== 作者比對 =====
def authors_match(cite_authors: Sequence[Name], reference_authors: Sequence[Name], et_al: Optional[str] = None) -> bool:
    """
    內文引用通常只有姓氏，參考文獻則有全名或縮寫 + 姓氏，因此只比對姓氏：

        authors_match([Joshi], [Aravind K Joshi]) -> True
        authors_match([Diab, Kamboj], [Mona Diab, Ankit Kamboj]) -> True

    et al. 只有在對應位置之後「還有」作者時才算符合，不能代表剛好一位作者：

        authors_match([Blei, et al.], [David M Blei, Andrew Y Ng, Michael I Jordan]) -> True
        authors_match([Blei, et al.], [David M Blei, Andrew Y Ng]) -> False
    """
    if et_al is None:
        et_al = get_settings().et_al

    for i in range(max(len(cite_authors), len(reference_authors))):
        cite_author = cite_authors[i] if i < len(cite_authors) else None
        reference_author = reference_authors[i] if i < len(reference_authors) else None
        # et al. 必須在一般的姓氏比對之前處理
        if cite_author is not None and cite_author.last == et_al and len(reference_authors) > i + 1:
            return True
        if cite_author is None or reference_author is None or _surname_key(cite_author) != _surname_key(reference_author):
            return False
    return True


# ===== 交叉比對 =====
def link_cites(cites: Sequence[AuthorYearCite], references: Sequence[Reference], et_al: Optional[str] = None) -> List[LinkedCite]:
    """
    為每個引用找出作者相符且年份字串完全相同的參考文獻 ("2015" 與 "2015a" 不同)。
    所有符合者都會列出，多筆符合時不猜測。
    """
    if et_al is None:
        et_al = get_settings().et_al

    linked = []
    for cite in cites:
        pointers = tuple(
            f"/references/{index}"
            for index, reference in enumerate(references)
            if reference.year is not None
            and cite.year == reference.year
            and authors_match(cite.authors, reference.authors, et_al)
        )
        if len(pointers) > 1:
            logger.debug("Ambiguous cite %r matches %s", cite.source, ", ".join(pointers))
        base_fields = {f.name: getattr(cite, f.name) for f in dataclasses.fields(AuthorYearCite)}
        linked.append(LinkedCite(**base_fields, references=pointers))
    return linked


def link_paper(paper: Paper, references_title: Union[str, re.Pattern, None] = None) -> Paper:
    """
    拆分內文與參考文獻章節，解析參考文獻、擷取內文引用並連結。

    回傳新的 Paper：sections 不變，references 與 cites 填入結果。
    對同一份 Paper 重複呼叫會得到相同結果。
    """
    settings = get_settings()
    if references_title is None:
        references_title = settings.references_title_pattern
    elif isinstance(references_title, str):
        references_title = re.compile(references_title)

    references = []
    cites = []
    for section_index, section in enumerate(paper.sections):
        if references_title.search(section.title.strip()):
            references.extend(process_single_reference(paragraph) for paragraph in section.paragraphs)
        else:
            for paragraph_index, paragraph in enumerate(section.paragraphs):
                cites.extend(find_cites(paragraph, f"/sections/{section_index}/paragraphs/{paragraph_index}"))

    linked_cites = link_cites(cites, references, settings.et_al)
    logger.info(
        "Linked paper %r: references=%d cites=%d linked=%d",
        paper.title or "", len(references), len(linked_cites),
        sum(1 for cite in linked_cites if cite.is_linked),
    )
    return dataclasses.replace(paper, references=tuple(references), cites=tuple(linked_cites))
