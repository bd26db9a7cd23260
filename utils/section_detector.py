import re
from typing import List

from models import Section

REFERENCES_TITLE = "References"


def is_appendix_heading(text):
    """判斷是否為附錄標題：Appendix, Appendix A, A Appendix"""
    text = text.strip()
    pattern = r'^(?:[A-Z0-9]+[\.\s]\s*)?(?:APPENDIX|Appendix|Appendices)(?:\s+[A-Z0-9]+)?[:.]?$'
    return bool(re.match(pattern, text))


def is_reference_heading(text):
    """
    判斷：單行是否為參考文獻標題
    能抓到：'Reference', 'References', '7. References', 'VII. Bibliography', 'Works Cited'
    """
    text = text.strip().lower()
    if len(text) > 40: return False  # 太長通常是內文

    # 前綴積木：抓取 "7.", "VII.", "[7]"
    prefix_pattern = r'^(?:\s*[\(\[]?\s*(?:[0-9\.]+|[ivxlcdm]+)\s*[\)\]]?)?'
    # 分隔積木：抓取空格、點、冒號
    delimiter_pattern = r'[\s\.\,:\-\_]*'
    keywords_regex = r'(?:references?|bibliography|works cited|literature cited)'

    return bool(re.match(prefix_pattern + delimiter_pattern + keywords_regex + r'[\s:\.]*$', text))


def is_numbered_heading(text):
    """
    判斷是否為編號章節標題：'1 Introduction', '2.1 Data', '3. Method'
    句號結尾或太長的視為內文
    """
    text = text.strip()
    if len(text) > 80 or text.endswith('.'):
        return False
    return bool(re.match(r'^\d+(?:\.\d+)*\.?\s+[A-Z][^\.]*$', text))


def sections_from_paragraphs(paragraphs) -> List[Section]:
    """
    將平的段落列表依標題分成章節。

    - 參考文獻標題統一改成 'References'，讓 link_paper 的預設規則能辨識
    - 第一個標題之前的段落放在標題為 '' 的章節
    - 參考文獻之後遇到附錄就停止收集參考文獻
    """
    sections = []
    title = ""
    current = []

    def close_section():
        if current or title:
            sections.append(Section(title=title, paragraphs=tuple(current)))

    for para in paragraphs:
        para = para.strip()
        if not para: continue

        if is_reference_heading(para):
            close_section()
            title, current = REFERENCES_TITLE, []
        elif is_appendix_heading(para) or is_numbered_heading(para):
            close_section()
            title, current = para, []
        else:
            current.append(para)

    close_section()
    return sections
