import re
import unicodedata


def collapse_whitespace(text):
    """只清理空白：隱藏空白轉一般空白、合併多重空白，不改動其他字元"""
    if not text:
        return ""
    # 將常見隱藏空白（NBSP、全形空白、零寬字元）統一為一般空白
    text = re.sub(r'[\u3000\xa0\u200b\u200c\u200d]+', ' ', text)
    # 去除多重空白、換行、tab
    text = re.sub(r'\s+', ' ', text)
    return text.strip()


def normalize_text(text):
    """正規化文字：全形轉半形、清理各種空白與控制符"""
    if not text:
        return ""
    # 全形字元轉半形 (包含括號、標點、空格)，之後再清理空白
    return collapse_whitespace(unicodedata.normalize('NFKC', text))


def split_paragraphs(text):
    """
    將貼上的全文切成段落：
    有空行時以空行分段（段落內的斷行合併），否則每一行就是一段
    """
    if not text or not text.strip():
        return []
    if re.search(r'\n\s*\n', text):
        blocks = re.split(r'\n\s*\n', text)
    else:
        blocks = text.splitlines()
    return [normalize_text(block) for block in blocks if block.strip()]
