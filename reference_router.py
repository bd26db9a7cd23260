# reference_router.py
import dataclasses
import logging

from models import Reference
from parsers.acl.acl_parser import parse_reference as parse_acl_reference
from utils.text_processor import collapse_whitespace

logger = logging.getLogger(__name__)

# 各引用格式的解析函式
REFERENCE_PARSERS = {
    'acl': parse_acl_reference,
}


def process_single_reference(ref_text: str, style: str = 'acl') -> Reference:
    """
    核心分流邏輯：
    - 先合併空白；不做 NFKC，標題等欄位保留原本的字元（例如連字 ﬃ）
    - 依 style 交給對應的解析器
    - source 保留未正規化的原始文字
    """
    try:
        parser = REFERENCE_PARSERS[style]
    except KeyError:
        raise ValueError(f"Unknown reference style: {style!r}") from None

    reference = parser(collapse_whitespace(ref_text))
    return dataclasses.replace(reference, source=ref_text)
