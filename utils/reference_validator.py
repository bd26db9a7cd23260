"""
參考文獻欄位驗證模組
檢查解析後的 Reference 是否具備比對所需的基本欄位
"""
import re
from typing import Dict, List, Sequence, Tuple

from models import Reference

# 錯誤代碼，顯示文字由 utils.i18n 提供
AUTHOR_MISSING = "author_missing"
YEAR_MISSING = "year_missing"
YEAR_FORMAT = "year_format"
TITLE_MISSING = "title_missing"

_YEAR_FORMAT_PATTERN = re.compile(r'^(1[5-9]\d{2}|20\d{2})(?:[-–—](1[5-9]\d{2}|20\d{2}))?[a-z]?$')


def validate_reference(ref: Reference) -> Tuple[bool, List[str]]:
    """
    驗證單筆參考文獻

    Args:
        ref: 解析後的參考文獻

    Returns:
        (is_valid, error_codes): 是否有效及錯誤代碼列表
    """
    errors = []

    # 1. 必須有作者
    if not ref.authors:
        errors.append(AUTHOR_MISSING)

    # 2. 必須有年份，且格式合理 (1500-2099 + 範圍 + a-z)
    if not ref.year:
        errors.append(YEAR_MISSING)
    elif not _YEAR_FORMAT_PATTERN.match(ref.year.strip()):
        errors.append(YEAR_FORMAT)

    # 3. 必須有標題
    if not ref.title:
        errors.append(TITLE_MISSING)

    return len(errors) == 0, errors


def validate_reference_list(references: Sequence[Reference]) -> Tuple[bool, List[Dict]]:
    """
    驗證整份參考文獻列表

    Returns:
        (all_valid, results): results 只包含有錯誤的項目
            [{'index': 0, 'errors': ['year_missing'], 'source': '...'}]
    """
    results = []
    for index, ref in enumerate(references):
        is_valid, errors = validate_reference(ref)
        if not is_valid:
            results.append({
                'index': index,
                'errors': errors,
                'source': ref.source or '',
            })
    return len(results) == 0, results
