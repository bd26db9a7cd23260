"""
設定值：先讀取 .env，再以環境變數覆寫預設值
"""
import logging
import os
import re
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv

DEFAULT_ET_AL = "et al."
DEFAULT_REFERENCES_TITLE = r"^References?$"


@dataclass(frozen=True)
class Settings:
    # et al. 的代表姓氏（舊版資料使用 "al."）
    et_al: str = DEFAULT_ET_AL
    # 判斷參考文獻章節標題的 regex（區分大小寫）
    references_title: str = DEFAULT_REFERENCES_TITLE
    log_level: str = "INFO"

    @property
    def references_title_pattern(self) -> re.Pattern:
        return re.compile(self.references_title)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    載入設定。結果會被快取，測試或重新載入時呼叫 get_settings.cache_clear()。

    環境變數：
        REFLINK_ET_AL: et al. 代表姓氏
        REFLINK_REFERENCES_TITLE: 參考文獻章節標題 regex
        REFLINK_LOG_LEVEL: logging 等級
    """
    load_dotenv()

    et_al = os.getenv("REFLINK_ET_AL", DEFAULT_ET_AL).strip()
    if not et_al:
        raise ValueError("REFLINK_ET_AL must not be empty")

    references_title = os.getenv("REFLINK_REFERENCES_TITLE", DEFAULT_REFERENCES_TITLE)
    try:
        re.compile(references_title)
    except re.error as exc:
        raise ValueError(f"Invalid REFLINK_REFERENCES_TITLE {references_title!r}: {exc}") from exc

    log_level = os.getenv("REFLINK_LOG_LEVEL", "INFO").upper()
    # getLevelName 對已知等級名稱回傳數字，未知名稱回傳字串
    if not isinstance(logging.getLevelName(log_level), int):
        raise ValueError(f"Invalid REFLINK_LOG_LEVEL {log_level!r}")

    return Settings(et_al=et_al, references_title=references_title, log_level=log_level)
