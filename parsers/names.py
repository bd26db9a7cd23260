"""
作者姓名解析

把一串作者文字（例如 'David Mimno, Hanna M Wallach, and Andrew McCallum'）
切成個別作者，再依字詞數拆成 first / middle / last。
"""
import logging
import re
from enum import Enum
from typing import List, NamedTuple, Optional, Sequence

from models import Name
from settings import get_settings

logger = logging.getLogger(__name__)


class Token(NamedTuple):
    kind: str
    value: str


# 小寫的姓氏前綴：van Dijk, de Marneffe, da Vinci
_PARTICLES = r'(?:(?:van|von|da|de|der|den|del|della|di|du|ter|ten|le|la)\s+)*'
# 世代後綴：Daumé III
_GENERATION = r'(?:\s+(?:I{2,3}|IV|VI{1,3}|IX)\b)?'

# 依序嘗試，第一個符合的規則勝出；kind 為 None 的規則直接略過
_RULES = [
    (None, re.compile(r'\s+')),
    ('SEPARATOR', re.compile(r'[,;]\s*')),
    ('ET_AL', re.compile(r'et\.?\s+al\b\.?')),
    ('CONJUNCTION', re.compile(r'(?:and|et)\b|&')),
    ('INITIAL', re.compile(r'[A-Z](?:\.|(?=[\s,;]|$))')),
    ('NAME', re.compile(_PARTICLES + r'[^\W\d_][^,;\s()]*' + _GENERATION)),
]


def tokenize_names(text: str) -> List[Token]:
    """
    把作者文字切成 token：SEPARATOR / ET_AL / CONJUNCTION / INITIAL / NAME。
    無法辨識的字元（括號、數字等）會被略過。
    """
    tokens = []
    pos = 0
    while pos < len(text):
        for kind, pattern in _RULES:
            match = pattern.match(text, pos)
            if match and match.end() > pos:
                if kind is not None:
                    tokens.append(Token(kind, match.group(0).strip()))
                pos = match.end()
                break
        else:
            logger.debug("Skipping unrecognized character %r at %d in %r", text[pos], pos, text)
            pos += 1
    return tokens


def parse_name_tokens(parts: Sequence[str]) -> Name:
    """
    依字詞數量決定 first / middle / last：

    ['Leonardo', 'da Vinci'] -> Name(first='Leonardo', last='da Vinci')
    ['Hanna', 'M', 'Wallach'] -> Name(first='Hanna', middle='M', last='Wallach')
    ['Zhou'] -> Name(last='Zhou')

    parts 為空時拋出 ValueError。
    """
    if not parts:
        raise ValueError("parse_name_tokens() needs at least one part")
    n = len(parts)
    if n >= 3:
        return Name(first=parts[0], middle=' '.join(parts[1:n - 1]), last=parts[n - 1])
    if n == 2:
        return Name(first=parts[0], last=parts[1])
    return Name(last=parts[0])


class ScanState(Enum):
    EMPTY = "empty"
    # 緩衝區只有一個字詞，尚未遇到分隔符號
    ONE_PENDING = "one_pending"
    # 緩衝區有兩個以上字詞（名 姓 順序）
    ACCUMULATING = "accumulating"
    # 'Levy, R.'：姓氏在分隔符號前，輸出時要把第一個字詞移到最後
    SWAP_PENDING = "swap_pending"


class _NameListScanner:
    """
    一個 token 一個 token 處理的有限狀態機。

    緩衝區收集同一位作者的字詞，遇到分隔符號或連接詞時輸出；
    若緩衝區只有一個字詞時遇到逗號，進入 SWAP_PENDING，
    代表可能是「姓, 名」順序，留待下一個 token 決定。
    """

    def __init__(self, tokens: List[Token], et_al: str):
        self.tokens = tokens
        self.et_al = et_al
        self.names: List[Name] = []
        self.buffer: List[str] = []
        self.state = ScanState.EMPTY

    def flush(self):
        if self.state == ScanState.SWAP_PENDING and len(self.buffer) > 1:
            # 把第一個字詞（姓）移到最後
            self.buffer.append(self.buffer.pop(0))
        if self.buffer:
            self.names.append(parse_name_tokens(self.buffer))
        self.buffer = []
        self.state = ScanState.EMPTY

    def push(self, value: str):
        self.buffer.append(value)
        if self.state == ScanState.EMPTY:
            self.state = ScanState.ONE_PENDING
        elif self.state == ScanState.ONE_PENDING:
            self.state = ScanState.ACCUMULATING

    def opens_inverted_name(self, index: int) -> bool:
        """NAME 後面緊接「, 縮寫」時，它本身就是下一位作者的姓氏"""
        following = self.tokens[index + 1:index + 3]
        return [t.kind for t in following] == ['SEPARATOR', 'INITIAL']

    def run(self) -> List[Name]:
        for index, token in enumerate(self.tokens):
            if token.kind == 'NAME':
                if self.state == ScanState.SWAP_PENDING:
                    if len(self.buffer) == 1 and not self.opens_inverted_name(index):
                        # 'Liu, Tian' 視為同一人 (Tian Liu)
                        self.buffer.append(token.value)
                        continue
                    self.flush()
                self.push(token.value)
            elif token.kind == 'INITIAL':
                self.push(token.value)
            elif token.kind == 'SEPARATOR':
                if self.state == ScanState.ONE_PENDING:
                    self.state = ScanState.SWAP_PENDING
                elif self.state == ScanState.ACCUMULATING:
                    self.flush()
                elif self.state == ScanState.SWAP_PENDING and len(self.buffer) > 1:
                    self.flush()
            elif token.kind == 'CONJUNCTION':
                self.flush()
            elif token.kind == 'ET_AL':
                self.flush()
                self.names.append(Name(last=self.et_al))

        self.flush()
        return self.names


def parse_name_list(text: str, et_al: Optional[str] = None) -> List[Name]:
    """
    解析作者列表：

    1. 三人以上
      'David Mimno, Hanna M Wallach, and Andrew McCallum' ->
        [David Mimno, Hanna M Wallach, Andrew McCallum]
    2. 沒有 Oxford comma
      'Aravind K Joshi, Ben King and Steven Abney' ->
        [Aravind K Joshi, Ben King, Steven Abney]
    3. 兩人
      'Daniel Ramage and Chris Callison-Burch'
    4. 單一作者
      'David Sankofl'
    5. et al. 縮寫
      'Zhao et al.' -> [Zhao, et al.]
    6. 姓在前
      'Levy, R., & Daumé III, H.' -> [R. Levy, H. Daumé III]
      'Liu, F., Tian, F., & Zhu, Q.' -> [F. Liu, F. Tian, Q. Zhu]

    'Liu, Tian' 本質上有歧義（一個人 Tian Liu 還是兩個人？），
    這裡採用一個人的解讀。
    """
    if not text:
        return []
    if et_al is None:
        et_al = get_settings().et_al
    tokens = tokenize_names(text)
    names = _NameListScanner(tokens, et_al).run()
    logger.debug("Parsed %d names from %r", len(names), text)
    return names


_LEGACY_SEPARATOR = re.compile(r',\s+and\s+|,\s+&\s+|\s+and\s+|\s+&\s+|,\s+')
_LEGACY_ET_AL = re.compile(r'[,\s]+et\.?\s+al\.?$')


def parse_name_list_legacy(text: str, et_al: Optional[str] = None) -> List[Name]:
    """
    舊版切法：只依分隔字串切開，不處理「姓, 名」順序。
    'Levy, R.' 會變成兩位作者。
    """
    if not text or not text.strip():
        return []
    if et_al is None:
        et_al = get_settings().et_al

    text = text.strip()
    has_et_al = bool(_LEGACY_ET_AL.search(text))
    if has_et_al:
        text = _LEGACY_ET_AL.sub('', text)

    names = [parse_name_tokens(chunk.split()) for chunk in _LEGACY_SEPARATOR.split(text) if chunk.strip()]
    if has_et_al:
        names.append(Name(last=et_al))
    return names


def format_name(name: Name) -> str:
    """名 中間名 姓"""
    return ' '.join(part for part in (name.first, name.middle, name.last) if part)


def format_names(names: Sequence[Name], et_al: Optional[str] = None) -> str:
    """
    'A' / 'A and B' / 'A, B, and C' / 'A et al.'
    """
    if et_al is None:
        et_al = get_settings().et_al

    names = list(names)
    truncated = bool(names) and names[-1].last == et_al
    if truncated:
        names = names[:-1]

    formatted = [format_name(name) for name in names]
    if truncated:
        return ', '.join(formatted) + ' et al.' if formatted else 'et al.'
    if len(formatted) <= 1:
        return ''.join(formatted)
    if len(formatted) == 2:
        return f"{formatted[0]} and {formatted[1]}"
    return ', '.join(formatted[:-1]) + ', and ' + formatted[-1]
