"""The 128-symbol Hangul alphabet.

Symbols are grouped by initial consonant (ㄱ through ㅎ) and chosen for
natural pronunciation: mostly open syllables or soft final consonants.
Index order is fixed; changing it changes every encoded string.
"""

import unicodedata
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from .errors import ConfigurationError, InvalidSymbol

SIZE = 128

SYMBOLS = (
    # ㄱ
    "가", "간", "강", "개", "거", "고", "공", "구", "금",
    # ㄴ
    "나", "날", "남", "내", "너", "노", "눈", "늘", "니",
    # ㄷ
    "다", "달", "담", "대", "더", "도", "동", "두", "드",
    # ㄹ
    "라", "람", "랑", "래", "러", "로", "루", "리", "림",
    # ㅁ
    "마", "만", "말", "매", "머", "모", "무", "문", "미",
    # ㅂ
    "바", "반", "방", "배", "보", "봄", "부", "비", "빈",
    # ㅅ (10)
    "사", "산", "상", "새", "서", "선", "소", "송", "수", "시",
    # ㅇ (10)
    "아", "안", "양", "어", "연", "영", "오", "온", "우", "이",
    # ㅈ
    "자", "잔", "장", "재", "저", "조", "주", "중", "지",
    # ㅊ
    "차", "찬", "창", "채", "천", "초", "춘", "충", "치",
    # ㅋ
    "카", "칸", "코", "쿠", "크", "키", "캐", "케", "콩",
    # ㅌ
    "타", "탄", "태", "터", "토", "통", "투", "트", "티",
    # ㅍ
    "파", "판", "패", "포", "풍", "프", "피", "팔", "품",
    # ㅎ
    "하", "한", "해", "허", "호", "홍", "화", "후", "히",
)


@dataclass(frozen=True)
class Alphabet:
    """Ordered symbol table with O(1) lookup in both directions."""
    symbols: tuple[str, ...]
    reverse: Mapping[str, int] = field(repr=False, compare=False)

    def symbol_at(self, index: int) -> str:
        if not 0 <= index < len(self.symbols):
            raise IndexError(f"Symbol index must be 0-{len(self.symbols) - 1}, got {index}")
        return self.symbols[index]

    def index_of(self, symbol: str) -> int:
        index = self.reverse.get(symbol)
        if index is None:
            raise InvalidSymbol(symbol)
        return index

    def __len__(self):
        return len(self.symbols)

    def __contains__(self, symbol):
        return symbol in self.reverse

    def __iter__(self):
        return iter(self.symbols)


def build(symbols=SYMBOLS) -> Alphabet:
    """Build an Alphabet from an ordered list of symbols.

    Raises ConfigurationError unless there are exactly 128 distinct
    symbols, each a single (NFC) character.
    """
    symbols = tuple(symbols)
    if len(symbols) != SIZE:
        raise ConfigurationError(f"Alphabet must have {SIZE} symbols, got {len(symbols)}")
    for s in symbols:
        if not isinstance(s, str) or len(unicodedata.normalize("NFC", s)) != 1:
            raise ConfigurationError(f"Alphabet symbol must be a single character, got {s!r}")

    symbols = tuple(unicodedata.normalize("NFC", s) for s in symbols)
    reverse = {s: i for i, s in enumerate(symbols)}
    if len(reverse) != SIZE:
        dupes = sorted({s for s in symbols if symbols.count(s) > 1})
        raise ConfigurationError(f"Alphabet symbols must be distinct, duplicated: {dupes}")
    return Alphabet(symbols, MappingProxyType(reverse))
