"""
スパム判定モジュール
"""
import unicodedata
from typing import Optional


def is_spam(text: Optional[str]) -> bool:
    """
    コメント本文がスパムらしいか判定する

    NFKD正規化で本文が変化する場合（全角文字、結合文字、互換文字など）を
    スパムとみなす。アクセント付き文字や非ラテン文字の通常コメントも
    該当し得る。

    Args:
        text: コメント本文

    Returns:
        bool: 正規化前後で本文が異なれば True
    """
    if not text:
        return False
    return unicodedata.normalize("NFKD", text) != text
