"""
ヘルパー関数モジュール
"""
import json
import os
from typing import Any, Callable, Dict, Optional, Tuple


def load_json_file(file_path: str) -> Dict[str, Any]:
    """
    JSONファイルを読み込む

    Args:
        file_path: JSONファイルのパス

    Returns:
        Dict[str, Any]: JSONデータ（ファイルが無い場合は空の辞書）
    """
    if not os.path.exists(file_path):
        return {}

    with open(file_path, 'r', encoding='utf-8') as f:
        return json.load(f)


def save_json_file(file_path: str, data: Dict[str, Any]) -> None:
    """
    JSONファイルに保存する

    Args:
        file_path: JSONファイルのパス
        data: 保存するデータ
    """
    directory = os.path.dirname(file_path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    with open(file_path, 'w', encoding='utf-8') as f:
        json.dump(data, f, ensure_ascii=False, indent=2)


def describe_http_error(exc: Exception) -> Tuple[Optional[int], str]:
    """
    APIエラーからステータスコードとエラー本文を取り出す

    googleapiclient の HttpError は resp.status と content を持つ。
    それ以外の例外はステータス無しで str(exc) を返す。

    Args:
        exc: 発生した例外

    Returns:
        Tuple[Optional[int], str]: (ステータスコード, エラー本文)
    """
    status = None
    resp = getattr(exc, "resp", None)
    if resp is not None:
        try:
            status = int(getattr(resp, "status", None))
        except (TypeError, ValueError):
            status = None

    content = getattr(exc, "content", None)
    if content:
        if isinstance(content, (bytes, bytearray)):
            return status, content.decode("utf-8", errors="replace")
        return status, str(content)
    return status, str(exc)


def prompt_yes_no(question: str, input_func: Callable[[str], str] = input) -> bool:
    """
    標準入力で y/n の確認を行う

    Args:
        question: 表示する質問
        input_func: 入力関数（テスト用に差し替え可能）

    Returns:
        bool: "y" と答えた場合のみ True
    """
    try:
        answer = input_func(question)
    except EOFError:
        return False
    return answer.lower() == "y"
