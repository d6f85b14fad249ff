"""
コメントスキャナーモジュール
"""
from typing import Callable, List

from core.config import Config
from .models import Comment
from .spam_filter import is_spam
from utils.logger import get_logger

logger = get_logger(__name__)


def fetch_comments(client, video_id: str, max_results: int = Config.MAX_RESULTS) -> List[Comment]:
    """
    動画のトップレベルコメントを取得する

    Args:
        client: YouTubeClient 互換のクライアント
        video_id: 動画ID
        max_results: 取得件数の上限

    Returns:
        List[Comment]: コメントのリスト
    """
    return client.list_comment_threads(video_id, max_results=min(max_results, Config.MAX_RESULTS))


def scan_comments(
    client,
    video_id: str,
    classifier: Callable[[str], bool] = is_spam,
    max_results: int = Config.MAX_RESULTS,
) -> List[str]:
    """
    スパムと判定されたコメントIDを返す

    Args:
        client: YouTubeClient 互換のクライアント
        video_id: 動画ID
        classifier: スパム判定関数
        max_results: 取得件数の上限

    Returns:
        List[str]: スパム判定されたトップレベルコメントID（APIの返却順）
    """
    flagged: List[str] = []
    for comment in fetch_comments(client, video_id, max_results=max_results):
        logger.info(f'Checking comment from {comment.author}: "{comment.text}"')
        if classifier(comment.text):
            logger.warning(f'Spam comment found from {comment.author}: "{comment.text}"')
            flagged.append(comment.id)
    return flagged
