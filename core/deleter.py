"""
コメント削除モジュール
"""
from typing import Iterable, Union

from googleapiclient.errors import HttpError

from .errors import ThreadNotFound
from .models import CommentRef, DeletionFailure, DeletionReport, IdKind
from utils.helpers import describe_http_error
from utils.logger import get_logger

logger = get_logger(__name__)

POSSIBLE_CAUSES = (
    "The comment ID is invalid or the comment was already deleted",
    "You do not have permission to delete this comment",
    "A comment thread ID was used instead of a comment ID",
    "The YouTube API rate limit was exceeded",
)


def classify_id(comment_id: str) -> IdKind:
    """
    IDの形からスレッドIDかコメントIDかを推定する

    "Ug" で始まり "." を含まないIDをスレッドIDとみなす。
    APIの仕様で保証された区別ではない。
    """
    if comment_id.startswith("Ug") and "." not in comment_id:
        return IdKind.THREAD
    return IdKind.COMMENT


def _as_ref(item: Union[str, CommentRef]) -> CommentRef:
    if isinstance(item, CommentRef):
        return item
    return CommentRef(kind=classify_id(item), id=item)


def _delete_one(client, ref: CommentRef) -> str:
    """1件削除し、実際に削除したコメントIDを返す"""
    if ref.kind is IdKind.THREAD:
        top = client.get_comment_thread(ref.id)
        if top is None:
            raise ThreadNotFound(ref.id)
        logger.info(f"Comment thread ID {ref.id} refers to comment ID: {top.id}")
        client.delete_comment(top.id)
        logger.info(f"Deleted comment: {top.id} (from thread {ref.id})")
        return top.id

    client.delete_comment(ref.id)
    logger.info(f"Deleted comment: {ref.id}")
    return ref.id


def _record_failure(ref: CommentRef, exc: Exception) -> DeletionFailure:
    logger.error(f"Failed to delete comment {ref.id}: {exc}")

    status = None
    detail = None
    if isinstance(exc, HttpError):
        status, detail = describe_http_error(exc)
        logger.error(f"Error status: {status}")
        logger.error(f"Error detail: {detail}")

    causes = "\n".join(f"{i}. {cause}" for i, cause in enumerate(POSSIBLE_CAUSES, 1))
    logger.info(f"Possible causes:\n{causes}")

    return DeletionFailure(comment_id=ref.id, reason=str(exc), status=status, detail=detail)


def delete_comments(client, ids: Iterable[Union[str, CommentRef]]) -> DeletionReport:
    """
    コメントを順番に削除する

    1件の失敗で残りの処理を止めない。ロールバックは行わない。

    Args:
        client: YouTubeClient 互換のクライアント
        ids: コメントIDまたは CommentRef の列

    Returns:
        DeletionReport: 削除結果
    """
    report = DeletionReport()
    for item in ids:
        ref = _as_ref(item)
        logger.info(f"Trying to delete comment with ID: {ref.id}")
        try:
            report.deleted.append(_delete_one(client, ref))
        except Exception as e:
            report.failures.append(_record_failure(ref, e))

    logger.info(f"Deletion finished: {len(report.deleted)} deleted, {len(report.failures)} failed")
    return report
