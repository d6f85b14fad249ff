"""
データモデルモジュール
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


@dataclass
class Comment:
    """トップレベルコメントデータクラス"""
    id: str
    thread_id: str
    author: str
    text: str


@dataclass
class VideoInfo:
    """動画データクラス"""
    id: str
    title: str
    channel_id: str
    channel_title: str


class IdKind(Enum):
    """コメントIDの種類"""
    THREAD = "thread"
    COMMENT = "comment"


@dataclass(frozen=True)
class CommentRef:
    """種類付きのコメントID"""
    kind: IdKind
    id: str


@dataclass
class DeletionFailure:
    """削除失敗の記録"""
    comment_id: str
    reason: str
    status: Optional[int] = None
    detail: Optional[str] = None


@dataclass
class DeletionReport:
    """削除処理の結果"""
    deleted: List[str] = field(default_factory=list)
    failures: List[DeletionFailure] = field(default_factory=list)

    @property
    def attempted(self) -> int:
        return len(self.deleted) + len(self.failures)


class RunState(Enum):
    """オーケストレーターの状態"""
    AUTHORIZING = "authorizing"
    VALIDATING = "validating"
    VALIDATED_OK = "validated_ok"
    VALIDATION_FAILED = "validation_failed"
    AWAITING_CONFIRM = "awaiting_confirm"
    ABORTED = "aborted"
    SCANNING = "scanning"
    HAS_SPAM = "has_spam"
    NO_SPAM = "no_spam"
    DELETING = "deleting"
    DONE = "done"


@dataclass
class RunResult:
    """1回の実行結果"""
    state: RunState
    ownership_verified: bool = False
    flagged: List[str] = field(default_factory=list)
    report: Optional[DeletionReport] = None
