"""
YouTube APIモジュール
"""
from typing import Any, List, Optional

from googleapiclient.discovery import build

from .models import Comment, VideoInfo
from utils.logger import get_logger

logger = get_logger(__name__)


def build_youtube(credentials) -> Any:
    """認可済みの YouTube Data API v3 サービスを作成する"""
    return build("youtube", "v3", credentials=credentials, cache_discovery=False)


def _comment_from_thread(item: dict) -> Comment:
    top = item["snippet"]["topLevelComment"]
    snippet = top.get("snippet", {})
    return Comment(
        id=top["id"],
        thread_id=item.get("id", ""),
        author=snippet.get("authorDisplayName", ""),
        text=snippet.get("textDisplay", ""),
    )


class YouTubeClient:
    """YouTube Data API の薄いラッパー"""

    def __init__(self, service: Any):
        """
        初期化

        Args:
            service: googleapiclient のサービスオブジェクト
        """
        self._service = service

    @classmethod
    def from_credentials(cls, credentials) -> "YouTubeClient":
        return cls(build_youtube(credentials))

    def get_my_channel_id(self) -> Optional[str]:
        """
        認証済みアカウントのチャンネルIDを取得する

        Returns:
            Optional[str]: チャンネルID（見つからない場合は None）
        """
        response = self._service.channels().list(part="id", mine=True).execute()
        items = response.get("items") or []
        if not items:
            return None
        return items[0]["id"]

    def get_video(self, video_id: str) -> Optional[VideoInfo]:
        """
        動画情報を取得する

        Args:
            video_id: 動画ID

        Returns:
            Optional[VideoInfo]: 動画情報（見つからない場合は None）
        """
        response = self._service.videos().list(part="snippet", id=video_id).execute()
        items = response.get("items") or []
        if not items:
            return None
        snippet = items[0]["snippet"]
        return VideoInfo(
            id=items[0].get("id", video_id),
            title=snippet.get("title", ""),
            channel_id=snippet["channelId"],
            channel_title=snippet.get("channelTitle", ""),
        )

    def list_comment_threads(self, video_id: str, max_results: int = 100) -> List[Comment]:
        """
        動画のトップレベルコメントを1ページ分取得する

        Args:
            video_id: 動画ID
            max_results: 取得件数の上限（API上限は100）

        Returns:
            List[Comment]: APIの返却順のコメント
        """
        response = self._service.commentThreads().list(
            part="snippet",
            videoId=video_id,
            maxResults=max_results,
        ).execute()
        return [_comment_from_thread(item) for item in response.get("items") or []]

    def get_comment_thread(self, thread_id: str) -> Optional[Comment]:
        """
        スレッドIDからトップレベルコメントを取得する

        Args:
            thread_id: コメントスレッドID

        Returns:
            Optional[Comment]: トップレベルコメント（見つからない場合は None）
        """
        response = self._service.commentThreads().list(part="snippet", id=thread_id).execute()
        items = response.get("items") or []
        if not items:
            return None
        return _comment_from_thread(items[0])

    def delete_comment(self, comment_id: str) -> None:
        """コメントを削除する"""
        self._service.comments().delete(id=comment_id).execute()
