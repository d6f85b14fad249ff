"""
設定管理モジュール
"""
import os
import re
from typing import Optional

from dotenv import load_dotenv

from core.errors import ConfigError

# 環境変数の読み込み
load_dotenv()

VIDEO_ID_PATTERN = re.compile(r"^[a-zA-Z0-9_-]{11}$")


def validate_video_id(video_id: Optional[str]) -> str:
    """
    動画IDを検証する

    Args:
        video_id: YouTubeの動画ID

    Returns:
        str: 検証済みの動画ID

    Raises:
        ConfigError: 未設定または形式が不正な場合
    """
    if not video_id:
        raise ConfigError(
            "VIDEO_ID was not found. Add VIDEO_ID=<youtube_video_id> to your .env file"
        )
    if not VIDEO_ID_PATTERN.match(video_id):
        raise ConfigError(
            f"Invalid VIDEO_ID format: {video_id!r}. "
            "A YouTube video ID is an 11 character string, e.g. VIDEO_ID=dQw4w9WgXcQ"
        )
    return video_id


class Config:
    """設定管理クラス"""

    # Target video
    VIDEO_ID = os.getenv("VIDEO_ID")

    # OAuth
    SCOPES = ["https://www.googleapis.com/auth/youtube.force-ssl"]
    CLIENT_SECRETS_FILE = os.getenv("CLIENT_SECRETS_FILE", "credentials.json")
    TOKEN_FILE = os.getenv("TOKEN_FILE", "token.json")
    OAUTH_PORT = int(os.getenv("OAUTH_PORT", "8080"))

    # Comment scanning（1ページのみ取得。nextPageToken は追わない。API上限は100）
    MAX_RESULTS = 100

    # 動作モード
    DRY_RUN = os.getenv("DRY_RUN", "false").lower() == "true"

    # Logging
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    LOG_FILE = os.getenv("LOG_FILE")

    @classmethod
    def validate(cls, video_id: Optional[str] = None) -> str:
        """
        設定の検証

        Args:
            video_id: コマンドラインで指定された動画ID（省略時は VIDEO_ID）

        Returns:
            str: 検証済みの動画ID
        """
        video_id = validate_video_id(cls.VIDEO_ID if video_id is None else video_id)

        if not 0 <= cls.OAUTH_PORT <= 65535:
            raise ConfigError(f"Invalid OAUTH_PORT: {cls.OAUTH_PORT}")

        return video_id
