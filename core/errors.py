"""
例外定義モジュール
"""


class CleanerError(Exception):
    """スパムクリーナーの基底例外"""


class ConfigError(CleanerError):
    """設定エラー（起動時に致命的）"""


class AuthorizationError(CleanerError):
    """OAuth認可エラー"""


class OwnershipError(CleanerError):
    """動画の所有権検証エラー"""


class AuthChannelNotFound(OwnershipError):
    """認証済みアカウントのチャンネルが見つからない"""

    def __init__(self):
        super().__init__("Could not find the authenticated channel")


class VideoNotFound(OwnershipError):
    """動画が見つからない"""

    def __init__(self, video_id: str):
        self.video_id = video_id
        super().__init__(f"Video with ID {video_id} was not found")


class NotOwner(OwnershipError):
    """動画が認証済みチャンネルのものではない"""

    def __init__(self, video_title: str, channel_title: str):
        self.video_title = video_title
        self.channel_title = channel_title
        super().__init__(
            f"Video '{video_title}' is not owned by your channel. "
            f"It belongs to channel: {channel_title}"
        )


class ThreadNotFound(CleanerError):
    """コメントスレッドIDを解決できない"""

    def __init__(self, thread_id: str):
        self.thread_id = thread_id
        super().__init__(f"Comment thread {thread_id} was not found")
