"""
所有権検証モジュール
"""
from .errors import AuthChannelNotFound, NotOwner, VideoNotFound
from .models import VideoInfo
from utils.logger import get_logger

logger = get_logger(__name__)


def validate_ownership(client, video_id: str) -> VideoInfo:
    """
    動画が認証済みアカウントのチャンネルのものか検証する

    Args:
        client: YouTubeClient 互換のクライアント
        video_id: 動画ID

    Returns:
        VideoInfo: 検証済みの動画情報

    Raises:
        AuthChannelNotFound: 認証済みチャンネルが取得できない場合
        VideoNotFound: 動画が存在しない場合
        NotOwner: チャンネルIDが一致しない場合
    """
    my_channel_id = client.get_my_channel_id()
    if not my_channel_id:
        raise AuthChannelNotFound()

    video = client.get_video(video_id)
    if video is None:
        raise VideoNotFound(video_id)

    if my_channel_id != video.channel_id:
        raise NotOwner(video.title, video.channel_title)

    logger.info(f"Ownership verified: video is owned by your channel ({video.channel_title})")
    return video
