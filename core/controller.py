"""
コントローラーモジュール
"""
from typing import Callable, List, Optional

from core.config import Config
from .auth import authorize
from .deleter import delete_comments
from .models import RunResult, RunState
from .ownership import validate_ownership
from .scanner import scan_comments
from .youtube_client import YouTubeClient
from utils.helpers import prompt_yes_no
from utils.logger import get_logger

logger = get_logger(__name__)

CONFIRM_QUESTION = "Do you still want to continue? (y/n): "


class SpamCleaner:
    """スパムコメント削除のオーケストレーター"""

    def __init__(
        self,
        video_id: str,
        config=Config,
        authorizer=authorize,
        client_factory: Callable = YouTubeClient.from_credentials,
        confirm: Callable[[str], bool] = prompt_yes_no,
        dry_run: Optional[bool] = None,
    ):
        """
        初期化

        Args:
            video_id: 検証済みの動画ID
            config: 設定
            authorizer: クレデンシャルを返す非同期関数
            client_factory: クレデンシャルからクライアントを作る関数
            confirm: y/n 確認関数
            dry_run: True の場合は削除しない（省略時は config.DRY_RUN）
        """
        self.video_id = video_id
        self.config = config
        self._authorizer = authorizer
        self._client_factory = client_factory
        self._confirm = confirm
        self.dry_run = config.DRY_RUN if dry_run is None else dry_run
        self.state = RunState.AUTHORIZING

    def _set_state(self, state: RunState) -> None:
        logger.debug(f"State: {self.state.value} -> {state.value}")
        self.state = state

    async def run(self) -> RunResult:
        """
        認可 → 所有権検証 → スキャン → 削除 を順に実行する

        Returns:
            RunResult: 実行結果
        """
        self._set_state(RunState.AUTHORIZING)
        credentials = await self._authorizer(self.config)
        client = self._client_factory(credentials)

        verified = self._validate(client)
        if not verified:
            self._set_state(RunState.AWAITING_CONFIRM)
            if not self._confirm(CONFIRM_QUESTION):
                logger.info("Program stopped.")
                self._set_state(RunState.ABORTED)
                return RunResult(state=self.state, ownership_verified=False)

        flagged = self._scan(client)
        result = RunResult(state=self.state, ownership_verified=verified, flagged=flagged)

        if not flagged:
            logger.info("No spam comments found.")
            self._set_state(RunState.DONE)
            result.state = self.state
            return result

        if self.dry_run:
            logger.info(f"Found {len(flagged)} spam comments. Dry run, nothing deleted.")
        else:
            logger.info(f"Found {len(flagged)} spam comments. Deleting...")
            self._set_state(RunState.DELETING)
            result.report = delete_comments(client, flagged)

        self._set_state(RunState.DONE)
        result.state = self.state
        return result

    def _validate(self, client) -> bool:
        self._set_state(RunState.VALIDATING)
        try:
            validate_ownership(client, self.video_id)
        except Exception as e:
            logger.warning(f"WARNING: {e}")
            logger.info("Make sure you are logged in with the account that owns the video.")
            self._set_state(RunState.VALIDATION_FAILED)
            return False
        self._set_state(RunState.VALIDATED_OK)
        return True

    def _scan(self, client) -> List[str]:
        self._set_state(RunState.SCANNING)
        try:
            flagged = scan_comments(client, self.video_id, max_results=self.config.MAX_RESULTS)
        except Exception as e:
            logger.error(f"Failed to fetch comments: {e}")
            flagged = []
        self._set_state(RunState.HAS_SPAM if flagged else RunState.NO_SPAM)
        return flagged
