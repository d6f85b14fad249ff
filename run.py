"""
スパムコメント削除の起動スクリプト
"""
import argparse
import asyncio
import sys
from typing import List, Optional

from core.config import Config
from core.controller import SpamCleaner
from core.errors import AuthorizationError, ConfigError
from core.models import RunState
from utils.logger import get_logger

logger = get_logger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    ap = argparse.ArgumentParser(description="Delete spam comments from one of your YouTube videos")
    ap.add_argument("--video-id", default=None, help="target video ID (default: VIDEO_ID from .env)")
    ap.add_argument("--dry-run", action="store_true", help="scan and report without deleting")
    return ap.parse_args(argv)


def main(argv: Optional[List[str]] = None, cleaner_cls=SpamCleaner) -> int:
    """メイン関数"""
    args = parse_args(argv)

    try:
        video_id = Config.validate(args.video_id)
    except ConfigError as e:
        logger.error(f"ERROR: {e}")
        return 1

    cleaner = cleaner_cls(video_id, dry_run=True if args.dry_run else None)
    try:
        result = asyncio.run(cleaner.run())
    except AuthorizationError as e:
        logger.error(f"Authorization failed: {e}")
        return 1
    except Exception as e:
        logger.exception(f"Failed to run the program: {e}")
        return 1

    if result.state is RunState.ABORTED:
        return 0
    if result.report is not None and result.report.failures:
        logger.warning(f"{len(result.report.failures)} comments could not be deleted")
    return 0


if __name__ == "__main__":
    sys.exit(main())
