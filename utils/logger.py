"""
ロギングユーティリティモジュール
"""
import logging
import os
from typing import Optional

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def get_logger(name: str, level: Optional[str] = None, log_file: Optional[str] = None) -> logging.Logger:
    """
    ロガーを取得する

    Args:
        name: ロガー名
        level: ログレベル（省略時は環境変数 LOG_LEVEL、既定は INFO）
        log_file: ログファイルのパス（省略時は環境変数 LOG_FILE）

    Returns:
        logging.Logger: 設定済みのロガー
    """
    logger = logging.getLogger(name)

    if not logger.handlers:
        level_name = (level or os.getenv("LOG_LEVEL", "INFO")).upper()
        logger.setLevel(getattr(logging, level_name, logging.INFO))

        formatter = logging.Formatter(LOG_FORMAT)

        # コンソールハンドラ
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

        # ファイルハンドラ（任意）
        log_file = log_file or os.getenv("LOG_FILE")
        if log_file:
            log_dir = os.path.dirname(log_file)
            if log_dir:
                os.makedirs(log_dir, exist_ok=True)
            file_handler = logging.FileHandler(log_file, encoding="utf-8")
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)

    return logger
