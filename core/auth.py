"""
OAuth認可モジュール
"""
import asyncio
import json
import os

from google.auth.transport.requests import Request
from google.oauth2.credentials import Credentials
from google_auth_oauthlib.flow import InstalledAppFlow

from core.config import Config
from .errors import AuthorizationError
from utils.helpers import load_json_file, save_json_file
from utils.logger import get_logger

logger = get_logger(__name__)

SUCCESS_MESSAGE = "Authentication succeeded. You can close this page."


def load_token(token_file: str, scopes) -> Credentials | None:
    """保存済みトークンを読み込む"""
    info = load_json_file(token_file)
    if not info:
        return None
    return Credentials.from_authorized_user_info(info, scopes)


def save_token(token_file: str, creds: Credentials) -> None:
    """トークンを保存する"""
    save_json_file(token_file, json.loads(creds.to_json()))
    logger.info(f"Token saved to {token_file}")


async def _wait_for_callback(flow: InstalledAppFlow, port: int) -> Credentials:
    """
    ローカルのコールバックを1回だけ待つ

    run_local_server はリダイレクトを1件受け取るとサーバーを閉じる。
    ブロッキング呼び出しなのでワーカースレッドで待機する。
    """
    logger.info(f"Waiting for the OAuth callback on http://localhost:{port}")
    return await asyncio.to_thread(
        flow.run_local_server,
        port=port,
        access_type="offline",
        authorization_prompt_message="Authorize this app by visiting this URL: {url}",
        success_message=SUCCESS_MESSAGE,
        open_browser=True,
    )


async def authorize(config=Config) -> Credentials:
    """
    認可済みのクレデンシャルを取得する

    Args:
        config: 設定（CLIENT_SECRETS_FILE, TOKEN_FILE, SCOPES, OAUTH_PORT）

    Returns:
        Credentials: 認可済みクレデンシャル

    Raises:
        AuthorizationError: クライアントシークレットが無い、または認可に失敗した場合
    """
    creds = load_token(config.TOKEN_FILE, config.SCOPES)
    if creds and creds.valid:
        return creds

    if creds and creds.expired and creds.refresh_token:
        try:
            creds.refresh(Request())
            save_token(config.TOKEN_FILE, creds)
            return creds
        except Exception as e:
            logger.warning(f"Token refresh failed, starting a new authorization: {e}")

    if not os.path.exists(config.CLIENT_SECRETS_FILE):
        raise AuthorizationError(f"Client secrets file not found: {config.CLIENT_SECRETS_FILE}")

    flow = InstalledAppFlow.from_client_secrets_file(config.CLIENT_SECRETS_FILE, config.SCOPES)
    try:
        creds = await _wait_for_callback(flow, config.OAUTH_PORT)
    except Exception as e:
        raise AuthorizationError(f"Failed to obtain an access token: {e}") from e

    save_token(config.TOKEN_FILE, creds)
    return creds
