"""End-to-end tests for the SpamCleaner orchestrator."""

import json
from unittest.mock import AsyncMock, MagicMock

import httplib2
import pytest
from googleapiclient.errors import HttpError

from core import controller as controller_module
from core.config import Config
from core.controller import SpamCleaner
from core.models import Comment, RunState
from fakes.fake_youtube_client import OWNER_CHANNEL, VIDEO_ID, FakeYouTubeClient


def _three_comments() -> list[Comment]:
    return [
        Comment(id="Ugx1.a", thread_id="Ugx1", author="alice", text="great video"),
        Comment(id="Ugx2.b", thread_id="Ugx2", author="bot", text="ｇｒｅａｔ！"),
        Comment(id="Ugx3.c", thread_id="Ugx3", author="carol", text="thanks!"),
    ]


def _cleaner(client: FakeYouTubeClient, answer: bool = False, **kwargs) -> SpamCleaner:
    confirm = MagicMock(return_value=answer)
    return SpamCleaner(
        VIDEO_ID,
        config=Config,
        authorizer=AsyncMock(return_value="credentials"),
        client_factory=lambda credentials: client,
        confirm=confirm,
        **kwargs,
    )


class TestSpamCleanerRun:
    """The orchestrator sequences validation, scanning and deletion."""

    @pytest.mark.asyncio
    async def test_owned_video_deletes_only_the_spam_comment(
        self, owned_client: FakeYouTubeClient, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        owned_client.comments = {VIDEO_ID: _three_comments()}
        delete_spy = MagicMock(wraps=controller_module.delete_comments)
        monkeypatch.setattr(controller_module, "delete_comments", delete_spy)

        cleaner = _cleaner(owned_client, dry_run=False)
        result = await cleaner.run()

        delete_spy.assert_called_once_with(owned_client, ["Ugx2.b"])
        assert owned_client.deleted == ["Ugx2.b"]
        assert result.state is RunState.DONE
        assert result.ownership_verified is True
        assert result.flagged == ["Ugx2.b"]
        assert result.report.deleted == ["Ugx2.b"]
        cleaner._confirm.assert_not_called()

    @pytest.mark.asyncio
    async def test_authorizer_receives_config(self, owned_client: FakeYouTubeClient) -> None:
        cleaner = _cleaner(owned_client)
        await cleaner.run()
        cleaner._authorizer.assert_awaited_once_with(Config)

    @pytest.mark.asyncio
    async def test_no_spam_is_a_no_op(self, owned_client: FakeYouTubeClient) -> None:
        owned_client.comments = {
            VIDEO_ID: [Comment(id="Ugx1.a", thread_id="Ugx1", author="a", text="hello")]
        }
        result = await _cleaner(owned_client, dry_run=False).run()
        assert result.state is RunState.DONE
        assert result.flagged == []
        assert result.report is None
        assert owned_client.deleted == []

    @pytest.mark.asyncio
    async def test_declined_confirmation_aborts_without_mutation(self) -> None:
        client = FakeYouTubeClient(
            my_channel_id=OWNER_CHANNEL,
            videos={VIDEO_ID: ("Title", "UC_other", "Other")},
            comments={VIDEO_ID: _three_comments()},
        )
        cleaner = _cleaner(client, answer=False, dry_run=False)
        result = await cleaner.run()

        cleaner._confirm.assert_called_once()
        assert result.state is RunState.ABORTED
        assert ("commentThreads.list", VIDEO_ID) not in client.calls
        assert client.deleted == []

    @pytest.mark.asyncio
    async def test_accepted_confirmation_continues_unverified(self) -> None:
        client = FakeYouTubeClient(
            my_channel_id=None,
            comments={VIDEO_ID: _three_comments()},
        )
        result = await _cleaner(client, answer=True, dry_run=False).run()
        assert result.ownership_verified is False
        assert result.state is RunState.DONE
        assert client.deleted == ["Ugx2.b"]

    @pytest.mark.asyncio
    async def test_scan_error_degrades_to_empty_result(self, owned_client: FakeYouTubeClient) -> None:
        owned_client.list_error = RuntimeError("quota exceeded")
        result = await _cleaner(owned_client, dry_run=False).run()
        assert result.flagged == []
        assert result.report is None
        assert result.state is RunState.DONE
        assert not any(call[0] == "comments.delete" for call in owned_client.calls)

    @pytest.mark.asyncio
    async def test_dry_run_skips_deletion(self, owned_client: FakeYouTubeClient) -> None:
        owned_client.comments = {VIDEO_ID: _three_comments()}
        result = await _cleaner(owned_client, dry_run=True).run()
        assert result.flagged == ["Ugx2.b"]
        assert result.report is None
        assert owned_client.deleted == []

    @pytest.mark.asyncio
    async def test_partial_deletion_failure_is_reported(self, owned_client: FakeYouTubeClient) -> None:
        owned_client.comments = {
            VIDEO_ID: [
                Comment(id="Ugx1.a", thread_id="Ugx1", author="a", text="ｓｐａｍ"),
                Comment(id="Ugx2.b", thread_id="Ugx2", author="b", text="ｍｏｒｅ"),
            ]
        }
        owned_client.delete_errors = {"Ugx1.a": RuntimeError("boom")}
        result = await _cleaner(owned_client, dry_run=False).run()
        assert owned_client.deleted == ["Ugx2.b"]
        assert [f.comment_id for f in result.report.failures] == ["Ugx1.a"]


class TestValidationErrors:
    """Any error while checking ownership leads to the confirmation prompt."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "error",
        [
            HttpError(
                httplib2.Response({"status": 403}),
                json.dumps({"error": {"code": 403, "message": "forbidden"}}).encode("utf-8"),
            ),
            TimeoutError("timed out"),
            ConnectionResetError("reset"),
        ],
    )
    async def test_error_prompts_and_continues_on_yes(self, error: Exception) -> None:
        client = FakeYouTubeClient(comments={VIDEO_ID: _three_comments()})
        client.get_my_channel_id = MagicMock(side_effect=error)
        cleaner = _cleaner(client, answer=True, dry_run=False)

        result = await cleaner.run()

        cleaner._confirm.assert_called_once()
        assert result.ownership_verified is False
        assert result.state is RunState.DONE
        assert client.deleted == ["Ugx2.b"]

    @pytest.mark.asyncio
    async def test_error_prompts_and_stops_on_no(self) -> None:
        client = FakeYouTubeClient(comments={VIDEO_ID: _three_comments()})
        client.get_my_channel_id = MagicMock(side_effect=TimeoutError("timed out"))
        cleaner = _cleaner(client, answer=False, dry_run=False)

        result = await cleaner.run()

        cleaner._confirm.assert_called_once()
        assert result.state is RunState.ABORTED
        assert client.deleted == []
