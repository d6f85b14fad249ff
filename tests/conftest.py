"""pytest configuration for the spam cleaner tests."""

import sys
from pathlib import Path

import pytest

# Make core/ and utils/ importable without installing the project
root_path = Path(__file__).parent.parent
if str(root_path) not in sys.path:
    sys.path.insert(0, str(root_path))

from fakes.fake_youtube_client import OWNER_CHANNEL, VIDEO_ID, FakeYouTubeClient  # noqa: E402


@pytest.fixture
def owned_client() -> FakeYouTubeClient:
    """A client whose authenticated channel owns VIDEO_ID."""
    return FakeYouTubeClient(
        my_channel_id=OWNER_CHANNEL,
        videos={VIDEO_ID: ("Never Gonna Give You Up", OWNER_CHANNEL, "Rick Astley")},
    )
