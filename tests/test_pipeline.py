from unittest.mock import AsyncMock

import pytest

import pipeline
from pipeline import VideoOutcome, purge_channel
from youtube_api import RemovalOutcome, Video

VIDEOS = [Video(id="v1", title="First"), Video(id="v2", title="Second"), Video(id="v3", title="Third")]


@pytest.fixture
def fake_api(monkeypatch):
    list_videos = AsyncMock(return_value=list(VIDEOS))
    fetch = AsyncMock()
    remove = AsyncMock()
    monkeypatch.setattr(pipeline, "list_channel_videos", list_videos)
    monkeypatch.setattr(pipeline, "fetch_spam_comment_ids", fetch)
    monkeypatch.setattr(pipeline, "remove_comments", remove)
    return list_videos, fetch, remove


@pytest.mark.asyncio
async def test_every_video_is_checked_in_order(youtube, fake_api):
    list_videos, fetch, remove = fake_api
    fetch.side_effect = [["a", "b"], [], ["c"]]
    remove.side_effect = [RemovalOutcome(2, 2, 0), RemovalOutcome(1, 1, 0)]

    outcomes = await purge_channel(youtube, "UCabc", ("spam",), last_n_videos=0)

    list_videos.assert_awaited_once_with(youtube, "UCabc")
    assert [c.args[1] for c in fetch.await_args_list] == ["v1", "v2", "v3"]
    assert [c.args[1] for c in remove.await_args_list] == [["a", "b"], ["c"]]
    assert outcomes == [
        VideoOutcome(video=VIDEOS[0], found=2, removed=2),
        VideoOutcome(video=VIDEOS[1]),
        VideoOutcome(video=VIDEOS[2], found=1, removed=1),
    ]


@pytest.mark.asyncio
async def test_no_spam_means_no_removal(youtube, fake_api):
    _, fetch, remove = fake_api
    fetch.return_value = []

    outcomes = await purge_channel(youtube, "UCabc", (), last_n_videos=0)

    remove.assert_not_awaited()
    assert all(o.found == 0 and o.removed == 0 for o in outcomes)


@pytest.mark.asyncio
async def test_failing_video_does_not_stop_the_run(youtube, fake_api):
    _, fetch, remove = fake_api
    fetch.side_effect = [["a"], RuntimeError("boom"), ["c"]]
    remove.side_effect = [RemovalOutcome(1, 1, 0), RemovalOutcome(1, 0, 1)]

    outcomes = await purge_channel(youtube, "UCabc", (), last_n_videos=0)

    assert len(outcomes) == 3
    assert outcomes[1].error == "boom"
    assert outcomes[2] == VideoOutcome(video=VIDEOS[2], found=1, removed=0)


@pytest.mark.asyncio
async def test_last_n_videos(youtube, fake_api):
    _, fetch, _ = fake_api
    fetch.return_value = []

    outcomes = await purge_channel(youtube, "UCabc", (), last_n_videos=2)

    assert [o.video.id for o in outcomes] == ["v1", "v2"]


@pytest.mark.asyncio
async def test_no_videos(youtube, fake_api):
    list_videos, fetch, _ = fake_api
    list_videos.return_value = []

    assert await purge_channel(youtube, "UCabc", (), last_n_videos=0) == []
    fetch.assert_not_awaited()


@pytest.mark.asyncio
async def test_settings_reach_the_api_calls(youtube, fake_api):
    _, fetch, remove = fake_api
    fetch.side_effect = [["a"], [], []]
    remove.return_value = RemovalOutcome(1, 0, 0)

    await purge_channel(youtube, "UCabc", ("spam",), last_n_videos=0, max_results=10, batch_size=5,
                        ban_author=True, dry_run=True)

    assert fetch.await_args_list[0].kwargs == {"max_results": 10}
    assert remove.await_args.kwargs == {"batch_size": 5, "ban_author": True, "dry_run": True}
