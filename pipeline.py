import logging
from dataclasses import dataclass
from typing import Optional

import config
from youtube_api import Video, fetch_spam_comment_ids, list_channel_videos, remove_comments


@dataclass(frozen=True)
class VideoOutcome:
    video: Video
    found: int = 0
    removed: int = 0
    error: Optional[str] = None


async def purge_video(youtube, video, blocked_words, max_results=config.MAX_RESULTS, batch_size=config.BATCH_SIZE,
                      ban_author=config.BAN_AUTHOR, dry_run=config.DRY_RUN):
    """
    Find and reject the spam of one video
    :return: VideoOutcome
    """
    logging.info("\nCURRENT VIDEO IS: {}".format(video.title))
    spam_ids = await fetch_spam_comment_ids(youtube, video.id, blocked_words, max_results=max_results)

    if not spam_ids:
        logging.info("No spam found")
        return VideoOutcome(video=video)

    found = len(spam_ids)
    logging.info("Found {} spam comments".format(found))
    outcome = await remove_comments(youtube, spam_ids, batch_size=batch_size, ban_author=ban_author,
                                    dry_run=dry_run)
    if outcome.failed_batches:
        logging.info("{} of {} spam comments rejected, {} batches failed".format(
            outcome.removed, found, outcome.failed_batches))
    else:
        logging.info("{} of {} spam comments rejected".format(outcome.removed, found))
    return VideoOutcome(video=video, found=found, removed=outcome.removed)


async def purge_channel(youtube, channel_id, blocked_words, last_n_videos=config.LAST_N_VIDEOS,
                        max_results=config.MAX_RESULTS, batch_size=config.BATCH_SIZE, ban_author=config.BAN_AUTHOR,
                        dry_run=config.DRY_RUN):
    """
    Check every video of the channel, one after the other, and reject their spam comments
    :param youtube: Youtube API client object
    :param channel_id: channel whose uploads are checked
    :param blocked_words: words loaded with spam_checker.load_blocked_words
    :param last_n_videos: only check the most recent N videos, 0 checks all of them
    :return: list of VideoOutcome, one for every checked video
    """
    logging.info("Checking for videos")
    videos = await list_channel_videos(youtube, channel_id)
    if last_n_videos:
        videos = videos[:last_n_videos]
    logging.info("{} videos to check".format(len(videos)))

    outcomes = []
    for video in videos:
        try:
            outcome = await purge_video(youtube, video, blocked_words, max_results=max_results,
                                        batch_size=batch_size, ban_author=ban_author, dry_run=dry_run)
        except Exception as e:  # keep going with the next video
            logging.exception("Failed to process video {}".format(video.id))
            outcome = VideoOutcome(video=video, error=str(e))
        outcomes.append(outcome)

    logging.info("\n- Checked {} videos, found {} spam comments, rejected {}".format(
        len(outcomes), sum(o.found for o in outcomes), sum(o.removed for o in outcomes)))
    failed = [o for o in outcomes if o.error]
    if failed:
        logging.info("{} videos failed: {}".format(len(failed), ", ".join(o.video.id for o in failed)))
    return outcomes
