import asyncio
import logging
from dataclasses import dataclass

import config
from spam_checker import check_is_spam


@dataclass(frozen=True)
class Video:
    id: str
    title: str


@dataclass(frozen=True)
class Comment:
    id: str
    text: str


@dataclass(frozen=True)
class RemovalOutcome:
    total: int
    removed: int
    failed_batches: int


async def execute_youtube_query(query):
    """
    Query the API and return the response. googleapiclient requests block, so the call runs in a worker thread and
    is awaited before anything else is sent.
    :param query: Google API query ready to execute
    :return: Dictionary
    """
    logging.debug("Making query to Youtube API")
    return await asyncio.to_thread(query.execute)


def _follow_path(item, path):
    for key in path:
        item = item[key]
    return item


async def get_them_all(api_function, api_kwargs, key_path):
    """
    Query the endpoint all the way through the pages (avoiding google pagination) and return every item once, in the
    order the API returned them.

    :param api_function: googleapiclient API function to query, example: youtube.playlistItems
    :param api_kwargs: attributes to pass to the API endpoint in a dictionary - check API docs
    :param key_path: list of strings, containing the path to the item value used to drop repeated items
    :return: list of items
    """
    api_kwargs = dict(api_kwargs)
    next_page_token = " "
    used_tokens = set()
    stuff = {}

    while next_page_token:
        api_kwargs["pageToken"] = next_page_token.strip()
        used_tokens.add(next_page_token)
        yt_request = api_function().list(**api_kwargs)

        yt_response = await execute_youtube_query(yt_request)

        for item in yt_response.get("items", []):
            current_key = _follow_path(item, key_path)
            if current_key not in stuff:
                stuff[current_key] = item

        next_page_token = yt_response.get("nextPageToken")
        if next_page_token in used_tokens:
            logging.warning("API returned page token {!r} twice, stopping pagination".format(next_page_token))
            break

    return list(stuff.values())


async def list_channel_videos(youtube, channel_id):
    """
    Get all the videos uploaded by the channel, walking its uploads playlist
    :param youtube: Youtube API client object
    :param channel_id: id of the channel
    :return: list of Video, empty if anything goes wrong
    """
    try:
        response = await execute_youtube_query(
            youtube.channels().list(part="contentDetails", id=channel_id))
        channels = response.get("items", [])
        if not channels:
            logging.error("Channel {} not found".format(channel_id))
            return []
        uploads_playlist_id = channels[0]["contentDetails"]["relatedPlaylists"]["uploads"]

        items = await get_them_all(youtube.playlistItems,
                                   {"part": "snippet",
                                    "playlistId": uploads_playlist_id,
                                    "maxResults": config.PLAYLIST_PAGE_SIZE},
                                   ["snippet", "resourceId", "videoId"])
        return [Video(id=item["snippet"]["resourceId"]["videoId"], title=item["snippet"].get("title", ""))
                for item in items]
    except Exception as e:  # a broken listing leaves nothing to do, but it's not a crash
        logging.error("Error fetching videos for channel {}: {}".format(channel_id, e))
        return []


def _comment_from_thread(thread):
    top_level = thread["snippet"]["topLevelComment"]
    return Comment(id=top_level["id"], text=top_level["snippet"].get("textDisplay", ""))


async def fetch_spam_comment_ids(youtube, video_id, blocked_words, max_results=config.MAX_RESULTS):
    """
    Check the most recent top level comments of a video. Only the first page is read, spam floods are recent.
    :param youtube: Youtube API client object
    :param video_id: id of the video to check
    :param blocked_words: words loaded with spam_checker.load_blocked_words
    :param max_results: how many comment threads to ask for, 100 at most
    :return: list of spam comment ids, empty if the comments can't be fetched
    """
    try:
        response = await execute_youtube_query(
            youtube.commentThreads().list(part="snippet",
                                          videoId=video_id,
                                          order="time",
                                          maxResults=max_results))
        comments = [_comment_from_thread(thread) for thread in response.get("items", [])]
    except Exception as e:  # one bad video must not stop the others
        logging.error("Error fetching comments for video {}: {}".format(video_id, e))
        return []

    spam_ids = []
    for comment in comments:
        if check_is_spam(comment.text, blocked_words):
            logging.debug("Spam detected {}: {}".format(comment.id, comment.text))
            spam_ids.append(comment.id)
    return spam_ids


async def remove_comments(youtube, comment_ids, batch_size=config.BATCH_SIZE, ban_author=config.BAN_AUTHOR,
                          dry_run=config.DRY_RUN):
    """
    Reject comments in batches, as Google likes. The list is consumed while the batches are sent.
    :param youtube: Youtube API client object
    :param comment_ids: list of comment ids to reject, emptied by this call
    :param batch_size: max comments on every moderation request
    :param ban_author: ban the authors of the rejected comments too
    :param dry_run: log the batches without sending them
    :return: RemovalOutcome
    """
    if batch_size < 1:
        raise ValueError("batch_size must be at least 1, got {}".format(batch_size))

    total = len(comment_ids)
    removed = 0
    failed_batches = 0

    while comment_ids:
        batch = comment_ids[:batch_size]
        del comment_ids[:batch_size]

        if dry_run:
            logging.info("DRY RUN: would reject comments: {}".format(", ".join(batch)))
            continue

        kwargs = {"id": batch, "moderationStatus": "rejected"}
        if ban_author:
            kwargs["banAuthor"] = True
        try:
            logging.debug("- Moderation on comments: {}".format(", ".join(batch)))
            await execute_youtube_query(youtube.comments().setModerationStatus(**kwargs))
        except Exception as e:  # the next batch may still go through
            failed_batches += 1
            logging.error("REJECTION FAILED for {} comments: {}".format(len(batch), e))
            continue

        removed += len(batch)
        logging.info("Rejected {}/{} comments".format(removed, total))

    return RemovalOutcome(total=total, removed=removed, failed_batches=failed_batches)
