from unittest.mock import MagicMock

import pytest
from googleapiclient.errors import HttpError


def make_request(response=None, error=None):
    """Fake googleapiclient request, execute() returns the response or raises the error"""
    request = MagicMock()
    if error is not None:
        request.execute.side_effect = error
    else:
        request.execute.return_value = response
    return request


def make_http_error(status=500, reason="Backend Error"):
    return HttpError(MagicMock(status=status, reason=reason), b"error")


def playlist_item(video_id, title=None):
    return {"snippet": {"title": title or "Video {}".format(video_id), "resourceId": {"videoId": video_id}}}


def comment_thread(comment_id, text):
    return {"id": comment_id,
            "snippet": {"topLevelComment": {"id": comment_id, "snippet": {"textDisplay": text}}}}


@pytest.fixture
def youtube():
    return MagicMock()
