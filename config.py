# Change here the script configuration before running, or override any value from the environment / .env file
import logging
import os

from dotenv import load_dotenv

load_dotenv()


def _env_int(name, default, minimum=None, maximum=None):
    value = os.getenv(name)
    try:
        value = int(value) if value not in (None, "") else default
    except ValueError:
        value = default
    if minimum is not None:
        value = max(minimum, value)
    if maximum is not None:
        value = min(maximum, value)
    return value


def _env_bool(name, default):
    value = os.getenv(name)
    if value is None or value == "":
        return default
    return value.strip().lower() in ("true", "1", "yes", "on")


def _env_log_level(name, default):
    # Accepts both numbers (20) and level names (INFO)
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return default
    value = value.strip()
    if value.isdigit():
        return int(value)
    level = logging.getLevelName(value.upper())
    if isinstance(level, int):
        return level
    logging.warning("Unknown {} {!r}, using {}".format(name, value, default))
    return default


# Put here your channel id (starts with UC...), every video uploaded by this channel will be checked
CHANNEL_ID = os.getenv("YOUTUBE_CHANNEL_ID", "")

# OAuth client secrets downloaded from the Google Cloud console
CREDENTIALS_FILE = os.getenv("CREDENTIALS_FILE", "storage/credentials.json")
# Where the authorized token is cached between executions
TOKEN_FILE = os.getenv("TOKEN_FILE", "storage/token.json")
# JSON list with all the words you want to search in the message of the comment to reject
BLOCKED_WORDS_FILE = os.getenv("BLOCKED_WORDS_FILE", "storage/blocked_words.json")

# How many of the most recent comment threads are checked on every video, the API allows 100 at most
MAX_RESULTS = _env_int("MAX_RESULTS", 100, minimum=1, maximum=100)
# How many comments are sent on every moderation request, the API allows 50 at most
BATCH_SIZE = _env_int("BATCH_SIZE", 50, minimum=1, maximum=50)
# How many videos you want to check, if you set 1, only the last video will be checked. 0 checks all of them
LAST_N_VIDEOS = _env_int("LAST_N_VIDEOS", 0, minimum=0)
# Set True to also ban the author of every rejected comment
BAN_AUTHOR = _env_bool("BAN_AUTHOR", False)
# Set True to detect and log the spam without asking the API to reject anything
DRY_RUN = _env_bool("DRY_RUN", False)

# For normal use, set to 20
# 10 = DEBUG, 20 = INFO, 30 = WARNING, 40 = ERROR, the level names work too
LOG_LEVEL = _env_log_level("LOG_LEVEL", 20)
LOG_FILE = os.getenv("LOG_FILE", "logfile.txt")

# Don't touch this
SCOPES = ['https://www.googleapis.com/auth/youtube.force-ssl']
API_SERVICE_NAME = "youtube"
API_VERSION = "v3"
OAUTH_PORT = 2725
PLAYLIST_PAGE_SIZE = 50
