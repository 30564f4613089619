"""
Reject the spam comments of every video of a Youtube channel
"""
import asyncio
import logging
import os
import sys

import google.auth.exceptions
import googleapiclient.discovery
from google.auth.transport.requests import Request
from google.oauth2.credentials import Credentials
from google_auth_oauthlib.flow import InstalledAppFlow
from oauthlib.oauth2.rfc6749.errors import OAuth2Error

import config
from pipeline import purge_channel
from spam_checker import ConfigurationError, load_blocked_words


class AuthorizationError(Exception):
    pass


def get_credentials():
    """
    Do the auth process on the google API
    :return: credentials object from google API
    """
    try:
        creds = None
        if os.path.exists(config.TOKEN_FILE):
            creds = Credentials.from_authorized_user_file(config.TOKEN_FILE, config.SCOPES)

        if not creds or not creds.valid:
            if creds and creds.expired and creds.refresh_token:
                creds.refresh(Request())
            else:
                flow = InstalledAppFlow.from_client_secrets_file(config.CREDENTIALS_FILE, config.SCOPES)
                creds = flow.run_local_server(port=config.OAUTH_PORT)
            # Save the credentials for the next time
            with open(config.TOKEN_FILE, 'w') as token:
                token.write(creds.to_json())
    except (google.auth.exceptions.GoogleAuthError, OAuth2Error, OSError, ValueError) as e:
        raise AuthorizationError(str(e)) from e
    logging.info("Authorized into Youtube")
    return creds


def create_client():
    # Query Youtube API for authentication or load from file
    creds = get_credentials()
    # Create API client
    return googleapiclient.discovery.build(config.API_SERVICE_NAME, config.API_VERSION, credentials=creds)


def setup_logger():
    """
    Set a simple logger to show text on terminal and log into a file
    """
    logging.basicConfig(filename=config.LOG_FILE,
                        format="%(asctime)s %(message)s",
                        filemode="w",
                        level=config.LOG_LEVEL)

    logging.getLogger().addHandler(logging.StreamHandler())

    logging.info("-- YOUTUBE SPAM PURGE RUNNING --\n")


def main():
    # Setup both file logging and terminal on-screen logs
    setup_logger()

    if not config.CHANNEL_ID:
        logging.error("YOUTUBE_CHANNEL_ID is not set")
        return 1

    try:
        blocked_words = load_blocked_words(config.BLOCKED_WORDS_FILE)
    except ConfigurationError as e:
        logging.error("Configuration error: {}".format(e))
        return 1

    try:
        youtube = create_client()
    except AuthorizationError as e:
        logging.error("Authorization error: {}".format(e))
        return 1

    if config.DRY_RUN:
        logging.info("DRY RUN: nothing will be rejected")
    asyncio.run(purge_channel(youtube, config.CHANNEL_ID, blocked_words))
    logging.info("\nProcess completed")
    return 0


if __name__ == '__main__':
    sys.exit(main())
