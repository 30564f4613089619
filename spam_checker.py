import json
import logging
import unicodedata


class ConfigurationError(Exception):
    pass


def load_blocked_words(file_name):
    """
    Load the blocked words list, it should be loaded once per run and passed to check_is_spam
    :param file_name: path to a JSON file containing a list of strings
    :return: tuple of lowercase words
    """
    try:
        with open(file_name, 'r', encoding='utf-8') as handle:
            data = json.load(handle)
    except OSError as e:
        raise ConfigurationError("Can't read blocked words file {}: {}".format(file_name, e)) from e
    except ValueError as e:
        raise ConfigurationError("Blocked words file {} is not valid JSON: {}".format(file_name, e)) from e

    if not isinstance(data, list):
        raise ConfigurationError("Blocked words file {} must contain a JSON list".format(file_name))

    words = []
    for position, word in enumerate(data):
        if not isinstance(word, str):
            raise ConfigurationError("Entry {} of {} is not a string: {!r}".format(position, file_name, word))
        # An empty word would be found in every comment
        if not word:
            logging.warning("Skipping empty blocked word at position {}".format(position))
            continue
        words.append(word.lower())

    logging.info("Loaded {} blocked words".format(len(words)))
    return tuple(words)


def check_is_spam(text, blocked_words):
    """
    :param text: displayed text of the comment
    :param blocked_words: sequence of words, any of them found inside the text marks it as spam
    :return: bool - is the comment spam?
    """
    # Look-alike characters used to dodge filters don't survive compatibility decomposition
    if unicodedata.normalize("NFKD", text) != text:
        return True

    lower_text = text.lower()
    for word in blocked_words:
        if word.lower() in lower_text:
            return True
    return False
