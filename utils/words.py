from constants import MAX_WORD_LIMIT
from exceptions import WordLimitExceededError


def count_words(text: str) -> int:
    """Count words separated by runs of whitespace."""
    return len(text.split())


def fits_word_limit(text: str, limit: int = MAX_WORD_LIMIT) -> bool:
    return count_words(text=text) <= limit


def check_word_limit(text: str, limit: int = MAX_WORD_LIMIT) -> int:
    """Enforce the word limit on text bound for summarization.

    Args:
        text: The text to check.
        limit: The inclusive word ceiling.

    Returns:
        The word count of the accepted text.

    Raises:
        WordLimitExceededError: If the text has more words than the limit.

    """
    count = count_words(text=text)
    if count > limit:
        raise WordLimitExceededError(count=count, limit=limit)

    return count
