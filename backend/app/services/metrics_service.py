import math
import re
from typing import List

from app.schemas.common import MetricsResult

# Compile regex once at module level for performance
WHITESPACE_REGEX = re.compile(r"\s+")
SENTENCE_SPLIT_REGEX = re.compile(r"[.!?]+")

# Average adult reading speed used for the estimate
CHARACTERS_PER_MINUTE = 1000


def compute_metrics(text: str, exclude_spaces: bool = False) -> MetricsResult:
    """Calculates the headline counts for a block of text.

    Args:
        text (str): The raw text as typed by the user.
        exclude_spaces (bool): If True, whitespace is not counted as characters.

    Returns:
        MetricsResult: Character, word and sentence counts plus reading time.
    """
    return MetricsResult(
        total_characters=count_characters(text, exclude_spaces),
        word_count=count_words(text),
        sentence_count=count_sentences(text),
        reading_time_minutes=calculate_reading_time(text),
    )


def count_characters(text: str, exclude_spaces: bool = False) -> int:
    """Counts characters, optionally leaving out every whitespace character."""
    if exclude_spaces:
        return len(WHITESPACE_REGEX.sub("", text))
    return len(text)


def count_words(text: str) -> int:
    """Counts maximal runs of non-whitespace characters."""
    words: List[str] = WHITESPACE_REGEX.split(text.strip())
    return len([w for w in words if w])


def count_sentences(text: str) -> int:
    """Counts segments between terminators that contain more than whitespace.

    A run of terminators ("?!", "...") closes a single sentence.
    """
    segments = SENTENCE_SPLIT_REGEX.split(text)
    return sum(1 for s in segments if s.strip())


def calculate_reading_time(text: str) -> int:
    """Estimates reading time in whole minutes, rounding halves up.

    Always based on the raw length, whitespace included.
    """
    return int(math.floor(len(text) / CHARACTERS_PER_MINUTE + 0.5))


def format_reading_time(minutes: int) -> str:
    """Formats a reading time for display.

    Args:
        minutes (int): Value returned by calculate_reading_time.

    Returns:
        str: "< 1 minute", "1 minute" or "N minutes".
    """
    if minutes < 1:
        return "< 1 minute"
    if minutes == 1:
        return "1 minute"
    return f"{minutes} minutes"
