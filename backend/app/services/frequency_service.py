from collections import Counter
from typing import List

from app.schemas.common import FrequencyEntry


def rank_characters(text: str) -> List[FrequencyEntry]:
    """Ranks every character of the text by how often it occurs.

    Characters are lower-cased before counting. Whitespace and punctuation
    are counted too, so percentages are shares of the full text length.

    Args:
        text (str): The raw text.

    Returns:
        List[FrequencyEntry]: Entries sorted by descending count. Equal
            counts keep the order in which the characters first appear.
    """
    if not text:
        return []

    # Counter keeps first-seen order, and most_common() is stable on ties
    counts = Counter()
    for char in text:
        counts[char.lower()] += 1

    total_count = sum(counts.values())

    return [
        FrequencyEntry(
            character=char,
            count=count,
            percentage=round(count / total_count * 100, 2),
        )
        for char, count in counts.most_common()
    ]


def top_window(ranking: List[FrequencyEntry], window_size: int) -> List[FrequencyEntry]:
    """Returns the first window_size entries of a ranking.

    Args:
        ranking (List[FrequencyEntry]): Output of rank_characters.
        window_size (int): Number of rows to show. Callers clamp this to the
            display window minimum.

    Returns:
        List[FrequencyEntry]: At most window_size entries.
    """
    return ranking[:window_size]
