"""
Text Statistics Command Line Tool
Prints the widget's metrics and character frequency table for a file,
or for standard input when no file is given.
"""

import argparse
import os
import sys

# Add parent directory to path to allow importing from backend modules
sys.path.append(os.path.join(os.path.dirname(__file__), ".."))

from app.schemas.analyzer_models import WINDOW_MIN
from app.services.frequency_service import rank_characters, top_window
from app.services.metrics_service import compute_metrics, format_reading_time


def print_report(text, exclude_spaces=False, top=WINDOW_MIN):
    """Prints the metrics and the top characters for a block of text."""
    metrics = compute_metrics(text, exclude_spaces)
    label = "Total characters (no spaces)" if exclude_spaces else "Total characters"

    print(f"{label}: {metrics.total_characters}")
    print(f"Word count: {metrics.word_count}")
    print(f"Sentence count: {metrics.sentence_count}")
    print(f"Reading time: {format_reading_time(metrics.reading_time_minutes)}")

    ranking = rank_characters(text)
    if not ranking:
        print("\nNo characters found. Start typing to see letter density.")
        return

    print("\nLetter density:")
    for entry in top_window(ranking, top):
        print(f"  {entry.display!r:>6}  {entry.count:>6}  {entry.percentage_label:>7}")

    hidden = len(ranking) - top
    if hidden > 0:
        print(f"  ... and {hidden} more")


def main():
    parser = argparse.ArgumentParser(description="Print text statistics")
    parser.add_argument("file", nargs="?", help="Path to a UTF-8 text file")
    parser.add_argument(
        "--exclude-spaces",
        action="store_true",
        help="Do not count whitespace as characters",
    )
    parser.add_argument(
        "--top",
        type=int,
        default=WINDOW_MIN,
        help=f"Number of characters to list (minimum {WINDOW_MIN})",
    )
    args = parser.parse_args()

    if args.file:
        if not os.path.exists(args.file):
            print(f"Error: File not found at {args.file}")
            sys.exit(1)
        with open(args.file, "r", encoding="utf-8") as f:
            text = f.read()
    else:
        text = sys.stdin.read()

    print_report(text, args.exclude_spaces, max(WINDOW_MIN, args.top))


if __name__ == "__main__":
    main()
