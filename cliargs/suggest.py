"""
Argument Name Suggestions.

When a token or a lookup names an undeclared argument, the closest declared
names are offered back ("--verbsoe" -> "Did you mean '--verbose'?").

Names are compared without their leading dashes, so a long name typed with
one dash ("-verbose") still finds "--verbose".
"""

from typing import List, Iterable

from rapidfuzz import process, fuzz

MIN_SIMILARITY_SCORE = 60

MAX_SUGGESTIONS = 3


def bare_name(name: str) -> str:
    """Strip the dash prefix: "--dry-run" -> "dry-run"."""
    return name.lstrip("-")


def suggest_names(
    unknown: str,
    declared: Iterable[str],
    min_score: int = MIN_SIMILARITY_SCORE,
    max_suggestions: int = MAX_SUGGESTIONS,
) -> List[str]:
    """
    Find declared argument names that look like an unknown one.

    Args:
        unknown: The name as the user typed it, dashes included.
        declared: Every registered long and short name.
        min_score: Minimum similarity score (0-100) to include a name.
        max_suggestions: Maximum number of names to return.

    Returns:
        Declared names, dashes included, best match first. Empty if the
        unknown name is blank or nothing is close enough.
    """
    if not bare_name(unknown):
        return []

    names = list(declared)
    if not names:
        return []

    # (name, score, index) tuples
    matches = process.extract(
        unknown,
        names,
        scorer=fuzz.WRatio,
        processor=bare_name,
        limit=max_suggestions,
        score_cutoff=min_score,
    )

    return [match[0] for match in matches]
