"""
Text helpers for releaseinfo.
"""

import regex

QUOTES = regex.compile(r"['`´‘’]+")
SEPARATOR_RUN = regex.compile(r"[[:punct:]\s]+")
SEPARATOR_EDGES = regex.compile(r"^[[:punct:]\s]+|[[:punct:]\s]+$")


def _collapse(match):
    run = match.group()
    if any(char.isspace() for char in run):
        return ' '
    return run[0]


def normalize_punctuation(text: str) -> str:
    """
    Clean up the separators left over after tokens were removed from a name.

    Quote marks are dropped, a run of separators containing whitespace becomes
    a single space, a run of punctuation becomes its first character, and
    separators at either end are trimmed.

    Args:
        text: Name to normalize

    Returns:
        Normalized name, e.g. "Show.Name..-" -> "Show.Name"
    """
    text = QUOTES.sub('', text)
    text = SEPARATOR_RUN.sub(_collapse, text)
    return SEPARATOR_EDGES.sub('', text)
