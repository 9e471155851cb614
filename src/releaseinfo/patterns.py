"""
Token patterns for releaseinfo.

PatternLibrary builds the compiled patterns used to find release tokens
(resolution, video format and source, language suffix, release group,
query blacklist) in file and directory names.

Patterns are rebuilt on every call so that a refreshed release group or
blacklist list is picked up without any invalidation.
"""

import unicodedata
from typing import Callable, Iterable, List, Optional, Sequence

import regex

from releaseinfo.languages import Language, default_languages, language_tokens

# Not preceded / followed by a letter or digit
NOT_ALNUM_BEFORE = r'(?<![[:alnum:]])'
NOT_ALNUM_AFTER = r'(?![[:alnum:]])'

# Matches nothing, used when a word list is empty
NEVER = r'(?!)'


class TokenPattern:
    """
    A compiled token pattern.

    Args:
        source: Regular expression source
        ignore_case: Match case-insensitively
        canonical: Alternatives were expanded to all canonical forms
    """

    def __init__(self, source: str, ignore_case: bool = False, canonical: bool = False):
        self.source = source
        self.ignore_case = ignore_case
        self.canonical = canonical
        self._compiled = regex.compile(source, regex.IGNORECASE if ignore_case else 0)

    @property
    def strict(self) -> bool:
        return not self.ignore_case

    def finditer(self, text: str):
        return self._compiled.finditer(text)

    def findall(self, text: str) -> List[str]:
        return [match.group() for match in self._compiled.finditer(text)]

    def search(self, text: str):
        return self._compiled.search(text)

    def sub(self, replacement: str, text: str) -> str:
        return self._compiled.sub(replacement, text)

    def __repr__(self):
        mode = 'strict' if self.strict else 'ignore-case'
        return f"TokenPattern({self.source[:60]!r}, {mode})"


def canonical_forms(tokens: Iterable[str]) -> List[str]:
    """
    Expand tokens to both their composed (NFC) and decomposed (NFD) forms.

    Matching against every canonical form lets "é" match both the single
    code point and "e" followed by a combining accent.
    """
    forms = []
    seen = set()
    for token in tokens:
        for form in (token, unicodedata.normalize('NFC', token), unicodedata.normalize('NFD', token)):
            if form not in seen:
                seen.add(form)
                forms.append(form)
    return forms


def alternation(tokens: Sequence[str]) -> str:
    """Join tokens into a regex alternation, or a never-matching pattern if empty."""
    tokens = [token for token in tokens if token]
    if not tokens:
        return NEVER
    return '|'.join(tokens)


def word_pattern(tokens: Sequence[str], strict: bool = False) -> TokenPattern:
    """
    Build a pattern matching any of the given regex fragments as a whole token.

    Args:
        tokens: Regex fragments, joined unescaped
        strict: Require exact case; otherwise match case-insensitively
            and across canonical forms
    """
    if not strict:
        tokens = canonical_forms(tokens)
    source = f"{NOT_ALNUM_BEFORE}({alternation(tokens)}){NOT_ALNUM_AFTER}"
    return TokenPattern(source, ignore_case=not strict, canonical=not strict)


class PatternLibrary:
    """
    Builds token patterns from configuration word lists and live reference lists.

    Args:
        video_source: Alternation of video source names (e.g. 'DVDRip|BluRay')
        video_format: Alternation of video format names (e.g. 'x264|Xvid')
        release_groups: Object whose get() returns the release group names
        query_blacklist: Object whose get() returns the query blacklist terms
        languages: Callable returning the languages for the language suffix pattern
    """

    def __init__(self, video_source: str, video_format: str, release_groups, query_blacklist,
                 languages: Optional[Callable[[], Iterable[Language]]] = None):
        self.video_source = video_source
        self.video_format = video_format
        self.release_groups = release_groups
        self.query_blacklist = query_blacklist
        self.languages = languages or default_languages

    def video_source_values(self) -> List[str]:
        """Get the standard spelling of each video source name."""
        return [value for value in self.video_source.split('|') if value]

    def video_format_values(self) -> List[str]:
        """Get the standard spelling of each video format name."""
        return [value for value in self.video_format.split('|') if value]

    def language_suffix_pattern(self) -> TokenPattern:
        """Match a language code or name at the end of a name, right after punctuation (Movie.eng, Movie.German)."""
        tokens = canonical_forms(regex.escape(token) for token in language_tokens(self.languages()))
        source = f"(?<=[[:punct:]])({alternation(tokens)})$"
        return TokenPattern(source, ignore_case=True, canonical=True)

    def resolution_pattern(self) -> TokenPattern:
        # match screen resolutions 640x480, 1280x720, etc
        source = fr"{NOT_ALNUM_BEFORE}([0-9]{{4}}|[6-9][0-9]{{2}})x([0-9]{{4}}|[4-9][0-9]{{2}}){NOT_ALNUM_AFTER}"
        return TokenPattern(source)

    def video_format_pattern(self) -> TokenPattern:
        source = f"{NOT_ALNUM_BEFORE}({self.video_format or NEVER}){NOT_ALNUM_AFTER}"
        return TokenPattern(source, ignore_case=True)

    def video_source_pattern(self) -> TokenPattern:
        source = f"{NOT_ALNUM_BEFORE}({self.video_source or NEVER}){NOT_ALNUM_AFTER}"
        return TokenPattern(source, ignore_case=True)

    def release_group_pattern(self, strict: bool) -> TokenPattern:
        """Match any known release group name enclosed in separators."""
        return word_pattern(self.release_groups.get(), strict)

    def blacklist_pattern(self, strict: bool) -> TokenPattern:
        """Match any query blacklist term enclosed in separators."""
        return word_pattern(self.query_blacklist.get(), strict)
