"""
Release info extraction and cleaning.

This module finds release tokens (video source, release group) in file
names and strips them to get a clean title usable as a lookup query.
"""

import os
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Union

from releaseinfo.cache import MovieListResource, PatternListResource
from releaseinfo.config import get_settings
from releaseinfo.patterns import PatternLibrary, TokenPattern
from releaseinfo.utils.logger import get_logger
from releaseinfo.utils.text import normalize_punctuation

logger = get_logger(__name__)


class ReleaseInfo:
    """
    Matcher and cleaner for release names.

    Args:
        patterns: Library building the token patterns
        movie_list: Object whose get() returns the movie catalog
    """

    def __init__(self, patterns: PatternLibrary, movie_list=None):
        self.patterns = patterns
        self.movie_list = movie_list

    @classmethod
    def from_settings(cls, settings=None, languages=None, fetch=None):
        """
        Build a ReleaseInfo from a settings bundle.

        Args:
            settings: Mapping with the pattern.* and url.* keys; defaults to config.get_settings()
            languages: Optional language provider for the language suffix pattern
            fetch: Optional callable returning raw bytes for a URL (used by all lists)

        Returns:
            ReleaseInfo backed by cached remote lists
        """
        settings = settings or get_settings()
        options = {
            'refresh_interval': settings.get('cache.refresh-interval', 24 * 60 * 60),
            'cache_dir': settings.get('cache.dir'),
            'timeout': settings.get('cache.fetch-timeout', 10),
            'fetch': fetch,
        }

        release_groups = PatternListResource(settings['url.release-groups'], name='release-groups.txt', **options)
        query_blacklist = PatternListResource(settings['url.query-blacklist'], name='query-blacklist.txt', **options)
        movie_list = MovieListResource(settings['url.movie-list'], name='movies.txt.gz', **options)
        logger.debug(f"Reference lists cached in {options['cache_dir'] or 'memory'}, "
                     f"refreshed every {options['refresh_interval']}s")

        patterns = PatternLibrary(
            video_source=settings['pattern.video.source'],
            video_format=settings['pattern.video.format'],
            release_groups=release_groups,
            query_blacklist=query_blacklist,
            languages=languages,
        )
        return cls(patterns, movie_list)

    def get_video_source(self, path: Union[str, os.PathLike]) -> Optional[str]:
        # check parent and itself for source names
        parent, name = _path_components(path)
        return self.match_last(self.patterns.video_source_pattern(), self.patterns.video_source_values(), parent, name)

    def get_release_group(self, path: Union[str, os.PathLike]) -> Optional[str]:
        # check parent and itself for group names
        parent, name = _path_components(path)
        return self.match_last(self.patterns.release_group_pattern(False), self.patterns.release_groups.get(), parent, name)

    @staticmethod
    def match_last(pattern: TokenPattern, standard_values: Sequence[str], *candidates: Optional[str]) -> Optional[str]:
        """
        Find the last match of a pattern across several strings.

        Args:
            pattern: Pattern to look for
            standard_values: Preferred spellings of the matched token
            candidates: Strings to search in order; None entries are skipped

        Returns:
            The standard spelling of the last match if one equals it ignoring case,
            otherwise the last match as found, or None if nothing matched
        """
        last_match = None

        # match last occurrence
        for candidate in candidates:
            if candidate is None:
                continue
            for match in pattern.finditer(candidate):
                last_match = match.group()

        if last_match is None:
            return None

        # prefer standard value over matched value
        folded = last_match.casefold()
        for standard in standard_values:
            if standard.casefold() == folded:
                return standard

        return last_match

    def clean_release(self, items: Union[str, Iterable[str]], strict: bool) -> Union[str, List[str]]:
        """
        Strip release tokens from one name or a list of names.

        Args:
            items: A single name, or an iterable of names
            strict: Match release groups case-sensitively

        Returns:
            The cleaned name for a single name, or the list of non-empty cleaned names
        """
        patterns = self.release_patterns(strict)
        if isinstance(items, str):
            return self.clean(items, *patterns)
        return self.clean_all(items, *patterns)

    def release_patterns(self, strict: bool) -> List[TokenPattern]:
        """Get the standard set of patterns stripped by clean_release, in order."""
        return [
            self.patterns.release_group_pattern(strict),
            self.patterns.language_suffix_pattern(),
            self.patterns.video_source_pattern(),
            self.patterns.video_format_pattern(),
            self.patterns.resolution_pattern(),
            self.patterns.blacklist_pattern(False),
        ]

    def clean_all(self, items: Iterable[str], *patterns: TokenPattern) -> List[str]:
        cleaned_items = []
        for item in items:
            cleaned_item = self.clean(item, *patterns)
            if cleaned_item:
                cleaned_items.append(cleaned_item)
        return cleaned_items

    @staticmethod
    def clean(item: str, *patterns: TokenPattern) -> str:
        """Remove every match of each pattern in turn, then normalize punctuation."""
        for pattern in patterns:
            item = pattern.sub('', item)
        return normalize_punctuation(item)

    def get_movie_list(self):
        """Get the movie catalog as a tuple of MovieRecord."""
        if self.movie_list is None:
            return ()
        return self.movie_list.get()

    def get_language_suffix_pattern(self) -> TokenPattern:
        return self.patterns.language_suffix_pattern()

    def get_resolution_pattern(self) -> TokenPattern:
        return self.patterns.resolution_pattern()

    def get_video_format_pattern(self) -> TokenPattern:
        return self.patterns.video_format_pattern()

    def get_video_source_pattern(self) -> TokenPattern:
        return self.patterns.video_source_pattern()

    def get_release_group_pattern(self, strict: bool) -> TokenPattern:
        return self.patterns.release_group_pattern(strict)

    def get_blacklist_pattern(self, strict: bool) -> TokenPattern:
        return self.patterns.blacklist_pattern(strict)


def _path_components(path):
    path = Path(path)
    parent = path.parent.name or None
    return parent, path.name
