"""
releaseinfo

Finds release metadata (video source and format, resolution, release
group, language suffix) in media file names and strips it to get a
clean title.
"""

from .cache import CachedList, MovieListResource, PatternListResource
from .errors import DecodeFailure, FetchFailure, ReleaseInfoError, ResourceUnavailable
from .models import MovieRecord
from .patterns import PatternLibrary, TokenPattern
from .release_info import ReleaseInfo

__all__ = [
    'CachedList', 'MovieListResource', 'PatternListResource',
    'DecodeFailure', 'FetchFailure', 'ReleaseInfoError', 'ResourceUnavailable',
    'MovieRecord', 'PatternLibrary', 'TokenPattern', 'ReleaseInfo',
]
