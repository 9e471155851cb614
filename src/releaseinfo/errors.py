"""
Exceptions raised by releaseinfo.

Matching and cleaning never raise; these only come out of the cached
reference lists.
"""


class ReleaseInfoError(Exception):
    """Base class for all releaseinfo errors."""


class FetchFailure(ReleaseInfoError):
    """Network or transport error while retrieving a remote list."""

    def __init__(self, url, message):
        super().__init__(f"Failed to fetch {url}: {message}")
        self.url = url


class DecodeFailure(ReleaseInfoError):
    """Remote or cached payload could not be decoded."""


class ResourceUnavailable(ReleaseInfoError):
    """No cached copy exists and the remote fetch failed."""

    def __init__(self, url):
        super().__init__(f"Resource not available: {url}")
        self.url = url
