"""
Cached remote lists for releaseinfo.

This module provides lists that are fetched from a remote location,
kept on disk, and refreshed once they are older than the refresh interval.
"""

import gzip
import os
import threading
import time
import zlib
from typing import Callable, Optional, Tuple
from urllib.parse import urlparse

import requests

from releaseinfo.config import CACHE_DIR, FETCH_TIMEOUT, REFRESH_INTERVAL
from releaseinfo.errors import DecodeFailure, FetchFailure, ResourceUnavailable
from releaseinfo.models import MovieRecord
from releaseinfo.utils.logger import get_logger

logger = get_logger(__name__)

# Wait this long before retrying after a failed refresh
RETRY_INTERVAL = 60 * 60


class CachedList:
    """
    A remote resource decoded into a Python value and cached locally.

    get() only hits the network when there is no cached copy or the cached
    copy is at least refresh_interval seconds old. If the fetch fails and a
    copy exists, the old copy is served. Callers arriving during a refresh
    block on the instance lock and receive the refreshed value.
    """

    def __init__(self, url: str, name: Optional[str] = None,
                 refresh_interval: float = REFRESH_INTERVAL,
                 cache_dir: Optional[str] = CACHE_DIR,
                 timeout: float = FETCH_TIMEOUT,
                 retry_interval: float = RETRY_INTERVAL,
                 fetch: Optional[Callable[[str], bytes]] = None,
                 clock: Callable[[], float] = time.time):
        """
        Initialize the cached list.

        Args:
            url: Remote location of the resource
            name: File name of the local copy (defaults to the last URL path segment)
            refresh_interval: Maximum age of the cached copy in seconds
            cache_dir: Directory for the local copy, or None to keep it in memory only
            timeout: Timeout for the remote request in seconds
            retry_interval: Delay in seconds before retrying after a failed refresh
            fetch: Callable returning the raw bytes for a URL, raising FetchFailure
            clock: Time source returning seconds
        """
        self.url = url
        self.name = name or os.path.basename(urlparse(url).path) or 'resource'
        self.refresh_interval = refresh_interval
        self.cache_dir = cache_dir
        self.timeout = timeout
        self.retry_interval = retry_interval
        self._fetch = fetch or self._http_fetch
        self._clock = clock

        self._data = None
        self._last_fetch = None
        self._last_failure = None
        self._local_loaded = False
        self._lock = threading.Lock()

    @property
    def cache_file(self) -> Optional[str]:
        if self.cache_dir is None:
            return None
        return os.path.join(self.cache_dir, self.name)

    @property
    def last_fetch(self) -> Optional[float]:
        return self._last_fetch

    def decode(self, data: bytes):
        """Turn the raw payload into the cached value. Raises DecodeFailure."""
        raise NotImplementedError

    def get(self):
        """
        Get the decoded value, refreshing it first if it is missing or stale.

        Returns:
            The decoded value

        Raises:
            ResourceUnavailable: No cached copy and the fetch failed
            DecodeFailure: The fetched payload is malformed
        """
        with self._lock:
            self._load_local()
            if self._needs_refresh():
                self._refresh()
            return self._data

    def refresh(self, force: bool = False):
        """
        Refresh the value from the remote location.

        Args:
            force: Fetch even if the cached copy is still fresh

        Returns:
            The decoded value
        """
        with self._lock:
            self._load_local()
            if force or self._needs_refresh():
                self._refresh()
            return self._data

    def clear(self):
        """Drop the cached value and its local copy."""
        with self._lock:
            self._data = None
            self._last_fetch = None
            self._last_failure = None
            self._local_loaded = True
            if self.cache_file and os.path.exists(self.cache_file):
                try:
                    os.remove(self.cache_file)
                except OSError as e:
                    logger.error(f"Error removing cached list {self.cache_file}: {e}")

    def _needs_refresh(self) -> bool:
        now = self._clock()
        if self._data is None:
            return True
        if now - self._last_fetch < self.refresh_interval:
            return False
        # Stale, but don't hammer a failing server
        if self._last_failure is not None and now - self._last_failure < self.retry_interval:
            return False
        return True

    def _refresh(self):
        try:
            raw = self._fetch(self.url)
        except FetchFailure as e:
            self._last_failure = self._clock()
            if self._data is None:
                logger.error(f"{e}; no cached copy of {self.name} available")
                raise ResourceUnavailable(self.url) from e
            logger.warning(f"{e}; using cached copy of {self.name}")
            return

        try:
            data = self.decode(raw)
        except DecodeFailure as e:
            self._last_failure = self._clock()
            logger.error(f"Error decoding {self.url}: {e}")
            raise

        self._data = data
        self._last_fetch = self._clock()
        self._last_failure = None
        self._store_local(raw)

    def _http_fetch(self, url: str) -> bytes:
        logger.info(f"Fetching {url}")
        try:
            response = requests.get(url, timeout=self.timeout)
            response.raise_for_status()
        except requests.exceptions.RequestException as e:
            raise FetchFailure(url, e) from e
        return response.content

    def _load_local(self):
        if self._local_loaded:
            return
        self._local_loaded = True

        cache_file = self.cache_file
        if not cache_file or not os.path.exists(cache_file):
            return

        try:
            with open(cache_file, 'rb') as f:
                raw = f.read()
            self._data = self.decode(raw)
            self._last_fetch = os.path.getmtime(cache_file)
            logger.debug(f"Loaded cached list {cache_file}")
        except (OSError, DecodeFailure) as e:
            logger.warning(f"Error loading cached list {cache_file}: {e}")

    def _store_local(self, raw: bytes):
        cache_file = self.cache_file
        if not cache_file:
            return

        tmp_file = cache_file + '.tmp'
        try:
            os.makedirs(self.cache_dir, exist_ok=True)
            with open(tmp_file, 'wb') as f:
                f.write(raw)
            os.replace(tmp_file, cache_file)
        except OSError as e:
            logger.error(f"Error saving cached list {cache_file}: {e}")


class PatternListResource(CachedList):
    """Newline-delimited UTF-8 list, one entry per non-empty line."""

    def decode(self, data: bytes) -> Tuple[str, ...]:
        try:
            text = data.decode('utf-8')
        except UnicodeDecodeError as e:
            raise DecodeFailure(f"Invalid UTF-8 in {self.name}: {e}") from e

        return tuple(line.strip() for line in text.split('\n') if line.strip())


class MovieListResource(CachedList):
    """Gzip-compressed catalog of id, title and year separated by tabs and newlines."""

    def decode(self, data: bytes) -> Tuple[MovieRecord, ...]:
        try:
            text = gzip.decompress(data).decode('utf-8')
        except (OSError, EOFError, zlib.error) as e:
            raise DecodeFailure(f"Invalid gzip data in {self.name}: {e}") from e
        except UnicodeDecodeError as e:
            raise DecodeFailure(f"Invalid UTF-8 in {self.name}: {e}") from e

        movies = []
        for line_number, line in enumerate(text.split('\n'), 1):
            line = line.rstrip('\r')
            if not line.strip():
                continue

            fields = line.split('\t')
            if len(fields) != 3:
                raise DecodeFailure(f"Expected 3 fields on line {line_number} of {self.name}, got {len(fields)}")

            imdb_id, title, year = fields
            try:
                movies.append(MovieRecord(id=int(imdb_id), title=title, year=int(year)))
            except ValueError as e:
                raise DecodeFailure(f"Bad record on line {line_number} of {self.name}: {e}") from e

        return tuple(movies)
