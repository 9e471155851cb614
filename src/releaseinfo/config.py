"""
Configuration settings for releaseinfo.

This module loads configuration from the .env file and
defines the settings bundle consumed by ReleaseInfo.
"""

import os
from pathlib import Path
from dotenv import load_dotenv

# Load environment variables from .env file
env_path = Path(__file__).parents[2] / '.env'
load_dotenv(dotenv_path=env_path)

# Token word lists (regex alternations)
VIDEO_SOURCE_PATTERN = os.getenv(
    'RELEASEINFO_VIDEO_SOURCE',
    'CAMRip|CAM|TS|TELESYNC|PDVD|PPV|PPVRip|Screener|SCR|SCREENER|DVDSCR|DVDSCREENER|BDSCR|R5|R5LINE|'
    'DVDRip|DVDR|TVRip|DSR|PDTV|HDTV|DVB|DVBRip|DTHRip|VODRip|VODR|BDRip|BRRip|BluRay|BDR|BR-Scr|'
    'BR-Screener|HDDVD|HDRip|WorkPrint|VHS|VCD|TELECINE|WEB-DL|WEBRip'
)
VIDEO_FORMAT_PATTERN = os.getenv(
    'RELEASEINFO_VIDEO_FORMAT',
    'DivX|Xvid|AVC|x264|h264|x265|h265|HEVC|3ivx|mpeg|mpeg4|mp3|aac|ac3|2ch|6ch|WS|HR|480p|576p|720p|1080p|1080i|2160p'
)

# Remote reference lists
RELEASE_GROUPS_URL = os.getenv('RELEASEINFO_RELEASE_GROUPS_URL', 'http://filebot.sourceforge.net/data/release-groups.txt')
QUERY_BLACKLIST_URL = os.getenv('RELEASEINFO_QUERY_BLACKLIST_URL', 'http://filebot.sourceforge.net/data/query-blacklist.txt')
MOVIE_LIST_URL = os.getenv('RELEASEINFO_MOVIE_LIST_URL', 'http://filebot.sourceforge.net/data/movies.txt.gz')

# Cache Settings
REFRESH_INTERVAL = int(os.getenv('RELEASEINFO_REFRESH_INTERVAL', str(24 * 60 * 60)))
FETCH_TIMEOUT = float(os.getenv('RELEASEINFO_FETCH_TIMEOUT', '10'))
CACHE_DIR = os.getenv('RELEASEINFO_CACHE_DIR', str(Path(__file__).parents[2] / 'data' / 'cache'))

# Logging Settings
LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
LOG_FILE = os.getenv('LOG_FILE', '')


def get_settings():
    """Get the settings bundle used to build a ReleaseInfo."""
    return {
        'pattern.video.source': VIDEO_SOURCE_PATTERN,
        'pattern.video.format': VIDEO_FORMAT_PATTERN,
        'url.release-groups': RELEASE_GROUPS_URL,
        'url.query-blacklist': QUERY_BLACKLIST_URL,
        'url.movie-list': MOVIE_LIST_URL,
        'cache.refresh-interval': REFRESH_INTERVAL,
        'cache.fetch-timeout': FETCH_TIMEOUT,
        'cache.dir': CACHE_DIR,
    }
