import gzip
import unittest
from pathlib import Path

from releaseinfo import ReleaseInfo
from releaseinfo.config import VIDEO_FORMAT_PATTERN, VIDEO_SOURCE_PATTERN
from releaseinfo.errors import FetchFailure
from releaseinfo.models import MovieRecord
from releaseinfo.patterns import PatternLibrary
from releaseinfo.utils.text import normalize_punctuation


class StaticList:
    """Stands in for a cached remote list."""

    def __init__(self, *values):
        self.values = tuple(values)

    def get(self):
        return self.values


class TestReleaseInfo(unittest.TestCase):

    def setUp(self):
        patterns = PatternLibrary(
            video_source=VIDEO_SOURCE_PATTERN,
            video_format=VIDEO_FORMAT_PATTERN,
            release_groups=StaticList('GROUP', 'CtrlHD', 'DON'),
            query_blacklist=StaticList('PROPER', 'REPACK'),
        )
        self.movies = StaticList(MovieRecord(499549, 'Avatar', 2009))
        self.release_info = ReleaseInfo(patterns, self.movies)

    def test_match_last_across_candidates(self):
        pattern = self.release_info.get_video_source_pattern()
        result = self.release_info.match_last(pattern, [], 'Avatar.DVDRip', 'avatar.BluRay.mkv')
        self.assertEqual(result, 'BluRay')

    def test_match_last_within_candidate(self):
        pattern = self.release_info.get_video_source_pattern()
        result = self.release_info.match_last(pattern, [], 'Avatar.DVDRip.HDTV.BluRay.mkv', None)
        self.assertEqual(result, 'BluRay')

    def test_match_last_skips_missing_candidates(self):
        pattern = self.release_info.get_video_source_pattern()
        self.assertEqual(self.release_info.match_last(pattern, [], None, 'Avatar.HDTV'), 'HDTV')
        self.assertIsNone(self.release_info.match_last(pattern, [], None, 'Avatar.2009'))

    def test_match_last_prefers_standard_value(self):
        pattern = self.release_info.get_video_source_pattern()
        self.assertEqual(self.release_info.match_last(pattern, ['BluRay'], 'avatar.bluray'), 'BluRay')
        self.assertEqual(self.release_info.match_last(pattern, ['HDTV'], 'avatar.bluray'), 'bluray')

    def test_get_video_source(self):
        self.assertEqual(self.release_info.get_video_source('Avatar.2009.bluray.x264-GROUP.mkv'), 'BluRay')
        self.assertEqual(self.release_info.get_video_source(Path('Avatar.DVDRip') / 'avatar.mkv'), 'DVDRip')
        self.assertEqual(self.release_info.get_video_source('Avatar.DVDRip/avatar.webrip.mkv'), 'WEBRip')
        self.assertIsNone(self.release_info.get_video_source('Movies/avatar.mkv'))

    def test_get_release_group(self):
        self.assertEqual(self.release_info.get_release_group('Movies/Avatar.2009-ctrlhd/avatar.mkv'), 'CtrlHD')
        self.assertEqual(self.release_info.get_release_group('Avatar-CtrlHD/avatar-don.mkv'), 'DON')
        self.assertIsNone(self.release_info.get_release_group('Movies/avatar.mkv'))

    def test_clean(self):
        patterns = [
            self.release_info.get_video_format_pattern(),
            self.release_info.get_video_source_pattern(),
            self.release_info.get_release_group_pattern(False),
        ]
        self.assertEqual(self.release_info.clean('Show.Name.720p.BluRay-GROUP', *patterns), 'Show.Name')

    def test_clean_resolution_leaves_scan_type_tokens(self):
        # 720p is a video format token, the resolution pattern only matches WIDTHxHEIGHT
        patterns = [
            self.release_info.get_resolution_pattern(),
            self.release_info.get_video_source_pattern(),
            self.release_info.get_release_group_pattern(False),
        ]
        self.assertEqual(self.release_info.clean('Show.Name.720p.BluRay-GROUP', *patterns), 'Show.Name.720p')
        self.assertEqual(self.release_info.clean('Show.Name.1280x720.BluRay-GROUP', *patterns), 'Show.Name')

    def test_clean_pattern_order(self):
        # each pattern runs on the text left by the previous one
        source = self.release_info.get_video_source_pattern()
        group = self.release_info.get_release_group_pattern(True)
        self.assertEqual(self.release_info.clean('Movie.BluRay-GROUP', source, group), 'Movie')
        self.assertEqual(self.release_info.clean('Movie.BluRay-GROUP', group), 'Movie.BluRay')

    def test_clean_release_list(self):
        self.assertEqual(self.release_info.clean_release(['Movie.x264-GROUP', ''], False), ['Movie'])

    def test_clean_release_keeps_order(self):
        items = ['Heat.1995.DVDRip', 'x264-GROUP', 'Avatar.2009.1920x1080.BluRay.eng']
        self.assertEqual(self.release_info.clean_release(items, False), ['Heat.1995', 'Avatar.2009'])

    def test_clean_release_single(self):
        self.assertEqual(self.release_info.clean_release('Avatar.2009.PROPER.720p.BluRay-CtrlHD', False), 'Avatar.2009')

    def test_clean_release_strict(self):
        self.assertEqual(self.release_info.clean_release('Movie.x264-group', True), 'Movie.group')
        self.assertEqual(self.release_info.clean_release('Movie.x264-group', False), 'Movie')

    def test_clean_release_language_suffix(self):
        self.assertEqual(self.release_info.clean_release('Avatar.2009.German', False), 'Avatar.2009')

    def test_clean_release_native_language_name(self):
        self.assertEqual(self.release_info.clean_release('Le.Film.Français', False), 'Le.Film')
        self.assertEqual(self.release_info.clean_release('Der.Film.Deutsch', False), 'Der.Film')

    def test_get_movie_list(self):
        self.assertEqual(self.release_info.get_movie_list(), (MovieRecord(499549, 'Avatar', 2009),))

    def test_get_movie_list_without_catalog(self):
        release_info = ReleaseInfo(self.release_info.patterns)
        self.assertEqual(release_info.get_movie_list(), ())


class TestFromSettings(unittest.TestCase):

    def setUp(self):
        self.payloads = {
            'http://example.com/release-groups.txt': b'GROUP\nCtrlHD\n',
            'http://example.com/query-blacklist.txt': b'PROPER\n',
            'http://example.com/movies.txt.gz': gzip.compress(b'499549\tAvatar\t2009\n'),
        }
        self.settings = {
            'pattern.video.source': 'DVDRip|BluRay',
            'pattern.video.format': 'x264|Xvid',
            'url.release-groups': 'http://example.com/release-groups.txt',
            'url.query-blacklist': 'http://example.com/query-blacklist.txt',
            'url.movie-list': 'http://example.com/movies.txt.gz',
        }

    def fetch(self, url):
        if url not in self.payloads:
            raise FetchFailure(url, 'not found')
        return self.payloads[url]

    def test_from_settings(self):
        release_info = ReleaseInfo.from_settings(self.settings, fetch=self.fetch)

        self.assertEqual(release_info.clean_release('Avatar.PROPER.BluRay.x264-ctrlhd', False), 'Avatar')
        self.assertEqual(release_info.get_release_group('Avatar.BluRay.x264-ctrlhd.avi'), 'CtrlHD')
        self.assertEqual(release_info.get_movie_list(), (MovieRecord(499549, 'Avatar', 2009),))
        self.assertIsNone(release_info.movie_list.cache_dir)


class TestNormalizePunctuation(unittest.TestCase):

    def test_trailing_separators(self):
        self.assertEqual(normalize_punctuation('Show.Name..-'), 'Show.Name')

    def test_whitespace(self):
        self.assertEqual(normalize_punctuation('  The   Movie  '), 'The Movie')
        self.assertEqual(normalize_punctuation('Movie (2009)'), 'Movie 2009')

    def test_quotes(self):
        self.assertEqual(normalize_punctuation("Ocean's Eleven"), 'Oceans Eleven')

    def test_only_punctuation(self):
        self.assertEqual(normalize_punctuation('.-[]'), '')


if __name__ == '__main__':
    unittest.main()
