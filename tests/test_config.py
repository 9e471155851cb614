import logging
import os
import tempfile
import unittest

from releaseinfo.config import get_settings
from releaseinfo.utils.logger import get_logger, setup_logging


class TestSettings(unittest.TestCase):

    def test_settings_bundle(self):
        settings = get_settings()
        for key in ('pattern.video.source', 'pattern.video.format', 'url.release-groups',
                    'url.query-blacklist', 'url.movie-list'):
            self.assertTrue(settings[key])
        self.assertIn('BluRay', settings['pattern.video.source'].split('|'))
        self.assertGreater(settings['cache.refresh-interval'], 0)


class TestLogging(unittest.TestCase):

    def tearDown(self):
        logging.getLogger().handlers.clear()
        logging.getLogger().setLevel(logging.WARNING)

    def test_setup_logging_writes_file(self):
        with tempfile.TemporaryDirectory() as log_dir:
            log_file = os.path.join(log_dir, 'logs', 'releaseinfo.log')
            setup_logging('debug', log_file)
            get_logger('releaseinfo.test').debug('hello')
            for handler in logging.getLogger().handlers:
                handler.flush()
                handler.close()

            self.assertEqual(logging.getLogger().level, logging.DEBUG)
            with open(log_file) as f:
                self.assertIn('releaseinfo.test - DEBUG - hello', f.read())


if __name__ == '__main__':
    unittest.main()
