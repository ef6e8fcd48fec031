#!/usr/bin/env python3
"""
Tests for environment-driven configuration.
"""
import unittest
import sys
import os
from unittest.mock import patch

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from billdiff.config import Config, DiffConfig, LoggingConfig, get_config, reset_config
from billdiff.load_env import load_env


class TestDiffConfig(unittest.TestCase):

    def test_defaults(self):
        config = DiffConfig()
        self.assertEqual(config.section_max_length, 20000)
        self.assertEqual(config.display_max_length, 50000)
        self.assertEqual(config.too_large_threshold, 40000)
        self.assertEqual(config.default_granularity, "word")
        self.assertIsNone(config.time_budget_seconds)
        self.assertTrue(config.validate())

    def test_from_env(self):
        env = {
            'DIFF_SECTION_MAX_LENGTH': '1000',
            'DIFF_DISPLAY_MAX_LENGTH': '2000',
            'DIFF_TOO_LARGE_THRESHOLD': '1500',
            'DIFF_GRANULARITY': 'CHAR',
            'DIFF_TIME_BUDGET_SECONDS': '2.5',
            'DIFF_CACHE_TTL_SECONDS': '60',
        }
        with patch.dict(os.environ, env):
            config = DiffConfig.from_env()
        self.assertEqual(config.section_max_length, 1000)
        self.assertEqual(config.display_max_length, 2000)
        self.assertEqual(config.too_large_threshold, 1500)
        self.assertEqual(config.default_granularity, "char")
        self.assertEqual(config.time_budget_seconds, 2.5)
        self.assertEqual(config.cache_ttl_seconds, 60.0)

    def test_bad_numbers_fall_back_to_defaults(self):
        with patch.dict(os.environ, {'DIFF_SECTION_MAX_LENGTH': 'lots', 'DIFF_TIME_BUDGET_SECONDS': 'soon'}):
            with self.assertLogs('billdiff.config', level='WARNING'):
                config = DiffConfig.from_env()
        self.assertEqual(config.section_max_length, 20000)
        self.assertIsNone(config.time_budget_seconds)

    def test_validate_rejects_bad_values(self):
        self.assertFalse(DiffConfig(section_max_length=0).validate())
        self.assertFalse(DiffConfig(default_granularity="sentence").validate())
        self.assertFalse(DiffConfig(time_budget_seconds=-1).validate())


class TestGlobalConfig(unittest.TestCase):

    def tearDown(self):
        reset_config()

    @patch('billdiff.config.configure_logging')
    @patch('billdiff.config.load_env')
    def test_get_config_is_cached(self, mock_load_env, mock_configure_logging):
        first = get_config()
        second = get_config()
        self.assertIs(first, second)
        mock_load_env.assert_called_once()
        mock_configure_logging.assert_called_once_with(first.logging)
        self.assertTrue(first.validate_all())

    @patch('billdiff.config.configure_logging')
    @patch('billdiff.config.load_env')
    def test_reset_config(self, mock_load_env, mock_configure_logging):
        first = get_config()
        reset_config()
        self.assertIsNot(first, get_config())

    @patch('billdiff.config.configure_logging')
    @patch('billdiff.config.load_env')
    def test_invalid_section_reported(self, mock_load_env, mock_configure_logging):
        with patch.dict(os.environ, {'DIFF_GRANULARITY': 'sentence'}):
            config = Config()
        with self.assertLogs('billdiff.config', level='WARNING'):
            self.assertFalse(config.validate_all())

    def test_logging_config_from_env(self):
        with patch.dict(os.environ, {'LOG_LEVEL': 'debug', 'LOG_FILE': '/tmp/billdiff.log'}):
            logging_config = LoggingConfig.from_env()
        self.assertEqual(logging_config.level, 'DEBUG')
        self.assertEqual(logging_config.file_path, '/tmp/billdiff.log')


class TestLoadEnv(unittest.TestCase):

    def test_loads_dotenv_file(self):
        import tempfile
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, '.env')
            with open(path, 'w') as f:
                f.write('# local settings\nDIFF_GRANULARITY="char"\n')
            with patch.dict(os.environ, {}, clear=False):
                os.environ.pop('RAILWAY_ENVIRONMENT', None)
                os.environ.pop('DIFF_GRANULARITY', None)
                self.assertTrue(load_env(path))
                self.assertEqual(os.environ['DIFF_GRANULARITY'], 'char')

    def test_existing_variables_win(self):
        import tempfile
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, '.env')
            with open(path, 'w') as f:
                f.write('DIFF_GRANULARITY=char\n')
            with patch.dict(os.environ, {'DIFF_GRANULARITY': 'word'}):
                os.environ.pop('RAILWAY_ENVIRONMENT', None)
                load_env(path)
                self.assertEqual(os.environ['DIFF_GRANULARITY'], 'word')

    def test_missing_file_is_skipped(self):
        with patch.dict(os.environ, {}):
            os.environ.pop('RAILWAY_ENVIRONMENT', None)
            self.assertFalse(load_env('/nonexistent/.env'))

    def test_skipped_on_railway(self):
        with patch.dict(os.environ, {'RAILWAY_ENVIRONMENT': 'production'}):
            self.assertFalse(load_env())


if __name__ == '__main__':
    unittest.main()
