"""
Tests for the UserConfig logging helpers.
"""

import json
import logging
import os
import shutil
import tempfile
import unittest

from UserConfig.utils.logging import (
    JsonFormatter,
    PACKAGE_LOGGER_NAME,
    StructuredLoggerAdapter,
    configure_logging,
    get_logger,
    set_log_level,
)


class TestLogging(unittest.TestCase):
    """Test cases for logging configuration."""

    def setUp(self):
        self.temp_dir = tempfile.mkdtemp()

    def tearDown(self):
        configure_logging(level='warning', use_json=False, log_file='')
        shutil.rmtree(self.temp_dir)

    def test_text_logger(self):
        configure_logging(level='info', use_json=False, log_file='')
        logger = get_logger('UserConfig.tests')
        self.assertIsInstance(logger, logging.Logger)
        self.assertEqual(logging.getLogger(PACKAGE_LOGGER_NAME).level, logging.INFO)

    def test_json_logger(self):
        configure_logging(level='debug', use_json=True, log_file='')
        logger = get_logger('UserConfig.tests', {'component': 'tests'})
        self.assertIsInstance(logger, StructuredLoggerAdapter)

    def test_root_logger_untouched(self):
        root_handlers = list(logging.getLogger().handlers)
        configure_logging(level='debug', use_json=False, log_file='')
        self.assertEqual(logging.getLogger().handlers, root_handlers)

    def test_log_file(self):
        log_file = os.path.join(self.temp_dir, 'userconfig.log')
        configure_logging(level='info', use_json=True, log_file=log_file)
        get_logger('UserConfig.tests').info("written", extra={'path': 'conf.yaml'})
        for handler in logging.getLogger(PACKAGE_LOGGER_NAME).handlers:
            handler.flush()
        with open(log_file) as f:
            record = json.loads(f.readline())
        self.assertEqual(record['message'], 'written')
        self.assertEqual(record['path'], 'conf.yaml')
        self.assertEqual(record['level'], 'INFO')

    def test_json_formatter(self):
        record = logging.LogRecord('UserConfig', logging.WARNING, __file__, 1, 'hello %s', ('world',), None)
        data = json.loads(JsonFormatter().format(record))
        self.assertEqual(data['message'], 'hello world')
        self.assertEqual(data['logger'], 'UserConfig')

    def test_set_log_level(self):
        set_log_level('error')
        self.assertEqual(logging.getLogger(PACKAGE_LOGGER_NAME).level, logging.ERROR)
        with self.assertRaises(ValueError):
            set_log_level('loud')


if __name__ == "__main__":
    unittest.main()
