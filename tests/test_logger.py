import logging
import os
import shutil
import tempfile
import unittest
from logging.handlers import RotatingFileHandler

from rich.logging import RichHandler

from cli_help.config import Config
from cli_help.logger import LOG_FILE_NAME, setup_logging


class TestSetupLogging(unittest.TestCase):

    def setUp(self):
        self.root = logging.getLogger()
        self.saved_handlers = list(self.root.handlers)
        self.saved_level = self.root.level
        self.log_dir = os.path.join(tempfile.mkdtemp(), "logs")

    def tearDown(self):
        for handler in self.root.handlers:
            if handler not in self.saved_handlers:
                handler.close()
        self.root.handlers = self.saved_handlers
        self.root.setLevel(self.saved_level)
        shutil.rmtree(os.path.dirname(self.log_dir), ignore_errors=True)

    def _new_handlers(self):
        return [h for h in self.root.handlers if h not in self.saved_handlers]

    def test_console_and_file_handlers(self):
        setup_logging(Config(log_dir=self.log_dir))

        handlers = self._new_handlers()
        rich_handlers = [h for h in handlers if isinstance(h, RichHandler)]
        file_handlers = [h for h in handlers if isinstance(h, RotatingFileHandler)]
        self.assertEqual(len(rich_handlers), 1)
        self.assertEqual(len(file_handlers), 1)
        self.assertEqual(rich_handlers[0].level, logging.ERROR)
        self.assertEqual(self.root.level, logging.INFO)
        self.assertEqual(file_handlers[0].level, logging.INFO)
        self.assertTrue(os.path.exists(os.path.join(self.log_dir, LOG_FILE_NAME)))

    def test_verbose_shows_info_on_console(self):
        setup_logging(Config(log_dir=self.log_dir, verbose=True))

        rich_handler = next(h for h in self._new_handlers() if isinstance(h, RichHandler))
        self.assertEqual(rich_handler.level, logging.INFO)

    def test_unwritable_log_dir_skips_file_handler(self):
        blocker = os.path.join(os.path.dirname(self.log_dir), "not-a-dir")
        os.makedirs(os.path.dirname(blocker), exist_ok=True)
        with open(blocker, "w") as f:
            f.write("")

        setup_logging(Config(log_dir=os.path.join(blocker, "logs")))

        handlers = self._new_handlers()
        self.assertFalse(any(isinstance(h, RotatingFileHandler) for h in handlers))
        self.assertTrue(any(isinstance(h, RichHandler) for h in handlers))


if __name__ == "__main__":
    unittest.main()
