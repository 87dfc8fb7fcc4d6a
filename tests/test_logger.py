"""
Logger Tests

Subsystem loggers, the session buffer and the log format.
"""

import logging
import os
import tempfile
import unittest

from shellsim.filesystem import File, FileSystem, Path
from shellsim.logger import LogFormatter, Logger, LogLevel, SessionLogHandler, get_logger


class TestLogger(unittest.TestCase):
    """Test the logging system."""

    def setUp(self):
        Logger.shutdown()
        Logger.initialize(level=LogLevel.DEBUG, console_output=False)

    def tearDown(self):
        Logger.shutdown()

    def test_one_instance_per_subsystem(self):
        """Test that loggers are shared per subsystem."""
        self.assertIs(get_logger('filesystem'), Logger('filesystem'))
        self.assertIsNot(get_logger('filesystem'), get_logger('parser'))
        self.assertEqual(get_logger('parser').subsystem, 'parser')

    def test_session_logs(self):
        """Test that records are kept with their subsystem and context."""
        get_logger('shell').warning("Something odd", context={'command': 'cp'})

        logs = Logger.get_session_logs(subsystem='shell')

        self.assertEqual(logs[-1]['message'], "Something odd")
        self.assertEqual(logs[-1]['level'], 'WARNING')
        self.assertEqual(logs[-1]['context'], {'command': 'cp'})

    def test_filesystem_operations_are_logged(self):
        """Test that file system changes produce debug records."""
        FileSystem().add(Path("/notes.txt"), File())

        messages = [entry['message'] for entry in Logger.get_session_logs(subsystem='filesystem')]

        self.assertIn("Added node", messages)

    def test_filter_by_level(self):
        """Test filtering the session buffer by level."""
        log = get_logger('shell')
        log.info("info message")
        log.error("error message")

        errors = Logger.get_session_logs(level='ERROR')

        self.assertEqual([entry['message'] for entry in errors], ["error message"])

    def test_exception(self):
        """Test logging an exception."""
        try:
            raise ValueError("broken")
        except ValueError as e:
            get_logger('shell').exception("Shell error", exc=e)

        self.assertEqual(Logger.get_session_logs(level='ERROR')[-1]['message'], "Shell error")

    def test_level_threshold(self):
        """Test that records below the configured level are dropped."""
        Logger.shutdown()
        Logger.initialize(level=LogLevel.WARNING, console_output=False)

        get_logger('shell').debug("hidden")
        get_logger('shell').warning("shown")

        self.assertEqual(
            [entry['message'] for entry in Logger.get_session_logs(subsystem='shell')],
            ["shown"]
        )

    def test_initialize_twice_has_no_effect(self):
        """Test that a second initialize keeps the first configuration."""
        Logger.initialize(level=LogLevel.CRITICAL, console_output=False)
        get_logger('shell').debug("still captured")

        self.assertEqual(Logger.get_session_logs()[-1]['message'], "still captured")

    def test_shutdown_clears_session(self):
        """Test that no session logs are available after shutdown."""
        get_logger('shell').warning("gone")
        Logger.shutdown()

        self.assertEqual(Logger.get_session_logs(), [])

    def test_log_file(self):
        """Test writing records to a file."""
        with tempfile.TemporaryDirectory() as temp_dir:
            log_file = os.path.join(temp_dir, "logs", "shellsim.log")
            Logger.shutdown()
            Logger.initialize(level=LogLevel.INFO, log_file=log_file, console_output=False)

            get_logger('config').info("Configuration loaded", context={'path': 'x.json'})
            Logger.shutdown()

            with open(log_file, encoding="utf-8") as f:
                content = f.read()

        self.assertIn("[config] Configuration loaded {path=x.json}", content)


class TestSessionLogHandler(unittest.TestCase):
    """Test the in-memory handler."""

    def record(self, message, level=logging.INFO):
        record = logging.LogRecord('shellsim.test', level, __file__, 1, message, None, None)
        record.subsystem = 'test'
        return record

    def test_ring_buffer(self):
        """Test that only the newest records are kept."""
        handler = SessionLogHandler(max_entries=2)
        for message in ["a", "b", "c"]:
            handler.emit(self.record(message))

        self.assertEqual([entry['message'] for entry in handler.get_logs()], ["b", "c"])

    def test_limit_and_clear(self):
        """Test limiting results and clearing the buffer."""
        handler = SessionLogHandler()
        for message in ["a", "b", "c"]:
            handler.emit(self.record(message))

        self.assertEqual([entry['message'] for entry in handler.get_logs(limit=1)], ["c"])
        handler.clear()
        self.assertEqual(handler.get_logs(), [])


class TestLogFormatter(unittest.TestCase):
    """Test the record format."""

    def test_format(self):
        """Test level, subsystem, message and context."""
        record = logging.LogRecord('shellsim.shell', logging.WARNING, __file__, 1, "Unknown command", None, None)
        record.subsystem = 'shell'
        record.context = {'command': 'nope'}

        text = LogFormatter(use_colors=False).format(record)

        self.assertIn("WARNING ", text)
        self.assertTrue(text.endswith("[shell] Unknown command {command=nope}"))
        self.assertTrue(text.startswith("["))

    def test_format_without_context(self):
        """Test a record without subsystem or context."""
        record = logging.LogRecord('other', logging.INFO, __file__, 1, "plain", None, None)

        text = LogFormatter(use_colors=False).format(record)

        self.assertTrue(text.endswith("INFO     plain"))


if __name__ == '__main__':
    unittest.main()
