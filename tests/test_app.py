"""
App Tests - Unit Tests for Startup Wiring and Logging Setup

Files that USE this module:
- pytest (test runner executes these tests)

Files that this module USES:
- smartfx.app (main entry point)
- smartfx.shared.logging_conf (setup_logging)
- unittest.mock (Mock and patch for startup collaborators)
- pytest (testing framework)
"""
import logging

import pytest  # Testing framework for writing and running tests

from unittest.mock import Mock, patch  # Mock objects and patching for startup tests

from smartfx import app
from smartfx.domain.errors import UnsupportedCurrencyError
from smartfx.shared.logging_conf import setup_logging


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


class TestMain:
    @patch("smartfx.app.setup_logging")
    @patch("smartfx.app.build_shell")
    def test_main_runs_shell(self, mock_build_shell, mock_setup_logging):
        mock_shell = Mock()
        mock_build_shell.return_value = mock_shell

        app.main()

        mock_setup_logging.assert_called_once()
        mock_build_shell.assert_called_once()
        mock_shell.run.assert_called_once_with()

    @patch("smartfx.app.setup_logging")
    @patch("smartfx.app.build_shell")
    def test_main_exits_on_startup_error(self, mock_build_shell, mock_setup_logging):
        mock_build_shell.side_effect = UnsupportedCurrencyError(["ZZZ"])

        with pytest.raises(SystemExit) as exc_info:
            app.main()

        assert exc_info.value.code == 1


class TestSetupLogging:
    def test_log_dir_creates_rotating_file(self, tmp_path):
        log_dir = tmp_path / "logs"
        setup_logging(level="INFO", log_dir=log_dir)

        logging.getLogger("smartfx.test").info("hello from test")
        for handler in logging.getLogger().handlers:
            handler.flush()

        log_file = log_dir / "smartfx.log"
        assert log_file.exists()
        assert "hello from test" in log_file.read_text(encoding="utf-8")

    def test_level_name(self):
        setup_logging(level="DEBUG")
        assert logging.getLogger().level == logging.DEBUG

    def test_default_stream_is_stderr(self):
        import sys

        setup_logging()
        streams = [getattr(h, "stream", None) for h in logging.getLogger().handlers]
        assert sys.stderr in streams
