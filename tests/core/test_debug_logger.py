"""
test_debug_logger.py
--------------------
Level and category filtering of the console logger.
"""

from skyline.core.debug.debug_logger import DebugLogger, LoggerConfig


def test_set_level_none_disables_logging():
    LoggerConfig.set_level("NONE")
    assert LoggerConfig.ENABLE_LOGGING is False


def test_set_level_ignores_unknown_names():
    LoggerConfig.set_level("WARN")
    LoggerConfig.set_level("LOUD")
    assert LoggerConfig.LOG_LEVEL == "WARN"


def test_trace_only_at_verbose(capsys):
    LoggerConfig.set_level("INFO")
    DebugLogger.trace("landed")
    assert capsys.readouterr().out == ""

    LoggerConfig.set_level("VERBOSE")
    DebugLogger.trace("landed")
    out = capsys.readouterr().out
    assert "[TRACE]" in out and "landed" in out


def test_disabled_category_is_silent(capsys):
    LoggerConfig.set_level("VERBOSE")
    DebugLogger.trace("keys", category="input")
    assert capsys.readouterr().out == ""


def test_fail_is_printed_at_error_level(capsys):
    LoggerConfig.set_level("ERROR")
    DebugLogger.warn("hidden")
    DebugLogger.fail("boom")
    out = capsys.readouterr().out
    assert "hidden" not in out
    assert "[FAIL]" in out and "boom" in out


def test_init_entry_shows_status(capsys):
    LoggerConfig.set_level("INFO")
    DebugLogger.init_entry("SoundManager", "MUTED")
    out = capsys.readouterr().out
    assert "> SoundManager" in out and "[MUTED]" in out


def test_log_line_names_calling_class(capsys):
    LoggerConfig.set_level("INFO")

    class FakeScene:
        def announce(self):
            DebugLogger.state("entered", category="scene")

    FakeScene().announce()
    assert "[FakeScene][STATE] entered" in capsys.readouterr().out
