"""
Unit tests for StrhashLogger and NullLogger.
"""

import logging

from strhash.services.logging import NullLogger, StrhashLogger


class TestStrhashLogger:
    """Tests for StrhashLogger."""

    def test_no_handlers_by_default(self):
        """Console and file output are both off unless asked for."""
        logger = StrhashLogger(name="strhash.test.default")
        assert logger.handlers == []

    def test_file_output_respects_level(self, tmp_path):
        """Messages below the threshold are not written."""
        log_file = tmp_path / "logs" / "strhash.log"
        logger = StrhashLogger(
            name="strhash.test.file",
            level="info",
            file_enabled=True,
            log_file=log_file,
        )
        logger.debug("hidden %s", "detail")
        logger.info("computed %s", "md5")
        logger.close()

        content = log_file.read_text(encoding="utf-8")
        assert "[INFO] strhash.test.file: computed md5" in content
        assert "hidden" not in content

    def test_set_level(self, tmp_path):
        """set_level changes every handler."""
        logger = StrhashLogger(
            name="strhash.test.level",
            console_enabled=True,
            file_enabled=True,
            log_file=tmp_path / "strhash.log",
        )
        logger.set_level("debug")
        assert [h.level for h in logger.handlers] == [logging.DEBUG, logging.DEBUG]
        logger.close()

    def test_unknown_level_falls_back_to_warning(self):
        logger = StrhashLogger(name="strhash.test.unknown", level="chatty", console_enabled=True)
        assert logger.handlers[0].level == logging.WARNING
        logger.close()

    def test_replacing_logger_closes_old_handlers(self, tmp_path):
        """A new logger with the same name takes over from the previous one."""
        first = StrhashLogger(
            name="strhash.test.replace",
            file_enabled=True,
            log_file=tmp_path / "first.log",
        )
        old_handler = first.handlers[0]
        second = StrhashLogger(name="strhash.test.replace", console_enabled=True)

        assert old_handler.stream is None
        assert logging.getLogger("strhash.test.replace").handlers == second.handlers
        second.close()

    def test_does_not_propagate(self):
        StrhashLogger(name="strhash.test.propagate")
        assert logging.getLogger("strhash.test.propagate").propagate is False


class TestNullLogger:
    """Tests for NullLogger."""

    def test_accepts_everything(self):
        logger = NullLogger()
        logger.debug("a %s", 1)
        logger.info("b")
        logger.warning("c")
        logger.error("d")
        logger.set_level("debug")
