"""Tests for logging configuration."""

import logging

from json_log_formatter import JSONFormatter

from schematool.core.logging import StructuredFormatter, configure_logging


def make_record(**extra):
    record = logging.LogRecord("schematool.test", logging.INFO, __file__, 1, "hello", None, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestStructuredFormatter:
    """Tests for StructuredFormatter."""

    def test_plain_message(self):
        assert StructuredFormatter().format(make_record()) == "[INFO] hello"

    def test_task_and_context(self):
        record = make_record(project_name="shop", task_name="dbinfo", context={"count": 8})
        assert StructuredFormatter().format(record) == "[INFO] project=shop task=dbinfo count=8 hello"


class TestConfigureLogging:
    """Tests for configure_logging."""

    def teardown_method(self):
        logging.getLogger("schematool").handlers.clear()

    def test_structured_handler(self):
        configure_logging(level="debug")
        logger = logging.getLogger("schematool")
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0].formatter, StructuredFormatter)

    def test_json_handler(self):
        configure_logging(json_format=True)
        handler = logging.getLogger("schematool").handlers[0]
        assert isinstance(handler.formatter, JSONFormatter)

    def test_reconfigure_replaces_handlers(self):
        configure_logging()
        configure_logging()
        assert len(logging.getLogger("schematool").handlers) == 1

    def test_unknown_level_falls_back_to_info(self):
        configure_logging(level="chatty")
        assert logging.getLogger("schematool").level == logging.INFO

    def test_project_name_stamped(self):
        configure_logging(project_name="shop")
        handler = logging.getLogger("schematool").handlers[0]
        record = make_record()
        handler.filter(record)
        assert record.project_name == "shop"
