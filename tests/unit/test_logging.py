"""Tests for logging configuration."""

import json
import logging

from responder.core.exceptions import ResponderError
from responder.core.logging import StructuredFormatter, configure_logging


def make_record(**extra):
    record = logging.LogRecord("responder.test", logging.INFO, __file__, 1, "hello", None, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestStructuredFormatter:
    """Tests for StructuredFormatter."""

    def test_plain_message(self):
        assert StructuredFormatter().format(make_record()) == "[INFO] hello"

    def test_context_and_resource_key(self):
        record = make_record(resource_key="posts", context={"includes": 2})
        assert StructuredFormatter().format(record) == "[INFO] resource=posts includes=2 hello"


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_sets_level_and_single_handler(self):
        configure_logging(level="debug")
        configure_logging(level="debug")

        logger = logging.getLogger("responder")
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0].formatter, StructuredFormatter)

    def test_json_format(self):
        configure_logging(json_format=True)

        formatter = logging.getLogger("responder").handlers[0].formatter
        output = json.loads(formatter.format(make_record()))
        assert output["message"] == "hello"


class TestResponderError:
    """Tests for the exception base class."""

    def test_context_is_rendered(self):
        error = ResponderError("failed", context={"relation": "author"})
        assert str(error) == "failed (relation=author)"
        assert error.message == "failed"

    def test_without_context(self):
        assert str(ResponderError("failed")) == "failed"
