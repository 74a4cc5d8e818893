import json
import logging
import sys

import pytest

from ebay_importer.logging_config import (
    ContextLogger,
    JsonFormatter,
    configure_logging,
    reconfigure_service_loggers,
)

pytestmark = pytest.mark.unit


def test_configure_logging_standardizes_name():
    logger = configure_logging("ebay_importer.collectors.ebay.ebay_url_parser")

    assert isinstance(logger, ContextLogger)
    assert logger.name == "ebay-importer:ebay_url_parser"


def test_configure_logging_keeps_explicit_name_and_level():
    logger = configure_logging("ebay-importer:test_component", log_level="debug")
    base = logging.getLogger("ebay-importer:test_component")

    assert logger.name == "ebay-importer:test_component"
    assert base.level == logging.DEBUG
    assert base.propagate is False


def test_reconfiguring_does_not_duplicate_handlers():
    configure_logging("ebay-importer:test_handlers")
    configure_logging("ebay-importer:test_handlers")

    assert len(logging.getLogger("ebay-importer:test_handlers").handlers) == 1


def test_kwargs_are_appended_to_message():
    logger = ContextLogger(logging.getLogger("ebay-importer:test_prepare"))

    prepared = logger._prepare("Scraped", {"item_id": "123", "variants": 4})

    assert prepared["msg"] == "Scraped - item_id=123 - variants=4"
    assert prepared["std"]["extra"] == {"extra_kwargs": {"item_id": "123", "variants": 4}}


def test_json_formatter_includes_structured_fields():
    record = logging.LogRecord(
        "ebay-importer:test", logging.INFO, __file__, 1, "Scraped", None, None
    )
    record.extra_kwargs = {"item_id": "123"}

    payload = json.loads(JsonFormatter().format(record))

    assert payload["message"] == "Scraped"
    assert payload["level"] == "INFO"
    assert payload["item_id"] == "123"


def test_log_output_goes_to_stderr():
    configure_logging("ebay-importer:test_stream")

    (handler,) = logging.getLogger("ebay-importer:test_stream").handlers
    assert handler.stream is sys.stderr


def test_reconfigure_service_loggers_applies_level_and_format():
    configure_logging("ebay-importer:test_reconfigure")
    other = logging.getLogger("unrelated-test-logger")
    other.setLevel(logging.INFO)

    reconfigure_service_loggers("ERROR", "json")

    base = logging.getLogger("ebay-importer:test_reconfigure")
    assert base.level == logging.ERROR
    assert isinstance(base.handlers[0].formatter, JsonFormatter)
    assert other.level == logging.INFO
    reconfigure_service_loggers("INFO")
