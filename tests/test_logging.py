"""
Structured logging setup.
"""

import io
import json
import logging

import pytest

from careconnect.core.structured_logger import ROOT_LOGGER_NAME, configure_logging, get_logger


@pytest.fixture
def restore_logging():
    yield
    configure_logging("INFO", "json")


def test_json_lines(restore_logging):
    stream = io.StringIO()
    configure_logging("DEBUG", "json", stream=stream)

    get_logger("triage").info("matched", extra={"request_id": "r-1", "extra_data": {"doctor_id": "d1"}})

    record = json.loads(stream.getvalue().strip())
    assert record["level"] == "INFO"
    assert record["logger"] == "careconnect.triage"
    assert record["message"] == "matched"
    assert record["request_id"] == "r-1"
    assert record["doctor_id"] == "d1"


def test_text_format_and_level(restore_logging):
    stream = io.StringIO()
    configure_logging("WARNING", "text", stream=stream)
    logger = get_logger()

    logger.info("hidden")
    logger.warning("shown")

    output = stream.getvalue()
    assert "hidden" not in output
    assert "careconnect - WARNING - shown" in output


def test_reconfiguring_replaces_handler(restore_logging):
    configure_logging("INFO", "json")
    configure_logging("INFO", "text")
    assert len(logging.getLogger(ROOT_LOGGER_NAME).handlers) == 1


def test_module_loggers_join_the_hierarchy():
    assert get_logger("careconnect.app").name == "careconnect.app"
    assert get_logger("adapters").name == "careconnect.adapters"
