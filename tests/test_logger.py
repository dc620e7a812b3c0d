"""Tests for the loguru configuration."""

from loguru import logger

from jvmcomplete.infrastructure import read_classlist
from jvmcomplete.logger import get_logger, reset_logger, setup_logger


def _write_classlist(tmp_path):
    path = tmp_path / "classlist"
    path.write_text("java/lang/Object\n")
    return path


def test_import_leaves_host_sinks_alone(tmp_path):
    records = []
    host_sink = logger.add(records.append, level="DEBUG")
    try:
        read_classlist(_write_classlist(tmp_path))
        logger.info("host message")
    finally:
        logger.remove(host_sink)

    messages = [message.record["message"] for message in records]
    assert messages == ["host message"]


def test_setup_logger_keeps_host_sinks(tmp_path):
    records = []
    host_sink = logger.add(records.append, level="DEBUG")
    try:
        setup_logger(console_output=False, log_level="DEBUG")
        read_classlist(_write_classlist(tmp_path))
    finally:
        logger.remove(host_sink)

    assert any(message.record["message"].startswith("Read 1 class names") for message in records)


def test_package_sinks_only_take_component_records(tmp_path):
    log_file = tmp_path / "engine.log"
    setup_logger(log_file=str(log_file), console_output=False, log_level="DEBUG")

    with logger.contextualize(request="r2"):
        logger.info("host record without component")
    get_logger("tests").info("engine record")
    reset_logger()

    content = log_file.read_text(encoding="utf-8")
    assert "tests:" in content
    assert "engine record" in content
    assert "host record" not in content


def test_reset_logger_disables_package(tmp_path):
    records = []
    setup_logger(console_output=False)
    reset_logger()
    host_sink = logger.add(records.append, level="DEBUG")
    try:
        read_classlist(_write_classlist(tmp_path))
    finally:
        logger.remove(host_sink)

    assert records == []
