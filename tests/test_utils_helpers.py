import io
import logging

import pytest

from rhymecraft.utils import configure_logging, estimate_syllable_count, get_logger
from rhymecraft.utils.logging_config import _PackageHandler, parse_level


@pytest.mark.parametrize(
    "word, expected",
    [("blorfle", 2), ("snorple", 2), ("flarion", 3), ("cat", 1), ("table", 2), ("", 0)],
)
def test_estimate_syllable_count(word, expected):
    assert estimate_syllable_count(word) == expected


def test_estimate_syllable_count_module_location():
    assert estimate_syllable_count.__module__ == "rhymecraft.utils.syllables"


def test_structured_logger_renders_context(caplog):
    logger = get_logger("rhymecraft.test", component="index")

    with caplog.at_level(logging.INFO, logger="rhymecraft.test"):
        logger.bind(words=3).info("Built", context={"seconds": 0.5})

    assert 'Built | {"component": "index", "seconds": 0.5, "words": 3}' in caplog.text


@pytest.fixture
def package_logger():
    logger = logging.getLogger("rhymecraft")
    handlers, level = list(logger.handlers), logger.level
    yield logger
    for handler in list(logger.handlers):
        if handler not in handlers:
            logger.removeHandler(handler)
    logger.setLevel(level)


@pytest.mark.parametrize(
    "value, expected",
    [
        (None, logging.INFO),
        ("debug", logging.DEBUG),
        (" Warning ", logging.WARNING),
        ("10", 10),
        (40, 40),
        ("loud", logging.INFO),
    ],
)
def test_parse_level(value, expected):
    assert parse_level(value) == expected


def test_configure_logging_reads_level_from_environment(monkeypatch, package_logger):
    monkeypatch.setenv("RHYMECRAFT_LOG_LEVEL", "warning")

    configure_logging(force=True)

    assert package_logger.level == logging.WARNING


def test_configure_logging_installs_one_handler_on_package_logger(package_logger):
    root_handlers = list(logging.getLogger().handlers)
    first, second = io.StringIO(), io.StringIO()

    configure_logging("info", stream=first, force=True)
    configure_logging("debug", stream=second)
    get_logger("rhymecraft.index").info("Built index")

    assert "[rhymecraft.index] Built index" in first.getvalue()
    assert second.getvalue() == ""
    assert package_logger.level == logging.INFO
    assert logging.getLogger().handlers == root_handlers

    configure_logging("info", stream=second, force=True)
    get_logger("rhymecraft.index").info("Rebuilt index")

    assert "Rebuilt index" not in first.getvalue()
    assert "Rebuilt index" in second.getvalue()
    assert sum(isinstance(h, _PackageHandler) for h in package_logger.handlers) == 1


def test_create_counter_reuses_registered_collector():
    from rhymecraft.utils import create_counter

    first = create_counter("rhymecraft_test_duplicate", "Counter registered twice.")
    second = create_counter("rhymecraft_test_duplicate", "Counter registered twice.")

    assert first is second
