import logging

from pytest_mock import MockerFixture

from requestkit.logging import ColorizedFormatter, getLogger, logger, LogLevel


def _record(level: int) -> logging.LogRecord:
    return logging.LogRecord("requestkit.test", level, __file__, 1, "hello", (), None)


def test_get_logger__copies_level(mocker: MockerFixture):
    mocker.patch.object(logger, "level", LogLevel.DEBUG)

    assert getLogger("requestkit.test_child").level == LogLevel.DEBUG


def test_colorized_formatter__color(mocker: MockerFixture):
    mocker.patch("requestkit.logging.settings.NO_COLOR", False)
    formatter = ColorizedFormatter("%(levelname)s %(message)s")
    record = _record(LogLevel.ERROR)

    output = formatter.format(record)

    assert output.startswith(ColorizedFormatter.get_level_color(LogLevel.ERROR))
    assert output.endswith("hello")
    assert record.levelname == "ERROR", "Expected original record to be untouched."


def test_colorized_formatter__no_color(mocker: MockerFixture):
    mocker.patch("requestkit.logging.settings.NO_COLOR", True)
    formatter = ColorizedFormatter("%(levelname)s %(message)s")

    assert formatter.format(_record(LogLevel.WARNING)) == "WARNING hello"


def test_colorized_formatter__level_colors():
    colors = {
        ColorizedFormatter.get_level_color(level)
        for level in (
            LogLevel.DEBUG,
            LogLevel.INFO,
            LogLevel.WARNING,
            LogLevel.ERROR,
            LogLevel.CRITICAL,
        )
    }

    assert len(colors) == 5, "Expected a distinct color per level."
