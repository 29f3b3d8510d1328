import logging

import pytest

from vpnsettings.logging import (
    ColoredFormatter,
    apply_settings_level,
    configure_logging_from_args,
    exception_exc_info,
    format_exception_summary,
    get_logger,
    setup_logging,
)


@pytest.fixture(autouse=True)
def _reset_vpnsettings_logger():
    logger = logging.getLogger("vpnsettings")
    level = logger.level
    handlers = list(logger.handlers)
    yield
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        if handler not in handlers:
            handler.close()
    for handler in handlers:
        logger.addHandler(handler)
    logger.setLevel(level)


def _record(level: int = logging.INFO, msg: str = "hello") -> logging.LogRecord:
    return logging.LogRecord(
        name="vpnsettings.test",
        level=level,
        pathname=__file__,
        lineno=1,
        msg=msg,
        args=(),
        exc_info=None,
    )


def test_get_logger_prefixes_namespace() -> None:
    assert get_logger("module").name == "vpnsettings.module"
    assert get_logger("vpnsettings.config.loader").name == "vpnsettings.config.loader"


def test_colored_formatter_formats_message() -> None:
    formatter = ColoredFormatter("[%(levelname)s] %(message)s", use_colors=False)
    assert formatter.format(_record()) == "[INFO] hello"


def test_colored_formatter_restores_level_name() -> None:
    formatter = ColoredFormatter("[%(levelname)s] %(message)s")
    record = _record(logging.WARNING)

    rendered = formatter.format(record)

    assert "\033[33m" in rendered
    assert record.levelname == "WARNING"


def test_setup_logging_with_file_handler(tmp_path) -> None:
    log_file = tmp_path / "vpnsettings.log"
    setup_logging(level="DEBUG", log_file=str(log_file))
    get_logger("test").debug("debug entry")

    content = log_file.read_text(encoding="utf-8")
    assert "debug entry" in content
    assert "\033[" not in content


def test_setup_logging_replaces_handlers() -> None:
    setup_logging(level="INFO")
    setup_logging(level="WARNING")

    logger = logging.getLogger("vpnsettings")
    assert len(logger.handlers) == 1
    assert logger.level == logging.WARNING


def test_apply_settings_level() -> None:
    setup_logging(level="INFO")

    apply_settings_level("debug")

    logger = logging.getLogger("vpnsettings")
    assert logger.level == logging.DEBUG
    assert all(handler.level == logging.DEBUG for handler in logger.handlers)


@pytest.mark.parametrize("level", [None, "", "verbose"])
def test_apply_settings_level_ignores_unknown(level) -> None:
    setup_logging(level="ERROR")
    apply_settings_level(level)
    assert logging.getLogger("vpnsettings").level == logging.ERROR


def test_configure_logging_from_args_selects_level(monkeypatch) -> None:
    calls = []

    def _fake_setup(level: str = "INFO", log_file=None):
        calls.append((level, log_file))

    monkeypatch.setattr("vpnsettings.logging.setup_logging", _fake_setup)
    configure_logging_from_args(verbose=True, log_level=None, log_file=None)
    configure_logging_from_args(verbose=True, log_level="warning", log_file="x.log")
    configure_logging_from_args()

    assert calls == [("DEBUG", None), ("WARNING", "x.log"), ("INFO", None)]


def test_format_exception_summary_truncates_long_messages() -> None:
    summary = format_exception_summary(RuntimeError("x" * 300), max_length=40)
    assert summary.startswith("RuntimeError: ")
    assert summary.endswith("...")
    assert len(summary) == 40


def test_format_exception_summary_is_single_line() -> None:
    assert format_exception_summary(ValueError("bad\n  value")) == "ValueError: bad value"
    assert format_exception_summary(KeyError()) == "KeyError"


def test_exception_exc_info_contains_traceback() -> None:
    captured: Exception | None = None
    try:
        raise ValueError("bad value")
    except ValueError as exc:
        captured = exc

    assert captured is not None
    exc_info = exception_exc_info(captured)
    assert exc_info[0] is ValueError
    assert exc_info[1] is captured
    assert exc_info[2] is captured.__traceback__
