import logging
import threading
from datetime import datetime

import pytest

from resourcehub.logsupport import OperationCounter, SimpleLogFormatter, init_logging


def _record(level, name="app.mod", message="hello"):
    return logging.LogRecord(name, level, __file__, 1, message, None, None)


@pytest.mark.parametrize(
    "level, label",
    [
        (logging.ERROR, "ERROR"),
        (logging.CRITICAL, "ERROR"),
        (logging.WARNING, "WARN "),
        (logging.INFO, "INFO "),
        (logging.DEBUG, "DEBUG"),
        (5, "TRACE"),
    ],
)
def test_formatter_layout(level, label):
    line = SimpleLogFormatter().format(_record(level))
    stamp = datetime.strptime(line[:23], "%Y-%m-%d %H:%M:%S.%f")
    assert stamp.year >= 2000
    assert line[23] == " "
    assert line[24:] == f"{label} [app.mod] hello"


@pytest.fixture
def root_logger():
    root = logging.getLogger()
    level = root.level
    before = list(root.handlers)
    yield root
    for handler in list(root.handlers):
        if handler not in before:
            root.removeHandler(handler)
    root.setLevel(level)


def test_init_logging_writes_to_stdout(root_logger, capsys):
    handler = init_logging(logging.INFO)
    assert handler in root_logger.handlers
    logging.getLogger("app.core").info("started")
    logging.getLogger("app.core").debug("hidden")
    out = capsys.readouterr().out
    assert "INFO  [app.core] started" in out
    assert "hidden" not in out


def test_init_logging_twice_fails(root_logger):
    init_logging(logging.DEBUG)
    with pytest.raises(RuntimeError):
        init_logging(logging.DEBUG)


def test_counter_starts_at_zero():
    counter = OperationCounter("ops")
    assert (counter.count, counter.success_count, counter.error_count) == (0, 0, 0)
    assert counter.success_rate() == 1.0


def test_counter_methods_return_new_values():
    counter = OperationCounter("ops")
    assert counter.increment() == 1
    assert counter.increment() == 2
    assert counter.record_success() == 1
    assert counter.record_error() == 1
    assert counter.count == 2
    assert counter.success_rate() == 0.5


def test_summary_format():
    counter = OperationCounter("ops")
    counter.increment()
    counter.increment()
    counter.record_success()
    counter.record_error()
    assert counter.summary() == "ops: total=2, success=1, error=1, success_rate=50.00%"


def test_counter_is_thread_safe():
    counter = OperationCounter("ops")

    def work():
        for _ in range(1000):
            counter.increment()
            counter.record_success()

    threads = [threading.Thread(target=work) for _ in range(4)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    assert counter.count == counter.success_count == 4000
    assert counter.success_rate() == 1.0


def test_log_summary_uses_given_level(caplog):
    caplog.set_level(logging.DEBUG, logger="resourcehub.logsupport")
    counter = OperationCounter("jobs")
    counter.increment()
    counter.log_summary(logging.WARNING)
    record = caplog.records[-1]
    assert record.levelno == logging.WARNING
    assert record.getMessage() == counter.summary()