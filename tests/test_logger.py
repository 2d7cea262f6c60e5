import logging

from polyobj.core.logger import (
    _RunIdFilter,
    configure_root_logger,
    current_run_id,
    get_logger,
    push_run_id,
    reset_run_id,
)


def _our_handlers():
    return [
        h for h in logging.getLogger().handlers
        if any(isinstance(f, _RunIdFilter) for f in h.filters)
    ]


def test_configure_root_logger_is_idempotent():
    configure_root_logger("INFO")
    configure_root_logger("DEBUG")

    assert len(_our_handlers()) == 1
    assert logging.getLogger("polyobj").level == logging.DEBUG

    configure_root_logger("WARNING")
    assert logging.getLogger("polyobj").level == logging.WARNING


def test_get_logger_returns_named_child():
    log = get_logger("polyobj.driver")

    assert log.name == "polyobj.driver"
    assert len(_our_handlers()) == 1


def test_push_and_reset_run_id():
    assert current_run_id() == "-"

    token = push_run_id("run-42")
    assert current_run_id() == "run-42"

    reset_run_id(token)
    assert current_run_id() == "-"


def test_push_empty_run_id_is_a_no_op():
    assert push_run_id("") is None
    reset_run_id(None)
    assert current_run_id() == "-"


def test_filter_injects_run_id_into_record():
    record = logging.LogRecord("polyobj", logging.INFO, __file__, 1, "msg", None, None)
    token = push_run_id("abc")
    try:
        assert _RunIdFilter().filter(record) is True
    finally:
        reset_run_id(token)

    assert record.run_id == "abc"
