import logging

from plangeo.core.logging_utils import configure_logging, get_logger
from plangeo.core.line import Line
from plangeo.core.vec2 import Vec2


def test_get_logger_namespaced():
    log = get_logger('plangeo.polygon')
    assert log.name == 'plangeo.polygon'
    assert log.level == logging.NOTSET
    assert get_logger('custom').name == 'plangeo.custom'


def test_root_isolated_from_process_root():
    get_logger('plangeo.test')
    root = logging.getLogger('plangeo')
    assert root.propagate is False
    assert any(not isinstance(h, logging.NullHandler) for h in root.handlers)


def test_configure_logging_level():
    root = logging.getLogger('plangeo')
    old = root.level
    try:
        configure_logging('DEBUG')
        assert root.level == logging.DEBUG
        configure_logging('not-a-level')
        assert root.level == logging.INFO
    finally:
        root.setLevel(old)


def test_degenerate_paths_log_at_debug(caplog):
    root = logging.getLogger('plangeo')
    old = root.level
    root.addHandler(caplog.handler)
    try:
        configure_logging('DEBUG')
        assert Line.do_intersect(Line(1, 1, 0), Line(1, 1, 5)) is None
    finally:
        root.removeHandler(caplog.handler)
        root.setLevel(old)
    assert any('parallel lines' in r.getMessage() for r in caplog.records)


def test_impossible_circle_center_logs_at_debug(caplog):
    root = logging.getLogger('plangeo')
    old = root.level
    root.addHandler(caplog.handler)
    try:
        configure_logging('DEBUG')
        assert Vec2.circle_center(Vec2(0, 0), Vec2(4, 0), 1.0) is None
    finally:
        root.removeHandler(caplog.handler)
        root.setLevel(old)
    records = [r for r in caplog.records if r.name == 'plangeo.vec2']
    assert records and 'too small' in records[0].getMessage()
    assert records[0].levelno == logging.DEBUG
