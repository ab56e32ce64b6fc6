import logging

from rendermath.logging_utils import configure_logging, get_logger


def test_get_logger_is_namespaced():
    assert get_logger('rendermath.core.trig').name == 'rendermath.core.trig'
    assert get_logger('host_app').name == 'rendermath.host_app'


def test_get_logger_inherits_by_default():
    log = get_logger('rendermath.inherit_check')
    assert log.level == logging.NOTSET


def test_get_logger_explicit_level():
    assert get_logger('rendermath.explicit', level='debug').level == logging.DEBUG
    assert get_logger('rendermath.explicit_int', level=logging.ERROR).level == logging.ERROR


def test_configure_logging_does_not_touch_process_root():
    root = logging.getLogger()
    before = (root.level, list(root.handlers))
    pkg = configure_logging('DEBUG')
    assert pkg.name == 'rendermath'
    assert pkg.level == logging.DEBUG
    assert pkg.propagate is False
    assert (root.level, list(root.handlers)) == before


def test_unknown_level_name_falls_back_to_info():
    assert configure_logging('not-a-level').level == logging.INFO


def test_package_root_gets_a_stream_handler():
    pkg = logging.getLogger('rendermath')
    for h in list(pkg.handlers):
        pkg.removeHandler(h)
    pkg.addHandler(logging.NullHandler())
    configure_logging('INFO')
    assert any(isinstance(h, logging.StreamHandler) for h in pkg.handlers)
    assert not any(isinstance(h, logging.NullHandler) for h in pkg.handlers)
