import logging

import pytest

import gpemu
from gpemu import config


def test_logger_and_level():
    logger = config.get_logger()
    assert logger.name == "gpemu"
    config.set_log_level(logging.DEBUG)
    assert logger.level == logging.DEBUG
    config.set_log_level(logging.INFO)


def test_grid_size():
    old = config.get_grid_size()
    try:
        config.set_grid_size(64)
        assert gpemu.Emulator().grid_size == 64
        with pytest.raises(ValueError):
            config.set_grid_size(1)
    finally:
        config.set_grid_size(old)


def test_update_and_repr():
    cfg = config.get_config()
    assert cfg.update(dtype="float64") is cfg
    assert "grid_size" in repr(cfg)
    assert isinstance(gpemu.__version__, str)
