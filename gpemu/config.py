# gpemu/config.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
import os
import logging

# Read version from VERSION file
_version_file = os.path.join(os.path.dirname(__file__), "..", "VERSION")
try:
    with open(os.path.abspath(_version_file), "r") as f:
        __version__ = f.read().strip()
except FileNotFoundError:
    __version__ = "0.0.0"

DEFAULT_GRID_SIZE = 1000


class _GPEmuConfig:
    def __init__(self):
        self.version = __version__
        self.dtype = "float64"
        self.grid_size = _detect_grid_size()
        # logger lives in config
        self.logger = logging.getLogger("gpemu")
        if not self.logger.handlers:
            h = logging.StreamHandler()
            h.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
            self.logger.addHandler(h)
        self.logger.setLevel(logging.INFO)

    def __str__(self):
        return (
            f"GPEmuConfig("
            f"version={self.version}, "
            f"dtype={self.dtype}, "
            f"grid_size={self.grid_size})"
        )

    def __repr__(self):
        return (
            f"<GPEmuConfig "
            f"version={self.version!r}, "
            f"dtype={self.dtype!r}, "
            f"grid_size={self.grid_size!r}>"
        )

    def update(self, **kwargs):
        for k, v in kwargs.items():
            setattr(self, k, v)
        return self


def _detect_grid_size():
    env = os.environ.get("GPEMU_GRID_SIZE")
    if env is None:
        return DEFAULT_GRID_SIZE
    try:
        n = int(env)
    except ValueError:
        raise ValueError(f"GPEMU_GRID_SIZE must be an integer, got {env!r}")
    if n < 2:
        raise ValueError("GPEMU_GRID_SIZE must be >= 2")
    return n


_config = _GPEmuConfig()


def get_config():
    return _config


def set_grid_size(n: int):
    """Set the default query-grid resolution used by new emulators."""
    if n < 2:
        raise ValueError("grid size must be >= 2")
    _config.grid_size = int(n)


def get_grid_size():
    return _config.grid_size


def get_logger():
    return _config.logger


def set_log_level(level):
    _config.logger.setLevel(level)
