"""ParamConf - Pre-registered key/value parameter files.

A small configuration reader: register the parameter names a program expects,
load them from a plain text file and read back validated string values.
"""
# ruff: noqa: F401

import logging

from .exceptions import (
    DuplicateParameterError,
    FileOpenError,
    MalformedLineError,
    NoValueError,
    ParamConfError,
    UnknownParameterError,
)
from .parser import LineParser, ParsedLine
from .store import DEFAULT_COMMENT_PREFIX, Entry, ParameterStore

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"
