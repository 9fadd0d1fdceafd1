"""Custom exceptions for ParamConf."""

import os
from typing import Union


class ParamConfError(Exception):
    """Base exception for ParamConf errors."""

    pass


class DuplicateParameterError(ParamConfError):
    """Raised when a parameter name is registered a second time."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f'Parameter "{name}" already exists!')


class FileOpenError(ParamConfError):
    """Raised when a parameter file cannot be opened for reading or writing."""

    def __init__(self, path: Union[str, os.PathLike], mode: str):
        """Initialize file open error.

        Args:
            path: Path of the file that could not be opened
            mode: Either "reading" or "writing"
        """
        self.path = os.fspath(path)
        self.mode = mode
        super().__init__(f'Could not open file "{self.path}" for {mode}!')


class MalformedLineError(ParamConfError):
    """Raised when a line of a parameter file cannot be parsed."""

    def __init__(self, line_number: int, source: str, reason: str):
        """Initialize malformed line error.

        Args:
            line_number: 1-based number of the offending line
            source: Name of the parsed input  # (file path or "<string>")
            reason: Short description such as "parameter without value"
        """
        self.line_number = line_number
        self.source = source
        self.reason = reason
        super().__init__(f'Found {reason} in line {line_number} of configuration file "{source}"!')


class UnknownParameterError(ParamConfError):
    """Raised when a value is requested for a name that was never registered."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f'Unknown parameter name: "{name}"')


class NoValueError(ParamConfError):
    """Raised when a registered parameter has neither a loaded nor a default value."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f'No value for parameter "{name}" read and no default value defined.')
