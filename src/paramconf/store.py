"""ParamConf parameter store module."""

from __future__ import annotations

import logging
import os
import sys
from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, Optional, TextIO, Union

from .exceptions import (
    DuplicateParameterError,
    FileOpenError,
    NoValueError,
    UnknownParameterError,
)
from .parser import LineParser, decode_lines

logger = logging.getLogger(__name__)

DEFAULT_COMMENT_PREFIX = "#"
DEFAULT_FILE_HEADER = "Default config file generated by ParameterParser"
NO_VALUE_TEXT = "<no value set>"

PathType = Union[str, os.PathLike]


@dataclass
class Entry:
    """State of one registered parameter. A value of None means unset."""

    name: str
    value: Optional[str] = None

    @property
    def is_set(self) -> bool:
        return self.value is not None


class ParameterStore:
    """Fixed schema of named string parameters backed by a plain text file.

    Names are registered up front, optionally with a default value. Files
    loaded afterward may only assign values to registered names; unknown
    names are logged and ignored.
    """

    def __init__(self, comment_prefix: str = DEFAULT_COMMENT_PREFIX, encoding: str = "utf-8"):
        """Initialize parameter store.

        Args:
            comment_prefix: Delimiter starting an end-of-line comment
            encoding: Text encoding for reading and writing parameter files
        """
        self._entries: Dict[str, Entry] = {}
        self.set_comment_prefix(comment_prefix)
        self.encoding = encoding

    def register(self, name: str, default_value: str = "") -> None:
        """Add a parameter to the schema.

        Args:
            name: Parameter name  # (case-sensitive)
            default_value: Value used until a loaded file overrides it; empty means unset

        Raises:
            DuplicateParameterError: If the name is already registered
        """
        if name in self._entries:
            raise DuplicateParameterError(name)
        self._entries[name] = Entry(name, default_value or None)

    def set_comment_prefix(self, prefix: str) -> None:
        """Replace the comment delimiter used by subsequent loads.

        Raises:
            ValueError: If the prefix is empty
        """
        if not prefix:
            raise ValueError("Comment prefix must not be empty")
        self.comment_prefix = prefix

    def load_from_file(self, path: PathType) -> None:
        """Read values of registered parameters from a parameter file.

        Args:
            path: Path of the parameter file

        Raises:
            FileOpenError: If the file cannot be opened for reading
            MalformedLineError: If a line has no value or cannot be decoded; earlier
                lines stay applied
        """
        # Binary mode splits on "\n" only; a lone "\r" belongs to the value.
        try:
            f = open(path, "rb")
        except OSError as e:
            raise FileOpenError(path, "reading") from e

        source = os.fspath(path)
        with f:
            self.load_from_lines(decode_lines(f, self.encoding, source), source=source)

    def load_from_lines(self, lines: Iterable[str], source: str = "<string>") -> None:
        """Read values of registered parameters from an iterable of lines.

        Args:
            lines: Lines in parameter file format  # (open stream or list of str)
            source: Name of the input used in errors and log records

        Raises:
            MalformedLineError: If a line has no value; earlier lines stay applied
        """
        applied = 0
        ignored = 0
        for parsed in LineParser(self.comment_prefix).parse(lines, source):
            entry = self._entries.get(parsed.name)
            if entry is None:
                logger.warning(
                    'Unknown parameter identifier "%s" will be ignored!',
                    parsed.name,
                    extra={"parameter": parsed.name, "line_number": parsed.line_number, "source": source},
                )
                ignored += 1
                continue
            entry.value = parsed.value
            applied += 1

        logger.debug("Loaded %s: %d parameter(s) applied, %d ignored", source, applied, ignored)

    def write_default_file(self, path: PathType) -> None:
        """Write the header and every parameter holding a value to a file.

        The file is created or truncated.

        Raises:
            FileOpenError: If the file cannot be opened for writing
        """
        try:
            f = open(path, "w", encoding=self.encoding)
        except OSError as e:
            raise FileOpenError(path, "writing") from e

        with f:
            self.write_parameters(f)

    def write_parameters(self, stream: TextIO) -> None:
        """Write parameters in parameter file format to a text stream.

        Unset parameters are omitted. The format has no escaping, so a value
        holding the comment prefix or a line break does not load back as written.

        Args:
            stream: Writable text stream
        """
        stream.write(f"{self.comment_prefix} {DEFAULT_FILE_HEADER}\n")
        for entry in self._sorted_entries():
            if entry.is_set:
                stream.write(f"{entry.name} {entry.value}\n")

    def dump(self, sink: Optional[TextIO] = None) -> None:
        """Write a human-readable listing of all parameters.

        Args:
            sink: Writable text stream  # (defaults to sys.stdout)
        """
        sink = sink if sink is not None else sys.stdout
        sink.write("Current parameters:\n")
        for entry in self._sorted_entries():
            if entry.is_set:
                sink.write(f"{entry.name} = {entry.value}\n")
            else:
                sink.write(f"{entry.name} {NO_VALUE_TEXT}\n")

    def get(self, name: str) -> str:
        """Get the value of a parameter.

        Args:
            name: Registered parameter name

        Returns:
            Current value as a string

        Raises:
            UnknownParameterError: If the name was never registered
            NoValueError: If no value was loaded and no default was given
        """
        entry = self._get_entry(name)
        if not entry.is_set:
            raise NoValueError(name)
        return entry.value

    def is_set(self, name: str) -> bool:
        """Check whether a registered parameter currently holds a value."""
        return self._get_entry(name).is_set

    def to_dict(self) -> Dict[str, Optional[str]]:
        """Map every parameter name to its value, None for unset ones."""
        return {entry.name: entry.value for entry in self._sorted_entries()}

    def __getitem__(self, name: str) -> str:
        return self.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._entries))

    def __repr__(self) -> str:
        """String representation."""
        return f"ParameterStore({self.to_dict()})"

    def _get_entry(self, name: str) -> Entry:
        entry = self._entries.get(name)
        if entry is None:
            raise UnknownParameterError(name)
        return entry

    def _sorted_entries(self) -> Iterator[Entry]:
        for name in sorted(self._entries):
            yield self._entries[name]
