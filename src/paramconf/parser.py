"""ParamConf line parser module."""

from dataclasses import dataclass
from typing import Iterable, Iterator, Optional

from .exceptions import MalformedLineError
from .utils import SPACE, strip_comment, trim_spaces


@dataclass(frozen=True)
class ParsedLine:
    """A name/value pair read from one line of a parameter file."""

    name: str
    value: str
    line_number: int


class LineParser:
    """Parses `<name> <value>` lines with end-of-line comments."""

    def __init__(self, comment_prefix: str):
        """Initialize line parser.

        Args:
            comment_prefix: Text from this delimiter to end-of-line is ignored
        """
        self.comment_prefix = comment_prefix

    def parse_line(self, raw_line: str, line_number: int, source: str) -> Optional[ParsedLine]:
        """Parse a single physical line.

        Args:
            raw_line: Line as read from the input, with or without terminator
            line_number: 1-based line number for error messages
            source: Name of the parsed input for error messages

        Returns:
            Parsed pair, or None for blank and comment-only lines

        Raises:
            MalformedLineError: If the line has no value
        """
        line = raw_line.rstrip("\n").rstrip("\r")
        content = strip_comment(line, self.comment_prefix)
        if not trim_spaces(content):
            return None

        raw_name, separator, raw_value = content.partition(SPACE)
        if not separator:
            raise MalformedLineError(line_number, source, "parameter without value")

        name = trim_spaces(raw_name)
        value = trim_spaces(raw_value)
        if not value:
            raise MalformedLineError(line_number, source, "identifier without value")

        return ParsedLine(name=name, value=value, line_number=line_number)

    def parse(self, lines: Iterable[str], source: str) -> Iterator[ParsedLine]:
        """Lazily parse lines, skipping blank and comment-only ones.

        The generator stops at the first malformed line, so pairs yielded
        before it may already have been consumed by the caller.

        Args:
            lines: Iterable of text lines  # (open file, list of strings, ...)
            source: Name of the parsed input for error messages

        Yields:
            One ParsedLine per non-skipped line
        """
        for line_number, raw_line in enumerate(lines, start=1):
            parsed = self.parse_line(raw_line, line_number, source)
            if parsed is not None:
                yield parsed


def decode_lines(raw_lines: Iterable[bytes], encoding: str, source: str) -> Iterator[str]:
    """Decode byte lines one at a time so errors point at the right line.

    Args:
        raw_lines: Lines split on b"\\n" only  # (file opened in binary mode)
        encoding: Text encoding of the input
        source: Name of the parsed input for error messages

    Yields:
        Decoded lines, terminators included

    Raises:
        MalformedLineError: If a line cannot be decoded
    """
    for line_number, raw_line in enumerate(raw_lines, start=1):
        try:
            line = raw_line.decode(encoding)
        except UnicodeDecodeError as e:
            raise MalformedLineError(line_number, source, f"text that is not valid {encoding}") from e
        yield line
