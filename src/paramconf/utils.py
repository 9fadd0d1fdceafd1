"""Utility functions for ParamConf."""

SPACE = " "


def trim_spaces(text: str) -> str:
    """Remove leading and trailing space characters.

    Only the plain space character is stripped. Tabs and other whitespace are
    part of the value.

    Args:
        text: String to trim

    Returns:
        Trimmed string
    """
    return text.strip(SPACE)


def strip_comment(line: str, comment_prefix: str) -> str:
    """Cut a line at the first occurrence of the comment prefix.

    Args:
        line: Raw line without its line terminator
        comment_prefix: Comment delimiter  # (e.g. "#" or "//")

    Returns:
        Text before the comment, or the whole line if there is none
    """
    comment_start = line.find(comment_prefix)
    if comment_start == -1:
        return line
    return line[:comment_start]
