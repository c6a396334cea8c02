"""
Line helpers shared by the line-oriented stages
"""

from typing import List


def lines_split(text: str) -> List[str]:
    """Split text into physical lines, treating CRLF and LF alike"""
    return text.replace("\r\n", "\n").split("\n")


def line_isBlank(line: str) -> bool:
    return not line.strip()


def indent_measure(line: str) -> int:
    """
    Column of the first non-whitespace character

    Raw character count: a tab counts as one column.
    """
    return len(line) - len(line.lstrip())
