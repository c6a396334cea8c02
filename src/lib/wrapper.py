"""
Markup wrapper stage

First stage of the pipeline: turns a raw code sample into an XML-safe block
wrapped in the code container, after trimming surrounding blank lines and
the indentation the sample inherited from its host document.

Example:
    >>> code_wrap("    if (a)\\n        b();")
    '<div class="csharpcode">\\nif (a)\\n    b();\\n</div>'
"""

from typing import List

from ..models.markup import CONTAINER
from .encoder import xmlText_encode
from .lines import lines_split, line_isBlank, indent_measure
from .log import LOG


def blankLines_trim(lines: List[str]) -> List[str]:
    """Drop leading and trailing whitespace-only lines"""
    start = 0
    while start < len(lines) and line_isBlank(lines[start]):
        start += 1

    end = len(lines)
    while end > start and line_isBlank(lines[end - 1]):
        end -= 1

    return lines[start:end]


def lines_dedent(lines: List[str]) -> List[str]:
    """
    Remove the common leading indentation

    Exactly min(indent) characters are removed from every non-blank line;
    blank lines become empty. Tabs and spaces are not normalized, so mixed
    indentation is de-indented by raw character count.

    Example:
        ["    a", "      b", "", "    c"] -> ["a", "  b", "", "c"]
    """
    indents = [indent_measure(line) for line in lines if not line_isBlank(line)]
    if not indents:
        return ["" for _ in lines]

    shortest = min(indents)
    return ["" if line_isBlank(line) else line[shortest:] for line in lines]


def code_wrap(code: str, filter_illegal: bool = True) -> str:
    """
    Wrap a raw code sample in the code container

    Args:
        code: Raw (entity-decoded) code sample text
        filter_illegal: Drop XML-illegal characters instead of raising

    Returns:
        '<div class="csharpcode">\\n{encoded code}\\n</div>'; a sample with
        only blank lines gives an empty block
    """
    lines = lines_dedent(blankLines_trim(lines_split(code)))
    LOG(f"Wrapping {len(lines)} code lines", level=3)

    encoded = xmlText_encode("\n".join(lines), filter_illegal=filter_illegal)
    return f'<div class="{CONTAINER}">\n{encoded}\n</div>'
