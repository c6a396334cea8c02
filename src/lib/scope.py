"""
Scope and line structuring stage

Rebuilds block structure from indentation rather than braces: each line is
wrapped in a line container, and every increase of indentation opens a
scope container that is closed again when the indentation drops back.

    if (a)                   <div class="line">if (a)</div>
    {                        <div class="line">{</div>
        b();          ->     <div class="scope">
    }                            <div class="line">b();</div>
                             </div>
                             <div class="line">}</div>

An indentation stack (sentinel 0 at the bottom, strictly increasing) tracks
the open scopes. Lines that are a single tag (the code container, remark
blocks) pass through untouched; scopes opened inside such a container are
closed before its closing tag so the result stays well-formed.
"""

import re
from typing import List

from ..models.markup import LINE, SCOPE
from .lines import lines_split, line_isBlank, indent_measure
from .log import LOG


TAG_LINE = re.compile(
    r'^\s*<(?P<closing>/)?[A-Za-z][\w.-]*'
    r'(?:\s+[\w.:-]+\s*=\s*"[^"]*")*\s*(?P<selfClosing>/)?>\s*$'
)
SPAN_TAG = re.compile(r'<(?P<closing>/)?span\b[^>]*>')


def spans_track(body: str) -> List[str]:
    """
    Return the span open-tags still unclosed at the end of a line body

    A verbatim string can span lines; its span is closed at the end of
    every line container and reopened at the start of the next one.
    """
    open_spans: List[str] = []
    for match in SPAN_TAG.finditer(body):
        if match.group("closing"):
            if open_spans:
                open_spans.pop()
        else:
            open_spans.append(match.group(0))
    return open_spans


def scopes_close(output: List[str], indents: List[int], depth: int) -> None:
    """Pop the indentation stack down to depth, closing one scope per level"""
    while len(indents) > depth:
        indents.pop()
        output.append(" " * indents[-1] + "</div>")


def scopes_structure(markup: str) -> str:
    """
    Wrap lines and nest scopes by indentation

    Args:
        markup: Highlighted markup whose first and last lines are the
                container's open and close tags

    Returns:
        Markup with line and scope containers; the final line is appended
        verbatim
    """
    lines = lines_split(markup)
    output: List[str] = []
    indents = [0]
    barriers: List[int] = []
    open_spans: List[str] = []
    previous = 0

    for line in lines[:-1]:
        if line_isBlank(line):
            continue

        tag = TAG_LINE.match(line)
        if tag:
            if tag.group("closing"):
                if barriers:
                    scopes_close(output, indents, barriers.pop())
                    previous = min(previous, indents[-1])
            elif not tag.group("selfClosing"):
                barriers.append(len(indents))
            output.append(line)
            continue

        column = indent_measure(line)
        floor = barriers[-1] if barriers else 1

        # push against the previous line, then pop against the stack, so a
        # dedent to a column never pushed stays in the enclosing scope
        if column > previous and column > indents[-1]:
            output.append(" " * previous + f'<div class="{SCOPE}">')
            indents.append(column)

        while column < indents[-1] and len(indents) > floor:
            indents.pop()
            output.append(" " * indents[-1] + "</div>")

        previous = column

        body = "".join(open_spans) + line.lstrip()
        open_spans = spans_track(body)
        closers = "</span>" * len(open_spans)
        output.append(f'{" " * column}<div class="{LINE}">{body}{closers}</div>')

    LOG(f"Closing {len(indents) - 1} open scopes", level=3)

    # innermost first, each at the level it was opened on
    indents.pop()
    for level in reversed(indents):
        output.append(" " * level + "</div>")

    output.append(lines[-1])
    return "\n".join(output)
