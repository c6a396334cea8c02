"""
Line-break hint stage

Places a zero-width non-joiner before dots (fluent calls) and after open
parentheses, so an e-book reader that has to wrap a long line favours
natural continuation points. Without the hints

    var xs = Observable.Interval(TimeSpan.FromSeconds(1)).Select(i=>i.ToString());

may wrap in the middle of an identifier; with them it can wrap as

    var xs = Observable.Interval(TimeSpan.FromSeconds(1))
        .Select(i=>i.ToString());

The scan covers the whole string, markup included, so this stage must run
last.
"""

import re

from .log import LOG


HINT_POINTS = re.compile(r"[.(]")

ZERO_WIDTH_NON_JOINER = "&zwnj;"


def breakHints_insert(markup: str, marker: str = ZERO_WIDTH_NON_JOINER) -> str:
    """
    Insert the break marker before every '.' and after every '('

    Args:
        markup: Final markup of the pipeline
        marker: Marker text (an entity reference by default)

    Returns:
        Markup with markers inserted
    """
    LOG("Inserting line-break hints", level=3)

    def hint_place(match: re.Match) -> str:
        char = match.group(0)
        return f"{marker}{char}" if char == "." else f"{char}{marker}"

    return HINT_POINTS.sub(hint_place, markup)
