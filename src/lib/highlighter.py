"""
Word highlighting stage

Wraps whole-word occurrences of configured words (keywords, known type
names) in marker spans. The markup is parsed into a tree first so that
replacements only ever touch text: tags and attributes are re-emitted as
they were, and nothing inside a string or comment region is highlighted,
however deeply nested.

Example:
    >>> spec = WordHighlightSpec(words=("var",), marker_class="kwrd")
    >>> words_highlight('<div>var x; <span class="rem">// var</span></div>', spec)
    '<div><span class="kwrd">var</span> x; <span class="rem">// var</span></div>'
"""

import re
import xml.etree.ElementTree as ET
from functools import lru_cache
from typing import Optional, Pattern, Tuple

from ..models.lexicon import WordHighlightSpec
from ..models.markup import MarkupElement, MarkupText, MarkupNode
from .encoder import xmlText_encode
from .errors import MarkupParseError
from .log import LOG


@lru_cache(maxsize=32)
def wordPattern_build(words: Tuple[str, ...]) -> Optional[Pattern[str]]:
    """
    Compile the whole-word alternation for a word list

    Returns:
        Compiled \\b(word1|word2|...)\\b pattern, or None for an empty list
    """
    if not words:
        return None
    alternation = "|".join(re.escape(word) for word in words)
    return re.compile(rf"\b({alternation})\b")


def element_convert(element: ET.Element) -> MarkupElement:
    """Convert an ElementTree element (text/tail model) into an explicit tree"""
    children = []
    if element.text:
        children.append(MarkupText(element.text))
    for child in element:
        children.append(element_convert(child))
        if child.tail:
            children.append(MarkupText(child.tail))
    return MarkupElement(tag=element.tag, attributes=dict(element.attrib), children=children)


def markup_parse(markup: str) -> MarkupElement:
    """
    Parse intermediate markup into a tree

    Args:
        markup: Well-formed fragment with a single root element

    Returns:
        Root MarkupElement

    Raises:
        MarkupParseError: The fragment is not well-formed
    """
    try:
        root = ET.fromstring(markup)
    except ET.ParseError as error:
        raise MarkupParseError(markup, str(error)) from error
    return element_convert(root)


def tag_open(element: MarkupElement) -> str:
    attributes = "".join(
        f' {name}="{xmlText_encode(value)}"' for name, value in element.attributes.items()
    )
    return f"<{element.tag}{attributes}>"


def text_highlight(text: str, pattern: Optional[Pattern[str]], marker_class: str) -> str:
    """Encode a text leaf, wrapping every whole-word match in a marker span"""
    if pattern is None:
        return xmlText_encode(text)

    parts = []
    pos = 0
    for match in pattern.finditer(text):
        parts.append(xmlText_encode(text[pos:match.start()]))
        parts.append(f'<span class="{marker_class}">{xmlText_encode(match.group(0))}</span>')
        pos = match.end()
    parts.append(xmlText_encode(text[pos:]))
    return ''.join(parts)


def node_render(
    node: MarkupNode, pattern: Optional[Pattern[str]], marker_class: str, enabled: bool
) -> str:
    """
    Serialize a node, highlighting its text where replacement is enabled

    The enabled flag is carried down the tree and switched off for the
    whole subtree of any string or comment element.
    """
    if isinstance(node, MarkupText):
        if enabled:
            return text_highlight(node.text, pattern, marker_class)
        return xmlText_encode(node.text)

    enabled = enabled and node.replacement_allowed()
    inner = "".join(node_render(child, pattern, marker_class, enabled) for child in node.children)
    return f"{tag_open(node)}{inner}</{node.tag}>"


def words_highlight(markup: str, spec: WordHighlightSpec) -> str:
    """
    Highlight the spec's words in markup outside string/comment regions

    Args:
        markup: Well-formed markup (output of the region stage or of a
                previous highlighting pass)
        spec: Words and the marker class to wrap them in

    Returns:
        Re-serialized markup with marker spans inserted

    Raises:
        MarkupParseError: The markup is not well-formed
    """
    tree = markup_parse(markup)
    LOG(f"Highlighting {len(spec.words)} words as '{spec.marker_class}'", level=3)
    return node_render(tree, wordPattern_build(spec.words), spec.marker_class, True)
