"""
Markup vocabulary and tree models

Defines the class names the pipeline emits (downstream stylesheets depend
on them verbatim) and the explicit tree the word highlighter walks.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Union


# Marker classes of the produced markup
CONTAINER = "csharpcode"   # outer wrapper of one code sample
SCOPE = "scope"            # one nested indentation level
LINE = "line"              # one logical line
STRING = "str"             # string literal
REMARK = "rem"             # comment
KEYWORD = "kwrd"           # language keyword
KNOWN_TYPE = "type"        # known library/type name

# Regions whose contents are never re-highlighted
PROTECTED_CLASSES = frozenset({STRING, REMARK})


@dataclass
class MarkupText:
    """
    Text leaf of a markup tree

    Attributes:
        text: Decoded character data (entities already resolved)
    """
    text: str


@dataclass
class MarkupElement:
    """
    Element node of a markup tree

    Attributes:
        tag: Element name (e.g., "div", "span")
        attributes: Attribute values in document order
        children: Ordered child nodes (elements and text leaves)

    Example:
        For '<span class="rem">// note</span>':
        MarkupElement(
            tag="span",
            attributes={"class": "rem"},
            children=[MarkupText("// note")]
        )
    """
    tag: str
    attributes: Dict[str, str] = field(default_factory=dict)
    children: List['MarkupNode'] = field(default_factory=list)

    def classes_get(self) -> List[str]:
        """Return the whitespace-separated values of the class attribute"""
        return self.attributes.get("class", "").split()

    def replacement_allowed(self) -> bool:
        """False for string/comment regions, whose subtree must not be highlighted"""
        return not PROTECTED_CLASSES.intersection(self.classes_get())


MarkupNode = Union[MarkupElement, MarkupText]
