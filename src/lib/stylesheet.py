"""
Stylesheet for the formatted markup

Derives colours for the marker classes from a Pygments style, so the code
samples can share a palette with anything else highlighted by Pygments,
and adds the layout rules that turn scope/line containers into indented
code.
"""

from typing import Any, Dict, List

from pygments.style import StyleMeta
from pygments.styles import get_style_by_name
from pygments.token import Comment, Keyword, Name, String
from pygments.util import ClassNotFound

from ..models.markup import CONTAINER, KEYWORD, KNOWN_TYPE, LINE, REMARK, SCOPE, STRING
from .log import LOG


# Pygments token each marker class takes its style from
MARKER_TOKENS: Dict[str, Any] = {
    KEYWORD: Keyword,
    KNOWN_TYPE: Name.Class,
    STRING: String,
    REMARK: Comment,
}

LAYOUT_RULES = f"""\
.{CONTAINER} {{
    font-family: monospace;
}}
.{CONTAINER} .{SCOPE} {{
    margin-left: 2em;
}}
.{CONTAINER} .{LINE} {{
    padding-left: 10pt;
    text-indent: -10pt;
}}
"""


def style_get(style_name: str) -> StyleMeta:
    """Pygments style by name, falling back to 'default' for unknown names"""
    try:
        return get_style_by_name(style_name)
    except ClassNotFound:
        LOG(f"Unknown Pygments style '{style_name}', using 'default'", level=1)
        return get_style_by_name("default")


def declarations_build(token_style: Dict[str, Any]) -> List[str]:
    declarations = []
    if token_style.get("color"):
        declarations.append(f"color: #{token_style['color']};")
    if token_style.get("bgcolor"):
        declarations.append(f"background-color: #{token_style['bgcolor']};")
    if token_style.get("bold"):
        declarations.append("font-weight: bold;")
    if token_style.get("italic"):
        declarations.append("font-style: italic;")
    if token_style.get("underline"):
        declarations.append("text-decoration: underline;")
    return declarations


def stylesheet_generate(style_name: str = "default") -> str:
    """
    Build the CSS for the marker vocabulary

    Args:
        style_name: Pygments style to take colours from

    Returns:
        CSS text: layout rules plus one rule per marker class
    """
    style = style_get(style_name)
    rules = [LAYOUT_RULES]

    if style.background_color:
        rules.append(f".{CONTAINER} {{\n    background-color: {style.background_color};\n}}\n")

    for marker, token in MARKER_TOKENS.items():
        declarations = declarations_build(style.style_for_token(token))
        body = "".join(f"    {declaration}\n" for declaration in declarations)
        rules.append(f".{CONTAINER} .{marker} {{\n{body}}}\n")

    return "".join(rules)
