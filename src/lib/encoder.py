"""
XML text encoding

Encodes text so that it can be embedded as character data in XML: the five
predefined entities are escaped and characters outside the XML character
ranges are dropped (or rejected).

References:
    http://www.w3.org/TR/xml11/#sec-predefined-ent
    http://www.w3.org/TR/xml11/#charsets
"""

from .errors import IllegalCharacterError


XML_ENTITIES = {
    '"': "&quot;",
    "&": "&amp;",
    "'": "&apos;",
    "<": "&lt;",
    ">": "&gt;",
}


def character_isLegal(codepoint: int) -> bool:
    """Check whether a code point may appear in XML character data"""
    if 0x0 <= codepoint <= 0x8:
        return False
    if codepoint in (0xB, 0xC, 0xFFFE, 0xFFFF):
        return False
    if 0xE <= codepoint <= 0x1F:
        return False
    if 0x7F <= codepoint <= 0x84 or 0x86 <= codepoint <= 0x9F:
        return False
    if 0xD800 <= codepoint <= 0xDFFF:
        return False
    return True


def xmlText_encode(text: str, filter_illegal: bool = True) -> str:
    """
    Encode text for safe embedding in XML

    Args:
        text: Raw text
        filter_illegal: Silently omit illegal characters when True; raise
                        IllegalCharacterError when False

    Returns:
        Encoded text

    Raises:
        IllegalCharacterError: Illegal character met with filtering disabled

    Example:
        >>> xmlText_encode('a < "b"')
        'a &lt; &quot;b&quot;'
    """
    result = []
    pos = 0
    length = len(text)

    while pos < length:
        char = text[pos]
        codepoint = ord(char)
        pos += 1

        if char in XML_ENTITIES:
            result.append(XML_ENTITIES[char])
        elif character_isLegal(codepoint):
            result.append(char)
        elif 0xD800 <= codepoint <= 0xDBFF and pos < length and 0xDC00 <= ord(text[pos]) <= 0xDFFF:
            # well-formed surrogate pair
            result.append(char)
            result.append(text[pos])
            pos += 1
        elif not filter_illegal:
            raise IllegalCharacterError(codepoint)

    return ''.join(result)
