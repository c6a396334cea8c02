"""
XML text encoder tests
"""

import pytest

from codemarkup.lib.encoder import xmlText_encode, character_isLegal
from codemarkup.lib.errors import IllegalCharacterError


class TestEntities:
    """Test escaping of the predefined entities"""

    def test_all_five_entities(self):
        """Each predefined entity is escaped"""
        assert xmlText_encode("<>&\"'") == "&lt;&gt;&amp;&quot;&apos;"

    def test_plain_text_unchanged(self):
        """Text without special characters passes through"""
        assert xmlText_encode("var i = 5;\n\tx();") == "var i = 5;\n\tx();"


class TestIllegalCharacters:
    """Test dropping or rejecting characters outside the XML ranges"""

    def test_control_character_dropped(self):
        """Illegal characters are silently omitted by default"""
        assert xmlText_encode("a\x01b\x0bc") == "abc"

    def test_control_character_rejected(self):
        """With filtering off the first illegal character raises"""
        with pytest.raises(IllegalCharacterError) as excinfo:
            xmlText_encode("a\x01b", filter_illegal=False)
        assert excinfo.value.codepoint == 1
        assert str(excinfo.value) == "Illegal character: '1'"

    def test_astral_character_kept(self):
        """Characters beyond the BMP are legal"""
        assert xmlText_encode("x \U0001F600") == "x \U0001F600"

    def test_surrogate_pair_passes_through(self):
        """A well-formed high/low surrogate pair is copied"""
        assert xmlText_encode("\ud83d\ude00") == "\ud83d\ude00"

    def test_lone_surrogate_dropped(self):
        """An unpaired surrogate is illegal and dropped"""
        assert xmlText_encode("a\ud83db") == "ab"

    @pytest.mark.parametrize("codepoint,legal", [
        (0x9, True),
        (0xA, True),
        (0x1F, False),
        (0x7F, False),
        (0x85, True),
        (0x9F, False),
        (0xFFFE, False),
        (0x10000, True),
    ])
    def test_character_ranges(self, codepoint, legal):
        """Boundaries of the legal character ranges"""
        assert character_isLegal(codepoint) is legal
