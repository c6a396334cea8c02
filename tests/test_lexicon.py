"""
Lexicon file tests
"""

import pytest

from codemarkup.lib import lexicon_load
from codemarkup.lib.errors import LexiconError
from codemarkup.models import Lexicon, DEFAULT_KEYWORDS, DEFAULT_KNOWN_TYPES


def lexicon_write(tmp_path, text):
    path = tmp_path / "lexicon.yaml"
    path.write_text(text, encoding="utf-8")
    return path


class TestLexiconLoad:
    """Test loading word lists from YAML"""

    def test_replace_keywords(self, tmp_path):
        """A listed key replaces its defaults, the other keeps them"""
        lexicon = lexicon_load(lexicon_write(tmp_path, "keywords:\n  - foo\n  - bar\n"))
        assert lexicon.keywords == ("foo", "bar")
        assert lexicon.known_types == DEFAULT_KNOWN_TYPES

    def test_extend_defaults(self, tmp_path):
        """extend appends new words to the built-in lists"""
        text = "extend: true\nkeywords: [async, await, var]\nknown_types: [Enumerable, Maybe]\n"
        lexicon = lexicon_load(lexicon_write(tmp_path, text))
        assert lexicon.keywords[:len(DEFAULT_KEYWORDS)] == DEFAULT_KEYWORDS
        assert lexicon.keywords[len(DEFAULT_KEYWORDS):] == ("async", "await")
        assert lexicon.known_types[-1] == "Maybe"

    def test_empty_file(self, tmp_path):
        """An empty file gives the default lexicon"""
        assert lexicon_load(lexicon_write(tmp_path, "")) == Lexicon()

    def test_missing_file(self, tmp_path):
        """A missing file raises LexiconError"""
        with pytest.raises(LexiconError):
            lexicon_load(tmp_path / "absent.yaml")

    @pytest.mark.parametrize("text", [
        "- var\n- new\n",
        "keywords: var\n",
        "keywords: [1, 2]\n",
        "colours: [red]\n",
        "extend: sometimes\n",
        "keywords: [unclosed\n",
    ])
    def test_invalid_file(self, tmp_path, text):
        """Badly shaped files raise LexiconError"""
        with pytest.raises(LexiconError):
            lexicon_load(lexicon_write(tmp_path, text))


class TestDefaults:
    """Test the built-in word lists"""

    def test_no_duplicates(self):
        """Built-in lists hold each word once"""
        assert len(set(DEFAULT_KEYWORDS)) == len(DEFAULT_KEYWORDS)
        assert len(set(DEFAULT_KNOWN_TYPES)) == len(DEFAULT_KNOWN_TYPES)

    def test_specs(self):
        """Lexicon builds the keyword and known-type specs"""
        lexicon = Lexicon()
        assert lexicon.keywordSpec_get().marker_class == "kwrd"
        assert lexicon.knownTypeSpec_get().marker_class == "type"
        assert "var" in lexicon.keywordSpec_get().words
        assert "Observable" in lexicon.knownTypeSpec_get().words
