"""
Word highlighter tests

Tests whole-word wrapping, protection of string/comment regions and the
re-serialization of untouched markup.
"""

import pytest

from codemarkup.lib.highlighter import words_highlight, markup_parse, wordPattern_build
from codemarkup.lib.errors import MarkupParseError
from codemarkup.models import WordHighlightSpec, MarkupElement, MarkupText


KEYWORDS = WordHighlightSpec(words=("var", "new", "int", "if", "string"), marker_class="kwrd")
TYPES = WordHighlightSpec(words=("Observable",), marker_class="type")


class TestHighlighting:
    """Test wrapping of configured words"""

    def test_keyword_outside_comment(self):
        """Keywords are wrapped except inside comments"""
        markup = '<div>var x; <span class="rem">// var</span></div>'
        assert words_highlight(markup, KEYWORDS) == (
            '<div><span class="kwrd">var</span> x; <span class="rem">// var</span></div>'
        )

    def test_whole_words_only(self):
        """Words embedded in identifiers are not matched"""
        assert words_highlight("<div>variable newer _int</div>", KEYWORDS) == "<div>variable newer _int</div>"

    def test_container_attributes_kept(self):
        """Element attributes are re-emitted unchanged"""
        markup = '<div class="csharpcode">\nint x\n</div>'
        assert words_highlight(markup, KEYWORDS) == '<div class="csharpcode">\n<span class="kwrd">int</span> x\n</div>'

    def test_entities_preserved(self):
        """Encoded text is decoded for matching and encoded again on output"""
        markup = "<div>if(a&lt;b &amp;&amp; c&gt;d)</div>"
        assert words_highlight(markup, KEYWORDS) == (
            '<div><span class="kwrd">if</span>(a&lt;b &amp;&amp; c&gt;d)</div>'
        )

    def test_nested_protected_region(self):
        """Nothing below a string region is highlighted"""
        markup = '<div><span class="str">&quot;new <b>int</b>&quot;</span></div>'
        assert words_highlight(markup, KEYWORDS) == markup

    def test_generic_argument(self):
        """Keywords between encoded angle brackets are found"""
        markup = "<div>Return&lt;string&gt;(x)</div>"
        assert words_highlight(markup, KEYWORDS) == (
            '<div>Return&lt;<span class="kwrd">string</span>&gt;(x)</div>'
        )

    def test_two_passes(self):
        """Keyword then known-type pass, as the pipeline runs them"""
        markup = words_highlight("<div>new Observable()</div>", KEYWORDS)
        assert words_highlight(markup, TYPES) == (
            '<div><span class="kwrd">new</span> <span class="type">Observable</span>()</div>'
        )

    def test_empty_word_list(self):
        """An empty word list leaves markup unchanged"""
        spec = WordHighlightSpec(words=(), marker_class="kwrd")
        assert words_highlight("<div>var x</div>", spec) == "<div>var x</div>"


class TestParsing:
    """Test conversion into the explicit markup tree"""

    def test_tree_shape(self):
        """Text and tails become ordered text leaves"""
        root = markup_parse('<div>a<span class="rem">b</span>c</div>')
        assert root == MarkupElement(
            tag="div",
            attributes={},
            children=[
                MarkupText("a"),
                MarkupElement(tag="span", attributes={"class": "rem"}, children=[MarkupText("b")]),
                MarkupText("c"),
            ],
        )

    def test_protected_element(self):
        """String elements disallow replacement"""
        root = markup_parse('<span class="str">x</span>')
        assert not root.replacement_allowed()

    def test_malformed_markup(self):
        """Unparseable markup raises MarkupParseError"""
        with pytest.raises(MarkupParseError):
            markup_parse("<div>unclosed")

    def test_pattern_for_empty_list(self):
        """No pattern is built for an empty list"""
        assert wordPattern_build(()) is None
