"""
Wrapper stage tests

Tests blank-line trimming, de-indentation and XML encoding of raw samples.
"""

from codemarkup.lib.wrapper import code_wrap, lines_dedent, blankLines_trim


class TestCodeWrap:
    """Test wrapping a raw sample in the code container"""

    def test_single_line(self):
        """A single statement is wrapped as-is"""
        assert code_wrap("var i = 5;") == '<div class="csharpcode">\nvar i = 5;\n</div>'

    def test_surrounding_blank_lines_trimmed(self):
        """Leading/trailing blank lines are dropped, common indent removed"""
        code = "\n\n    if (a)\n        b();\n\n  \n"
        assert code_wrap(code) == '<div class="csharpcode">\nif (a)\n    b();\n</div>'

    def test_inner_blank_lines_kept(self):
        """Blank lines between code lines stay, whitespace-only become empty"""
        assert code_wrap("a\n   \nb") == '<div class="csharpcode">\na\n\nb\n</div>'

    def test_crlf_normalized(self):
        """CRLF line endings come out as LF"""
        assert code_wrap("a\r\nb") == '<div class="csharpcode">\na\nb\n</div>'

    def test_special_characters_encoded(self):
        """XML special characters are escaped"""
        assert code_wrap('a < "b" & c') == '<div class="csharpcode">\na &lt; &quot;b&quot; &amp; c\n</div>'

    def test_blank_only_sample(self):
        """A sample with nothing but blank lines gives an empty block"""
        assert code_wrap("   \n\n") == '<div class="csharpcode">\n\n</div>'


class TestLineHelpers:
    """Test the line helpers used by the wrapper"""

    def test_dedent_by_shortest_indent(self):
        """Exactly the shortest indent is removed from every line"""
        assert lines_dedent(["    a", "      b", "", "    c"]) == ["a", "  b", "", "c"]

    def test_dedent_all_blank(self):
        """All-blank input becomes empty lines"""
        assert lines_dedent(["  ", ""]) == ["", ""]

    def test_trim_keeps_middle(self):
        """Only outer blank lines are trimmed"""
        assert blankLines_trim(["", "a", " ", "b", "\t"]) == ["a", " ", "b"]
