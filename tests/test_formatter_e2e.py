"""
End-to-end formatting tests

Tests the full pipeline: raw sample -> wrap -> regions -> keywords ->
known types -> scope/line -> (break hints)
"""

import xml.etree.ElementTree as ET
from functools import partial

import pytest

from codemarkup.lib import code_format, pipeline_get, KINDLE_STAGES, WEB_STAGES
from codemarkup.lib.errors import CodeSampleError, IllegalCharacterError
from codemarkup.lib.wrapper import code_wrap
from codemarkup.models import Lexicon


IF_BLOCK = 'if(1<2)\n{\n    var i = Observable.Return<string>("Some text");\n}'


class TestKindlePipeline:
    """Test the e-book variant"""

    def test_single_statement(self):
        """One statement gives one line, keyword wrapped"""
        assert code_format("var i = 5;", KINDLE_STAGES) == (
            '<div class="csharpcode">\n'
            '<div class="line"><span class="kwrd">var</span> i = 5;</div>\n'
            '</div>'
        )

    def test_if_block(self):
        """Indented block gets a scope, hints after ( and before ."""
        assert code_format(IF_BLOCK, KINDLE_STAGES) == (
            '<div class="csharpcode">\n'
            '<div class="line"><span class="kwrd">if</span>(&zwnj;1&lt;2)</div>\n'
            '<div class="line">{</div>\n'
            '<div class="scope">\n'
            '    <div class="line"><span class="kwrd">var</span> i = '
            '<span class="type">Observable</span>&zwnj;.Return&lt;<span class="kwrd">string</span>&gt;'
            '(&zwnj;<span class="str">&quot;Some text&quot;</span>);</div>\n'
            '</div>\n'
            '<div class="line">}</div>\n'
            '</div>'
        )

    def test_block_comment_sample(self):
        """A multi-line comment becomes a remark block and stays well-formed"""
        code = "var i = 6; /* one\n   two var */\nvar j = 7;"
        result = code_format(code, KINDLE_STAGES)

        assert '<div class="rem">' in result
        assert '<div class="line"><span class="kwrd">var</span> j = 7;</div>' in result
        assert 'two var */' in result
        ET.fromstring(result.replace("&zwnj;", "&#8204;"))


class TestWebPipeline:
    """Test the web variant"""

    def test_line_comment_suffix(self):
        """Only the comment suffix is wrapped as a remark"""
        assert code_format("i = 1; // done", WEB_STAGES) == (
            '<div class="csharpcode">\n'
            '<div class="line">i = 1; <span class="rem">// done</span></div>\n'
            '</div>'
        )

    def test_indented_if_block(self):
        """One scope wraps exactly the indented line"""
        assert code_format("if(1<2)\n{\n    var i = 1;\n}", WEB_STAGES) == (
            '<div class="csharpcode">\n'
            '<div class="line"><span class="kwrd">if</span>(1&lt;2)</div>\n'
            '<div class="line">{</div>\n'
            '<div class="scope">\n'
            '    <div class="line"><span class="kwrd">var</span> i = 1;</div>\n'
            '</div>\n'
            '<div class="line">}</div>\n'
            '</div>'
        )

    def test_web_is_kindle_without_hints(self):
        """Web output equals e-book output without markers"""
        assert code_format(IF_BLOCK, WEB_STAGES) == code_format(IF_BLOCK, KINDLE_STAGES).replace("&zwnj;", "")

    def test_result_well_formed(self):
        """A class with nested members parses as XML"""
        code = (
            "public class Foo\n"
            "{\n"
            "    // counter\n"
            "    private int _count;\n"
            "\n"
            "    public void Tick()\n"
            "    {\n"
            "        _count++;\n"
            "        Console.WriteLine(\"count\");\n"
            "    }\n"
            "}"
        )
        result = code_format(code, WEB_STAGES)
        root = ET.fromstring(result)
        assert root.get("class") == "csharpcode"
        assert result.count('<div class="scope">') == 2


class TestPipelineConstruction:
    """Test variant lookup and custom stages"""

    def test_stage_counts(self):
        """E-book variant has the extra hint stage"""
        assert len(pipeline_get("kindle")) == 6
        assert len(pipeline_get("web")) == 5

    def test_unknown_variant(self):
        """An unknown variant name is rejected"""
        with pytest.raises(ValueError):
            pipeline_get("print")

    def test_custom_lexicon(self):
        """Stages use the supplied word lists"""
        stages = pipeline_get("web", Lexicon(keywords=("foo",), known_types=()))
        assert code_format("foo var", stages) == (
            '<div class="csharpcode">\n'
            '<div class="line"><span class="kwrd">foo</span> var</div>\n'
            '</div>'
        )

    def test_failure_carries_sample(self):
        """A stage failure is reported with the original sample text"""
        stages = (partial(code_wrap, filter_illegal=False),)
        with pytest.raises(CodeSampleError) as excinfo:
            code_format("a\x01", stages)
        assert excinfo.value.sample == "a\x01"
        assert isinstance(excinfo.value.cause, IllegalCharacterError)
