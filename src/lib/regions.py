"""
Lexical region extraction stage

Finds string literals and comments in wrapped code and marks them so the
later highlighting stages leave their contents alone:

    i = 1; //done            ->  i = 1; <span class="rem">//done</span>
    s = "text";              ->  s = <span class="str">&quot;text&quot;</span>;

A block comment spanning several lines is placed in a block-level remark
container, on lines of its own, so each line still holds one logical unit
for the scope/line stage:

    var i = 6; /* one        ->  var i = 6;
    two */                       <div class="rem">
                                 /* one
                                 two */
                                 </div>
"""

import re
from typing import Optional

from ..models.lexicon import RegionPatterns
from ..models.markup import REMARK, STRING
from .errors import RegionMatchError
from .log import LOG


class RegionExtractor:
    """
    Single-pass region marker driven by one composite pattern

    Precedence at any position is the pattern's alternation order: comments
    before strings, and single-line block comments before the multi-line
    form, so a same-line /* */ stays an inline span.
    """

    def __init__(self, patterns: Optional[RegionPatterns] = None) -> None:
        """
        Args:
            patterns: Sub-patterns to combine (defaults to RegionPatterns())
        """
        self.patterns = patterns or RegionPatterns()
        self.pattern = re.compile(self.patterns.composite_build(), re.MULTILINE)

    def __call__(self, markup: str) -> str:
        return self.regions_extract(markup)

    def regions_extract(self, markup: str) -> str:
        """
        Wrap every comment and string literal of the markup

        Args:
            markup: XML-encoded code (output of the wrapper stage)

        Returns:
            Markup with rem/str spans and rem blocks inserted

        Raises:
            RegionMatchError: A match populated none of the known groups
        """
        return self.pattern.sub(self.match_replace, markup)

    def match_replace(self, match: re.Match) -> str:
        remark = match.group("remark")
        if remark is not None:
            return f'<span class="{REMARK}">{remark}</span>'

        string = match.group("string")
        if string is not None:
            return f'<span class="{STRING}">{string}</span>'

        if match.group("blockComment") is not None:
            return self.blockComment_split(match)

        raise RegionMatchError(match.group(0))

    def blockComment_split(self, match: re.Match) -> str:
        """
        Put a multi-line block comment into a remark block on its own lines

        Code in front of the comment on its first line is emitted on its own
        line first; code after the closing delimiter goes on a new line after
        the block, at the comment's indentation. Both are region-extracted in
        turn. Blank lines captured by the leading whitespace are kept.
        """
        leading_space = match.group("leadingSpace")
        leading_text = match.group("leadingText")
        comment = match.group("blockComment")
        trailing_text = match.group("trailingText")
        trailing_space = match.group("trailingSpace")

        cut = leading_space.rfind("\n") + 1
        head, indentation = leading_space[:cut], leading_space[cut:]
        padding = " " * len(indentation)

        prefix = head
        if leading_text:
            prefix = f"{head}{indentation}{self.regions_extract(leading_text)}\n"

        suffix = ""
        if trailing_text:
            LOG(f"Moving code after block comment to its own line: {trailing_text.strip()}", level=2)
            suffix = f"\n{padding}{self.regions_extract(trailing_text.lstrip())}"
        suffix += trailing_space

        return (
            f'{prefix}{padding}<div class="{REMARK}">\n'
            f'{padding}{comment}\n'
            f'{padding}</div>{suffix}'
        )


def regions_extract(markup: str) -> str:
    """Mark regions with the default patterns"""
    return RegionExtractor()(markup)
