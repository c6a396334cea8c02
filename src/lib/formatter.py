"""
Code formatting pipeline

Composes the text stages into the two recognised variants and runs a code
sample through them:

    kindle: wrap -> regions -> keywords -> known types -> scope/line -> break hints
    web:    wrap -> regions -> keywords -> known types -> scope/line

Each stage is a callable str -> str configured once at construction, so a
built stage tuple can be shared across any number of samples.

Example:
    >>> code_format("var i = 5;", pipeline_get("web"))
    '<div class="csharpcode">\\n<div class="line"><span class="kwrd">var</span> i = 5;</div>\\n</div>'
"""

from functools import partial
from typing import Callable, Optional, Tuple

from ..config import appsettings
from ..models.lexicon import Lexicon, RegionPatterns
from ..models.state import pipeline
from .breakhints import breakHints_insert
from .errors import CodeFormatError, CodeSampleError
from .highlighter import words_highlight
from .log import LOG
from .regions import RegionExtractor
from .scope import scopes_structure
from .wrapper import code_wrap


Stage = Callable[[str], str]

KINDLE = "kindle"
WEB = "web"
VARIANTS = (KINDLE, WEB)


def stages_build(
    lexicon: Optional[Lexicon] = None,
    break_hints: bool = True,
    patterns: Optional[RegionPatterns] = None,
) -> Tuple[Stage, ...]:
    """
    Build the ordered stage tuple

    Args:
        lexicon: Keyword/known-type lists (built-in lists when None)
        break_hints: Append the line-break hint stage (e-book output)
        patterns: Region patterns (defaults when None)

    Returns:
        Stages in application order
    """
    lexicon = lexicon or Lexicon()
    stages: Tuple[Stage, ...] = (
        partial(code_wrap, filter_illegal=appsettings.filter_illegal_chars),
        RegionExtractor(patterns),
        partial(words_highlight, spec=lexicon.keywordSpec_get()),
        partial(words_highlight, spec=lexicon.knownTypeSpec_get()),
        scopes_structure,
    )
    if break_hints:
        stages += (partial(breakHints_insert, marker=appsettings.zero_width_marker),)
    return stages


def pipeline_get(variant: str, lexicon: Optional[Lexicon] = None) -> Tuple[Stage, ...]:
    """
    Stages of a named variant

    Args:
        variant: "kindle" (with break hints) or "web"
        lexicon: Word lists for the highlighting stages

    Raises:
        ValueError: Unknown variant name
    """
    if variant not in VARIANTS:
        raise ValueError(f"Unknown pipeline variant '{variant}' (expected one of {', '.join(VARIANTS)})")
    return stages_build(lexicon=lexicon, break_hints=(variant == KINDLE))


def stage_name(stage: Stage) -> str:
    function = getattr(stage, "func", stage)
    return getattr(function, "__name__", type(function).__name__)


def code_format(code: str, stages: Tuple[Stage, ...]) -> str:
    """
    Run a code sample through the stages

    Args:
        code: Raw, entity-decoded code sample
        stages: Ordered stages (see stages_build / pipeline_get)

    Returns:
        Well-formed markup fragment replacing the original code element

    Raises:
        CodeSampleError: A stage failed; carries the original sample text
    """
    LOG(f"Formatting sample through {' -> '.join(stage_name(s) for s in stages)}", level=3)
    try:
        return pipeline(code, *stages)
    except CodeFormatError as error:
        raise CodeSampleError(code, error) from error


KINDLE_STAGES = stages_build(break_hints=True)
WEB_STAGES = stages_build(break_hints=False)
