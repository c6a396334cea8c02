"""
Models package for codemarkup

Contains data structures and type definitions for the formatting pipeline.
"""

from .state import ProgramState, pipeline
from .lexicon import (
    Lexicon,
    RegionPatterns,
    WordHighlightSpec,
    DEFAULT_KEYWORDS,
    DEFAULT_KNOWN_TYPES,
)
from .markup import MarkupElement, MarkupText, MarkupNode

__all__ = [
    "ProgramState",
    "pipeline",
    "Lexicon",
    "RegionPatterns",
    "WordHighlightSpec",
    "DEFAULT_KEYWORDS",
    "DEFAULT_KNOWN_TYPES",
    "MarkupElement",
    "MarkupText",
    "MarkupNode",
]
