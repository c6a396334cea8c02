"""
codemarkup - Code sample formatter for e-book and web documentation

Turns plain-text code samples embedded in HTML pages into highlighted,
scope-structured markup.
"""

__version__ = "1.0.0"

from .formatter import code_format, pipeline_get, stages_build, KINDLE_STAGES, WEB_STAGES
from .document import CodeDocument, contentFiles_format
from .lexicon import lexicon_load
from .stylesheet import stylesheet_generate
from .log import LOG, state_connectToLogger

__all__ = [
    "code_format",
    "pipeline_get",
    "stages_build",
    "KINDLE_STAGES",
    "WEB_STAGES",
    "CodeDocument",
    "contentFiles_format",
    "lexicon_load",
    "stylesheet_generate",
    "LOG",
    "state_connectToLogger",
    "__version__",
]
