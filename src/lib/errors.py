"""
Error types raised by the formatting pipeline and its collaborators

Fatal conditions are never recovered from inside the pipeline: a stage
raises one of the CodeFormatError subclasses below and code_format()
re-raises it as a CodeSampleError carrying the sample that failed.
"""

from typing import Optional


class CodeFormatError(Exception):
    """Base class for every error raised while formatting a code sample"""
    pass


class IllegalCharacterError(CodeFormatError):
    """Raised by the text encoder for an XML-illegal character when filtering is off"""

    def __init__(self, codepoint: int):
        self.codepoint = codepoint
        super().__init__(f"Illegal character: '{codepoint:X}'")


class RegionMatchError(CodeFormatError):
    """
    Raised when the region pattern matches without populating a known group

    This is an internal invariant violation (a pattern bug), not bad input.
    """

    def __init__(self, matched: str):
        self.matched = matched
        super().__init__(f"Unknown group has been matched: {matched!r}")


class MarkupParseError(CodeFormatError):
    """Raised when intermediate markup cannot be parsed into a tree"""

    def __init__(self, fragment: str, reason: str):
        self.fragment = fragment
        self.reason = reason
        super().__init__(f"Error processing xml snippet ({reason}): {fragment}")


class CodeSampleError(CodeFormatError):
    """
    Raised when formatting a single code sample fails

    Attributes:
        sample: Original text of the code sample handed to the pipeline
        source: Document the sample was read from, when known
    """

    def __init__(self, sample: str, cause: Exception, source: Optional[str] = None):
        self.sample = sample
        self.cause = cause
        self.source = source
        location = f" in {source}" if source else ""
        super().__init__(f"Error formatting code sample{location}: {cause}\nSample:\n{sample}")


class LexiconError(Exception):
    """Raised when a lexicon file cannot be loaded or has an invalid shape"""
    pass
