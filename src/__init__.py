"""
codemarkup - Code sample formatter for e-book and web documentation

Highlights keywords, known types, strings and comments of the code samples
in HTML pages and rebuilds their block structure from indentation.
"""

__version__ = "1.0.0"

from .lib import code_format, pipeline_get, CodeDocument, LOG, state_connectToLogger

__all__ = ["code_format", "pipeline_get", "CodeDocument", "LOG", "state_connectToLogger", "__version__"]
