"""
Document loading and writing around the formatting pipeline

A content page carries its code samples as elements with the csharpcode
class (typically <pre class="csharpcode">). This module pulls each sample's
entity-decoded text out of the page, runs it through the pipeline, splices
the formatted fragment back in place of the original element and writes
the page out with the characters e-book readers trip over encoded as
numeric character references.
"""

from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Union

from bs4 import BeautifulSoup, Tag

from ..config import appsettings
from ..models.markup import CONTAINER
from .errors import CodeSampleError
from .formatter import Stage, code_format
from .log import LOG


# Written as &#N; in output documents
EBOOK_CHARACTERS: Tuple[int, ...] = (
    8204,   # zero-width non-joiner (&zwnj;)
    8217,   # right single quotation mark
    8220,   # left double quotation mark
    8221,   # right double quotation mark
    233,    # lowercase e-acute
    160,    # non-breaking space (&nbsp;)
)


def unicodeCharacters_encode(html: str) -> str:
    """Replace each of EBOOK_CHARACTERS with its numeric character reference"""
    for codepoint in EBOOK_CHARACTERS:
        html = html.replace(chr(codepoint), f"&#{codepoint};")
    return html


class CodeDocument:
    """
    An HTML page whose code samples are to be formatted

    Attributes:
        soup: Parsed page
        source: Where the page was read from (used in error reports)
    """

    def __init__(self, html: str, source: Optional[str] = None) -> None:
        self.source = source
        self.soup = BeautifulSoup(html, "html.parser")

    @classmethod
    def document_load(cls, path: Union[str, Path]) -> "CodeDocument":
        """Read and parse a page from disk"""
        path = Path(path)
        LOG(f"Loading {path}", level=2)
        return cls(path.read_text(encoding="utf-8"), source=str(path))

    def codeElements_find(self) -> List[Tag]:
        """Outermost elements carrying the code container class, in document order"""
        return [
            element for element in self.soup.find_all(class_=CONTAINER)
            if element.find_parent(class_=CONTAINER) is None
        ]

    def codeSamples_get(self) -> List[str]:
        """Entity-decoded text of every code sample"""
        return [element.get_text() for element in self.codeElements_find()]

    def codeSamples_format(self, stages: Tuple[Stage, ...]) -> int:
        """
        Format every code sample in place

        All samples are formatted before any element is replaced, so a
        failing sample leaves the document untouched.

        Args:
            stages: Pipeline stages to run each sample through

        Returns:
            Number of samples formatted

        Raises:
            CodeSampleError: A sample failed to format (names this document)
        """
        replacements = []
        for element in self.codeElements_find():
            code = element.get_text()
            try:
                formatted = code_format(code, stages)
            except CodeSampleError as error:
                raise CodeSampleError(code, error.cause, source=self.source) from error

            fragment = BeautifulSoup(formatted, "html.parser").find()
            replacements.append((element, fragment))

        for element, fragment in replacements:
            element.replace_with(fragment)

        LOG(f"Formatted {len(replacements)} code samples in {self.source or 'document'}", level=2)
        return len(replacements)

    def html_render(self) -> str:
        """Serialize the page for output"""
        return unicodeCharacters_encode(str(self.soup))

    def document_write(self, path: Union[str, Path]) -> Path:
        path = Path(path)
        path.write_text(self.html_render(), encoding="utf-8")
        LOG(f"Wrote {path}", level=2)
        return path


def contentFiles_list(inputdir: Path, pattern: Optional[str] = None) -> List[Path]:
    """Content files directly inside inputdir matching the glob, sorted by name"""
    pattern = pattern or appsettings.content_pattern
    return sorted(path for path in Path(inputdir).glob(pattern) if path.is_file())


def contentFiles_format(
    inputdir: Path,
    outputdir: Path,
    stages: Tuple[Stage, ...],
    pattern: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Format the code samples of every content file of a directory

    Each file is written to outputdir under its own name (outputdir may be
    inputdir itself for in-place formatting).

    Args:
        inputdir: Directory holding the content files
        outputdir: Directory receiving the formatted files
        stages: Pipeline stages
        pattern: Glob of content files (settings default when None)

    Returns:
        dict with status, output_files and sample_count

    Raises:
        CodeSampleError: A sample failed; processing stops at that file
    """
    outputdir = Path(outputdir)
    outputdir.mkdir(parents=True, exist_ok=True)

    output_files = []
    sample_count = 0
    for content_file in contentFiles_list(inputdir, pattern):
        document = CodeDocument.document_load(content_file)
        sample_count += document.codeSamples_format(stages)
        output_files.append(str(document.document_write(outputdir / content_file.name)))

    return {
        'status': True,
        'output_files': output_files,
        'sample_count': sample_count,
    }
