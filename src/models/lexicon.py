"""
Static configuration models for the formatting stages

Word lists and region patterns are immutable values injected into the
stages at construction; nothing here is derived from the code being
formatted.
"""

from dataclasses import dataclass
from typing import Iterable, Tuple

from .markup import KEYWORD, KNOWN_TYPE


DEFAULT_KEYWORDS: Tuple[str, ...] = (
    # var is contextual but reads as a keyword in samples
    "var",
    "abstract", "event", "new", "struct",
    "as", "explicit", "null", "switch",
    "base", "extern", "object", "this",
    "bool", "false", "operator", "throw",
    "break", "finally", "out", "true",
    "byte", "fixed", "override", "try",
    "case", "float", "params", "typeof",
    "catch", "for", "private", "uint",
    "char", "foreach", "protected", "ulong",
    "checked", "goto", "public", "unchecked",
    "class", "if", "readonly", "unsafe",
    "const", "implicit", "ref", "ushort",
    "continue", "in", "return", "using",
    "decimal", "int", "sbyte", "virtual",
    "default", "interface", "sealed", "volatile",
    "delegate", "internal", "short", "void",
    "do", "is", "sizeof", "while",
    "double", "lock", "stackalloc",
    "else", "long", "static",
    "enum", "namespace", "string",
    # query comprehension
    "from", "select",
)

DEFAULT_KNOWN_TYPES: Tuple[str, ...] = (
    "Console", "Application", "AppDomain",
    "Exception", "IOException", "TimeoutException",
    "IDisposable", "Disposable", "BooleanDisposable", "CompositeDisposable",
    "ContextDisposable", "MultipleAssignmentDisposable", "SerialDisposable",
    "SingleAssignmentDisposable",
    "Func", "Action", "Unit",
    "IEquatable", "IEqualityComparer",
    "IEnumerable", "Enumerable", "EnumerableEx", "IDictionary", "ILookup",
    "Thread", "Timer", "TimeSpan",
    "IObserver", "IObservable", "Observable", "ISubject", "Subject",
    "ReplaySubject", "AsyncSubject", "BehaviorSubject",
    "IScheduler", "Scheduler", "TestScheduler", "ScheduledItem",
    "Notification", "NotificationKind",
    "Mock", "Assert", "TestInitialize", "TestMethod",
    "EventArgs", "PropertyChangedEventHandler", "PropertyChangedEventArgs",
    "FirstChanceExceptionEventArgs",
    "IAsyncResult", "AsyncCallback",
    "Task", "CancellationToken",
    "IEventPatternSource", "IEventSource", "EventPattern", "EventHandler",
)


def words_normalize(words: Iterable[str]) -> Tuple[str, ...]:
    """Drop empty entries and duplicates, keeping first-seen order"""
    seen = {}
    for word in words:
        word = str(word).strip()
        if word and word not in seen:
            seen[word] = None
    return tuple(seen)


@dataclass(frozen=True)
class WordHighlightSpec:
    """
    Configuration of one word-highlighting pass

    Attributes:
        words: Whole words to wrap
        marker_class: Class of the span each occurrence is wrapped in

    Example:
        WordHighlightSpec(words=("var", "new"), marker_class="kwrd")
        turns "var x = new Y();" into
        '<span class="kwrd">var</span> x = <span class="kwrd">new</span> Y();'
    """
    words: Tuple[str, ...]
    marker_class: str


@dataclass(frozen=True)
class Lexicon:
    """
    Keyword and known-type word lists

    Attributes:
        keywords: Language keywords, highlighted with the kwrd marker
        known_types: Library/type names, highlighted with the type marker
    """
    keywords: Tuple[str, ...] = DEFAULT_KEYWORDS
    known_types: Tuple[str, ...] = DEFAULT_KNOWN_TYPES

    def keywordSpec_get(self) -> WordHighlightSpec:
        return WordHighlightSpec(words=self.keywords, marker_class=KEYWORD)

    def knownTypeSpec_get(self) -> WordHighlightSpec:
        return WordHighlightSpec(words=self.known_types, marker_class=KNOWN_TYPE)


@dataclass(frozen=True)
class RegionPatterns:
    """
    Sub-patterns of the lexical region scan

    Patterns run against already XML-encoded text, so quotes appear as
    &quot;. The composite tries, at each position: single-line block
    comment, line comment, verbatim string, line string, and finally a
    multi-line block comment anchored at the start of its line (with the
    code before and after it on the same lines captured separately).

    Attributes:
        single_line_block_comment: /* ... */ closed on the same line
        multi_line_block_comment: /* ... */ whose first line break comes
            before its closing delimiter
        line_comment: // up to the end of the line
        block_string: @"..." verbatim string, may span lines
        line_string: "..." string with backslash escapes, single line
    """
    single_line_block_comment: str = r"/\*.*?\*/"
    multi_line_block_comment: str = r"/\*(?:(?!\*/)[^\n])*\n[\s\S]*?\*/"
    line_comment: str = r"//.*?(?=\r|$)"
    block_string: str = r"@&quot;[\s\S]*?&quot;"
    # a backslash always takes the next character (or &quot;) with it, so
    # each character has exactly one way to match
    line_string: str = r"&quot;(?:\\(?:&quot;|&(?!quot;)|[^&\n])|[^\\\n])*?&quot;"
    # code in front of a multi-line comment; never runs into a line comment
    leading_text: str = r"(?:(?!//)[^\n])*?"

    def composite_build(self) -> str:
        """
        Assemble the composite pattern with its named groups

        Returns:
            Pattern with groups remark, string and leadingSpace /
            leadingText / blockComment / trailingText / trailingSpace
            (to be compiled with re.MULTILINE)
        """
        remark = f"(?P<remark>{self.single_line_block_comment}|{self.line_comment})"
        string = f"(?P<string>{self.block_string}|{self.line_string})"
        block = (
            r"(?P<leadingSpace>^\s*)"
            f"(?P<leadingText>{self.leading_text})"
            f"(?P<blockComment>{self.multi_line_block_comment})"
            r"(?P<trailingText>.*?)(?P<trailingSpace>\s*$)"
        )
        return f"{remark}|{string}|{block}"
