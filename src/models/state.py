"""
Program state model and pipeline helper

Defines ProgramState dataclass for the functional pipeline pattern and
the pipeline() helper for composing transformation stages. The same helper
composes the text stages of the code formatter, where the state is simply
the markup string.
"""

from pathlib import Path
from argparse import Namespace
from typing import Any, Optional, Type, TypeVar, List, Dict, Callable
from dataclasses import dataclass, field

from .lexicon import Lexicon


PS = TypeVar("PS", bound="ProgramState")
T = TypeVar("T")


@dataclass
class ProgramState:
    """
    Central state container for the command-line pipeline (state bus pattern).

    This dataclass carries all program state through the functional pipeline,
    with each stage adding new fields as the run progresses.

    Pipeline stages and their state additions:
        - Initial: inputdir, outputdir, verbosity, variant, lexiconFile,
          pattern, stylesheet
        - env_check: contentFiles, envOK
        - lexicon_resolve: lexicon, stages
        - content_format: formatResult
        - stylesheet_write: stylesheetFile
        - results_report: (no additions, terminal stage)

    Attributes:
        inputdir: Directory containing the HTML content files
        outputdir: Directory the formatted files are written to
        verbosity: Logging verbosity level (1-3)
        variant: Pipeline variant, "kindle" (with break hints) or "web"
        lexiconFile: Optional YAML lexicon overriding the built-in word lists
        pattern: Glob selecting the content files within inputdir
        stylesheet: Whether to also write the marker stylesheet
        envOK: Environment validation passed
        contentFiles: Resolved content files to format
        lexicon: Word lists used by the highlighting stages
        stages: Ordered text stages of the selected variant
        formatResult: Formatting results (files, samples, status)
        stylesheetFile: Path of the written stylesheet, if any
    """

    # CLI arguments
    inputdir: Optional[Path] = field(default=None)
    outputdir: Optional[Path] = field(default=None)
    verbosity: int = field(default=1)
    variant: str = field(default="kindle")
    lexiconFile: Optional[str] = field(default=None)
    pattern: Optional[str] = field(default=None)
    stylesheet: bool = field(default=False)

    # Pipeline state
    envOK: bool = field(default=False)
    contentFiles: List[Path] = field(default_factory=list)
    lexicon: Optional[Lexicon] = field(default=None)
    stages: Optional[tuple] = field(default=None)
    formatResult: Optional[Dict[str, Any]] = field(default=None)
    stylesheetFile: Optional[Path] = field(default=None)

    @classmethod
    def state_createFromNamespace(
        cls: Type["ProgramState"], options: Namespace, inputdir: Path, outputdir: Path
    ) -> "ProgramState":
        """
        Create ProgramState from argparse Namespace and directory paths.

        Args:
            options: Parsed CLI arguments (variant, lexiconFile, etc.)
            inputdir: Directory containing content files
            outputdir: Directory for formatted output

        Returns:
            ProgramState instance with all CLI options as attributes
        """
        options_dict = vars(options)

        import dataclasses
        valid_fields = {f.name for f in dataclasses.fields(cls)}

        # Only CLI options that are also state fields
        filtered_options = {k: v for k, v in options_dict.items() if k in valid_fields}

        merged_args = {**filtered_options, "inputdir": inputdir, "outputdir": outputdir}

        return cls(**merged_args)

    def copy(self: PS) -> PS:
        """
        Creates a shallow copy of the ProgramState instance.

        Returns:
            A new ProgramState instance.
        """
        return type(self)(**self.__dict__)


def pipeline(initial_state: T, *stages: Callable[[T], T]) -> T:
    """
    Execute a functional pipeline of state transformations.

    Each stage is a function (state) -> state that receives the output of
    the previous stage and returns a new state.

    Args:
        initial_state: Starting state (a ProgramState, or a markup string)
        *stages: Variable number of stage functions to execute in order

    Returns:
        Final state after all transformations

    Example:
        final_state = pipeline(
            initial_state,
            env_check,
            lexicon_resolve,
            content_format,
            results_report
        )

    This is equivalent to:
        results_report(content_format(lexicon_resolve(env_check(initial_state))))

    But reads left-to-right instead of inside-out.
    """
    from functools import reduce
    return reduce(lambda state, stage: stage(state), stages, initial_state)
