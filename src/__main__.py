#!/usr/bin/env python3
"""
codemarkup - Code sample formatter for e-book and web documentation

Formats the code samples of a directory of HTML content pages: every
element with the csharpcode class is replaced by highlighted markup with
line and scope containers.

As an aside, this codebase leverages the ChRIS "plugin" concept/pattern as
general purpose python app development framework.

Variants:
    kindle: adds zero-width line-break hints after '(' and before '.'
    web:    same markup without the hints

Usage:
    codemarkup inputdir/ outputdir/ --variant kindle

Examples:
    # E-book content
    codemarkup content/ build/kindle/

    # Web content with a custom lexicon and a stylesheet
    codemarkup content/ build/web/ --variant web --lexiconFile rx.yaml --stylesheet

    # Verbose output
    codemarkup content/ build/ -vv
"""

import sys
from pathlib import Path
from argparse import ArgumentParser, Namespace, ArgumentDefaultsHelpFormatter

from chris_plugin import chris_plugin
from .config import appsettings
from .lib import pipeline_get, contentFiles_format, lexicon_load, stylesheet_generate
from .lib import __version__, LOG, state_connectToLogger
from .lib.document import contentFiles_list
from .lib.errors import CodeSampleError, LexiconError
from .lib.formatter import VARIANTS, KINDLE
from .models import ProgramState, Lexicon, pipeline


DISPLAY_TITLE = r"""
                 _                             _
   ___ ___   __| | ___ _ __ ___   __ _ _ __| | ___   _ _ __
  / __/ _ \ / _` |/ _ \ '_ ` _ \ / _` | '__| |/ / | | | '_ \
 | (_| (_) | (_| |  __/ | | | | | (_| | |  |   <| |_| | |_) |
  \___\___/ \__,_|\___|_| |_| |_|\__,_|_|  |_|\_\\__,_| .__/
                                                      |_|
  Code sample formatter
"""

# Define CLI arguments
parser = ArgumentParser(
    description="codemarkup - highlight and structure the code samples of HTML content pages",
    formatter_class=ArgumentDefaultsHelpFormatter,
)

parser.add_argument(
    "--variant",
    default=KINDLE,
    choices=VARIANTS,
    help="Pipeline variant: kindle adds line-break hints, web omits them",
)

parser.add_argument(
    "--lexiconFile",
    default=None,
    type=str,
    help="YAML file with keywords/known_types lists (defaults to built-in C# lists)",
)

parser.add_argument(
    "--pattern",
    default=None,
    type=str,
    help="Glob of content files within inputdir (defaults to CODEMARKUP_CONTENT_PATTERN or *.html)",
)

parser.add_argument(
    "--stylesheet",
    action="store_true",
    help="Also write a stylesheet for the generated markup into outputdir",
)

parser.add_argument(
    "-v",
    "--verbosity",
    action="count",
    default=1,
    help="Increase output verbosity (can be repeated: -v, -vv, -vvv)",
)

parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")


def env_check(inputstate: ProgramState) -> ProgramState:
    """
    Validate the input directory and collect the content files.

    Args:
        inputstate: Initial program state with CLI options

    Returns:
        ProgramState with added fields:
            - contentFiles: Content files to format
            - envOK: True if environment is valid

    Exits:
        1 if the input directory does not exist
    """

    state = inputstate.copy()

    if state.verbosity >= 2:
        LOG(DISPLAY_TITLE, level=2)

    LOG("Checking environment...", level=2)

    if not state.inputdir.is_dir():
        print(f"Error: Input directory not found: {state.inputdir}", file=sys.stderr)
        state.envOK = False
        sys.exit(1)

    state.contentFiles = contentFiles_list(state.inputdir, state.pattern)
    LOG(f"Found {len(state.contentFiles)} content files in {state.inputdir}", level=2)

    state.outputdir.mkdir(parents=True, exist_ok=True)
    LOG(f"Output directory: {state.outputdir}", level=2)

    state.envOK = True
    return state


def lexicon_resolve(inputstate: ProgramState) -> ProgramState:
    """
    Load the word lists and build the stages of the selected variant.

    The --lexiconFile option wins over CODEMARKUP_LEXICON_FILE; without
    either the built-in lists are used.

    Returns:
        ProgramState with added fields:
            - lexicon: Word lists for the highlighting stages
            - stages: Ordered pipeline stages

    Exits:
        1 if the lexicon file cannot be loaded
    """

    state = inputstate.copy()

    lexicon_file = state.lexiconFile or appsettings.lexicon_file
    if lexicon_file:
        try:
            state.lexicon = lexicon_load(lexicon_file)
        except LexiconError as e:
            print(f"Lexicon error: {e}", file=sys.stderr)
            sys.exit(1)
    else:
        state.lexicon = Lexicon()

    state.stages = pipeline_get(state.variant, state.lexicon)
    LOG(f"Using the {state.variant} pipeline ({len(state.stages)} stages)", level=2)
    return state


def content_format(inputstate: ProgramState) -> ProgramState:
    """
    Format the code samples of every content file.

    Returns:
        ProgramState with added field:
            - formatResult: Dict containing:
                - status: bool
                - output_files: list of written files
                - sample_count: number of code samples formatted

    Exits:
        1 if any code sample fails to format
    """

    state = inputstate.copy()

    LOG("Formatting code samples...", level=1)

    try:
        state.formatResult = contentFiles_format(
            state.inputdir, state.outputdir, state.stages, state.pattern
        )
    except CodeSampleError as e:
        print(f"Formatting error: {e}", file=sys.stderr)
        if state.verbosity >= 3:
            import traceback

            traceback.print_exc()
        sys.exit(1)

    LOG(f"Formatted {state.formatResult['sample_count']} code samples", level=2)
    return state


def stylesheet_write(inputstate: ProgramState) -> ProgramState:
    """
    Write the marker stylesheet when requested.

    Returns:
        ProgramState with added field:
            - stylesheetFile: Path of the stylesheet (None when not requested)
    """

    state = inputstate.copy()
    if not state.stylesheet:
        return state

    stylesheet_file = state.outputdir / appsettings.stylesheet_name
    stylesheet_file.write_text(stylesheet_generate(appsettings.stylesheet_style), encoding="utf-8")
    state.stylesheetFile = stylesheet_file
    LOG(f"Wrote stylesheet {stylesheet_file}", level=2)
    return state


def results_report(inputstate: ProgramState) -> ProgramState:
    """
    Display formatting results to user.

    Returns:
        ProgramState unchanged (terminal pipeline stage)

    Exits:
        1 if formatResult is None
    """
    state: ProgramState = inputstate.copy()
    if not state.formatResult:
        print("Error: Formatting failed", file=sys.stderr)
        sys.exit(1)

    if state.verbosity >= 1:
        LOG("\n✓ Formatting successful!", level=1)
        LOG(f"  Files:   {len(state.formatResult['output_files'])}", level=1)
        LOG(f"  Samples: {state.formatResult['sample_count']}", level=1)
        LOG(f"  Output:  {state.outputdir}", level=1)
        if state.stylesheetFile:
            LOG(f"  Styles:  {state.stylesheetFile}", level=1)
    return state


@chris_plugin(
    parser=parser,
    title="codemarkup - Code sample formatter",
    category="Utility",
    min_memory_limit="100Mi",
    min_cpu_limit="500m",
)
def main(options: Namespace, inputdir: Path, outputdir: Path):
    """
    Main entry point - format the code samples of a content directory.

    Orchestrates the full pipeline:
        1. env_check: Validate paths, collect content files
        2. lexicon_resolve: Load word lists, build the variant's stages
        3. content_format: Format every code sample and write the pages
        4. stylesheet_write: Optionally write the marker stylesheet
        5. results_report: Display results to user

    Args:
        options: CLI arguments from argparse
            - variant: str - "kindle" or "web"
            - lexiconFile: Optional[str] - YAML lexicon
            - pattern: Optional[str] - content file glob
            - stylesheet: bool - write the stylesheet
            - verbosity: int - Logging verbosity level (1-3)
        inputdir: Directory containing the content pages
        outputdir: Directory where formatted pages will be written

    Note:
        This function is wrapped by @chris_plugin which handles CLI
        argument parsing and invokes this function with parsed values.
    """

    state: ProgramState = ProgramState.state_createFromNamespace(
        options=options, inputdir=inputdir, outputdir=outputdir
    )

    # Connect state to logger for entire pipeline
    state_connectToLogger(state)

    pipeline(state, env_check, lexicon_resolve, content_format, stylesheet_write, results_report)


if __name__ == "__main__":
    main()  # type: ignore  # @chris_plugin decorator transforms signature
