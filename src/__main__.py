#!/usr/bin/env python3
"""
reloaded - Inline directive text post-processor

Reads a text file, applies the (directive) markers written in it, tidies
punctuation and quote spacing, fixes a/an articles and writes the result.

As an aside, this codebase leverages the ChRIS "plugin" concept/pattern as
general purpose python app development framework.

Directives (applied to the word(s) before the marker):
    (hex)  (bin)        Convert a hexadecimal / binary word to decimal
    (up)   (low)        Uppercase / lowercase
    (cap)               Capitalize
    (up, 3)  (cap,2)    Apply to the previous N words

Usage:
    reloaded inputdir/ outputdir/ --inputFile sample.txt --outputFile result.txt

Examples:
    # Result written as outputdir/sample.txt
    reloaded . output/ --inputFile sample.txt

    # Verbose output with per-directive trace
    reloaded . output/ --inputFile sample.txt -vvv
"""

import sys
from pathlib import Path
from argparse import ArgumentParser, Namespace, ArgumentDefaultsHelpFormatter

from chris_plugin import chris_plugin
from .config import appsettings
from .lib import Processor, __version__, LOG, state_connectToLogger
from .models import ProgramState, pipeline


DISPLAY_TITLE = r"""
           _                 _          _
  _ __ ___| | ___   __ _  __| | ___  __| |
 | '__/ _ \ |/ _ \ / _` |/ _` |/ _ \/ _` |
 | | |  __/ | (_) | (_| | (_| |  __/ (_| |
 |_|  \___|_|\___/ \__,_|\__,_|\___|\__,_|

  Inline directive text post-processor
"""

# Define CLI arguments
parser = ArgumentParser(
    description="reloaded - Apply inline (directive) markers and tidy punctuation",
    formatter_class=ArgumentDefaultsHelpFormatter,
)

parser.add_argument(
    "--inputFile", required=True, type=str, help="Input text file (relative to inputdir)"
)

parser.add_argument(
    "--outputFile",
    default=None,
    type=str,
    help="Output text file (relative to outputdir). Defaults to the inputFile name",
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
    Validate environment and resolve all file paths.

    Args:
        inputstate: Initial program state with CLI options

    Returns:
        ProgramState with added fields:
            - inputSourceFile: Resolved path to the input text file
            - outputTargetFile: Resolved path to the result file
            - envOK: True if environment is valid

    Exits:
        1 if the input file is not found
    """

    state = inputstate.copy()

    if state.verbosity >= 2:
        LOG(DISPLAY_TITLE, level=2)

    LOG("Checking environment...", level=2)

    input_file = state.inputdir / state.inputFile

    if not input_file.is_file():
        print(f"Error: Input file not found: {input_file}", file=sys.stderr)
        state.envOK = False
        sys.exit(1)

    state.inputSourceFile = input_file
    LOG(f"Input file: {input_file}", level=2)

    state.outputTargetFile = state.outputdir / (state.outputFile or state.inputFile)
    state.outputTargetFile.parent.mkdir(parents=True, exist_ok=True)
    LOG(f"Output file: {state.outputTargetFile}", level=2)

    state.envOK = True
    return state


def source_read(inputstate: ProgramState) -> ProgramState:
    """
    Read the source text into memory.

    Args:
        inputstate: Program state with inputSourceFile path set

    Returns:
        ProgramState with added field:
            - sourceText: Full contents of the input file

    Exits:
        1 if the file cannot be read or decoded
    """

    state = inputstate.copy()

    LOG("Reading source file...", level=1)

    try:
        state.sourceText = state.inputSourceFile.read_text(encoding=appsettings.encoding)
        LOG(f"Read {len(state.sourceText)} characters from {state.inputSourceFile.name}", level=2)
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error reading input file: {e}", file=sys.stderr)
        sys.exit(1)

    return state


def text_process(inputstate: ProgramState) -> ProgramState:
    """
    Run the directive, punctuation and article stages over the source text.

    Args:
        inputstate: Program state with sourceText

    Returns:
        ProgramState with added field:
            - processResult: Dict containing:
                - status: bool
                - text: str (processed text, one trailing newline)
                - directives_applied: int
                - words_transformed: int
                - articles_corrected: int

    Exits:
        1 if sourceText is None
    """

    state = inputstate.copy()

    LOG("Processing text...", level=1)

    if state.sourceText is None:
        print("Error: No source text available", file=sys.stderr)
        sys.exit(1)

    processor = Processor(verbosity=state.verbosity)
    state.processResult = processor.process(state.sourceText)
    LOG(f"Applied {state.processResult['directives_applied']} directive(s)", level=2)

    return state


def result_write(inputstate: ProgramState) -> ProgramState:
    """
    Write the processed text to the output file.

    Args:
        inputstate: Program state with processResult and outputTargetFile

    Returns:
        ProgramState unchanged

    Exits:
        1 if there is no result or the file cannot be written
    """

    state = inputstate.copy()

    if not state.processResult:
        print("Error: Processing failed", file=sys.stderr)
        sys.exit(1)

    try:
        state.outputTargetFile.write_text(state.processResult['text'], encoding=appsettings.encoding)
        LOG(f"Wrote {state.outputTargetFile}", level=2)
    except OSError as e:
        print(f"Error writing output file: {e}", file=sys.stderr)
        sys.exit(1)

    return state


def results_report(inputstate: ProgramState) -> ProgramState:
    """
    Display a summary of the run.

    Args:
        inputstate: Program state with processResult populated

    Returns:
        ProgramState unchanged (terminal pipeline stage)
    """
    state: ProgramState = inputstate.copy()
    result = state.processResult or {}

    LOG("\n✓ Processing complete!", level=1)
    LOG(f"  Output:     {state.outputTargetFile}", level=1)
    LOG(f"  Directives: {result.get('directives_applied', 0)}", level=1)
    LOG(f"  Articles:   {result.get('articles_corrected', 0)}", level=1)
    return state


@chris_plugin(
    parser=parser,
    title="reloaded - Inline directive text post-processor",
    category="Text",
    min_memory_limit="100Mi",
    min_cpu_limit="500m",
)
def main(options: Namespace, inputdir: Path, outputdir: Path):
    """
    Main entry point - process one text file from inputdir into outputdir.

    Orchestrates the full pipeline:
        1. env_check: Validate and resolve paths
        2. source_read: Read the input text
        3. text_process: Apply directives, punctuation and article fixes
        4. result_write: Write the processed text
        5. results_report: Display results to user

    Args:
        options: CLI arguments from argparse
            - inputFile: str - Input filename
            - outputFile: Optional[str] - Output filename
            - verbosity: int - Logging verbosity level (1-3)
        inputdir: Directory containing the input file
        outputdir: Directory where the result will be written

    Note:
        This function is wrapped by @chris_plugin which handles CLI
        argument parsing and invokes this function with parsed values.
    """

    state: ProgramState = ProgramState.state_createFromNamespace(
        options=options, inputdir=inputdir, outputdir=outputdir
    )

    # Connect state to logger for entire pipeline
    state_connectToLogger(state)

    pipeline(state, env_check, source_read, text_process, result_write, results_report)


if __name__ == "__main__":
    main()  # type: ignore  # @chris_plugin decorator transforms signature
