#!/usr/bin/env python3
"""
mdstrip - Markdown to plain text

Renders a Markdown file to clean plain text suitable for previews,
notifications, or search indexing. Formatting syntax is removed while
paragraph breaks and list bullets are kept.

As an aside, this codebase leverages the ChRIS "plugin" concept/pattern as
general purpose python app development framework.

Usage:
    mdstrip inputdir/ outputdir/ --inputFile notes.md

    The plain text is written to outputdir/ as notes.txt (or the name
    given with --outputFile).

Examples:
    # Basic conversion
    mdstrip . output/ --inputFile README.md

    # Custom output name and ASCII bullets
    mdstrip . output/ --inputFile README.md --outputFile preview.txt --bullet "-"

    # Trace every parse event
    mdstrip . output/ --inputFile README.md -vvv
"""

import sys
from pathlib import Path
from argparse import ArgumentParser, Namespace, ArgumentDefaultsHelpFormatter

from chris_plugin import chris_plugin
from .config import appsettings
from .lib import Renderer, events_fromMarkdown, __version__, LOG, state_connectToLogger
from .models import ProgramState, pipeline


DISPLAY_TITLE = r"""
               _     _        _
  _ __ ___  __| |___| |_ _ __(_)_ __
 | '_ ` _ \/ _` / __| __| '__| | '_ \
 | | | | | | (_| \__ \ |_| |  | | |_) |
 |_| |_| |_|\__,_|___/\__|_|  |_| .__/
                                |_|
  Markdown to plain text
"""

parser = ArgumentParser(
    description="mdstrip - render Markdown to plain text",
    formatter_class=ArgumentDefaultsHelpFormatter,
)

parser.add_argument(
    "--inputFile", required=True, type=str, help="Input Markdown file (relative to inputdir)"
)

parser.add_argument(
    "--outputFile",
    default=None,
    type=str,
    help="Output filename within outputdir. Defaults to the input stem plus the configured suffix",
)

parser.add_argument(
    "--bullet",
    default=None,
    type=str,
    help="Bullet marker for list items. Defaults to MDSTRIP_BULLET_MARKER",
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
    Validate environment and resolve file paths.

    Verifies that the input file exists and creates the output directory.

    Args:
        inputstate: Initial program state with CLI options

    Returns:
        ProgramState with added fields:
            - inputSourceFile: Resolved path to the Markdown file
            - textOutputFile: Path the plain text will be written to
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

    state.outputdir.mkdir(parents=True, exist_ok=True)
    output_name = state.outputFile or appsettings.outputName_make(input_file.stem)
    state.textOutputFile = state.outputdir / output_name
    LOG(f"Output file: {state.textOutputFile}", level=2)

    state.envOK = True
    return state


def source_read(inputstate: ProgramState) -> ProgramState:
    """
    Read the Markdown source file.

    Args:
        inputstate: Program state with inputSourceFile path set

    Returns:
        ProgramState with added field:
            - markdownSource: Raw Markdown text

    Exits:
        1 if the file cannot be read or decoded
    """
    state = inputstate.copy()

    LOG("Reading source file...", level=1)
    try:
        state.markdownSource = state.inputSourceFile.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error reading input file: {e}", file=sys.stderr)
        sys.exit(1)

    LOG(f"Read {len(state.markdownSource)} characters from {state.inputSourceFile.name}", level=2)
    return state


def text_render(inputstate: ProgramState) -> ProgramState:
    """
    Render the Markdown source to plain text.

    Args:
        inputstate: Program state with markdownSource

    Returns:
        ProgramState with added field:
            - plainText: Rendered, trimmed plain text
    """
    state = inputstate.copy()

    LOG("Rendering Markdown to plain text...", level=1)
    renderer = Renderer(bullet=state.bullet)
    state.plainText = renderer.render(events_fromMarkdown(state.markdownSource or ""))
    LOG(f"Rendered {len(state.plainText)} characters", level=2)
    return state


def results_report(inputstate: ProgramState) -> ProgramState:
    """
    Write the plain text and report the result.

    Args:
        inputstate: Program state with plainText and textOutputFile

    Returns:
        ProgramState with added field:
            - renderResult: Dict with output_file and characters

    Exits:
        1 if nothing was rendered or the output cannot be written
    """
    state = inputstate.copy()
    if state.plainText is None:
        print("Error: Rendering failed", file=sys.stderr)
        sys.exit(1)

    try:
        state.textOutputFile.write_text(state.plainText + "\n", encoding="utf-8")
    except OSError as e:
        print(f"Error writing output file: {e}", file=sys.stderr)
        sys.exit(1)

    state.renderResult = {
        "output_file": str(state.textOutputFile),
        "characters": len(state.plainText),
    }

    LOG("\n✓ Conversion successful!", level=1)
    LOG(f"  Output: {state.renderResult['output_file']}", level=1)
    LOG(f"  Characters: {state.renderResult['characters']}", level=1)
    return state


@chris_plugin(
    parser=parser,
    title="mdstrip - Markdown to plain text",
    category="Utility",
    min_memory_limit="100Mi",
    min_cpu_limit="500m",
)
def main(options: Namespace, inputdir: Path, outputdir: Path):
    """
    Main entry point - render a Markdown file to plain text.

    Orchestrates the pipeline:
        1. env_check: Validate paths and environment
        2. source_read: Read the Markdown file
        3. text_render: Render events to plain text
        4. results_report: Write the output and report

    Note:
        This function is wrapped by @chris_plugin which handles CLI
        argument parsing and invokes this function with parsed values.
    """
    state: ProgramState = ProgramState.state_createFromNamespace(
        options=options, inputdir=inputdir, outputdir=outputdir
    )

    state_connectToLogger(state)

    pipeline(state, env_check, source_read, text_render, results_report)


if __name__ == "__main__":
    main()  # type: ignore  # @chris_plugin decorator transforms signature
