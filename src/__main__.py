#!/usr/bin/env python3
"""
stylemark - Styled text from a tiny markdown subset

Renders a text file using quotes, bullet points and inline code into flat
text plus style annotations, written as JSON for a display surface to apply.

As an aside, this codebase leverages the ChRIS "plugin" concept/pattern as
general purpose python app development framework.

Markup:
    > quote           Paragraph set in italics, indented and enlarged
    * item / + item   Bullet point; may contain `code` and nested bullets
    `code`            Inline code in the code typeface over a background

Usage:
    stylemark inputdir/ outputdir/ --inputFile notes.txt

Examples:
    # Basic rendering
    stylemark . output/ --inputFile notes.txt

    # With a theme and a custom output name
    stylemark . output/ --inputFile notes.txt --themeFile dark.yaml --outputFile notes.json

    # Trace parsing, with the highlighted source
    stylemark . output/ --inputFile notes.txt -vv
"""

import json
import sys
from pathlib import Path
from argparse import ArgumentParser, Namespace, ArgumentDefaultsHelpFormatter

from chris_plugin import chris_plugin
from .config import appsettings
from .lib import Parser, StyleBuilder, Theme, ThemeError, __version__, LOG, state_connectToLogger
from .lib.lexer import source_highlight
from .models import ProgramState, StyleParams, pipeline


# Define CLI arguments
parser = ArgumentParser(
    description="stylemark - render quotes, bullet points and inline code as styled text",
    formatter_class=ArgumentDefaultsHelpFormatter,
)

parser.add_argument(
    "--inputFile", required=True, type=str, help="Input text file (relative to inputdir)"
)

parser.add_argument(
    "--themeFile",
    default=None,
    type=str,
    help="Theme YAML overriding colors, widths and typeface",
)

parser.add_argument(
    "--outputFile",
    default="styled.json",
    type=str,
    help="Output JSON file (relative to outputdir)",
)

parser.add_argument(
    "-v",
    "--verbosity",
    action="count",
    default=1,
    help="Increase output verbosity (can be repeated: -v, -vv)",
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
            - themePath: Resolved theme path, or None
            - outputPath: Output JSON path (parent directory created)
            - envOK: True if environment is valid

    Exits:
        1 if the input file or theme file is not found
    """
    state = inputstate.copy()

    LOG("Checking environment...", level=2)

    input_file = state.inputdir / state.inputFile
    if not input_file.exists():
        print(f"Error: Input file not found: {input_file}", file=sys.stderr)
        state.envOK = False
        sys.exit(1)

    state.inputSourceFile = input_file
    LOG(f"Input file: {input_file}", level=2)

    if state.themeFile:
        theme_path = Path(state.themeFile)
        if not theme_path.is_absolute():
            theme_path = state.inputdir / theme_path
        if not theme_path.exists():
            print(f"Error: Theme file not found: {theme_path}", file=sys.stderr)
            state.envOK = False
            sys.exit(1)
        state.themePath = theme_path
        LOG(f"Theme file: {theme_path}", level=2)

    state.outputPath = state.outputdir / state.outputFile
    state.outputPath.parent.mkdir(parents=True, exist_ok=True)
    LOG(f"Output file: {state.outputPath}", level=2)

    state.envOK = True
    return state


def source_parse(inputstate: ProgramState) -> ProgramState:
    """
    Read the input file and parse it into a Document.

    Args:
        inputstate: Program state with inputSourceFile set

    Returns:
        ProgramState with added fields:
            - sourceText: Raw file contents
            - parsedDocument: Parsed Document

    Exits:
        1 if the file can't be read
    """
    state = inputstate.copy()

    LOG("Reading source file...", level=1)

    try:
        state.sourceText = state.inputSourceFile.read_text(encoding="utf-8")
        LOG(f"Read {len(state.sourceText)} characters from {state.inputSourceFile.name}", level=2)
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error reading input file: {e}", file=sys.stderr)
        sys.exit(1)

    LOG(f"Source:\n{source_highlight(state.sourceText)}", level=3)

    LOG("Parsing source...", level=1)
    state.parsedDocument = Parser(line_separator=appsettings.line_separator).parse(state.sourceText)
    LOG(f"Parsed {len(state.parsedDocument)} top-level elements", level=2)
    return state


def spans_build(inputstate: ProgramState) -> ProgramState:
    """
    Resolve style parameters and render the parsed Document.

    Settings (STYLEMARK_* environment) provide the defaults, which the theme
    file, when given, overrides.

    Args:
        inputstate: Program state with parsedDocument

    Returns:
        ProgramState with added fields:
            - styleParams: Resolved StyleParams
            - styledText: StyledText(text, annotations)

    Exits:
        1 if there is no parsed document or the theme is invalid
    """
    state = inputstate.copy()

    if state.parsedDocument is None:
        print("Error: No parsed document available", file=sys.stderr)
        sys.exit(1)

    try:
        params = StyleParams.styleParams_fromSettings(appsettings)
    except ValueError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        sys.exit(1)

    if state.themePath is not None:
        try:
            theme = Theme(state.themePath)
            params = theme.styleParams_apply(params)
            LOG(f"Loaded theme: {theme.name}", level=2)
        except ThemeError as e:
            print(f"Theme error: {e}", file=sys.stderr)
            sys.exit(1)

    state.styleParams = params

    LOG("Building spans...", level=1)
    state.styledText = StyleBuilder(params).render(state.parsedDocument)
    LOG(f"Built {len(state.styledText.annotations)} annotations", level=2)
    return state


def results_write(inputstate: ProgramState) -> ProgramState:
    """
    Write the styled text and its annotations as JSON.

    Output format:
        {
          "text": "<flattened text>",
          "annotations": [{"kind": "bullet_margin", "start": 7, "end": 11}, ...],
          "elements": <number of top-level elements>
        }

    Args:
        inputstate: Program state with styledText

    Returns:
        ProgramState with added field:
            - writeResult: Dict with output_file, characters, annotations

    Exits:
        1 if the output can't be written
    """
    state = inputstate.copy()

    payload = {
        "text": state.styledText.text,
        "annotations": [
            {"kind": annotation.kind.value, "start": annotation.start, "end": annotation.end}
            for annotation in state.styledText.annotations
        ],
        "elements": len(state.parsedDocument),
    }

    try:
        state.outputPath.write_text(
            json.dumps(payload, indent=2, ensure_ascii=False), encoding="utf-8"
        )
    except OSError as e:
        print(f"Error writing output file: {e}", file=sys.stderr)
        sys.exit(1)
    LOG(f"Wrote {state.outputPath}", level=2)

    state.writeResult = {
        "output_file": str(state.outputPath),
        "characters": len(state.styledText.text),
        "annotations": len(state.styledText.annotations),
    }
    return state


def results_report(inputstate: ProgramState) -> ProgramState:
    """
    Display a summary of the rendering to the user.

    Args:
        inputstate: Program state with writeResult populated

    Returns:
        ProgramState unchanged (terminal pipeline stage)

    Exits:
        1 if writeResult is None
    """
    state: ProgramState = inputstate.copy()
    if not state.writeResult:
        print("Error: Rendering failed", file=sys.stderr)
        sys.exit(1)

    LOG("\n✓ Rendering successful!", level=1)
    LOG(f"  Output: {state.writeResult['output_file']}", level=1)
    LOG(f"  Characters: {state.writeResult['characters']}", level=1)
    LOG(f"  Annotations: {state.writeResult['annotations']}", level=1)
    return state


@chris_plugin(
    parser=parser,
    title="stylemark - styled text renderer",
    category="Utility",
    min_memory_limit="100Mi",
    min_cpu_limit="500m",
)
def main(options: Namespace, inputdir: Path, outputdir: Path):
    """
    Main entry point - render a stylemark text file to styled JSON.

    Orchestrates the pipeline:
        1. env_check: Validate paths
        2. source_parse: Read and parse the text
        3. spans_build: Resolve style parameters and render
        4. results_write: Write JSON output
        5. results_report: Display results

    Args:
        options: CLI arguments from argparse
        inputdir: Directory containing the source text
        outputdir: Directory where the JSON will be written

    Note:
        This function is wrapped by @chris_plugin which handles CLI
        argument parsing and invokes this function with parsed values.
    """
    state: ProgramState = ProgramState.state_createFromNamespace(
        options=options, inputdir=inputdir, outputdir=outputdir
    )

    state_connectToLogger(state)

    pipeline(state, env_check, source_parse, spans_build, results_write, results_report)


if __name__ == "__main__":
    main()  # type: ignore  # @chris_plugin decorator transforms signature
