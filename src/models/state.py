"""
Program state model and pipeline helper

Defines ProgramState dataclass for the functional pipeline pattern and
the pipeline() helper for composing transformation stages.
"""

import dataclasses
from functools import reduce
from pathlib import Path
from argparse import Namespace
from typing import Any, Optional, Type, TypeVar, Dict, Callable
from dataclasses import dataclass, field


PS = TypeVar("PS", bound="ProgramState")


@dataclass
class ProgramState:
    """
    Central state container for the rendering pipeline (state bus pattern).

    Each pipeline stage receives a copy of the state and adds its results.

    Pipeline stages and their state additions:
        - Initial: inputdir, outputdir, verbosity, inputFile, themeFile, outputFile
        - env_check: inputSourceFile, themePath, outputPath, envOK
        - source_parse: sourceText, parsedDocument
        - spans_build: styleParams, styledText
        - results_write: writeResult
        - results_report: (no additions, terminal stage)

    Attributes:
        inputdir: Directory containing the source text file
        outputdir: Directory for the rendered output
        verbosity: Logging verbosity level (1-3)
        inputFile: Source filename (relative to inputdir)
        themeFile: Optional theme YAML path
        outputFile: Output JSON filename (relative to outputdir)
        envOK: Environment validation passed
        inputSourceFile: Resolved path to the source file
        themePath: Resolved theme path, if any
        outputPath: Resolved output file path
        sourceText: Raw source text
        parsedDocument: Document parsed from the source
        styleParams: StyleParams after settings and theme
        styledText: Flattened text and annotations
        writeResult: Summary of the written output
    """

    # CLI arguments
    inputdir: Optional[Path] = field(default=None)
    outputdir: Optional[Path] = field(default=None)
    verbosity: int = field(default=1)
    inputFile: str = field(default="")
    themeFile: Optional[str] = field(default=None)
    outputFile: str = field(default="styled.json")

    # Pipeline state
    envOK: bool = field(default=False)
    inputSourceFile: Path = field(default=Path("/"))
    themePath: Optional[Path] = field(default=None)
    outputPath: Path = field(default=Path("/"))
    sourceText: str = field(default="")
    parsedDocument: Optional[Any] = field(default=None)  # Document at runtime
    styleParams: Optional[Any] = field(default=None)  # StyleParams at runtime
    styledText: Optional[Any] = field(default=None)  # StyledText at runtime
    writeResult: Optional[Dict] = field(default=None)

    @classmethod
    def state_createFromNamespace(
        cls: Type["ProgramState"], options: Namespace, inputdir: Path, outputdir: Path
    ) -> "ProgramState":
        """
        Create ProgramState from argparse Namespace and directory paths.

        Options that are not ProgramState fields are ignored.

        Args:
            options: Parsed CLI arguments (inputFile, themeFile, etc.)
            inputdir: Directory containing source files
            outputdir: Directory for output

        Returns:
            ProgramState instance with all CLI options as attributes
        """
        valid_fields = {f.name for f in dataclasses.fields(cls)}
        filtered_options = {k: v for k, v in vars(options).items() if k in valid_fields}
        merged_args = {**filtered_options, "inputdir": inputdir, "outputdir": outputdir}
        return cls(**merged_args)

    def copy(self: PS) -> PS:
        """
        Creates a shallow copy of the ProgramState instance.

        Returns:
            A new ProgramState instance.
        """
        return type(self)(**self.__dict__)


def pipeline(
    initial_state: ProgramState, *stages: Callable[[ProgramState], ProgramState]
) -> ProgramState:
    """
    Execute a functional pipeline of state transformations.

    Each stage is a function (ProgramState) -> ProgramState that receives
    the output of the previous stage and returns a new state.

    Args:
        initial_state: Starting ProgramState
        *stages: Variable number of stage functions to execute in order

    Returns:
        Final ProgramState after all transformations

    Example:
        final_state = pipeline(
            initial_state,
            env_check,
            source_parse,
            spans_build,
            results_write,
            results_report
        )
    """
    return reduce(lambda state, stage: stage(state), stages, initial_state)
