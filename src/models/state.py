"""
Program state model and pipeline helper

Defines ProgramState dataclass for the functional pipeline pattern and
the pipeline() helper for composing transformation stages.
"""

from pathlib import Path
from argparse import Namespace
from typing import Optional, Type, TypeVar, Dict, Callable
from dataclasses import dataclass, field


PS = TypeVar("PS", bound="ProgramState")


@dataclass
class ProgramState:
    """
    Central state container for the CLI pipeline (state bus pattern).

    Each pipeline stage receives a copy of the state and adds the fields
    it is responsible for.

    Pipeline stages and their state additions:
        - Initial: inputdir, outputdir, verbosity, inputFile, outputFile, bullet
        - env_check: inputSourceFile, textOutputFile, envOK
        - source_read: markdownSource
        - text_render: plainText
        - results_report: renderResult (terminal stage)

    Attributes:
        inputdir: Directory containing the Markdown source file
        outputdir: Directory receiving the plain-text file
        verbosity: Logging verbosity level (1-3)
        inputFile: Markdown filename (relative to inputdir)
        outputFile: Optional output filename (defaults to input stem + suffix)
        bullet: Optional bullet marker override for list items
        envOK: Environment validation passed
        inputSourceFile: Resolved path to the Markdown file
        textOutputFile: Resolved path of the plain-text file to write
        markdownSource: Raw Markdown text read from inputSourceFile
        plainText: Rendered plain text
        renderResult: Summary of the written output (output_file, characters)
    """

    # CLI arguments
    inputdir: Optional[Path] = field(default=None)
    outputdir: Optional[Path] = field(default=None)
    verbosity: int = field(default=1)
    inputFile: str = field(default="")
    outputFile: Optional[str] = field(default=None)
    bullet: Optional[str] = field(default=None)

    # Pipeline state
    envOK: bool = field(default=False)
    inputSourceFile: Path = field(default=Path("/"))
    textOutputFile: Path = field(default=Path("/"))
    markdownSource: Optional[str] = field(default=None)
    plainText: Optional[str] = field(default=None)
    renderResult: Optional[Dict] = field(default=None)

    @classmethod
    def state_createFromNamespace(
        cls: Type["ProgramState"], options: Namespace, inputdir: Path, outputdir: Path
    ) -> "ProgramState":
        """
        Create ProgramState from argparse Namespace and directory paths.

        Args:
            options: Parsed CLI arguments (inputFile, outputFile, bullet, ...)
            inputdir: Directory containing source files
            outputdir: Directory for rendered output

        Returns:
            ProgramState instance with all known CLI options as attributes
        """
        options_dict = vars(options)

        import dataclasses
        valid_fields = {f.name for f in dataclasses.fields(cls)}

        # Namespace may carry options the state does not model
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


def pipeline(
    initial_state: ProgramState, *stages: Callable[[ProgramState], ProgramState]
) -> ProgramState:
    """
    Execute a functional pipeline of state transformations.

    Each stage is a function (ProgramState) -> ProgramState that receives
    the output of the previous stage and returns a new state.

    Example:
        final_state = pipeline(
            initial_state,
            env_check,
            source_read,
            text_render,
            results_report
        )

    This is equivalent to:
        results_report(text_render(source_read(env_check(initial_state))))
    """
    from functools import reduce
    return reduce(lambda state, stage: stage(state), stages, initial_state)
