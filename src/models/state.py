"""
Run state for the reloaded CLI

A ProgramState is handed from stage to stage: the CLI fills in the
options, each stage returns a copy with its own results added, and
pipeline() threads one state through a list of stages.
"""

from pathlib import Path
from argparse import Namespace
from typing import Any, Optional, Type, TypeVar, Dict, Callable
from dataclasses import dataclass, field


PS = TypeVar("PS", bound="ProgramState")


@dataclass
class ProgramState:
    """
    Everything one reloaded run knows about its files and its text.

    Stages, in the order main() runs them, and what each one sets:
        - CLI options: inputdir, outputdir, verbosity, inputFile, outputFile
        - env_check: envOK once the input file is found, plus the
          resolved inputSourceFile and outputTargetFile
        - source_read: sourceText, decoded with the configured encoding
        - text_process: processResult from the directive, punctuation
          and article passes
        - result_write: nothing new; saves processResult["text"]
        - results_report: nothing new; logs the counters

    A missing input file exits with status 1 inside env_check, so later
    stages can rely on inputSourceFile and outputTargetFile being set.

    Attributes:
        inputdir: Where the text file to fix is looked up
        outputdir: Where the fixed text is saved
        verbosity: 1 reports the summary, 2 each pass, 3 every directive
        inputFile: Name of the text file, relative to inputdir
        outputFile: Name of the saved file; None reuses inputFile
        envOK: True when inputSourceFile exists
        inputSourceFile: inputdir / inputFile
        outputTargetFile: outputdir / (outputFile or inputFile)
        sourceText: Contents of inputSourceFile
        processResult: Processor.process() output (status, text, counters)
    """

    # CLI arguments
    inputdir: Optional[Path] = field(default=None)
    outputdir: Optional[Path] = field(default=None)
    verbosity: int = field(default=1)
    inputFile: str = field(default="")
    outputFile: Optional[str] = field(default=None)

    # Pipeline state
    envOK: bool = field(default=False)
    inputSourceFile: Path = field(default=Path("/"))
    outputTargetFile: Path = field(default=Path("/"))
    sourceText: Optional[str] = field(default=None)
    processResult: Optional[Dict[str, Any]] = field(default=None)

    @classmethod
    def state_createFromNamespace(
        cls: Type["ProgramState"], options: Namespace, inputdir: Path, outputdir: Path
    ) -> "ProgramState":
        """
        Create ProgramState from argparse Namespace and directory paths.

        Args:
            options: Parsed CLI arguments (inputFile, outputFile, verbosity)
            inputdir: Directory containing source files
            outputdir: Directory for processed output

        Returns:
            ProgramState instance with all CLI options as attributes
        """
        options_dict = vars(options)

        # Keep only the options ProgramState knows about
        import dataclasses
        valid_fields = {f.name for f in dataclasses.fields(cls)}
        filtered_options = {k: v for k, v in options_dict.items() if k in valid_fields}

        merged_args = {**filtered_options, "inputdir": inputdir, "outputdir": outputdir}
        return cls(**merged_args)

    def copy(self: PS) -> PS:
        """Shallow copy, so a stage can add its results without touching its input"""
        return type(self)(**self.__dict__)


def pipeline(
    initial_state: ProgramState, *stages: Callable[[ProgramState], ProgramState]
) -> ProgramState:
    """
    Feed a state through each stage in turn and return the last result.

    Stages take a ProgramState and return one; main() runs the five CLI
    stages this way.

    Example:
        final_state = pipeline(
            initial_state,
            env_check,
            source_read,
            text_process,
            result_write,
            results_report
        )

    This is equivalent to:
        results_report(result_write(text_process(source_read(env_check(initial_state)))))
    """
    from functools import reduce
    return reduce(lambda state, stage: stage(state), stages, initial_state)
