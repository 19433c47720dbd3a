"""Processing options for the SQL file splitter."""

from dataclasses import dataclass

from sql_file_splitter.paths import compact_path

DEFAULT_LINES_PER_FILE = 500_000
DEFAULT_MAX_OUTPUT_FILES = 25


class OptionsError(ValueError):
    """Raised when splitter options fail validation."""


@dataclass
class SplitterOptions:
    """Settings for one split run."""

    input_file_path: str = ""
    # Minimum number of lines before a boundary line may start a new file.
    lines_per_file: int = DEFAULT_LINES_PER_FILE
    # Once this many files exist, the rest of the input goes to the last one.
    max_output_files: int = DEFAULT_MAX_OUTPUT_FILES
    verbose: bool = False

    def validate(self) -> None:
        """Raise OptionsError if the options cannot be used for a run."""
        if not self.input_file_path or not self.input_file_path.strip():
            raise OptionsError("An input file is required: specify the SQL script file to process")

        if self.lines_per_file < 1:
            raise OptionsError(f"Lines per file must be a positive integer, got {self.lines_per_file}")

        if self.max_output_files < 1:
            raise OptionsError(
                f"Maximum output files must be a positive integer, got {self.max_output_files}"
            )

    def describe(self) -> list[str]:
        """Return a human-readable summary of the options, one line per setting."""
        rows = [
            ("Input script file:", compact_path(self.input_file_path, 120)),
            ("Lines per file:", f"{self.lines_per_file:,}"),
            ("Max output files:", str(self.max_output_files)),
            ("Verbose output:", str(self.verbose)),
        ]
        return ["Options:"] + [f" {label:<25} {value}" for label, value in rows]
