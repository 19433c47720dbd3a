"""Output naming and path display helpers."""

from pathlib import Path

SEGMENT_SUFFIX = "_part"


def segment_path(input_file: Path, sequence: int) -> Path:
    """
    Derive the path of output segment ``sequence`` for ``input_file``.

    Segments live next to the input and are named
    ``<stem>_part<NNN><ext>``, with the sequence number zero-padded to
    three digits.
    """
    return input_file.parent / f"{input_file.stem}{SEGMENT_SUFFIX}{sequence:03d}{input_file.suffix}"


def compact_path(path: str | Path, max_length: int = 100) -> str:
    """Shorten a path for display by eliding its middle, keeping the file name."""
    text = str(path)
    if len(text) <= max_length:
        return text

    name = Path(text).name
    if len(name) + 4 >= max_length:
        return "..." + text[-(max_length - 3) :]

    head_length = max_length - len(name) - 4
    return f"{text[:head_length]}...{text[-(len(name) + 1) :]}"
