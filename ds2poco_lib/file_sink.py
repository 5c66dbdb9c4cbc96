"""File sink writing emitted units to the export directory."""
from pathlib import Path
from typing import Union

from .constants import DEFAULT_LINE_ENDING
from .errors import OutputWriteError
from .models import EmittedUnit


def write_unit(unit: EmittedUnit, export_directory: Union[str, Path],
               line_ending: str = DEFAULT_LINE_ENDING) -> Path:
    """
    Write one generated unit, creating the export directory if needed.

    An existing file with the same name is overwritten. File names that would
    land anywhere but directly inside the export directory are rejected.

    Args:
        unit: Generated class source
        export_directory: Target directory
        line_ending: Line terminator used in the written file

    Returns:
        Path of the written file

    Raises:
        OutputWriteError: if the target escapes the export directory or cannot be written
    """
    out_dir = Path(export_directory)
    file_path = out_dir / unit.file_name
    if file_path.resolve().parent != out_dir.resolve():
        raise OutputWriteError(f"Refusing to write {unit.file_name!r} outside the export directory",
                               context=str(out_dir))
    try:
        out_dir.mkdir(parents=True, exist_ok=True)
        with open(file_path, "w", encoding="utf-8", newline=line_ending) as f:
            f.write(unit.source)
    except OSError as io_err:
        raise OutputWriteError(f"Could not write {unit.file_name}: {io_err}", context=str(file_path)) from io_err
    return file_path
