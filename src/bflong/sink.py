"""
Compiled Output Sink
====================

Persists a CompiledOutput to disk: one file per destination name, each
holding the long-form text verbatim.

    <output_dir>/<name><extension>

The output directory (and any missing parents) is created on demand. OS
failures are wrapped in SinkError subclasses so the CLI can report them
with a hint.
"""

from pathlib import Path
from typing import TYPE_CHECKING, Union
import logging

from bflong.errors import OutputDirectoryError, OutputWriteError

if TYPE_CHECKING:
    from bflong.compiler import CompiledOutput

# Logger for this module
logger = logging.getLogger(__name__)

DEFAULT_EXTENSION = ".long"


def write_long_output(
    output: "CompiledOutput",
    output_dir: Union[str, Path],
    extension: str = DEFAULT_EXTENSION,
) -> list[Path]:
    """
    Write compiled long-form text to every destination.

    Args:
        output: The compiled output and its destination names
        output_dir: Directory to write into (created if missing)
        extension: File suffix appended to each destination name

    Returns:
        Paths of the files written, in destination order

    Raises:
        OutputDirectoryError: If output_dir cannot be created
        OutputWriteError: If any destination file cannot be written
    """
    directory = Path(output_dir)

    try:
        directory.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise OutputDirectoryError(str(directory), e.strerror or str(e)) from e

    written = []
    for name in output.destinations:
        path = directory / f"{name}{extension}"
        try:
            path.write_text(output.compiled, encoding="utf-8")
        except OSError as e:
            raise OutputWriteError(str(path), e.strerror or str(e)) from e

        logger.debug(f"Wrote {len(output.compiled)} bytes to {path}")
        written.append(path)

    return written
