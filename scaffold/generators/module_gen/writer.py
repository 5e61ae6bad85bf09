"""File writer for module generation."""
import logging
from pathlib import Path
from typing import Iterable

from scaffold.generators.module_gen.types import GeneratedFile

log = logging.getLogger(__name__)


def write_files(files: Iterable[GeneratedFile], out_dir: Path, directories: Iterable[str] = ()) -> None:
    """
    Write generated files to the output directory, replacing existing files.

    Args:
        files: GeneratedFile objects to write
        out_dir: Base output directory path
        directories: Relative directories to create even if no file lands in them
    """
    out_dir.mkdir(parents=True, exist_ok=True)

    for directory in directories:
        (out_dir / directory).mkdir(parents=True, exist_ok=True)

    for file in files:
        file_path = out_dir / file.path
        # Create parent directories if needed
        file_path.parent.mkdir(parents=True, exist_ok=True)
        file_path.write_text(file.content, encoding="utf-8")
        log.debug("Wrote %s", file_path, extra={"role": file.role.value})
