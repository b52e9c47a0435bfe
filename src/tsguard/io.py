"""Reading TypeScript sources and writing generated guards."""

from __future__ import annotations

import logging
import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import TextIO

from tsguard.config import FILE_TOKEN, GuardGenConfig
from tsguard.errors import ReadError, UsageError

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SourceFile:
    """An input file and its text content."""

    path: Path
    text: str

    @property
    def stem(self) -> str:
        """Base name of the file without extension."""
        return self.path.stem


def find_missing_files(paths: list[Path]) -> list[Path]:
    """Return every named input path that does not exist as a file."""
    return [path for path in paths if not path.is_file()]


def require_input_files(paths: list[Path]) -> None:
    """Validate the input file list.

    Raises:
        UsageError: If no files are given or any file does not exist

    """
    if not paths:
        raise UsageError("At least one file must be specified via the -f FILE flag.")

    missing = find_missing_files(paths)
    if missing:
        raise UsageError(
            f"Input file(s) not found: {','.join(str(path) for path in missing)}",
            missing=missing,
        )


def output_path_for(
    pattern: str, source_path: Path, output_dir: Path | None = None
) -> Path:
    """Compute the output path for an input file.

    Args:
        pattern: Output pattern containing an optional '<FILE>' token
        source_path: Input file the guards were generated from
        output_dir: Directory relative patterns are resolved against

    Returns:
        The output file path

    """
    path = Path(pattern.replace(FILE_TOKEN, source_path.stem))
    if output_dir is not None and not path.is_absolute():
        return output_dir / path
    return path


def import_specifier(source_path: Path, output_path: Path | None) -> str:
    """Return the module specifier a guard file uses to import its source.

    Both paths are resolved, so the specifier is relative to the guard file's
    directory. Guards written to stdout import by file name only.
    """
    if output_path is None:
        return f"./{source_path.name}"

    relative = Path(
        os.path.relpath(source_path.resolve(), output_path.resolve().parent)
    ).as_posix()
    if relative.startswith("../"):
        return relative
    return f"./{relative}"


class SourceReader:
    """Reads input source files as text."""

    def __init__(self, encoding: str = "utf-8") -> None:
        """Initialise the reader.

        Args:
            encoding: Text encoding of the input files

        """
        self._encoding = encoding

    def read(self, path: Path) -> SourceFile:
        """Read one source file.

        Raises:
            ReadError: If the file cannot be read or decoded

        """
        try:
            text = path.read_text(encoding=self._encoding)
        except (OSError, UnicodeDecodeError) as e:
            logger.debug("Failed to read %s: %s", path, e)
            raise ReadError(path, e) from e

        logger.debug("Read %d characters from %s", len(text), path)
        return SourceFile(path=path, text=text)

    def read_all(self, paths: list[Path]) -> list[SourceFile]:
        """Read every source file, failing on the first unreadable one."""
        return [self.read(path) for path in paths]


class GuardWriter:
    """Writes generated guard text to files or stdout."""

    def __init__(self, config: GuardGenConfig, stdout: TextIO | None = None) -> None:
        """Initialise the writer.

        Args:
            config: Generation configuration (output pattern, directory, encoding)
            stdout: Stream used when writing to stdout (default: sys.stdout)

        """
        self._config = config
        self._stdout = stdout

    def target_for(self, source: SourceFile) -> Path | None:
        """Return the output path for a source, or None for stdout."""
        if self._config.writes_to_stdout:
            return None
        return output_path_for(
            self._config.output_pattern, source.path, self._config.output_dir
        )

    def write(self, source: SourceFile, text: str) -> Path | None:
        """Write the guards generated for one source.

        Returns:
            The written path, or None when written to stdout

        """
        target = self.target_for(source)
        if target is None:
            stream = self._stdout or sys.stdout
            stream.write(text)
            stream.flush()
            return None

        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(text, encoding=self._config.encoding)
        logger.info("Wrote guards for %s to %s", source.path, target)
        return target
