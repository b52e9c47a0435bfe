"""Per-file guard generation pipeline.

Files are processed independently and in the order given. Reading is done for
every file before any output is written, so an unreadable file aborts the run
without leaving partial output behind. Extraction failures are recorded per
file: the failing file produces no output, the others are still written.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import TextIO

from tsguard.config import GuardGenConfig
from tsguard.errors import (
    ExtractionError,
    GenerationError,
    ParserError,
    TsGuardError,
)
from tsguard.extractor import InterfaceExtractor
from tsguard.generator import GuardGenerator
from tsguard.io import (
    GuardWriter,
    SourceFile,
    SourceReader,
    import_specifier,
    require_input_files,
)
from tsguard.parser import TypeScriptParser

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class FileOutcome:
    """Result of generating guards for one input file."""

    source: Path
    interfaces: list[str] = field(default_factory=list)
    output: Path | None = None
    error: TsGuardError | None = None

    @property
    def success(self) -> bool:
        """Whether guards were generated and written for the file."""
        return self.error is None


class GuardPipeline:
    """Reads, extracts, generates and writes guards for a batch of files."""

    def __init__(self, config: GuardGenConfig, stdout: TextIO | None = None) -> None:
        """Initialise the pipeline.

        Args:
            config: Generation configuration
            stdout: Stream for debug dumps and stdout output (default: sys.stdout)

        """
        self._config = config
        self._stdout = stdout
        self._reader = SourceReader(encoding=config.encoding)
        self._writer = GuardWriter(config, stdout=stdout)
        self._generator = GuardGenerator()
        self._extractors: dict[str, InterfaceExtractor] = {}

    def run(self, paths: list[Path]) -> list[FileOutcome]:
        """Generate guards for every input file.

        Args:
            paths: Input files, in output order

        Returns:
            One outcome per input file

        Raises:
            UsageError: If no files are given or any file is missing
            ReadError: If any file cannot be read

        """
        require_input_files(paths)
        sources = self._reader.read_all(paths)
        outcomes = [self.process(source) for source in sources]

        failed = sum(1 for outcome in outcomes if not outcome.success)
        logger.info(
            "Processed %d files: %d succeeded, %d failed",
            len(outcomes),
            len(outcomes) - failed,
            failed,
        )
        return outcomes

    def process(self, source: SourceFile) -> FileOutcome:
        """Extract, generate and write the guards of one source file."""
        extractor = self._extractor_for(source.path)
        try:
            result = extractor.extract_source(source.text)
        except (ParserError, ExtractionError) as e:
            logger.info("Failed to extract interfaces from %s: %s", source.path, e)
            return FileOutcome(source=source.path, error=e)

        if self._config.dumps_ast():
            stream = self._stdout or sys.stdout
            stream.write(f"{source.path}\n")
            stream.write(result.ast.model_dump_json(indent=4) + "\n")

        target = self._writer.target_for(source)
        try:
            text = self._generator.generate_module(
                result.interfaces, import_specifier(source.path, target)
            )
        except GenerationError as e:
            logger.info("Failed to generate guards for %s: %s", source.path, e)
            return FileOutcome(source=source.path, error=e)
        output = self._writer.write(source, text)

        return FileOutcome(
            source=source.path,
            interfaces=[interface.name for interface in result.interfaces],
            output=output,
        )

    def _extractor_for(self, path: Path) -> InterfaceExtractor:
        """Return the extractor for the dialect of a file."""
        dialect = self._config.dialect or TypeScriptParser.detect_dialect_from_file(
            path
        )
        if dialect not in self._extractors:
            self._extractors[dialect] = InterfaceExtractor(
                parser=TypeScriptParser(dialect)
            )
        return self._extractors[dialect]
