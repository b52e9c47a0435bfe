"""Tests for reading sources and writing guards."""

import io
from pathlib import Path

import pytest

from tsguard.config import GuardGenConfig
from tsguard.errors import ReadError, UsageError
from tsguard.io import (
    GuardWriter,
    SourceFile,
    SourceReader,
    import_specifier,
    output_path_for,
    require_input_files,
)


class TestRequireInputFiles:
    """Tests for input file validation."""

    def test_no_files_is_a_usage_error(self) -> None:
        with pytest.raises(
            UsageError, match="At least one file must be specified via the -f FILE flag."
        ):
            require_input_files([])

    def test_missing_files_are_listed(self, tmp_path: Path) -> None:
        present = tmp_path / "present.ts"
        present.write_text("")
        missing_a = tmp_path / "a.ts"
        missing_b = tmp_path / "b.ts"

        with pytest.raises(UsageError) as exc_info:
            require_input_files([missing_a, present, missing_b])

        assert exc_info.value.missing == [missing_a, missing_b]
        assert str(exc_info.value) == f"Input file(s) not found: {missing_a},{missing_b}"

    def test_directory_is_not_an_input_file(self, tmp_path: Path) -> None:
        with pytest.raises(UsageError):
            require_input_files([tmp_path])

    def test_existing_files_pass(self, tmp_path: Path) -> None:
        source = tmp_path / "foo.ts"
        source.write_text("")

        require_input_files([source])


class TestOutputPaths:
    """Tests for output path and import specifier computation."""

    @pytest.mark.parametrize(
        ("pattern", "expected"),
        [
            ("<FILE>-guard.ts", "foo-guard.ts"),
            ("<FILE>.guards.ts", "foo.guards.ts"),
            ("guards/<FILE>.ts", "guards/foo.ts"),
            ("all-guards.ts", "all-guards.ts"),
        ],
    )
    def test_file_token_is_replaced_by_stem(self, pattern: str, expected: str) -> None:
        assert output_path_for(pattern, Path("src/foo.ts")) == Path(expected)

    def test_output_dir_prefixes_relative_patterns(self) -> None:
        path = output_path_for("<FILE>-guard.ts", Path("src/foo.ts"), Path("out"))

        assert path == Path("out/foo-guard.ts")

    def test_output_dir_ignored_for_absolute_patterns(self, tmp_path: Path) -> None:
        pattern = str(tmp_path / "<FILE>-guard.ts")

        path = output_path_for(pattern, Path("foo.ts"), Path("out"))

        assert path == tmp_path / "foo-guard.ts"

    def test_import_of_sibling_source(self, tmp_path: Path) -> None:
        specifier = import_specifier(
            tmp_path / "src" / "foo.ts", tmp_path / "src" / "foo-guard.ts"
        )

        assert specifier == "./foo.ts"

    def test_import_from_other_directory(self, tmp_path: Path) -> None:
        specifier = import_specifier(
            tmp_path / "src" / "foo.ts", tmp_path / "generated" / "foo-guard.ts"
        )

        assert specifier == "../src/foo.ts"

    def test_import_from_parent_directory(self, tmp_path: Path) -> None:
        specifier = import_specifier(
            tmp_path / "models" / "foo.ts", tmp_path / "foo-guard.ts"
        )

        assert specifier == "./models/foo.ts"

    def test_stdout_imports_by_file_name(self) -> None:
        assert import_specifier(Path("src/foo.ts"), None) == "./foo.ts"


class TestSourceReader:
    """Tests for SourceReader."""

    def test_reads_text(self, tmp_path: Path) -> None:
        path = tmp_path / "foo.ts"
        path.write_text("interface Foo {}\n", encoding="utf-8")

        source = SourceReader().read(path)

        assert source == SourceFile(path=path, text="interface Foo {}\n")
        assert source.stem == "foo"

    def test_undecodable_file_raises_read_error(self, tmp_path: Path) -> None:
        path = tmp_path / "binary.ts"
        path.write_bytes(b"\xff\xfe\xfa interface")

        with pytest.raises(ReadError) as exc_info:
            SourceReader(encoding="utf-8").read(path)

        assert exc_info.value.path == path
        assert str(exc_info.value).startswith(f"Failed to open {path}:")

    def test_other_encodings_are_supported(self, tmp_path: Path) -> None:
        path = tmp_path / "latin.ts"
        path.write_bytes("// café\ninterface Foo {}\n".encode("latin-1"))

        source = SourceReader(encoding="latin-1").read(path)

        assert "café" in source.text

    def test_read_all_preserves_order(self, tmp_path: Path) -> None:
        paths = [tmp_path / "b.ts", tmp_path / "a.ts"]
        for path in paths:
            path.write_text(path.stem)

        sources = SourceReader().read_all(paths)

        assert [source.text for source in sources] == ["b", "a"]


class TestGuardWriter:
    """Tests for GuardWriter."""

    def test_writes_file_creating_directories(self, tmp_path: Path) -> None:
        config = GuardGenConfig(output_dir=tmp_path / "nested" / "out")
        source = SourceFile(path=Path("foo.ts"), text="")

        written = GuardWriter(config).write(source, "// guards\n")

        assert written == tmp_path / "nested" / "out" / "foo-guard.ts"
        assert written.read_text() == "// guards\n"

    def test_writes_to_stdout_stream(self) -> None:
        config = GuardGenConfig(output_pattern="-")
        stream = io.StringIO()
        source = SourceFile(path=Path("foo.ts"), text="")

        written = GuardWriter(config, stdout=stream).write(source, "// guards\n")

        assert written is None
        assert stream.getvalue() == "// guards\n"
