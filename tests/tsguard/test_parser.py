"""Tests for the tree-sitter TypeScript parser."""

from pathlib import Path

import pytest

from tsguard.errors import ParserError, SourceSyntaxError
from tsguard.parser import TypeScriptParser


class TestTypeScriptParser:
    """Tests for TypeScriptParser."""

    def test_parses_valid_source(self) -> None:
        root = TypeScriptParser().parse("interface Foo { a: string; }")

        assert root.type == "program"
        assert not root.has_error

    def test_syntax_error_reports_line(self) -> None:
        with pytest.raises(SourceSyntaxError) as exc_info:
            TypeScriptParser().parse("\n\nconst = ;\n")

        assert exc_info.value.line == 3
        assert "(line 3)" in str(exc_info.value)

    def test_unknown_dialect_raises(self) -> None:
        with pytest.raises(ParserError, match="Dialect 'flow' not supported"):
            TypeScriptParser("flow")

    def test_tsx_dialect_accepts_jsx(self) -> None:
        source = "interface Props { label: string; }\nconst el = <div />;\n"

        root = TypeScriptParser("tsx").parse(source)

        assert not root.has_error

    def test_typescript_dialect_rejects_jsx(self) -> None:
        with pytest.raises(SourceSyntaxError):
            TypeScriptParser("typescript").parse("const el = <div />;\n")


class TestDialectDetection:
    """Tests for detecting the dialect from a file name."""

    @pytest.mark.parametrize(
        ("file_name", "expected"),
        [
            ("models.ts", "typescript"),
            ("models.mts", "typescript"),
            ("models.cts", "typescript"),
            ("View.tsx", "tsx"),
            ("View.TSX", "tsx"),
            ("models.d.ts", "typescript"),
            ("no_extension", "typescript"),
            ("notes.txt", "typescript"),
        ],
    )
    def test_detects_dialect(self, file_name: str, expected: str) -> None:
        assert TypeScriptParser.detect_dialect_from_file(Path(file_name)) == expected
