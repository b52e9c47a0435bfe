"""TypeScript source parser using tree-sitter."""

import logging
from pathlib import Path

import tree_sitter_typescript
from tree_sitter import Language, Node, Parser

from tsguard.errors import ParserError, SourceSyntaxError
from tsguard.syntax.base import find_first_error, get_line

logger = logging.getLogger(__name__)

# Dialect registry for the tree-sitter-typescript bindings
_DIALECT_REGISTRY: dict[str, Language] = {}
_DIALECT_REGISTRY["typescript"] = Language(tree_sitter_typescript.language_typescript())
_DIALECT_REGISTRY["tsx"] = Language(tree_sitter_typescript.language_tsx())


def _get_tree_sitter_language(dialect: str) -> Language:
    """Get a tree-sitter Language object for the specified dialect.

    Args:
        dialect: Name of the TypeScript dialect

    Returns:
        Tree-sitter Language object for the specified dialect

    Raises:
        ParserError: If the dialect is not supported

    """
    if dialect not in _DIALECT_REGISTRY:
        supported_dialects: list[str] = list(_DIALECT_REGISTRY.keys())
        raise ParserError(
            f"Dialect '{dialect}' not supported. Available: {supported_dialects}"
        )
    return _DIALECT_REGISTRY[dialect]


# Constants
_DEFAULT_DIALECT = "typescript"
_DEFAULT_ENCODING = "utf-8"


class TypeScriptParser:
    """Parser for TypeScript source code using tree-sitter."""

    # Supported dialects and their file extensions
    _SUPPORTED_DIALECTS = {
        "typescript": [".ts", ".mts", ".cts"],
        "tsx": [".tsx"],
    }

    def __init__(self, dialect: str = _DEFAULT_DIALECT) -> None:
        """Initialise the parser.

        Args:
            dialect: TypeScript dialect to parse (default: typescript)

        Raises:
            ParserError: If the dialect is not supported

        """
        self.dialect = dialect
        self.parser = Parser()
        self.parser.language = _get_tree_sitter_language(dialect)

    @staticmethod
    def detect_dialect_from_file(file_path: Path) -> str:
        """Detect the TypeScript dialect from a file extension.

        Unknown extensions fall back to plain TypeScript, since the input
        files are named explicitly rather than discovered.

        Args:
            file_path: Path to the source file

        Returns:
            Detected dialect name

        """
        extension = file_path.suffix.lower()

        for dialect, extensions in TypeScriptParser._SUPPORTED_DIALECTS.items():
            if extension in extensions:
                return dialect

        return _DEFAULT_DIALECT

    def parse(self, source_code: str) -> Node:
        """Parse source code string.

        Args:
            source_code: Whole-file TypeScript source text

        Returns:
            AST root node

        Raises:
            SourceSyntaxError: If the source contains syntax errors

        """
        tree = self.parser.parse(bytes(source_code, _DEFAULT_ENCODING))
        root = tree.root_node

        error_node = find_first_error(root)
        if error_node is not None:
            line = get_line(error_node)
            logger.debug("Syntax error node '%s' at line %d", error_node.type, line)
            raise SourceSyntaxError("Source is not valid TypeScript", line=line)

        return root
