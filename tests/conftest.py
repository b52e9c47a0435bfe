"""Global test configuration for tsguard tests."""

from pathlib import Path

import pytest
from dotenv import load_dotenv

from tsguard.extractor import InterfaceExtractor
from tsguard.parser import TypeScriptParser
from tsguard.syntax import ModuleNode, SyntaxConverter

# Load environment variables from .env file for testing
env_file = Path(__file__).parent.parent / ".env"
if env_file.exists():
    load_dotenv(env_file)


@pytest.fixture
def extractor() -> InterfaceExtractor:
    """Interface extractor with the default keyword type resolver."""
    return InterfaceExtractor()


@pytest.fixture
def parse_module():
    """Parse TypeScript source into a typed ModuleNode."""

    def _parse(source_code: str, dialect: str = "typescript") -> ModuleNode:
        root_node = TypeScriptParser(dialect).parse(source_code)
        return SyntaxConverter(source_code).convert_module(root_node)

    return _parse
