"""Tests for tree-sitter to typed syntax node conversion."""

import json

import pytest

from tsguard.models import PrimitiveKind
from tsguard.syntax import (
    IdentifierNode,
    InterfaceDeclarationNode,
    KeywordTypeNode,
    OpaqueNode,
    PropertySignatureNode,
    kind_name,
)


class TestKindName:
    """Tests for tree-sitter node type naming."""

    @pytest.mark.parametrize(
        ("node_type", "expected"),
        [
            ("method_signature", "MethodSignature"),
            ("index_signature", "IndexSignature"),
            ("array_type", "ArrayType"),
            ("union_type", "UnionType"),
            ("predefined_type", "PredefinedType"),
            ("program", "Module"),
            ("type_identifier", "TypeReference"),
            ("generic_type", "TypeReference"),
            ("object_type", "TypeLiteral"),
            ("string", "StringLiteral"),
            ("number", "NumericLiteral"),
            ("extends_type_clause", "ExtendsClause"),
            ("lexical_declaration", "VariableDeclaration"),
        ],
    )
    def test_maps_node_types(self, node_type: str, expected: str) -> None:
        assert kind_name(node_type) == expected


class TestSyntaxConverter:
    """Tests for SyntaxConverter.convert_module."""

    def test_interface_becomes_typed_declaration(self, parse_module) -> None:
        module = parse_module("interface Foo {\n  a: string;\n  b;\n}\n")

        declaration = module.body[0]
        assert isinstance(declaration, InterfaceDeclarationNode)
        assert declaration.id == IdentifierNode(value="Foo", line=1)
        assert declaration.type_parameters is None
        assert declaration.extends == []
        assert declaration.body.body == [
            PropertySignatureNode(
                key=IdentifierNode(value="a", line=2),
                type_annotation=KeywordTypeNode(keyword=PrimitiveKind.STRING, line=2),
                line=2,
            ),
            PropertySignatureNode(key=IdentifierNode(value="b", line=3), line=3),
        ]

    def test_exported_interface_is_unwrapped(self, parse_module) -> None:
        module = parse_module("export interface Foo { a: number; }")

        assert module.body[0].kind == "InterfaceDeclaration"

    def test_other_statements_are_opaque(self, parse_module) -> None:
        source = """\
type Alias = string;
const value = 1;
function helper() {}
class Service {}
export const exported = 2;
"""
        module = parse_module(source)

        assert [item.kind for item in module.body] == [
            "TypeAliasDeclaration",
            "VariableDeclaration",
            "FunctionDeclaration",
            "ClassDeclaration",
            "ExportDeclaration",
        ]
        assert all(isinstance(item, OpaqueNode) for item in module.body)
        assert module.body[0].text == "type Alias = string;"

    def test_comments_are_skipped(self, parse_module) -> None:
        source = """\
interface Foo {
  // leading comment
  a: string; /* trailing */
}
"""
        declaration = parse_module(source).body[0]

        assert [member.kind for member in declaration.body.body] == [
            "PropertySignature"
        ]

    @pytest.mark.parametrize(
        ("annotation", "keyword"),
        [
            ("null", PrimitiveKind.NULL),
            ("undefined", PrimitiveKind.UNDEFINED),
            ("bigint", PrimitiveKind.BIGINT),
            ("never", PrimitiveKind.NEVER),
            ("object", PrimitiveKind.OBJECT),
        ],
    )
    def test_keyword_annotations_are_normalised(
        self, parse_module, annotation: str, keyword: PrimitiveKind
    ) -> None:
        declaration = parse_module(f"interface Foo {{ a: {annotation}; }}").body[0]

        member = declaration.body.body[0]
        assert member.type_annotation == KeywordTypeNode(keyword=keyword, line=1)

    def test_non_keyword_annotation_keeps_text(self, parse_module) -> None:
        declaration = parse_module("interface Foo { a: Array<string>; }").body[0]

        annotation = declaration.body.body[0].type_annotation
        assert annotation == OpaqueNode(
            kind="TypeReference", text="Array<string>", line=1
        )

    def test_optional_marker_is_recorded(self, parse_module) -> None:
        declaration = parse_module("interface Foo { a?: string; b: string; }").body[0]

        assert [member.optional for member in declaration.body.body] == [True, False]

    def test_heritage_and_type_parameters_are_kept(self, parse_module) -> None:
        declaration = parse_module("interface Box<T> extends Base { a: T; }").body[0]

        assert declaration.type_parameters is not None
        assert declaration.type_parameters.kind == "TypeParameters"
        assert [clause.kind for clause in declaration.extends] == ["ExtendsClause"]

    def test_tsx_source_converts(self, parse_module) -> None:
        source = "interface Props { label: string; }\nconst el = <div />;\n"

        module = parse_module(source, dialect="tsx")

        assert [item.kind for item in module.body] == [
            "InterfaceDeclaration",
            "VariableDeclaration",
        ]

    def test_tree_serialises_to_json(self, parse_module) -> None:
        module = parse_module("interface Foo { a: string; }")

        dumped = json.loads(module.model_dump_json())

        assert dumped["kind"] == "Module"
        interface = dumped["body"][0]
        assert interface["kind"] == "InterfaceDeclaration"
        assert interface["body"]["body"][0]["type_annotation"] == {
            "kind": "KeywordType",
            "keyword": "string",
            "line": 1,
        }

    def test_ambient_interface_is_unwrapped(self, parse_module) -> None:
        module = parse_module(
            "declare interface Foo { a: string; }\ndeclare const b: number;\n"
        )

        assert [item.kind for item in module.body] == [
            "InterfaceDeclaration",
            "AmbientDeclaration",
        ]
        assert module.body[0].id == IdentifierNode(value="Foo", line=1)

    def test_node_text_uses_byte_offsets(self, parse_module) -> None:
        """Multi-byte characters before a node do not shift its text."""
        module = parse_module('const café = "é";\ninterface Naïve { a: string; }\n')

        assert module.body[0].text == 'const café = "é";'
        assert module.body[1].id == IdentifierNode(value="Naïve", line=2)
