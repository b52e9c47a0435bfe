"""Utility functions for tree-sitter traversal."""

from tree_sitter import Node

_DEFAULT_ENCODING = "utf-8"

# Line index offset (tree-sitter uses 0-based, we want 1-based)
LINE_INDEX_OFFSET = 1

# Node types that carry no structure for extraction
_TRIVIAL_NODE_TYPES = frozenset({"comment", ";", ","})


def get_node_text(node: Node, source_bytes: bytes) -> str:
    """Get the text content of an AST node.

    Args:
        node: Tree-sitter node with start_byte and end_byte attributes
        source_bytes: Encoded source the tree was parsed from

    Returns:
        Text content of the node

    """
    return source_bytes[node.start_byte : node.end_byte].decode(_DEFAULT_ENCODING)


def get_line(node: Node) -> int:
    """Return the 1-based line a node starts on."""
    return node.start_point[0] + LINE_INDEX_OFFSET


def find_child_by_type(node: Node, child_type: str) -> Node | None:
    """Find the first direct child of a specific type.

    Args:
        node: Parent node to search in
        child_type: Type of child node to find

    Returns:
        First matching child node or None

    """
    for child in node.children:
        if child.type == child_type:
            return child
    return None


def find_children_by_type(node: Node, child_type: str) -> list[Node]:
    """Find all direct children of a specific type."""
    return [child for child in node.children if child.type == child_type]


def is_trivial_node(node: Node) -> bool:
    """Check if a node is a comment or separator."""
    return node.type in _TRIVIAL_NODE_TYPES


def find_first_error(node: Node) -> Node | None:
    """Find the first error or missing node in document order.

    Args:
        node: Root node to search from

    Returns:
        The first ERROR or MISSING node, or None if the tree is clean

    """
    if node.is_error or node.is_missing:
        return node
    if not node.has_error:
        return None
    for child in node.children:
        found = find_first_error(child)
        if found is not None:
            return found
    return None
