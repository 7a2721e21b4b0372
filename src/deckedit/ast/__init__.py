#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Serialized tree nodes, visitors and JSON interchange."""

from deckedit.ast.nodes import ElementNode, Node, SerializedNode, StyleMap, TextNode
from deckedit.ast.serialization import ast_to_json, dict_to_node, json_to_ast, node_to_dict
from deckedit.ast.visitors import NodeVisitor, find_elements, walk

__all__ = [
    "ElementNode",
    "Node",
    "NodeVisitor",
    "SerializedNode",
    "StyleMap",
    "TextNode",
    "ast_to_json",
    "dict_to_node",
    "find_elements",
    "json_to_ast",
    "node_to_dict",
    "walk",
]
