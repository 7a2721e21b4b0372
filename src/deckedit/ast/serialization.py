#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/deckedit/ast/serialization.py
"""JSON serialization and deserialization for serialized trees.

The JSON form is what a host slide component receives: every node carries
a ``node_type`` tag, element attributes and style maps are plain objects,
and children keep document order.

Examples
--------
    >>> from deckedit.ast import ElementNode, TextNode
    >>> from deckedit.ast.serialization import ast_to_json, json_to_ast
    >>> tree = ElementNode("b", children=(TextNode("Hi"),))
    >>> json_to_ast(ast_to_json(tree)) == tree
    True

"""

from __future__ import annotations

import json
from typing import Any

from deckedit.ast.nodes import ElementNode, SerializedNode, TextNode


def node_to_dict(node: SerializedNode) -> dict[str, Any]:
    """Convert a node and its subtree to plain dictionaries.

    Parameters
    ----------
    node : SerializedNode
        Node to convert

    Returns
    -------
    dict
        JSON-compatible representation

    """
    if isinstance(node, TextNode):
        return {"node_type": "Text", "content": node.content}

    result: dict[str, Any] = {
        "node_type": "Element",
        "tag": node.tag,
        "attributes": dict(node.attributes),
        "children": [node_to_dict(child) for child in node.children],
    }
    if node.style is not None:
        result["style"] = dict(node.style)
    return result


def dict_to_node(data: dict[str, Any]) -> SerializedNode:
    """Rebuild a node from its dictionary form.

    Raises
    ------
    ValueError
        If ``node_type`` is missing or unknown

    """
    node_type = data.get("node_type")
    if node_type == "Text":
        return TextNode(content=data.get("content", ""))
    if node_type == "Element":
        return ElementNode(
            tag=data["tag"],
            attributes=data.get("attributes", {}),
            style=data.get("style"),
            children=tuple(dict_to_node(child) for child in data.get("children", [])),
        )
    raise ValueError(f"Unknown node_type: {node_type!r}")


def ast_to_json(nodes: SerializedNode | list[SerializedNode], indent: int | None = None) -> str:
    """Serialize a node, or a list of root children, to a JSON string."""
    if isinstance(nodes, list):
        return json.dumps([node_to_dict(node) for node in nodes], indent=indent, ensure_ascii=False)
    return json.dumps(node_to_dict(nodes), indent=indent, ensure_ascii=False)


def json_to_ast(json_str: str) -> SerializedNode | list[SerializedNode]:
    """Deserialize the output of :func:`ast_to_json`."""
    data = json.loads(json_str)
    if isinstance(data, list):
        return [dict_to_node(item) for item in data]
    return dict_to_node(data)
