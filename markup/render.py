from __future__ import annotations
from html import escape
from typing import List, Optional

from markup.attributes import StoredAttribute
from markup.config import RAW_TEXT_TAGS, RenderConfig
from markup.dom import ElementNode, Node, TextNode


def render(node: Node, config: Optional[RenderConfig] = None) -> str:
    """Serialize a node and its subtree to HTML."""
    out: List[str] = []
    _render_node(node, config or RenderConfig(), out, raw=False)
    return "".join(out)


def _render_node(node: Node, config: RenderConfig, out: List[str], raw: bool) -> None:
    if isinstance(node, TextNode):
        out.append(node.text if raw else escape(node.text, quote=False))
        return
    if not isinstance(node, ElementNode):
        return

    out.append(f"<{node.tag}")
    for attr in node.attributes:
        _render_attribute(attr, config, out)
    out.append(">")

    if node.tag in config.void_tags:
        return

    for child in node.children:
        _render_node(child, config, out, raw=node.tag in RAW_TEXT_TAGS)
    out.append(f"</{node.tag}>")


def _render_attribute(attr: StoredAttribute, config: RenderConfig, out: List[str]) -> None:
    # style values come out of the pair stream, so malformed fragments vanish here
    value = attr.rendered_value(config.style_separator)
    if not value and config.drop_empty_style and attr.style_key_value_pairs is not None:
        return

    if value is None:
        out.append(f" {attr.name}")
    else:
        out.append(f' {attr.name}="{escape(value)}"')
