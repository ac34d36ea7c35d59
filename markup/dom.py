from __future__ import annotations
from dataclasses import dataclass, field
from typing import Iterator, List, Optional

from markup.attributes import (
    STYLE_ATTRIBUTE,
    AttributeStorage,
    AttributeValue,
    MergeMode,
    StoredAttribute,
    StyleItems,
    Styles,
)
from markup.style import StyleKeyValuePairs


class Node:
    parent: Optional["ElementNode"] = None


@dataclass
class TextNode(Node):
    text: str = ""


@dataclass
class ElementNode(Node):
    tag: str
    attributes: AttributeStorage = field(default_factory=AttributeStorage)
    children: List[Node] = field(default_factory=list)

    def append(self, child: Node) -> None:
        child.parent = self
        self.children.append(child)

    def set_attribute(self, name: str, value: AttributeValue, merge_mode: Optional[MergeMode] = None) -> StoredAttribute:
        return self.attributes.add(StoredAttribute(name, value, merge_mode))

    def add_styles(self, items: StyleItems) -> StoredAttribute:
        return self.attributes.add(StoredAttribute.styles(Styles.from_mapping(items)))

    def add_style_text(self, text: str) -> StoredAttribute:
        return self.attributes.add(StoredAttribute.styles(Styles.from_plain(text)))

    def get_attribute(self, name: str) -> Optional[str]:
        attr = self.attributes.get(name)
        return None if attr is None else attr.rendered_value()

    def style_pairs(self) -> Optional[StyleKeyValuePairs]:
        attr = self.attributes.get(STYLE_ATTRIBUTE)
        return None if attr is None else attr.style_key_value_pairs

    def iter_elements(self) -> Iterator[ElementNode]:
        yield self
        for child in self.children:
            if isinstance(child, ElementNode):
                yield from child.iter_elements()
