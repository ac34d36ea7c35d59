"""Attribute storage for markup elements.

An attribute value is plain text, structured ``Styles``, or ``None`` for a
bare attribute (``<input disabled>``). When the same attribute is set twice
the incoming attribute's ``MergeMode`` decides how the values combine.
Style values are never deduplicated: merging only appends entries, so every
declaration survives in the order it was added.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable, Iterator, List, Mapping, Optional, Tuple, Union

from markup.errors import AttributeMergeError, UnknownMergeModeError
from markup.style import RawStyleText, StyleDeclaration, StyleEntry, StyleKeyValuePairs

logger = logging.getLogger(__name__)

STYLE_ATTRIBUTE = "style"

StyleItems = Union[Mapping[str, str], Iterable[Tuple[str, str]]]


class MergeAction(Enum):
    APPEND_VALUE = "append"
    REPLACE_VALUE = "replace"
    IGNORE_IF_SET = "ignore"


@dataclass(frozen=True)
class MergeMode:
    action: MergeAction
    separator: str = " "  # only used by APPEND_VALUE on plain non-style values

    @classmethod
    def append_value(cls, separator: str = " ") -> MergeMode:
        return cls(MergeAction.APPEND_VALUE, separator)

    @classmethod
    def replace_value(cls) -> MergeMode:
        return cls(MergeAction.REPLACE_VALUE)

    @classmethod
    def ignore_if_set(cls) -> MergeMode:
        return cls(MergeAction.IGNORE_IF_SET)

    @classmethod
    def parse(cls, name: str, separator: str = " ") -> MergeMode:
        try:
            action = MergeAction(name)
        except ValueError:
            raise UnknownMergeModeError(name) from None
        return cls(action, separator)


def default_merge_mode(name: str) -> MergeMode:
    if name == "class":
        return MergeMode.append_value(" ")
    if name == STYLE_ATTRIBUTE:
        return MergeMode.append_value(";")
    return MergeMode.ignore_if_set()


class Styles:
    """Ordered style entries, structured and raw, in the order they were added."""

    __slots__ = ("_entries",)

    def __init__(self, entries: Iterable[StyleEntry] = ()) -> None:
        self._entries: List[StyleEntry] = list(entries)

    @classmethod
    def from_mapping(cls, items: StyleItems) -> Styles:
        styles = cls()
        styles.append_mapping(items)
        return styles

    @classmethod
    def from_plain(cls, text: str) -> Styles:
        return cls([RawStyleText(text)])

    @property
    def entries(self) -> Tuple[StyleEntry, ...]:
        return tuple(self._entries)

    def append_plain(self, text: str) -> None:
        self._entries.append(RawStyleText(text))

    def append_mapping(self, items: StyleItems) -> None:
        """Append one entry per item, keeping the items' own order.

        An empty key marks its value as raw declaration text.
        """
        pairs = items.items() if isinstance(items, Mapping) else items
        for key, value in pairs:
            if key:
                self._entries.append(StyleDeclaration(key, value))
            else:
                self._entries.append(RawStyleText(value))

    def extend(self, other: Styles) -> None:
        self._entries.extend(other._entries)

    def copy(self) -> Styles:
        return Styles(self._entries)

    def pairs(self) -> StyleKeyValuePairs:
        return StyleKeyValuePairs(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Styles):
            return NotImplemented
        return self._entries == other._entries

    def __repr__(self) -> str:
        return f"Styles({self._entries!r})"


AttributeValue = Union[str, Styles, None]


def _as_styles(value: Union[str, Styles]) -> Styles:
    if isinstance(value, Styles):
        return value.copy()
    return Styles.from_plain(value)


@dataclass
class StoredAttribute:
    name: str
    value: AttributeValue = None
    merge_mode: Optional[MergeMode] = None

    def __post_init__(self) -> None:
        if self.merge_mode is None:
            self.merge_mode = default_merge_mode(self.name)

    @classmethod
    def styles(cls, styles: Styles, merge_mode: Optional[MergeMode] = None) -> StoredAttribute:
        return cls(STYLE_ATTRIBUTE, styles, merge_mode)

    @property
    def style_key_value_pairs(self) -> Optional[StyleKeyValuePairs]:
        """Style pairs of this attribute, or None if it does not carry styles.

        Structured styles always produce a sequence, possibly empty. Plain text
        only counts when the attribute is named exactly ``style``.
        """
        if isinstance(self.value, Styles):
            return self.value.pairs()
        if isinstance(self.value, str) and self.name == STYLE_ATTRIBUTE:
            return StyleKeyValuePairs.from_plain(self.value)
        return None

    def merge_with(self, other: StoredAttribute) -> None:
        if other.name != self.name:
            raise AttributeMergeError(self.name, other.name)

        mode = other.merge_mode or default_merge_mode(other.name)
        if other.value is None:
            return

        if mode.action is MergeAction.REPLACE_VALUE or self.value is None:
            self.value = other.value.copy() if isinstance(other.value, Styles) else other.value
        elif mode.action is MergeAction.IGNORE_IF_SET:
            logger.debug("Ignoring %s=%r, already set", self.name, other.value)
            return
        elif isinstance(self.value, str) and isinstance(other.value, str):
            # style text is a declaration list, so it always joins on ";"
            separator = ";" if self.name == STYLE_ATTRIBUTE else mode.separator
            self.value = f"{self.value}{separator}{other.value}"
        else:
            merged = _as_styles(self.value)
            merged.extend(_as_styles(other.value))
            self.value = merged
        logger.debug("Merged attribute %s (%s)", self.name, mode.action.value)

    def rendered_value(self, style_separator: str = ";") -> Optional[str]:
        pairs = self.style_key_value_pairs
        if pairs is not None:
            return style_separator.join(f"{key}:{value}" for key, value in pairs)
        if isinstance(self.value, str):
            return self.value
        return None


class AttributeStorage:
    """Attributes of one element, ordered by first insertion."""

    def __init__(self, attributes: Iterable[StoredAttribute] = ()) -> None:
        self._by_name: Dict[str, StoredAttribute] = {}
        for attr in attributes:
            self.add(attr)

    def add(self, attr: StoredAttribute) -> StoredAttribute:
        existing = self._by_name.get(attr.name)
        if existing is None:
            self._by_name[attr.name] = attr
            return attr
        existing.merge_with(attr)
        return existing

    def get(self, name: str) -> Optional[StoredAttribute]:
        return self._by_name.get(name)

    def value(self, name: str) -> AttributeValue:
        attr = self._by_name.get(name)
        return None if attr is None else attr.value

    def names(self) -> List[str]:
        return list(self._by_name)

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def __iter__(self) -> Iterator[StoredAttribute]:
        return iter(self._by_name.values())

    def __len__(self) -> int:
        return len(self._by_name)
