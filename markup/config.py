from __future__ import annotations

from dataclasses import dataclass, field
from typing import FrozenSet

VOID_TAGS: FrozenSet[str] = frozenset({"br", "img", "meta", "link", "input", "hr"})
RAW_TEXT_TAGS: FrozenSet[str] = frozenset({"script", "style"})  # inner text is not markup


@dataclass(frozen=True)
class RenderConfig:
    style_separator: str = ";"
    drop_empty_style: bool = True  # omit style="" when no pairs survive parsing
    void_tags: FrozenSet[str] = field(default=VOID_TAGS)
