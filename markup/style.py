from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional, Tuple, Union

from markup.css import StylePair, next_style_pair


@dataclass(frozen=True)
class StyleDeclaration:
    """A structured style entry, emitted as-is."""

    key: str
    value: str


@dataclass(frozen=True)
class RawStyleText:
    """Plain CSS declaration text, tokenized when iterated."""

    text: str


StyleEntry = Union[StyleDeclaration, RawStyleText]


class StylePairIterator:
    """Single-pass cursor over style entries and raw declaration text.

    Raw text is tokenized lazily, one declaration per ``__next__``; a raw
    entry never shows up as a pair itself.
    """

    __slots__ = ("_entries", "_entry_index", "_text", "_pos", "_end")

    def __init__(self, entries: Tuple[StyleEntry, ...], plain_value: Optional[str] = None) -> None:
        self._entries = entries
        self._entry_index = 0
        self._text = plain_value or ""
        self._pos = 0
        self._end = len(self._text)

    def __iter__(self) -> StylePairIterator:
        return self

    def __next__(self) -> StylePair:
        while True:
            pair, self._pos = next_style_pair(self._text, self._pos, self._end)
            if pair is not None:
                return pair

            if self._entry_index >= len(self._entries):
                raise StopIteration
            entry = self._entries[self._entry_index]
            self._entry_index += 1

            if isinstance(entry, RawStyleText):
                self._text = entry.text
                self._pos = 0
                self._end = len(entry.text)
            else:
                return StylePair(entry.key, entry.value)


class StyleKeyValuePairs:
    """Ordered (key, value) pairs of a style attribute.

    Holds a snapshot of the entries it was built from; every ``iter()`` starts
    a fresh pass from the beginning.
    """

    __slots__ = ("entries", "plain_value")

    def __init__(self, entries: Iterable[StyleEntry] = (), plain_value: Optional[str] = None) -> None:
        self.entries: Tuple[StyleEntry, ...] = tuple(entries)
        self.plain_value = plain_value

    @classmethod
    def from_plain(cls, text: str) -> StyleKeyValuePairs:
        return cls((), plain_value=text)

    def __iter__(self) -> Iterator[StylePair]:
        return StylePairIterator(self.entries, self.plain_value)

    def to_list(self) -> List[StylePair]:
        return list(self)

    def __repr__(self) -> str:
        return f"StyleKeyValuePairs({list(self)!r})"
