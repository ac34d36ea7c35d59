from __future__ import annotations
from typing import Iterator, NamedTuple, Optional, Tuple

# space, tab, LF, CR, FF
CSS_WHITESPACE = " \t\n\r\f"


class StylePair(NamedTuple):
    key: str
    value: str


def trimmed_bounds(text: str, lo: int, hi: int) -> Tuple[int, int]:
    """Shrink ``[lo, hi)`` past leading and trailing CSS whitespace."""
    while lo < hi and text[lo] in CSS_WHITESPACE:
        lo += 1
    while hi > lo and text[hi - 1] in CSS_WHITESPACE:
        hi -= 1
    return lo, hi


def trim_css_whitespace(text: str) -> str:
    lo, hi = trimmed_bounds(text, 0, len(text))
    return text[lo:hi]


def next_style_pair(text: str, pos: int = 0, end: Optional[int] = None) -> Tuple[Optional[StylePair], int]:
    """Read the next ``key:value`` declaration from ``text[pos:end]``.

    Returns the pair (or None once the range holds no more declarations) and
    the position to resume from. Segments without a colon or with an empty
    key are skipped.
    """
    if end is None:
        end = len(text)

    while pos < end:
        semi = text.find(";", pos, end)
        segment_end = end if semi == -1 else semi
        start = pos
        pos = end if semi == -1 else semi + 1

        colon = text.find(":", start, segment_end)
        if colon == -1:
            continue

        k_lo, k_hi = trimmed_bounds(text, start, colon)
        if k_lo == k_hi:
            continue
        v_lo, v_hi = trimmed_bounds(text, colon + 1, segment_end)

        return StylePair(text[k_lo:k_hi], text[v_lo:v_hi]), pos

    return None, end


def iter_declarations(text: str) -> Iterator[StylePair]:
    pos = 0
    while True:
        pair, pos = next_style_pair(text, pos)
        if pair is None:
            return
        yield pair
