from __future__ import annotations
import logging
import re
from typing import Dict, List, Mapping, Optional

from markup.attributes import MergeMode, StoredAttribute
from markup.config import RAW_TEXT_TAGS, VOID_TAGS
from markup.dom import ElementNode, TextNode

logger = logging.getLogger(__name__)

TAG_RE = re.compile(r"<(/?)([a-zA-Z0-9]+)([^>]*)>")
ATTR_RE = re.compile(r"""([a-zA-Z_:][-a-zA-Z0-9_:.]*)(?:\s*=\s*(".*?"|'.*?'|[^\s"'>]+))?""")


class HTMLParser:
    def __init__(self, source: str, merge_modes: Optional[Mapping[str, MergeMode]] = None) -> None:
        self.source = source or ""
        # per attribute name, for repeated attributes on one tag
        self.merge_modes: Dict[str, MergeMode] = dict(merge_modes or {})

    def parse(self) -> ElementNode:
        root = ElementNode(tag="html")
        stack: List[ElementNode] = [root]

        i = 0
        while True:
            m = TAG_RE.search(self.source, i)
            if not m:
                self._emit_text(stack[-1], self.source[i:], raw=(stack[-1].tag in RAW_TEXT_TAGS))
                break

            start, end = m.span()
            if start > i:
                self._emit_text(stack[-1], self.source[i:start], raw=(stack[-1].tag in RAW_TEXT_TAGS))

            closing, tag, attr_text = m.group(1), m.group(2).lower(), m.group(3)
            i = end

            if closing:
                if not any(el.tag == tag for el in stack[1:]):
                    logger.debug("Ignoring stray closing tag </%s> at offset %d", tag, start)
                    continue
                while stack[-1].tag != tag:
                    stack.pop()
                stack.pop()
                continue

            el = ElementNode(tag=tag)
            self._parse_attrs(el, attr_text)
            stack[-1].append(el)

            if tag in VOID_TAGS:
                continue

            stack.append(el)

            # raw text runs until the matching closing tag
            if tag in RAW_TEXT_TAGS:
                close_pat = f"</{tag}>"
                close_m = re.compile(re.escape(close_pat), re.IGNORECASE).search(self.source, i)
                if close_m is None:
                    logger.debug("Unterminated <%s> element, consuming rest of input", tag)
                    raw = self.source[i:]
                    if raw:
                        el.append(TextNode(text=raw))
                    i = len(self.source)
                else:
                    raw = self.source[i:close_m.start()]
                    if raw:
                        el.append(TextNode(text=raw))
                    i = close_m.end()
                    stack.pop()

        return root

    def _emit_text(self, parent: ElementNode, text: str, raw: bool) -> None:
        if not text:
            return
        if raw:
            parent.append(TextNode(text=text))
            return
        t = re.sub(r"\s+", " ", text).strip()
        if t:
            parent.append(TextNode(text=t))

    def _parse_attrs(self, el: ElementNode, s: str) -> None:
        # key="value" / key='value' / key=value / bare key
        for k, v in ATTR_RE.findall(s):
            value: Optional[str] = None
            if v:
                value = v
                if len(v) >= 2 and v[0] == v[-1] and v[0] in "\"'":
                    value = v[1:-1]
            name = k.lower()
            el.attributes.add(StoredAttribute(name, value, self.merge_modes.get(name)))


def parse_html(source: str, merge_modes: Optional[Mapping[str, MergeMode]] = None) -> ElementNode:
    return HTMLParser(source, merge_modes).parse()
