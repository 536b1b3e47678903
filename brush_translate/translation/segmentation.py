"""
Sentence segmentation for interactive rendering

Component offsets come from the model as UTF-16 code units. Python strings
index by code point, so each string gets an explicit UTF-16 -> code point
table; offsets that fall inside a surrogate pair, or in front of a
combining mark, do not map to a boundary and abort segmentation.
"""
import unicodedata
from typing import Iterable, List, Optional, Sequence

from .models import Component, ComponentID, RenderSegment


# Code points that continue the preceding character
_JOINERS = {"\u200d"}
_VARIATION_SELECTORS = range(0xFE00, 0xFE10)


def utf16_length(text: str) -> int:
    """Length of ``text`` in UTF-16 code units"""
    return len(text.encode("utf-16-le", "surrogatepass")) // 2


def _is_continuation(char: str) -> bool:
    return (
        unicodedata.combining(char) != 0
        or char in _JOINERS
        or ord(char) in _VARIATION_SELECTORS
    )


class Utf16Index:
    """Maps UTF-16 offsets of one string onto code point indices"""

    def __init__(self, text: str):
        self.text = text
        # None marks offsets that are not a valid cut position
        table: List[Optional[int]] = []
        for index, char in enumerate(text):
            table.append(None if _is_continuation(char) else index)
            if ord(char) > 0xFFFF:
                table.append(None)
        table.append(len(text))
        self._table = table

    @property
    def length(self) -> int:
        return len(self._table) - 1

    def to_index(self, offset: int) -> Optional[int]:
        if offset < 0 or offset > self.length:
            return None
        return self._table[offset]

    def substring(self, start: int, end: int) -> Optional[str]:
        """Slice by UTF-16 offsets, or None if either end is not a boundary"""
        lower = self.to_index(start)
        upper = self.to_index(end)
        if lower is None or upper is None or upper < lower:
            return None
        return self.text[lower:upper]


class SentenceSegmenter:
    """Turns analysed components into a gap-filled segment sequence"""

    def segment(self, source_text: str, components: Iterable[Component]) -> Optional[List[RenderSegment]]:
        """
        Build segments covering ``source_text`` in order.

        Components become interactive segments, the text between them plain
        gap segments. Returns None when a component overlaps its
        predecessor, ends before it starts, runs past the text, or cuts
        through a character; the caller then renders plain text.
        """
        index = Utf16Index(source_text)
        total = index.length
        ordered: Sequence[Component] = sorted(components, key=lambda c: c.start)

        cursor = 0
        segments: List[RenderSegment] = []

        for component in ordered:
            if component.start < cursor or component.end < component.start or component.end > total:
                return None

            if component.start > cursor:
                gap = index.substring(cursor, component.start)
                if gap is None:
                    return None
                if gap:
                    segments.append(RenderSegment(text=gap))

            piece = index.substring(component.start, component.end)
            if piece is None:
                return None
            if piece:
                segments.append(RenderSegment(
                    text=piece,
                    component_id=ComponentID(component.start, component.end),
                ))
            cursor = component.end

        if cursor < total:
            tail = index.substring(cursor, total)
            if tail is None:
                return None
            if tail:
                segments.append(RenderSegment(text=tail))

        return segments


def segment_sentence(source_text: str, components: Iterable[Component]) -> Optional[List[RenderSegment]]:
    return SentenceSegmenter().segment(source_text, components)
