"""Cursor based region extraction over the raw event-names markup."""

from dataclasses import dataclass

SECTION_MARKER = "<h2 "


@dataclass(frozen=True)
class Region:
    """A span of the document from a start marker through its end marker."""

    text: str
    start: int
    end: int


def find_region(document: str, start: str, end: str, cursor: int) -> Region | None:
    """Find the next ``start``...``end`` span at or after ``cursor``.

    A region never crosses into the next section: if a section heading
    appears after the cursor and before the end marker (other than the one
    the region itself starts with) no region is returned.

    Args:
        document: Whole document text.
        start: Start marker.
        end: End marker, searched from the start marker onward.
        cursor: Position to search from.

    Returns:
        The region, whose ``end`` is the cursor for the next search, or None if
        there is no further region in the current section.
    """
    start_index = document.find(start, cursor)
    if start_index == -1:
        return None
    end_index = document.find(end, start_index)
    if end_index == -1:
        return None

    next_section = document.find(SECTION_MARKER, cursor)
    if next_section not in (-1, start_index) and next_section < end_index:
        return None

    stop = end_index + len(end)
    return Region(text=document[start_index:stop], start=start_index, end=stop)
