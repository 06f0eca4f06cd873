from __future__ import annotations

from typing import Optional, Sequence

from rich.console import RenderableType
from rich.table import Table
from rich.text import Text
from textual.reactive import reactive
from textual.widget import Widget

from models.catalog import Catalog, CatalogEntry
from styles import COLOR_MUTED, COLOR_PRIMARY

COLUMNS = (("Track", 42), ("Artist", 34), ("Album", 24))
HEADER_HEIGHT = 1
SELECTED_STYLE = "reverse"


def row_height(entry: CatalogEntry) -> int:
    """Lines needed to draw an entry; cells may contain newlines."""
    return max(cell.count("\n") for cell in entry.cells) + 1


def visible_rows(
    heights: Sequence[int],
    selected: Optional[int],
    offset: int,
    max_height: int,
) -> tuple[int, int]:
    """Return the half-open ``(start, end)`` range of rows to draw.

    Starts from the previous ``offset`` and scrolls only as far as needed to
    keep ``selected`` on screen.
    """
    if not heights or max_height <= 0:
        return 0, 0

    offset = min(max(offset, 0), len(heights) - 1)
    start = end = offset
    height = 0
    for h in heights[offset:]:
        if height + h > max_height:
            break
        height += h
        end += 1

    if selected is None:
        return start, end

    selected = min(selected, len(heights) - 1)
    while selected >= end:
        height += heights[end]
        end += 1
        while height > max_height and start < end - 1:
            height -= heights[start]
            start += 1
    while selected < start:
        start -= 1
        height += heights[start]
        while height > max_height and end > start + 1:
            end -= 1
            height -= heights[end]

    return start, end


class LibraryView(Widget):
    """Library table with Track/Artist/Album columns and a reverse-video cursor."""
    
    DEFAULT_CSS = """
    LibraryView {
        background: #1a1a1a;
        border: solid #ff8c00;
        border-title-color: #ff8c00;
        border-title-style: bold;
        height: 50%;
    }
    """
    
    selected_index: reactive[Optional[int]] = reactive(None)
    
    def __init__(self, catalog: Catalog, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.catalog = catalog
        self._heights = [row_height(entry) for entry in catalog]
        self._offset = 0
    
    def on_mount(self) -> None:
        self.border_title = f"Muse: Loaded from {self.catalog.root}"
    
    @property
    def offset_row(self) -> int:
        """First row drawn on the last render."""
        return self._offset
    
    def render(self) -> RenderableType:
        if not self.catalog:
            result = Text(justify="center")
            result.append(f"No .mp3 files found in {self.catalog.root}\n", style=COLOR_MUTED)
            result.append("Press q to quit", style=f"{COLOR_PRIMARY} bold")
            return result
        
        max_height = self.content_size.height - HEADER_HEIGHT
        start, end = visible_rows(self._heights, self.selected_index, self._offset, max_height)
        self._offset = start
        return self._build_table(start, end, self.selected_index)
    
    def _build_table(self, start: int, end: int, selected: Optional[int]) -> Table:
        table = Table(
            expand=True,
            box=None,
            show_edge=False,
            pad_edge=False,
            header_style="",
            padding=(0, 1),
        )
        for label, ratio in COLUMNS:
            table.add_column(
                label,
                ratio=ratio,
                header_style="underline",
                no_wrap=True,
                overflow="ellipsis",
            )
        
        for index in range(start, end):
            style = SELECTED_STYLE if index == selected else ""
            table.add_row(*self.catalog[index].cells, style=style)
        
        return table
