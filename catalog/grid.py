"""
Grid pagination for product pages.

Rows fill the cells of a page in row-major order; a new page starts whenever the
cell index wraps back to zero.
"""

import math
from typing import List, Sequence

from .models import CellBox, GridSpec, PageSize, Placement, ProductRow


class GridPaginator:
    """Maps a flat sequence of rows onto pages of fixed-size cells."""

    def __init__(self, page: PageSize, grid: GridSpec):
        self.page = page
        self.grid = grid

    @property
    def cell_width(self) -> float:
        return (self.page.width - 2 * self.grid.margin) / self.grid.cols

    @property
    def cell_height(self) -> float:
        return (self.page.height - 2 * self.grid.margin) / self.grid.rows

    def cell_box(self, cell_index: int) -> CellBox:
        cell_row, cell_col = divmod(cell_index, self.grid.cols)
        return CellBox(
            x=self.grid.margin + cell_col * self.cell_width,
            y=self.grid.margin + cell_row * self.cell_height,
            width=self.cell_width,
            height=self.cell_height,
        )

    def page_count(self, row_count: int) -> int:
        return math.ceil(row_count / self.grid.cells_per_page)

    def paginate(self, rows: Sequence[ProductRow]) -> List[Placement]:
        """One placement per row, in the same order as the rows."""
        placements = []
        for i in range(len(rows)):
            page_index, cell_index = divmod(i, self.grid.cells_per_page)
            placements.append(Placement(page_index, cell_index, self.cell_box(cell_index)))
        return placements
