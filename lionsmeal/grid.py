import re
from dataclasses import dataclass, field

from .exceptions import TableShapeError


MEAL_SLOTS = ("breakfast", "lunch", "dinner", "supper")
EMPTY_LINES = re.compile(r"\n\s+\n")


@dataclass(frozen=True)
class TableLayout:
    """Where the menu table keeps its data.

    The anchor date is the last cell of ``anchor_row``. Each meal slot is a
    whole row whose first ``label_columns`` cells are labels, followed by one
    cell per weekday.
    """

    anchor_row: int = 0
    slot_rows: dict = field(
        default_factory=lambda: {"breakfast": 2, "lunch": 3, "dinner": 4, "supper": 5}
    )
    label_columns: int = 1
    days: int = 7

    @property
    def min_cells(self):
        return self.label_columns + self.days


DEFAULT_LAYOUT = TableLayout()


def clean_cell_text(text):
    text = text.strip()
    return EMPTY_LINES.sub("\n", text)


def table_rows(soup):
    table = soup.find("table")
    if table is None:
        raise TableShapeError("Page has no table")
    return table.find_all("tr")


def row_cells(row):
    return row.find_all("td")


def _row(rows, index, name):
    if index >= len(rows):
        raise TableShapeError(f"Table has {len(rows)} rows, {name} expected at row {index}")
    return rows[index]


def extract_anchor_text(rows, layout=DEFAULT_LAYOUT):
    cells = row_cells(_row(rows, layout.anchor_row, "anchor date"))
    if not cells:
        raise TableShapeError(f"Anchor row {layout.anchor_row} has no cells")
    return cells[-1].get_text().strip()


def extract_meal_grid(rows, layout=DEFAULT_LAYOUT):
    """Read one cleaned string per weekday for every meal slot."""
    grid = {}
    for slot in MEAL_SLOTS:
        index = layout.slot_rows[slot]
        cells = row_cells(_row(rows, index, slot))
        if len(cells) < layout.min_cells:
            raise TableShapeError(
                f"{slot} row {index} has {len(cells)} cells, expected at least {layout.min_cells}"
            )
        data = cells[layout.label_columns:layout.min_cells]
        grid[slot] = [clean_cell_text(cell.get_text()) for cell in data]
    return grid
