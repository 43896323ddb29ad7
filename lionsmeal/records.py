import json
from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from .grid import MEAL_SLOTS
from .exceptions import TableShapeError


class DateFormat(str, Enum):
    EPOCH = "epoch"
    STRING = "string"


@dataclass(frozen=True)
class DayRecord:
    date: datetime
    breakfast: str
    lunch: str
    dinner: str
    supper: str

    def format_date(self, date_format=DateFormat.EPOCH):
        if DateFormat(date_format) is DateFormat.STRING:
            return f"{self.date.day}-{self.date.month}-{self.date.year}"
        return int(self.date.timestamp())

    def to_dict(self, date_format=DateFormat.EPOCH):
        return {
            "date": self.format_date(date_format),
            "breakfast": self.breakfast,
            "lunch": self.lunch,
            "dinner": self.dinner,
            "supper": self.supper,
        }


def assemble_week(week, grid):
    """Pair the week's dates with the grid columns, index by index."""
    dates = week.days()
    for slot in MEAL_SLOTS:
        if len(grid[slot]) != len(dates):
            raise TableShapeError(f"{slot} has {len(grid[slot])} days, expected {len(dates)}")

    return [
        DayRecord(date, *(grid[slot][i] for slot in MEAL_SLOTS))
        for i, date in enumerate(dates)
    ]


def dumps_records(records, date_format=DateFormat.EPOCH):
    payload = [record.to_dict(date_format) for record in records]
    return json.dumps(payload, ensure_ascii=False) + "\n"


def dump_records(records, fp, date_format=DateFormat.EPOCH):
    fp.write(dumps_records(records, date_format))
