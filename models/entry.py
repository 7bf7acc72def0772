from dataclasses import dataclass
from datetime import datetime

from . import RowDecodeError


@dataclass
class Entry:
    """One row of the entries sheet: Timestamp, Name, Today's Meal, Next Day's Meal."""

    timestamp: datetime
    name: str
    meal: str
    next_day_meal: str

    @classmethod
    def from_row(cls, row):
        if len(row) != 4:
            raise RowDecodeError("Entry", 4, row)
        return cls(*row)

    def to_row(self):
        return [self.timestamp, self.name, self.meal, self.next_day_meal]

    def to_today(self):
        return TodayEntry(self.name, self.meal, self.next_day_meal)


@dataclass
class TodayEntry:
    name: str
    meal: str
    next_day_meal: str

    @classmethod
    def from_row(cls, row):
        if len(row) != 3:
            raise RowDecodeError("Today entry", 3, row)
        return cls(*row)

    def to_row(self):
        return [self.name, self.meal, self.next_day_meal]
