from dataclasses import dataclass
from typing import Any

from . import RowDecodeError

STATUS_YES = "status-yes"
STATUS_NO = "status-no"
STATUS_NA = "status-n_a"


@dataclass
class ReportRow:
    name: Any
    amount_given: Any
    total_meals: Any
    status: Any

    @classmethod
    def from_row(cls, row):
        if len(row) != 4:
            raise RowDecodeError("Report", 4, row)
        return cls(*row)

    def to_row(self):
        return [self.name, self.amount_given, self.total_meals, self.status]

    @property
    def status_class(self):
        value = "" if self.status is None else str(self.status).lower()
        if value == "yes":
            return STATUS_YES
        if value == "no":
            return STATUS_NO
        return STATUS_NA
