class RowDecodeError(ValueError):
    def __init__(self, kind, expected, row):
        super().__init__(f"{kind} row must have {expected} columns, got {len(row)}: {row!r}")
        self.row = row


from .entry import Entry, TodayEntry
from .report import ReportRow, STATUS_YES, STATUS_NO, STATUS_NA
from .initial_data import InitialData, DEFAULT_YEAR, DEFAULT_NOTICE
