"""Tabular store backing the meal register.

The spreadsheet is the database: three named tables (configuration, entries
and reports) read by 1-based ranges and appended to row by row, the same way
the administrator sees them in the workbook.
"""
from flask import current_app
from openpyxl import load_workbook

from errors import NotFound

EXTENSION_KEY = "meal_store"


class TableNotFound(NotFound):
    def __init__(self, table):
        super().__init__(f"Sheet not found: {table}")
        self.table = table


def _is_blank_row(row):
    return all(value is None or (isinstance(value, str) and value == "") for value in row)


def _last_used(rows):
    last = 0
    for i, row in enumerate(rows, start=1):
        if not _is_blank_row(row):
            last = i
    return last


class TableStore:
    """Range-read and row-append access to named tables."""

    def has_table(self, table):
        raise NotImplementedError

    def last_row(self, table):
        raise NotImplementedError

    def read_range(self, table, row_start, col_start, row_count, col_count):
        raise NotImplementedError

    def read_cell(self, table, row, col):
        rows = self.read_range(table, row, col, 1, 1)
        return rows[0][0]

    def append_row(self, table, row):
        raise NotImplementedError


class MemoryStore(TableStore):
    def __init__(self, tables=None):
        self.tables = {name: [list(r) for r in rows] for name, rows in (tables or {}).items()}

    def _rows(self, table):
        if table not in self.tables:
            raise TableNotFound(table)
        return self.tables[table]

    def has_table(self, table):
        return table in self.tables

    def last_row(self, table):
        return _last_used(self._rows(table))

    def read_range(self, table, row_start, col_start, row_count, col_count):
        rows = self._rows(table)
        if row_count <= 0 or col_count <= 0:
            return []
        result = []
        for r in range(row_start - 1, row_start - 1 + row_count):
            row = rows[r] if r < len(rows) else []
            cells = []
            for c in range(col_start - 1, col_start - 1 + col_count):
                cells.append(row[c] if c < len(row) else None)
            result.append(cells)
        return result

    def append_row(self, table, row):
        rows = self._rows(table)
        del rows[_last_used(rows):]
        rows.append(list(row))


class WorkbookStore(TableStore):
    """An .xlsx workbook on disk, opened for every operation."""

    def __init__(self, path):
        self.path = path

    def _sheet(self, workbook, table):
        if table not in workbook.sheetnames:
            raise TableNotFound(table)
        return workbook[table]

    def has_table(self, table):
        wb = load_workbook(self.path, read_only=True)
        try:
            return table in wb.sheetnames
        finally:
            wb.close()

    def last_row(self, table):
        wb = load_workbook(self.path, read_only=True, data_only=True)
        try:
            ws = self._sheet(wb, table)
            return _last_used(ws.iter_rows(values_only=True))
        finally:
            wb.close()

    def read_range(self, table, row_start, col_start, row_count, col_count):
        if row_count <= 0 or col_count <= 0:
            return []
        # Reports are usually formulas; read their cached values.
        wb = load_workbook(self.path, data_only=True)
        try:
            ws = self._sheet(wb, table)
            values = ws.iter_rows(min_row=row_start,
                                  max_row=row_start + row_count - 1,
                                  min_col=col_start,
                                  max_col=col_start + col_count - 1,
                                  values_only=True)
            return [list(row) for row in values]
        finally:
            wb.close()

    def append_row(self, table, row):
        wb = load_workbook(self.path)
        try:
            ws = self._sheet(wb, table)
            next_row = _last_used(ws.iter_rows(values_only=True)) + 1
            for col, value in enumerate(row, start=1):
                ws.cell(row=next_row, column=col, value=value)
            wb.save(self.path)
        finally:
            wb.close()


def init_store(app):
    if EXTENSION_KEY in app.extensions:
        return app.extensions[EXTENSION_KEY]
    path = app.config.get("WORKBOOK_PATH")
    store = WorkbookStore(path) if path else MemoryStore()
    app.extensions[EXTENSION_KEY] = store
    return store


def get_store():
    return current_app.extensions[EXTENSION_KEY]
