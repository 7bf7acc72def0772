from datetime import datetime

import pytest

from models import (Entry, TodayEntry, ReportRow, InitialData, RowDecodeError,
                    STATUS_YES, STATUS_NO, STATUS_NA)


def test_entry_row_shapes():
    stamp = datetime(2025, 10, 9, 12, 30)
    entry = Entry.from_row([stamp, 'Alice', 'Veg', 'Non-Veg'])
    assert entry.to_row() == [stamp, 'Alice', 'Veg', 'Non-Veg']
    assert entry.to_today() == TodayEntry('Alice', 'Veg', 'Non-Veg')


@pytest.mark.parametrize('record, row', [
    (TodayEntry, ['Alice', 'Veg']),
    (ReportRow, ['Carol', 500, 42]),
    (Entry, ['x'] * 5),
])
def test_wrong_width_fails_with_description(record, row):
    with pytest.raises(RowDecodeError, match=f'got {len(row)}'):
        record.from_row(row)


@pytest.mark.parametrize('status, expected', [
    ('yes', STATUS_YES),
    ('YES', STATUS_YES),
    ('No', STATUS_NO),
    ('nO', STATUS_NO),
    ('maybe', STATUS_NA),
    ('', STATUS_NA),
    (None, STATUS_NA),
])
def test_report_status_class(status, expected):
    assert ReportRow('Carol', 500, 42, status).status_class == expected


def test_initial_data_from_partial_payload():
    data = InitialData.from_payload({'status': 'success', 'names': ['Alice']})
    assert data.names == ['Alice']
    assert data.meals == [] and data.next_day_meals == []
    assert data.year_name == 'Default Year'
    assert data.notice_text == 'No notice available.'
    assert InitialData.from_payload(data.to_payload()) == data
