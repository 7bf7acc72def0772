from datetime import datetime

import pytest

import meals
from app import create_app
from config import TestingConfig
from store import MemoryStore

FIXED_NOW = datetime(2025, 10, 9, 12, 30)

CONFIG_ROWS = [
    ['2025', 'Lunch orders close at 10 AM'],
    ['Alice', 'Veg', 'Veg'],
    ['   ', 'Non-Veg', 'Non-Veg'],
    ['Bob', None, ''],
]

ENTRY_HEADER = ['Timestamp', 'Name', "Today's Meal", "Next Day's Meal"]
REPORT_HEADER = ['NameOfB', 'Given Taka', 'Total Meal', 'Enough']


class FakeScheduler:
    """Deferred callbacks driven by advance() instead of wall time."""

    class Handle:
        def __init__(self, when, callback):
            self.when = when
            self.callback = callback
            self.cancelled = False

        def cancel(self):
            self.cancelled = True

    def __init__(self):
        self.time = 0.0
        self.pending = []

    def call_later(self, delay, callback):
        handle = self.Handle(self.time + delay, callback)
        self.pending.append(handle)
        return handle

    def advance(self, seconds):
        self.time += seconds
        due = sorted((h for h in self.pending if h.when <= self.time + 1e-9), key=lambda h: h.when)
        for handle in due:
            self.pending.remove(handle)
            if not handle.cancelled:
                handle.callback()


@pytest.fixture
def store():
    return MemoryStore({
        'Config': CONFIG_ROWS,
        'Meal_Entries': [ENTRY_HEADER],
        'Reports': [REPORT_HEADER],
    })


@pytest.fixture
def app(store, monkeypatch):
    monkeypatch.setattr(meals, 'now', lambda: FIXED_NOW)
    app = create_app(TestingConfig, store=store)
    yield app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def scheduler():
    return FakeScheduler()
