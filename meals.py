"""Read and write operations of the meal register over the tabular store."""
from dataclasses import dataclass
from enum import Enum

from flask import current_app

from errors import InvalidRequest, MealRegisterError, NotFound, ServerFault
from models import Entry, InitialData, ReportRow, DEFAULT_YEAR, DEFAULT_NOTICE
from store import get_store
from utils import now, display_value, non_blank, is_same_day

REQUIRED_FIELDS = ('name', 'meal', 'nextDay')
SUBMIT_OK = 'Data submitted successfully'


class Action(str, Enum):
    GET_INITIAL_DATA = 'getInitialData'
    GET_TODAY_ENTRIES = 'getTodayEntries'
    GET_MEAL_REPORTS = 'getMealReports'

    @classmethod
    def parse(cls, value):
        try:
            return cls(value)
        except ValueError:
            raise InvalidRequest(f"Invalid action: {value}")


@dataclass
class SubmitEntry:
    name: str
    meal: str
    next_day: str

    @classmethod
    def from_form(cls, params):
        if not all(params.get(field) for field in REQUIRED_FIELDS):
            raise InvalidRequest('Missing required form data: name, meal, or nextDay.')
        return cls(params['name'], params['meal'], params['nextDay'])


def envelope(status, **payload):
    return {'status': status, **payload}


def as_fault(error):
    if isinstance(error, MealRegisterError):
        return error
    return ServerFault(str(error))


def load_initial_data():
    store = get_store()
    sheet = current_app.config['CONFIG_SHEET']
    if not store.has_table(sheet):
        raise NotFound(f"Configuration sheet not found: {sheet}")

    # A1: year, B1: notice; columns A, B, C from row 2: names, meals, next day meals
    year_name = display_value(store.read_cell(sheet, 1, 1)) or DEFAULT_YEAR
    notice_text = display_value(store.read_cell(sheet, 1, 2)) or DEFAULT_NOTICE

    last = store.last_row(sheet)
    rows = store.read_range(sheet, 2, 1, last - 1, 3) if last >= 2 else []
    return InitialData(names=non_blank(r[0] for r in rows),
                       meals=non_blank(r[1] for r in rows),
                       next_day_meals=non_blank(r[2] for r in rows),
                       year_name=year_name,
                       notice_text=notice_text)


def _data_rows(sheet):
    store = get_store()
    if not store.has_table(sheet):
        return []
    last = store.last_row(sheet)
    if last < 2:
        return []
    return store.read_range(sheet, 2, 1, last - 1, 4)


def load_today_entries(today=None):
    today = today or now().date()
    entries = [Entry.from_row(r) for r in _data_rows(current_app.config['ENTRIES_SHEET'])]
    return [e.to_today() for e in entries if is_same_day(e.timestamp, today)]


def load_meal_reports():
    return [ReportRow.from_row(r) for r in _data_rows(current_app.config['REPORTS_SHEET'])]


def initial_data_payload():
    return load_initial_data().to_payload()


def today_entries_payload():
    return {'data': [e.to_row() for e in load_today_entries()]}


def meal_reports_payload():
    return {'data': [r.to_row() for r in load_meal_reports()]}


HANDLERS = {
    Action.GET_INITIAL_DATA: initial_data_payload,
    Action.GET_TODAY_ENTRIES: today_entries_payload,
    Action.GET_MEAL_REPORTS: meal_reports_payload,
}


def read(action_value):
    """Envelope and HTTP status for a read action."""
    try:
        action = Action.parse(action_value)
    except InvalidRequest as e:
        return envelope('error', message=e.message), e.status_code

    try:
        payload = HANDLERS[action]()
    except Exception as e:
        current_app.logger.exception("Error in read action %s", action.value)
        fault = as_fault(e)
        return envelope('error', message=f"Server error: {fault.message}"), fault.status_code
    return envelope('success', **payload), 200


def append_entry(submission):
    entry = Entry(now(), submission.name, submission.meal, submission.next_day)
    get_store().append_row(current_app.config['ENTRIES_SHEET'], entry.to_row())
    current_app.logger.info("Entry appended for %s", entry.name)
    return entry


def write(params):
    """Envelope and HTTP status for a form submission."""
    try:
        submission = SubmitEntry.from_form(params)
    except InvalidRequest as e:
        return envelope('error', message=e.message), e.status_code

    try:
        append_entry(submission)
    except Exception as e:
        current_app.logger.exception("Error in submission")
        fault = as_fault(e)
        return envelope('error', message=f"Submission failed: {fault.message}"), fault.status_code
    return envelope('success', message=SUBMIT_OK), 200
