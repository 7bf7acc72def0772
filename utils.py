from datetime import datetime, date
from urllib.parse import unquote_plus


def now():
    return datetime.now()


def normalize_date(value):
    """Local calendar date of a timestamp cell, or None when it is not a date."""
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone()
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            parsed = datetime.fromisoformat(value.strip())
        except ValueError:
            return None
        return normalize_date(parsed)
    return None


def is_same_day(value, today):
    return normalize_date(value) == today


def display_value(value):
    if value is None:
        return ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def non_blank(values):
    """Display strings of the non-blank cells, in order."""
    return [display_value(v) for v in values if display_value(v).strip() != ""]


def parse_form_encoded(body):
    params = {}
    for pair in body.split("&"):
        if not pair:
            continue
        key, _, value = pair.partition("=")
        params[unquote_plus(key)] = unquote_plus(value)
    return params
