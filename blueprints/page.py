import time

from flask import Blueprint, current_app, request, render_template

import meals
from client.api import decode_rows
from client.errors import ApiError, TransientNetworkError
from client.retry import RetryPolicy, attempt_with_retry
from client.view import (ViewController, ImmediateScheduler, BrowserScheduler,
                         MESSAGE_TIMEOUT)
from models import InitialData, TodayEntry, ReportRow

page_bp = Blueprint('page', __name__)


def submit_policy(config):
    scale = config['SUBMIT_BACKOFF_SCALE']
    return RetryPolicy(max_attempts=config['SUBMIT_MAX_ATTEMPTS'],
                       backoff=lambda attempt: scale * 2 ** attempt)


class LocalBackend:
    """Same calls as MealApiClient, answered in-process by the router code."""

    def __init__(self, policy=None, sleep=time.sleep):
        self.policy = policy or submit_policy(current_app.config)
        self.sleep = sleep

    def _read(self, action):
        result, _ = meals.read(action)
        if result['status'] != 'success':
            raise ApiError(result.get('message') or 'Unknown error.')
        return result

    def get_initial_data(self):
        return InitialData.from_payload(self._read(meals.Action.GET_INITIAL_DATA.value))

    def get_today_entries(self):
        return decode_rows(TodayEntry, self._read(meals.Action.GET_TODAY_ENTRIES.value)['data'])

    def get_meal_reports(self):
        return decode_rows(ReportRow, self._read(meals.Action.GET_MEAL_REPORTS.value)['data'])

    def _write_once(self, fields):
        result, status = meals.write(fields)
        # A rejected form fails the same way every time; only store faults are retried.
        if 400 <= status < 500:
            raise ApiError(result['message'])
        if status >= 500:
            raise TransientNetworkError(result['message'])
        return result

    def submit_entry(self, fields):
        result = attempt_with_retry(lambda: self._write_once(fields), self.policy, self.sleep)
        return result['message']


def build_view():
    # Panels settle before rendering; the message box is dismissed by the page itself.
    view = ViewController(LocalBackend(), scheduler=ImmediateScheduler(),
                          message_scheduler=BrowserScheduler())
    view.load_initial_data()
    return view


def render_page(view):
    return render_template('index.html', view=view, message_timeout=MESSAGE_TIMEOUT)


def form_page():
    view = build_view()

    report = request.args.get('report')
    if report in view.panels:
        view.toggle_report(report)

    return render_page(view)


@page_bp.route('/submit', methods=['POST'])
def submit_form():
    view = build_view()
    view.submit(request.form.to_dict())
    return render_page(view)
