"""HTTP client for the meal register router."""
import logging
import time

import requests

from models import InitialData, TodayEntry, ReportRow, RowDecodeError
from .errors import ApiError, TransientNetworkError
from .retry import SUBMIT_POLICY, attempt_with_retry

logger = logging.getLogger(__name__)

FORM_HEADERS = {"Content-Type": "application/x-www-form-urlencoded"}


def decode_rows(record, rows):
    try:
        return [record.from_row(list(row)) for row in rows or []]
    except (RowDecodeError, TypeError) as e:
        raise ApiError(f"Malformed response: {e}") from e


class MealApiClient:
    def __init__(self, base_url, session=None, timeout=30, policy=SUBMIT_POLICY, sleep=time.sleep):
        self.base_url = base_url
        self.session = session or requests.Session()
        self.timeout = timeout
        self.policy = policy
        self.sleep = sleep

    @classmethod
    def from_config(cls, config, **kwargs):
        return cls(config["MEAL_API_URL"], timeout=config["MEAL_API_TIMEOUT"], **kwargs)

    def _get(self, action):
        # Error envelopes come back with 4xx/5xx; read the body anyway.
        try:
            r = self.session.get(self.base_url, params={"action": action}, timeout=self.timeout)
            result = r.json()
        except (requests.RequestException, ValueError) as e:
            raise TransientNetworkError(str(e)) from e
        if result.get("status") != "success":
            logger.error("%s failed: %s", action, result.get("message"))
            raise ApiError(result.get("message") or "Unknown error.")
        return result

    def get_initial_data(self):
        return InitialData.from_payload(self._get("getInitialData"))

    def get_today_entries(self):
        return decode_rows(TodayEntry, self._get("getTodayEntries").get("data"))

    def get_meal_reports(self):
        return decode_rows(ReportRow, self._get("getMealReports").get("data"))

    def _post_once(self, fields):
        try:
            r = self.session.post(self.base_url, data=fields, headers=FORM_HEADERS, timeout=self.timeout)
        except requests.RequestException as e:
            raise TransientNetworkError(str(e)) from e
        if not r.ok:
            raise TransientNetworkError(f"HTTP {r.status_code}")
        return r

    def submit_entry(self, fields):
        """Post one entry; returns the router's success message."""
        response = attempt_with_retry(lambda: self._post_once(fields), self.policy, self.sleep)
        try:
            result = response.json()
        except ValueError as e:
            raise TransientNetworkError(str(e)) from e
        logger.debug("Submission response: %s", result)
        if result.get("status") != "success":
            raise ApiError(result.get("message") or "Unknown error. Check console.")
        return result.get("message")
