"""UI state of the meal register form.

Everything the page shows lives on one ViewController built at startup and
handed to whatever drives it. Timed effects go through a scheduler so they
can be replaced in tests.
"""
import logging
import threading
from dataclasses import dataclass, field
from typing import List

from markupsafe import Markup

from .errors import ApiError, TransientNetworkError, RetryExhaustedError
from .render import TODAY, MEAL, render_report

logger = logging.getLogger(__name__)

MESSAGE_TIMEOUT = 3.5
SHOW_DELAY = 0.01
# Must match the CSS transition length of .report-container
HIDE_DELAY = 0.6

FETCHING = {TODAY: "Fetching today's entries...", MEAL: "Generating total meal report..."}
LOADED = {TODAY: "Loaded {n} entries for today.", MEAL: "Loaded {n} user records for the total report."}
FAILED = {TODAY: "Daily data failed to load. Try again.", MEAL: "Total meal report failed to load. Try again."}
CLOSED = {TODAY: "Today's entries report closed.", MEAL: "Total mess report closed."}
NETWORK_ERROR = "An error occurred. Check the service URL or network connection."


class _Done:
    def cancel(self):
        pass


class Scheduler:
    def call_later(self, delay, callback):
        timer = threading.Timer(delay, callback)
        timer.daemon = True
        timer.start()
        return timer


class ImmediateScheduler:
    """Runs callbacks at once, for rendering a settled state server-side."""

    def call_later(self, delay, callback):
        callback()
        return _Done()


class BrowserScheduler:
    """Leaves the callback to the page; the rendered CSS runs the timer."""

    def call_later(self, delay, callback):
        return _Done()


@dataclass
class SelectList:
    placeholder: str
    options: List[str] = field(default_factory=list)
    selected: str = ""

    def populate(self, values):
        self.options = list(values)
        self.selected = ""

    def choose(self, value):
        if value not in self.options:
            raise ValueError(f"{value!r} is not an option")
        self.selected = value

    def reset(self):
        self.selected = ""


@dataclass
class Button:
    label: str
    loading: bool = False

    @property
    def disabled(self):
        return self.loading


class MessageBox:
    def __init__(self, scheduler):
        self.scheduler = scheduler
        self.text = ""
        self.is_error = False
        self.visible = False
        self._timer = None

    def show(self, text, is_error=False):
        if self._timer is not None:
            self._timer.cancel()
        self.text = text
        self.is_error = is_error
        self.visible = True
        self._timer = self.scheduler.call_later(MESSAGE_TIMEOUT, self.dismiss)

    def dismiss(self):
        self.visible = False

    @property
    def css_class(self):
        classes = ["message-box"]
        if self.visible:
            classes.append("show")
        classes.append("message-box-error" if self.is_error else "message-box-success")
        return " ".join(classes)


class ReportPanel:
    def __init__(self, kind, scheduler):
        self.kind = kind
        self.scheduler = scheduler
        self.display = "none"
        self.visible = False
        self.content = Markup("")
        self._generation = 0

    def show(self):
        self._generation += 1
        generation = self._generation
        self.display = "block"

        def reveal():
            if generation == self._generation:
                self.visible = True

        self.scheduler.call_later(SHOW_DELAY, reveal)

    def hide(self):
        self._generation += 1
        generation = self._generation
        self.visible = False

        def collapse():
            if generation == self._generation:
                self.display = "none"

        self.scheduler.call_later(HIDE_DELAY, collapse)


class ViewController:
    def __init__(self, backend, scheduler=None, message_scheduler=None):
        self.backend = backend
        self.scheduler = scheduler or Scheduler()
        self.message_scheduler = message_scheduler or self.scheduler

        self.name_select = SelectList("Select Your Name")
        self.meal_select = SelectList("Select Meal")
        self.next_day_select = SelectList("Select Meal")
        self.year_name = ""
        self.notice_text = ""

        self.message = MessageBox(self.message_scheduler)
        self.submit_button = Button("Submit")
        self.report_buttons = {TODAY: Button("Today's Entries"), MEAL: Button("Total Meal Report")}
        self.panels = {TODAY: ReportPanel(TODAY, self.scheduler),
                       MEAL: ReportPanel(MEAL, self.scheduler)}
        self.fetchers = {TODAY: backend.get_today_entries, MEAL: backend.get_meal_reports}

    # Form

    def form_values(self):
        return {
            "name": self.name_select.selected,
            "meal": self.meal_select.selected,
            "nextDay": self.next_day_select.selected,
        }

    def reset_form(self):
        for select in (self.name_select, self.meal_select, self.next_day_select):
            select.reset()

    def load_initial_data(self, announce=True):
        if announce:
            self.message.show("Loading initial configuration data...")
        try:
            data = self.backend.get_initial_data()
        except ApiError as e:
            logger.error("Initial data loading failed: %s", e.message)
            self.message.show("Failed to load configuration data. Check the service URL or sheet.", is_error=True)
            return False
        except TransientNetworkError as e:
            logger.error("Error during initial data loading: %s", e)
            self.message.show("Connection error. Please ensure the meal register service is reachable.", is_error=True)
            return False

        self.name_select.populate(data.names)
        self.meal_select.populate(data.meals)
        self.next_day_select.populate(data.next_day_meals)
        if data.year_name:
            self.year_name = data.year_name
        if data.notice_text:
            self.notice_text = data.notice_text
        if announce:
            self.message.show("Configuration loaded successfully. Ready for entry!")
        return True

    def submit(self, fields=None):
        """Submit the form once; re-entrant calls while one is running are ignored."""
        if self.submit_button.disabled:
            return False
        fields = dict(fields) if fields is not None else self.form_values()

        self.submit_button.loading = True
        self.message.show("Submitting data...")
        try:
            self.backend.submit_entry(fields)
        except ApiError as e:
            logger.error("Submission failed: %s", e.message)
            self.message.show(f"Submission failed: {e.message}", is_error=True)
            return False
        except (RetryExhaustedError, TransientNetworkError) as e:
            logger.error("Error during submission: %s", e)
            self.message.show("A critical error occurred. Check service URL or network.", is_error=True)
            return False
        finally:
            self.submit_button.loading = False

        self.message.show("Entry saved! Thanks for updating your meal preference.")
        self.reset_form()
        # Keep the saved message; only failures replace it.
        self.load_initial_data(announce=False)
        return True

    # Reports

    def show_report(self, kind, records):
        panel = self.panels[kind]
        panel.content = render_report(kind, records)
        for other in self.panels.values():
            if other is not panel and other.display == "block":
                other.hide()
        panel.show()

    def toggle_report(self, kind):
        if kind not in self.panels:
            raise ValueError(f"Unknown report type: {kind}")
        panel = self.panels[kind]
        if panel.visible:
            panel.hide()
            self.message.show(CLOSED[kind])
            return

        button = self.report_buttons[kind]
        button.loading = True
        self.message.show(FETCHING[kind])
        try:
            records = self.fetchers[kind]()
        except ApiError as e:
            logger.error("Report %s retrieval failed: %s", kind, e.message)
            self.show_report(kind, [])
            self.message.show(FAILED[kind], is_error=True)
        except TransientNetworkError as e:
            logger.error("Error during report %s retrieval: %s", kind, e)
            self.message.show(NETWORK_ERROR, is_error=True)
        else:
            self.show_report(kind, records)
            self.message.show(LOADED[kind].format(n=len(records)))
        finally:
            button.loading = False
