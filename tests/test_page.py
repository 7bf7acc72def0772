from store import MemoryStore
from tests.conftest import ENTRY_HEADER, FIXED_NOW


def html_of(response):
    return response.get_data(as_text=True)


def test_form_page_lists_options(client):
    response = client.get('/')
    html = html_of(response)
    assert response.status_code == 200
    assert 'Select Your Name' in html
    assert '<option value="Alice"' in html and '<option value="Bob"' in html
    assert 'Lunch orders close at 10 AM' in html
    assert '<span class="status-badge' not in html
    assert '<table class="report-table">' not in html


def test_form_page_shows_load_message(client):
    html = html_of(client.get('/'))
    assert 'class="message-box show message-box-success"' in html
    assert 'Configuration loaded successfully. Ready for entry!' in html
    assert 'animation: dismiss-message 0s linear 3.5s forwards' in html


def test_form_posts_to_page_handler(client):
    html = html_of(client.get('/'))
    assert 'action="/submit"' in html


def test_form_page_with_meal_report(client, store):
    store.tables['Reports'].append(['Carol', 500, 42, 'No'])
    html = html_of(client.get('/?report=meal'))
    assert '<span class="status-badge status-no">No</span>' in html
    assert 'id="mealReportContainer" style="display: block"' in html
    assert 'id="todayReportContainer" style="display: none"' in html


def test_form_page_with_today_report(client, store):
    client.post('/', data={'name': 'Bob', 'meal': 'Non-Veg', 'nextDay': 'Veg'})
    html = html_of(client.get('/?report=today'))
    assert '<td class="report-table-cell">Bob</td>' in html


def test_form_page_ignores_unknown_report(client):
    response = client.get('/?report=weekly')
    assert response.status_code == 200
    assert 'style="display: block"' not in html_of(response)


def test_form_page_without_config_shows_error(client, store):
    del store.tables['Config']
    response = client.get('/')
    html = html_of(response)
    assert response.status_code == 200
    assert 'Select Your Name' in html
    assert ('<div id="messageBox" class="message-box show message-box-error">\n'
            '    <span id="messageText">Failed to load configuration data. Check the service URL or sheet.</span>') in html


def test_submit_form_saves_and_rerenders(client, store):
    response = client.post('/submit', data={'name': 'Alice', 'meal': 'Veg', 'nextDay': 'Non-Veg'})
    html = html_of(response)
    assert response.status_code == 200
    assert response.mimetype == 'text/html'
    assert 'class="message-box show message-box-success"' in html
    assert 'Entry saved! Thanks for updating your meal preference.' in html
    assert store.tables['Meal_Entries'] == [ENTRY_HEADER, [FIXED_NOW, 'Alice', 'Veg', 'Non-Veg']]
    # Selections are back on the placeholders
    assert '<option value="Alice" >' in html
    assert 'selected>Select Your Name</option>' in html


def test_submit_form_missing_field(client, store):
    response = client.post('/submit', data={'name': 'Alice', 'meal': 'Veg', 'nextDay': ''})
    html = html_of(response)
    assert response.status_code == 200
    assert response.mimetype == 'text/html'
    assert 'class="message-box show message-box-error"' in html
    assert 'Submission failed: Missing required form data: name, meal, or nextDay.' in html
    assert store.tables['Meal_Entries'] == [ENTRY_HEADER]


def test_submit_form_retries_store_faults(client, store, monkeypatch):
    append_row = MemoryStore.append_row
    attempts = []

    def flaky(self, table, row):
        attempts.append(row)
        if len(attempts) < 3:
            raise OSError('workbook is locked')
        append_row(self, table, row)

    monkeypatch.setattr(MemoryStore, 'append_row', flaky)
    html = html_of(client.post('/submit', data={'name': 'Bob', 'meal': 'Veg', 'nextDay': 'Veg'}))
    assert len(attempts) == 3
    assert store.tables['Meal_Entries'] == [ENTRY_HEADER, [FIXED_NOW, 'Bob', 'Veg', 'Veg']]
    assert 'Entry saved!' in html


def test_submit_form_gives_up_after_retries(client, store):
    del store.tables['Meal_Entries']
    html = html_of(client.post('/submit', data={'name': 'Bob', 'meal': 'Veg', 'nextDay': 'Veg'}))
    assert 'A critical error occurred. Check service URL or network.' in html
    assert 'class="message-box show message-box-error"' in html
