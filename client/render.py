from markupsafe import Markup

from utils import display_value

TODAY = "today"
MEAL = "meal"

HEADERS = {
    TODAY: ["User", "Today's Meal", "Next Day's Meal"],
    MEAL: ["Name", "Given Taka", "Total Meal", "Status"],
}

EMPTY_REPORT = Markup('<p class="report-empty">No entries found for this report.</p>')


def headers_for(kind):
    try:
        return HEADERS[kind]
    except KeyError:
        raise ValueError(f"Unknown report type: {kind}")


def render_cell(kind, index, value, record):
    # Blank sheet cells read as "", so a missing status shows an empty badge.
    text = display_value(value)
    if kind == MEAL and index == 3:
        return Markup('<td class="report-table-cell"><span class="status-badge {}">{}</span></td>').format(
            record.status_class, text)
    return Markup('<td class="report-table-cell">{}</td>').format(text)


def render_report(kind, records):
    headers = headers_for(kind)
    if not records:
        return EMPTY_REPORT

    head = Markup("").join(Markup("<th>{}</th>").format(h) for h in headers)
    body = []
    for record in records:
        cells = Markup("").join(render_cell(kind, i, v, record) for i, v in enumerate(record.to_row()))
        body.append(Markup('<tr class="report-table-row">{}</tr>').format(cells))

    return Markup(
        '<table class="report-table">'
        '<thead class="report-table-header"><tr>{}</tr></thead>'
        '<tbody>{}</tbody>'
        '</table>'
    ).format(head, Markup("").join(body))
