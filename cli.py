"""`flask meals ...` commands that talk to a running meal register over HTTP."""
import click
from flask import current_app
from flask.cli import AppGroup

from client import MealApiClient, ApiError, TransientNetworkError, RetryExhaustedError
from client.render import HEADERS, TODAY, MEAL
from utils import display_value

meals_cli = AppGroup('meals', help='Submit entries and print reports through MEAL_API_URL.')


def api_client():
    return MealApiClient.from_config(current_app.config)


@meals_cli.command('submit')
@click.argument('name')
@click.argument('meal')
@click.argument('next_day')
def submit(name, meal, next_day):
    try:
        message = api_client().submit_entry({'name': name, 'meal': meal, 'nextDay': next_day})
    except ApiError as e:
        raise click.ClickException(f"Submission failed: {e.message}")
    except (RetryExhaustedError, TransientNetworkError) as e:
        raise click.ClickException(str(e))
    click.echo(message)


@meals_cli.command('report')
@click.argument('kind', type=click.Choice([TODAY, MEAL]))
def report(kind):
    api = api_client()
    fetch = api.get_today_entries if kind == TODAY else api.get_meal_reports
    try:
        records = fetch()
    except (ApiError, TransientNetworkError) as e:
        raise click.ClickException(str(e))

    click.echo("\t".join(HEADERS[kind]))
    for record in records:
        click.echo("\t".join(display_value(v) for v in record.to_row()))
