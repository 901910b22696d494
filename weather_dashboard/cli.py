from concurrent.futures import ThreadPoolExecutor

import click
from flask import current_app
from flask.cli import with_appcontext

from .display import current_conditions, forecast_days, render_text
from .upstream import WeatherProxyError, WeatherQuery


@click.command('weather')
@click.argument('city', required=False)
@click.option('--lat', help='Latitude, used together with --lon.')
@click.option('--lon', help='Longitude, used together with --lat.')
@with_appcontext
def weather_command(city, lat, lon):
    """Print current weather and the daily forecast for CITY or a position."""
    query = WeatherQuery(city=city, lat=lat, lon=lon)
    if not query.params():
        raise click.UsageError('give a CITY or both --lat and --lon')

    client = current_app.extensions['weather_client']
    with ThreadPoolExecutor(max_workers=2) as pool:
        current = pool.submit(client.current, query)
        forecast = pool.submit(client.forecast, query)
        try:
            current_data, forecast_data = current.result(), forecast.result()
        except WeatherProxyError as exc:
            raise click.ClickException(exc.message or str(exc)) from exc

    click.echo(render_text(current_conditions(current_data), forecast_days(forecast_data)))
