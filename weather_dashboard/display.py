"""Turn provider payloads into the values the dashboard shows.

The browser script in ``static/js/weather.js`` applies the same rules to the
DOM; this module is what the ``flask weather`` command prints.
"""

import math
from dataclasses import dataclass
from datetime import datetime, timezone

ICON_URL = 'https://openweathermap.org/img/wn/{code}{suffix}.png'
ENTRIES_PER_DAY = 8  # forecast feed is one entry per 3 hours
MS_TO_KMH = 3.6


@dataclass(frozen=True)
class CurrentConditions:
    city: str
    temperature: str
    icon_url: str
    description: str
    humidity: str
    wind_speed: str
    feels_like: str


@dataclass(frozen=True)
class ForecastDay:
    weekday: str
    icon_url: str
    temperatures: str


def js_round(value):
    """Round half up, like the browser's Math.round (round(2.5) is 3, round(-2.5) is -2)."""
    return int(math.floor(value + 0.5))


def icon_url(code, large=False):
    return ICON_URL.format(code=code, suffix='@2x' if large else '')


def current_conditions(data):
    weather = data['weather'][0]
    main = data['main']
    country = (data.get('sys') or {}).get('country') or ''
    return CurrentConditions(
        city=f'{data["name"]}, {country}',
        temperature=f'{js_round(main["temp"])}°C',
        icon_url=icon_url(weather['icon'], large=True),
        description=weather['description'],
        humidity=f'{main["humidity"]}%',
        wind_speed=f'{js_round(data["wind"]["speed"] * MS_TO_KMH)} km/h',
        feels_like=f'{js_round(main["feels_like"])}°C',
    )


def sample_daily(entries):
    # Every 8th entry from the first, not a true daily min/max.
    return entries[::ENTRIES_PER_DAY]


def forecast_days(data, tz=timezone.utc):
    days = []
    for item in sample_daily(data['list']):
        date = datetime.fromtimestamp(item['dt'], tz=tz)
        days.append(ForecastDay(
            weekday=date.strftime('%a'),
            icon_url=icon_url(item['weather'][0]['icon']),
            temperatures=f'{js_round(item["main"]["temp_max"])}°/{js_round(item["main"]["temp_min"])}°',
        ))
    return days


def render_text(current, days):
    lines = [
        current.city,
        f'  {current.temperature}  {current.description}',
        f'  Humidity: {current.humidity}  Wind: {current.wind_speed}  Feels like: {current.feels_like}',
    ]
    if days:
        lines.append('  ' + '  '.join(f'{day.weekday} {day.temperatures}' for day in days))
    return '\n'.join(lines)
