"""Shared fixtures and sample provider payloads."""

import json

import pytest
import requests

from weather_dashboard import create_app
from weather_dashboard.config import Settings

BASE_URL = 'https://api.openweathermap.org/data/2.5'

SAMPLE_WEATHER = {
    'name': 'Paris',
    'sys': {'country': 'FR'},
    'main': {'temp': 17.5, 'feels_like': 16.4, 'humidity': 72},
    'wind': {'speed': 4.1},
    'weather': [{'icon': '04d', 'description': 'broken clouds'}],
}


def forecast_entry(dt, temp_max=20.0, temp_min=10.0, icon='01d'):
    return {
        'dt': dt,
        'main': {'temp_max': temp_max, 'temp_min': temp_min},
        'weather': [{'icon': icon, 'description': 'clear sky'}],
    }


# 2024-01-01 00:00 UTC was a Monday; 40 entries, 3 hours apart
SAMPLE_FORECAST = {
    'city': {'name': 'Paris'},
    'list': [forecast_entry(1704067200 + i * 3 * 3600, temp_max=20 + i, temp_min=10 + i) for i in range(40)],
}


def make_response(status_code, payload=None, text=None):
    resp = requests.Response()
    resp.status_code = status_code
    resp._content = (json.dumps(payload) if text is None else text).encode()
    return resp


@pytest.fixture
def settings():
    return Settings(api_key='secret', base_url=BASE_URL)


@pytest.fixture
def make_app():
    def _make(**overrides):
        values = {'api_key': 'secret', 'base_url': BASE_URL}
        values.update(overrides)
        app = create_app(Settings(**values))
        app.config['TESTING'] = True
        return app
    return _make


@pytest.fixture
def app(make_app):
    return make_app()


@pytest.fixture
def client(app):
    return app.test_client()
