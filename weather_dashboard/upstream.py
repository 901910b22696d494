"""OpenWeatherMap client used by the proxy endpoints and the CLI."""

import logging
from dataclasses import dataclass
from urllib.parse import urlencode

import requests

logger = logging.getLogger(__name__)

CURRENT = 'weather'
FORECAST = 'forecast'


class WeatherProxyError(Exception):
    """Base class for everything the proxy turns into a 500 response."""

    # Message the provider supplied, safe to show to the browser.
    message = None


class ConfigurationError(WeatherProxyError):
    pass


class UpstreamError(WeatherProxyError):
    def __init__(self, reason, message=None, status_code=None):
        self.message = message
        self.status_code = status_code
        super().__init__(reason)


@dataclass(frozen=True)
class WeatherQuery:
    city: str | None = None
    lat: str | None = None
    lon: str | None = None

    @classmethod
    def from_args(cls, args):
        return cls(city=args.get('city'), lat=args.get('lat'), lon=args.get('lon'))

    def params(self):
        params = []
        if self.city:
            params.append(('q', self.city))
        if self.lat and self.lon:
            params.append(('lat', self.lat))
            params.append(('lon', self.lon))
        return params


def build_url(base_url, endpoint, api_key, query):
    params = [('units', 'metric'), ('appid', api_key)] + query.params()
    return f'{base_url}/{endpoint}?{urlencode(params)}'


class OpenWeatherClient:
    def __init__(self, api_key, base_url, timeout=None):
        self.api_key = api_key
        self.base_url = base_url
        self.timeout = timeout

    @classmethod
    def from_settings(cls, settings):
        return cls(settings.api_key, settings.base_url, settings.upstream_timeout)

    def current(self, query):
        return self.get(CURRENT, query)

    def forecast(self, query):
        return self.get(FORECAST, query)

    def get(self, endpoint, query):
        """Issue one GET against the provider and return its decoded JSON body."""
        if not self.api_key:
            raise ConfigurationError('API key not configured')

        url = build_url(self.base_url, endpoint, self.api_key, query)
        logger.debug('GET %s/%s %s', self.base_url, endpoint, query.params())
        try:
            resp = requests.get(url, timeout=self.timeout)
        except requests.RequestException as exc:
            # str(exc) carries the full URL, appid included
            raise UpstreamError(f'{type(exc).__name__} calling {self.base_url}/{endpoint}') from exc

        if not resp.ok:
            raise UpstreamError(
                f'upstream returned {resp.status_code}',
                message=_provider_message(resp),
                status_code=resp.status_code,
            )
        try:
            return resp.json()
        except ValueError as exc:
            raise UpstreamError('upstream returned invalid JSON', status_code=resp.status_code) from exc


def _provider_message(resp):
    try:
        body = resp.json()
    except ValueError:
        return None
    if isinstance(body, dict) and body.get('message'):
        return str(body['message'])
    return None
