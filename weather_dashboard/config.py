import os
from dataclasses import dataclass

from dotenv import load_dotenv

DEFAULT_BASE_URL = 'https://api.openweathermap.org/data/2.5'
PROFILES = ('simple', 'production')
ONE_DAY = 24 * 60 * 60


def _timeout(value):
    if value is None or value.strip().lower() in ('', '0', 'none'):
        return None
    return float(value)


@dataclass(frozen=True)
class Settings:
    api_key: str = ''
    port: int = 3000
    host: str = '0.0.0.0'
    profile: str = 'simple'
    default_city: str = ''
    base_url: str = DEFAULT_BASE_URL
    upstream_timeout: float | None = 10.0
    log_level: str = 'INFO'

    def __post_init__(self):
        if self.profile not in PROFILES:
            raise ValueError(f'unknown profile {self.profile!r}, expected one of {PROFILES}')

    @property
    def production(self):
        return self.profile == 'production'

    @property
    def static_max_age(self):
        return ONE_DAY if self.production else None

    @property
    def html_no_cache(self):
        return self.production

    @property
    def compress(self):
        return self.production

    @property
    def spa_fallback(self):
        return self.production

    @classmethod
    def from_env(cls, environ=None):
        """Build settings from the process environment (and a local .env file)."""
        if environ is None:
            load_dotenv()
            environ = os.environ
        return cls(
            api_key=environ.get('OPENWEATHER_API_KEY', ''),
            port=int(environ.get('PORT') or 3000),
            host=environ.get('HOST', '0.0.0.0'),
            profile=environ.get('WEATHER_PROFILE', 'simple').strip().lower(),
            default_city=environ.get('DEFAULT_CITY', ''),
            base_url=environ.get('OPENWEATHER_BASE_URL', DEFAULT_BASE_URL).rstrip('/'),
            upstream_timeout=_timeout(environ.get('UPSTREAM_TIMEOUT', '10')),
            log_level=environ.get('LOG_LEVEL', 'INFO'),
        )
