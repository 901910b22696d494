import pytest

from weather_dashboard.config import DEFAULT_BASE_URL, Settings


def test_defaults_from_empty_environment():
    settings = Settings.from_env({})
    assert settings.api_key == ''
    assert settings.port == 3000
    assert settings.profile == 'simple'
    assert settings.base_url == DEFAULT_BASE_URL
    assert settings.upstream_timeout == 10.0
    assert not settings.production


def test_values_from_environment():
    settings = Settings.from_env({
        'OPENWEATHER_API_KEY': 'abc',
        'PORT': '8080',
        'WEATHER_PROFILE': 'Production',
        'DEFAULT_CITY': 'Oslo',
        'OPENWEATHER_BASE_URL': 'http://localhost:9000/',
        'UPSTREAM_TIMEOUT': '2.5',
    })
    assert settings.api_key == 'abc'
    assert settings.port == 8080
    assert settings.production
    assert settings.default_city == 'Oslo'
    assert settings.base_url == 'http://localhost:9000'
    assert settings.upstream_timeout == 2.5


@pytest.mark.parametrize('value', ['0', 'none', ''])
def test_timeout_can_be_disabled(value):
    assert Settings.from_env({'UPSTREAM_TIMEOUT': value}).upstream_timeout is None


def test_unknown_profile():
    with pytest.raises(ValueError):
        Settings(profile='staging')


def test_profiles():
    simple = Settings()
    production = Settings(profile='production')
    assert (simple.static_max_age, simple.html_no_cache, simple.compress, simple.spa_fallback) == (None, False, False, False)
    assert production.static_max_age == 86400
    assert production.html_no_cache and production.compress and production.spa_fallback
