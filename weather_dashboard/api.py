import logging

from flask import Blueprint, current_app, jsonify, request

from .upstream import CURRENT, FORECAST, WeatherProxyError, WeatherQuery

logger = logging.getLogger(__name__)

bp = Blueprint('api', __name__, url_prefix='/api')


def _relay(endpoint, fallback):
    query = WeatherQuery.from_args(request.args)
    client = current_app.extensions['weather_client']
    try:
        data = client.get(endpoint, query)
    except WeatherProxyError as exc:
        logger.error('API Error: %s', exc)
        return jsonify({'error': exc.message or fallback}), 500
    return jsonify(data)


@bp.route('/weather')
def get_weather():
    return _relay(CURRENT, 'Weather data unavailable')


@bp.route('/forecast')
def get_forecast():
    return _relay(FORECAST, 'Forecast data unavailable')
