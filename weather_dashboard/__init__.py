import logging

from flask import Flask, render_template, request
from flask_compress import Compress
from flask_cors import CORS

from . import api
from .cli import weather_command
from .config import Settings
from .upstream import OpenWeatherClient

logger = logging.getLogger(__name__)


def create_app(settings=None):
    if settings is None:
        settings = Settings.from_env()

    app = Flask(__name__, static_folder='static', template_folder='templates')
    app.config['WEATHER_SETTINGS'] = settings
    app.config['SEND_FILE_MAX_AGE_DEFAULT'] = settings.static_max_age
    app.extensions['weather_client'] = OpenWeatherClient.from_settings(settings)

    CORS(app)
    if settings.compress:
        Compress(app)

    app.register_blueprint(api.bp)
    app.cli.add_command(weather_command)

    @app.route('/')
    def index():
        return render_template('index.html', default_city=settings.default_city)

    if settings.html_no_cache:
        @app.after_request
        def no_cache_html(response):
            if response.mimetype == 'text/html':
                response.headers['Cache-Control'] = 'no-cache'
            return response

    if settings.spa_fallback:
        @app.errorhandler(404)
        def spa_fallback(error):
            if request.method != 'GET':
                return error
            return render_template('index.html', default_city=settings.default_city)

    if not settings.api_key:
        logger.warning('OPENWEATHER_API_KEY is not set, every weather request will fail')

    return app
