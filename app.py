from weather_dashboard import create_app
from weather_dashboard.config import Settings
from weather_dashboard.logging_config import setup_logging
from weather_dashboard.server import serve

settings = Settings.from_env()
setup_logging(settings.log_level)
app = create_app(settings)

if __name__ == '__main__':
    serve(app, settings)
