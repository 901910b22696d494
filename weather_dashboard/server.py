import logging
import sys
import threading

from werkzeug.serving import make_server

logger = logging.getLogger(__name__)


class FailFast:
    """Shut the server down when an exception escapes one of its threads."""

    def __init__(self, server):
        self.server = server
        self.failed = False

    def __call__(self, args):
        logger.critical(
            'Unhandled exception in %s',
            args.thread.name if args.thread else 'thread',
            exc_info=(args.exc_type, args.exc_value, args.exc_traceback),
        )
        self.failed = True
        # shutdown() waits for serve_forever(), so it cannot run on the serving thread
        threading.Thread(target=self.server.shutdown, daemon=True).start()


def serve(app, settings):
    # without passthrough werkzeug logs app errors itself and keeps serving
    server = make_server(settings.host, settings.port, app, threaded=True, passthrough_errors=True)
    hook = FailFast(server)
    threading.excepthook = hook

    logger.info('Server running on port %s (%s profile)', settings.port, settings.profile)
    logger.info('API Test: http://localhost:%s/api/weather?city=Paris', settings.port)
    try:
        server.serve_forever()
    except KeyboardInterrupt:
        logger.info('Shutting down')
    finally:
        server.server_close()

    if hook.failed:
        sys.exit(1)
