import logging
import os
import sys

import sentry_sdk
from flask import Flask
from sentry_sdk.integrations.flask import FlaskIntegration
from werkzeug.middleware.proxy_fix import ProxyFix
from werkzeug.utils import import_string

__version__ = "0.1.0"

log_level = os.environ.get('LOGLEVEL', 'INFO').upper()
logger = logging.getLogger(__name__)
handler = logging.StreamHandler(sys.stderr)
handler.setLevel(log_level)
logger.addHandler(handler)
logger.setLevel(log_level)

# urllib3 logs every connection at debug level, quiet it.
logging.getLogger("urllib3").setLevel("WARN")

# The key under which the app keeps its Dispatcher in app.extensions.
DISPATCHER_EXTENSION = "githook.dispatcher"


def expand_config(name=None):
    if not name:
        name = "default"
    return "githook.config.{classname}Config".format(
        classname=name.capitalize(),
    )


def create_app(config=None, transport=None):
    """
    Build the Flask application.

    `config` names one of the classes in githook.config ("development",
    "testing", ...).  `transport` overrides the Transport class named by the
    config, and is used as-is.
    """
    app = Flask(__name__)
    app.wsgi_app = ProxyFix(app.wsgi_app)   # type: ignore[method-assign]
    config = config or os.environ.get("GITHOOK_CONFIG") or "default"
    config_obj = import_string(expand_config(config))()
    app.config.from_object(config_obj)

    if os.environ.get("SENTRY_DSN", ""):
        sentry_sdk.init(integrations=[FlaskIntegration()])

    app.extensions[DISPATCHER_EXTENSION] = build_dispatcher(app, transport)

    # attach our blueprints
    from .github_views import github_bp
    app.register_blueprint(github_bp, url_prefix="/api")
    from .ui import ui as ui_blueprint
    app.register_blueprint(ui_blueprint)

    return app


def build_dispatcher(app, transport=None):
    """
    Wire the transport, the deployment handler and the dispatcher together.

    This happens once per process: everything built here is shared by all
    requests and never modified afterwards.
    """
    from . import settings
    from .dispatcher import Dispatcher
    from .dispatcher.actions.deployment import DeploymentHandler

    if transport is None:
        transport_class = import_string(app.config["TRANSPORT"])
        transport = transport_class(timeout=settings.TRANSPORT_TIMEOUT)
    logger.info(f"Using {type(transport).__name__} for outbound requests")

    dispatcher = Dispatcher()
    dispatcher.register(
        DeploymentHandler.EVENT_TYPE,
        DeploymentHandler(transport, app.config.get("DEPLOYMENT_URL", settings.DEPLOYMENT_URL)),
    )
    return dispatcher
