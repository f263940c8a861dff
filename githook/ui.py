from flask import Blueprint, jsonify

from githook import __version__
from githook.github_views import get_dispatcher

ui = Blueprint('ui', __name__)


@ui.route("/")
def index():
    """
    Describe this service: its version, and the event types it acts on.
    """
    return jsonify({
        "service": "githook",
        "version": __version__,
        "events": get_dispatcher().event_types,
    })
