"""
These are the views that process webhook events coming from GitHub.
"""

import logging

from flask import current_app as app
from flask import Blueprint, jsonify, request

from githook import DISPATCHER_EXTENSION
from githook.debug import is_debug, print_request_body
from githook.models import InboundEvent
from githook.utils import sentry_extra_context

github_bp = Blueprint('github_views', __name__)
logger = logging.getLogger(__name__)


def get_dispatcher():
    """The Dispatcher built for this app by create_app."""
    return app.extensions[DISPATCHER_EXTENSION]


@github_bp.route('/githook', methods=('POST',))
def hook_receiver():
    """
    Process incoming GitHub webhook events.

    1.  Read the event type from the ``X-GitHub-Event`` header.  A missing
        header is an empty event type.
    2.  Dispatch it, running whatever action is registered for it.
    3.  Respond with the dispatch result: 200 if the event was handled, 400
        if nobody handles that event type.

    The body is not parsed.

    Returns:
        A JSON response.
    """
    event = InboundEvent.from_headers(request.headers)
    sentry_extra_context({"event_type": event.event_type})
    if is_debug(__name__):
        print_request_body("Incoming GitHub event body", request.get_data())

    result = get_dispatcher().dispatch(event.event_type)

    resp = jsonify(result.body)
    resp.status_code = result.status_code
    return resp
