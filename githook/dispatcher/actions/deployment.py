"""
Trigger a downstream deployment when GitHub reports a deployment event.
"""

from __future__ import annotations

import logging
from typing import Union

from githook.transport import Transport, TransportError, TransportResponse

logger = logging.getLogger(__name__)


class DeploymentHandler:
    """
    POST to the deployment URL, once, through the injected transport.

    There is no retry.  A failed request is logged and returned, but the
    webhook is still answered with a 200: GitHub delivered the event fine, the
    deployment service is what failed.
    """

    EVENT_TYPE = "deployment"

    def __init__(self, transport: Transport, url: str):
        self.transport = transport
        self.url = url

    def run(self, event_type: str) -> Union[TransportResponse, TransportError]:
        return self.handle_deployment()

    def handle_deployment(self) -> Union[TransportResponse, TransportError]:
        """
        Make the deployment request.

        Returns:
            The TransportResponse, or the TransportError describing why the
            request failed.
        """
        try:
            response = self.transport.make_request("POST", self.url, b"")
        except TransportError as err:
            logger.warning(f"Deployment request to {self.url} failed: {err.reason}")
            return err
        logger.debug(f"Deployment request to {self.url} answered {response.status_code}")
        return response
