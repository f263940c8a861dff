"""
Outbound HTTP calls.

A Transport makes exactly one HTTP request per call.  The class to use is
chosen once per process by the ``TRANSPORT`` config value:
:class:`HttpTransport` talks to the network, :class:`RecordingTransport` only
remembers what it was asked to do.
"""

from __future__ import annotations

import dataclasses
import logging
from typing import List, Mapping, Optional

import requests

from githook.utils import RequestFailed, log_check_response

logger = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True)
class TransportRequest:
    """One outbound request: method, absolute URL and raw body."""
    method: str
    url: str
    body: bytes = b""


@dataclasses.dataclass(frozen=True)
class TransportResponse:
    """What came back from a successful request."""
    status_code: int
    headers: Mapping[str, str] = dataclasses.field(default_factory=dict)


class TransportError(Exception):
    """
    An outbound request failed.

    Network errors, timeouts and non-2xx responses all end up here.
    """
    def __init__(self, reason: str):
        super().__init__(reason)
        self.reason = reason


class Transport:
    """The capability to make one outbound HTTP request."""

    def make_request(self, method: str, url: str, body: bytes = b"") -> TransportResponse:
        """
        Make the request.

        Returns:
            TransportResponse for a 2xx response.

        Raises:
            TransportError for anything else.
        """
        raise NotImplementedError


class HttpTransport(Transport):
    """Make real HTTP requests with `requests`."""

    HEADERS = {
        "Content-Type": "application/json",
        "Accept": "application/json",
    }

    def __init__(self, timeout: float = 10.0):
        self.timeout = timeout

    def make_request(self, method: str, url: str, body: bytes = b"") -> TransportResponse:
        # No shared Session: nothing is carried from one request to the next.
        try:
            response = requests.request(
                method, url, data=body, headers=self.HEADERS, timeout=self.timeout,
            )
            log_check_response(response)
        except RequestFailed as exc:
            raise TransportError(str(exc)) from exc
        except requests.RequestException as exc:
            raise TransportError(f"{method} {url} failed: {exc}") from exc
        if not 200 <= response.status_code < 300:
            # raise_for_status lets 1xx and 3xx through.
            raise TransportError(f"{method} {url} answered {response.status_code}")
        return TransportResponse(
            status_code=response.status_code,
            headers=dict(response.headers),
        )


class RecordingTransport(Transport):
    """
    A Transport for tests: no network, just a list of the requests made.

    Every call returns `response`, or raises `error` if one was given.

    `requests` keeps every request until `clear` is called, so a long-running
    server under the testing config grows without bound.  Don't use it for
    anything but tests and short-lived local runs.
    """

    def __init__(
        self,
        timeout: float = 10.0,
        response: Optional[TransportResponse] = None,
        error: Optional[TransportError] = None,
    ):
        self.timeout = timeout
        self.response = response or TransportResponse(
            status_code=200,
            headers={"Content-Type": "application/json"},
        )
        self.error = error
        self.requests: List[TransportRequest] = []

    def make_request(self, method: str, url: str, body: bytes = b"") -> TransportResponse:
        self.requests.append(TransportRequest(method, url, body))
        logger.debug(f"Recorded {method} {url}, not sending it")
        if self.error is not None:
            raise self.error
        return self.response

    def clear(self) -> None:
        """Forget the requests recorded so far."""
        self.requests.clear()
