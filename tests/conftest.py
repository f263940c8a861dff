"""Automatically run by pytest to set up test infrastructure."""

import logging

import pytest
import requests_mock

import githook

from . import settings as test_settings


@pytest.fixture
def requests_mocker():
    """Make requests_mock available as a fixture."""
    mocker = requests_mock.Mocker(real_http=False, case_sensitive=True)
    mocker.start()
    try:
        yield mocker
    finally:
        mocker.stop()


@pytest.fixture(autouse=True)
def settings_for_tests(mocker):
    for name, value in vars(test_settings).items():
        if name.isupper():
            mocker.patch(f"githook.settings.{name}", value)


@pytest.fixture
def app():
    """An app with the testing config, so no real HTTP requests are made."""
    return githook.create_app(config="testing")


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def dispatcher(app):
    return app.extensions[githook.DISPATCHER_EXTENSION]


@pytest.fixture
def transport(dispatcher):
    """The RecordingTransport the testing app sends deployments through."""
    return dispatcher.actions["deployment"].transport


@pytest.fixture
def dispatch_records(caplog):
    """
    A function returning the dispatch log records captured so far.

    Only records with a ``dispatch_stage`` attribute are returned, so other
    logging doesn't get in the way.
    """
    caplog.set_level(logging.INFO, logger="githook")

    def _records():
        return [r for r in caplog.records if hasattr(r, "dispatch_stage")]
    return _records
