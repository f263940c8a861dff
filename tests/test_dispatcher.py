"""Tests of githook/dispatcher."""

import logging

import pytest

from githook.dispatcher import (
    Action,
    STAGE_HANDLED,
    STAGE_IGNORED,
    STAGE_RECEIVED,
    Dispatcher,
    ignore_unknown_event,
)
from githook.dispatcher.actions.deployment import DeploymentHandler
from githook.models import DispatchResult
from githook.transport import HttpTransport, RecordingTransport, TransportError

DEPLOY_URL = "https://deploy.example.com/hook"


class DummyAction:
    def __init__(self):
        self.runs = []

    def run(self, event_type):
        self.runs.append(event_type)


@pytest.fixture
def transport():
    return RecordingTransport()


@pytest.fixture
def dispatcher(transport):
    d = Dispatcher()
    d.register("deployment", DeploymentHandler(transport, DEPLOY_URL))
    return d


def test_deployment_is_handled(dispatcher, transport, dispatch_records):
    result = dispatcher.dispatch("deployment")

    assert result.status_code == 200
    assert result.body == {"status": "OK", "event": "deployment"}
    assert len(transport.requests) == 1
    records = dispatch_records()
    assert [r.getMessage() for r in records] == [
        "Received GitHub event: deployment",
        "Handling deployment event",
    ]
    assert [r.dispatch_stage for r in records] == [STAGE_RECEIVED, STAGE_HANDLED]
    assert all(r.levelno == logging.INFO for r in records)
    assert all(r.event_type == "deployment" for r in records)


@pytest.mark.parametrize("event_type", [
    "push",
    "",
    "Deployment",
    "deployment ",
    "deployment_status",
    "pull_request",
    "%s %d {0}",
    "☃ snow",
    pytest.param("x" * 5000, id="very-long"),
])
def test_unknown_events_are_ignored(dispatcher, transport, dispatch_records, event_type):
    result = dispatcher.dispatch(event_type)

    assert result.status_code == 400
    assert result.body == {"status": "Unknown event", "event": event_type}
    assert transport.requests == []
    records = dispatch_records()
    assert [r.getMessage() for r in records] == [
        f"Received GitHub event: {event_type}",
        f"Ignoring unknown event: {event_type}",
    ]
    assert [r.dispatch_stage for r in records] == [STAGE_RECEIVED, STAGE_IGNORED]


@pytest.mark.parametrize("event_type", ["deployment", "push", ""])
def test_dispatch_is_repeatable(dispatcher, event_type):
    results = [dispatcher.dispatch(event_type) for _ in range(5)]
    assert len(set(results)) == 1


def test_batch_of_events(dispatcher, transport, dispatch_records):
    event_types = [
        "check_run", "check_suite", "create", "delete", "deployment",
        "deployment_status", "fork", "gollum", "issue_comment", "issues",
        "label", "member", "milestone", "page_build", "ping", "public",
        "pull_request", "pull_request_review", "push", "release",
        "repository", "star", "status", "watch",
    ]
    assert len(set(event_types)) == 24

    results = [dispatcher.dispatch(et) for et in event_types]

    assert sum(1 for r in results if r.status_code == 200) == 1
    assert sum(1 for r in results if r.status_code == 400) == 23
    assert [r.event for r in results] == event_types
    assert len(transport.requests) == 1
    received = [r for r in dispatch_records() if r.dispatch_stage == STAGE_RECEIVED]
    assert [r.getMessage() for r in received] == [
        f"Received GitHub event: {et}" for et in event_types
    ]


def test_transport_failure_still_answers_ok(dispatch_records, caplog):
    transport = RecordingTransport(error=TransportError("connection refused"))
    dispatcher = Dispatcher()
    dispatcher.register("deployment", DeploymentHandler(transport, DEPLOY_URL))

    result = dispatcher.dispatch("deployment")

    assert result == DispatchResult(200, "OK", "deployment")
    assert len(transport.requests) == 1
    # The failure is logged, but it isn't one of the dispatch records.
    assert len(dispatch_records()) == 2
    warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
    assert len(warnings) == 1
    assert "connection refused" in warnings[0].getMessage()


def test_real_and_fake_transports_dispatch_the_same(requests_mocker):
    requests_mocker.post(DEPLOY_URL, status_code=201, json={})
    real = Dispatcher()
    real.register("deployment", DeploymentHandler(HttpTransport(timeout=1), DEPLOY_URL))
    fake = Dispatcher()
    fake.register("deployment", DeploymentHandler(RecordingTransport(), DEPLOY_URL))

    for event_type in ["deployment", "push", ""]:
        assert real.dispatch(event_type) == fake.dispatch(event_type)
    assert requests_mocker.call_count == 1


def test_registered_actions_run():
    action = DummyAction()
    dispatcher = Dispatcher({"release": action})

    result = dispatcher.dispatch("release")

    assert result.body == {"status": "OK", "event": "release"}
    assert action.runs == ["release"]
    assert dispatcher.dispatch("deployment").status_code == 400


def test_register_twice_is_an_error():
    dispatcher = Dispatcher()
    dispatcher.register("push", DummyAction())
    with pytest.raises(ValueError, match="already registered for 'push'"):
        dispatcher.register("push", DummyAction())


def test_event_types():
    dispatcher = Dispatcher({"release": DummyAction()})
    dispatcher.register("deployment", DummyAction())
    assert dispatcher.event_types == ["deployment", "release"]


def test_replaceable_default(dispatch_records):
    def teapot(event_type, logger):
        logger.info("Not a teapot", extra={"event_type": event_type, "dispatch_stage": "teapot"})
        return DispatchResult(418, "Teapot", event_type)

    dispatcher = Dispatcher(default=teapot)

    assert dispatcher.dispatch("brew").body == {"status": "Teapot", "event": "brew"}
    assert [r.dispatch_stage for r in dispatch_records()] == [STAGE_RECEIVED, "teapot"]


def test_injected_logger(caplog):
    caplog.set_level(logging.INFO, logger="deploys")
    dispatcher = Dispatcher(logger=logging.getLogger("deploys"))

    dispatcher.dispatch("push")

    assert [(r.name, r.getMessage()) for r in caplog.records] == [
        ("deploys", "Received GitHub event: push"),
        ("deploys", "Ignoring unknown event: push"),
    ]


def test_ignore_unknown_event(caplog):
    caplog.set_level(logging.INFO)
    result = ignore_unknown_event("fork", logging.getLogger("test"))
    assert result == DispatchResult(400, "Unknown event", "fork")
    assert caplog.records[0].event_type == "fork"


def test_action_interface(transport):
    assert isinstance(DeploymentHandler(transport, DEPLOY_URL), Action)
    assert isinstance(DummyAction(), Action)
    assert not isinstance(object(), Action)
