"""
Dispatch incoming webhook events to the action registered for their type.

Every dispatch logs two records at info level: one when the event is
received, one saying which branch was taken.  Both carry ``event_type`` and
``dispatch_stage`` attributes so they can be picked out of the log stream
without parsing messages.
"""

import logging
from typing import Callable, Dict, List, Optional, Protocol, runtime_checkable

from githook.models import DispatchResult


module_logger = logging.getLogger(__name__)

# Values of the ``dispatch_stage`` log record attribute.
STAGE_RECEIVED = "received"
STAGE_HANDLED = "handled"
STAGE_IGNORED = "ignored"


def _log_extra(event_type, stage):
    return {"event_type": event_type, "dispatch_stage": stage}


def ignore_unknown_event(event_type: str, logger: logging.Logger) -> DispatchResult:
    """The fallback for event types nobody registered: log it and answer 400."""
    logger.info(f"Ignoring unknown event: {event_type}", extra=_log_extra(event_type, STAGE_IGNORED))
    return DispatchResult(400, "Unknown event", event_type)


@runtime_checkable
class Action(Protocol):
    """What the dispatcher needs from an action."""

    def run(self, event_type: str) -> object:
        ...


DefaultAction = Callable[[str, logging.Logger], DispatchResult]


class Dispatcher:
    """
    Route event types to actions.

    Actions are objects with a ``run(event_type)`` method, see :class:`Action`.
    Whatever ``run`` returns is the action's own business: a handled event
    always gets a 200.
    Event types are matched exactly, so "Deployment" is not "deployment".

    Arguments:
        actions (Dict[str, Action]): initial registrations.
        default (DefaultAction): builds the answer for unregistered event types.
        logger (logging.Logger): where the dispatch records go.
    """

    def __init__(
        self,
        actions: Optional[Dict[str, Action]] = None,
        default: DefaultAction = ignore_unknown_event,
        logger: Optional[logging.Logger] = None,
    ):
        self.actions: Dict[str, Action] = dict(actions or {})
        self.default = default
        self.logger = logger or module_logger

    def register(self, event_type: str, action: Action) -> None:
        """Make `action` handle events of type `event_type`."""
        if event_type in self.actions:
            raise ValueError(f"An action is already registered for {event_type!r}")
        self.actions[event_type] = action

    @property
    def event_types(self) -> List[str]:
        """The event types with a registered action, sorted."""
        return sorted(self.actions)

    def dispatch(self, event_type: str) -> DispatchResult:
        """
        Determine how an event needs to be processed, and process it.

        The event type is echoed back verbatim in the result, even when it's
        empty or nonsense.
        """
        self.logger.info(f"Received GitHub event: {event_type}", extra=_log_extra(event_type, STAGE_RECEIVED))

        action = self.actions.get(event_type)
        if action is None:
            return self.default(event_type, self.logger)

        self.logger.info(f"Handling {event_type} event", extra=_log_extra(event_type, STAGE_HANDLED))
        action.run(event_type)
        return DispatchResult(200, "OK", event_type)
