"""
Inbound events and the results of dispatching them.
"""

from __future__ import annotations

import dataclasses
from typing import Dict, Mapping, Union

from werkzeug.datastructures import Headers

# The header GitHub uses to say what kind of event it is delivering.
EVENT_TYPE_HEADER = "X-GitHub-Event"


@dataclasses.dataclass(frozen=True)
class InboundEvent:
    """A webhook delivery, as far as dispatching is concerned."""
    event_type: str

    @classmethod
    def from_headers(cls, headers: Union[Headers, Mapping[str, str]]) -> InboundEvent:
        """
        Read the event type from request headers.

        Header names are matched case-insensitively.  If the header appears
        more than once, the first value wins.  WSGI servers join repeated
        headers with commas before we see them, so the first value is
        whatever comes before the first comma.  GitHub event types never
        contain commas.  A missing header gives an empty event type, which
        no handler will claim.
        """
        if not isinstance(headers, Headers):
            headers = Headers(headers)
        value = headers.get(EVENT_TYPE_HEADER, "")
        first, sep, _ = value.partition(",")
        if sep:
            first = first.strip()
        return cls(first)


@dataclasses.dataclass(frozen=True)
class DispatchResult:
    """The HTTP answer to one event."""
    status_code: int
    status: str
    event: str

    @property
    def body(self) -> Dict[str, str]:
        return {"status": self.status, "event": self.event}
