r"""
Actions run by the dispatcher.

Each action is registered for one event type and implements the
``run(event_type)`` interface.

Inputs
------

-  `event\_type`_ is one of the GitHub event types as delivered via the
   ``X-GitHub-Event`` header.

The request body is not passed along: no action needs it yet.

.. _event\_type: https://docs.github.com/en/webhooks/webhook-events-and-payloads
"""
