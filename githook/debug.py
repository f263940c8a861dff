"""Helpers for debugging."""

import base64
import gzip
import logging


def is_debug(module_name):
    """Is this module configured for debug-level information?"""
    return logging.getLogger(module_name).isEnabledFor(logging.DEBUG)


def print_long(label, long_text):
    """Print a long data dump in a logging-safe way."""
    data = base64.b85encode(gzip.compress(long_text.encode())).decode()
    print(
        f"{label}:",
        "import base64,gzip;" +
        f"print(gzip.decompress(base64.b85decode({data!r})).decode())"
    )


def print_request_body(label, body: bytes):
    """Like print_long, but for a raw request body which might not be UTF-8."""
    print_long(label, body.decode("utf-8", errors="replace"))
