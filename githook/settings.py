"""Settings for how the webhook should behave."""

import os


def read_timeout_setting(setting_name: str, default: float) -> float:
    """Read a number of seconds from a setting.

    Raises ValueError if the setting is present but isn't a positive number.
    """
    raw = os.environ.get(setting_name, None)
    if raw is None:
        return default
    timeout = float(raw)
    if timeout <= 0:
        raise ValueError(f"{setting_name} must be a positive number of seconds, not {raw!r}")
    return timeout


# Where a "deployment" event sends its POST.
DEPLOYMENT_URL = os.environ.get("DEPLOYMENT_URL", "http://localhost:4000/api/deploy")

# How long an outbound request may take, in seconds.
TRANSPORT_TIMEOUT = read_timeout_setting("TRANSPORT_TIMEOUT", 10.0)
