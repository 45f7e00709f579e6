"""Runtime settings read from the environment.

Values are looked up on every call so tests (and users) can change them
without re-importing the module.
"""

import os

DEFAULT_REGISTRY_URL = "https://registry.npmjs.org"

REGISTRY_URL_ENV = "MCADDON_REGISTRY_URL"
REGISTRY_TIMEOUT_ENV = "MCADDON_REGISTRY_TIMEOUT"

# Project config file written at the project root.
PROJECT_CONFIG_FILE = "mcaddon.yaml"


class SettingsError(ValueError):
    """An environment setting has an invalid value."""


def registry_url() -> str:
    """Return the registry base URL without a trailing slash."""
    url = os.environ.get(REGISTRY_URL_ENV, "").strip() or DEFAULT_REGISTRY_URL
    return url.rstrip("/")


def registry_timeout() -> float | None:
    """Return the registry request timeout in seconds.

    Unset (or empty) means no deadline: a stalled connection blocks the
    caller, same as the interactive wizard always did.

    Raises:
        SettingsError: If the variable is set but is not a positive number.
    """
    raw = os.environ.get(REGISTRY_TIMEOUT_ENV, "").strip()
    if not raw:
        return None
    try:
        timeout = float(raw)
    except ValueError as e:
        raise SettingsError(
            f"{REGISTRY_TIMEOUT_ENV} must be a number of seconds, got {raw!r}"
        ) from e
    if timeout <= 0:
        raise SettingsError(f"{REGISTRY_TIMEOUT_ENV} must be positive, got {raw!r}")
    return timeout
