"""Resolution of the identity of the current caller."""

import getpass

from surrogate.config.settings import get_settings


def current_caller_identity() -> str:
    """
    Return who is calling now.

    Uses the `caller_identity` setting when configured, otherwise the
    login name of the process owner.
    """
    settings = get_settings()
    if settings.caller_identity:
        return settings.caller_identity
    return getpass.getuser()
