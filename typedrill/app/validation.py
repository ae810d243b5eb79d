import re

DEFAULT_PROFILE = "guest"
MAX_PROFILE_LEN = 24

_DISALLOWED = re.compile(r"[^a-z0-9_-]")


def sanitize_profile_name(name: str) -> str:
    """Lower-case, spaces to underscores, anything else outside [a-z0-9_-] dropped.

    Falls back to the default profile when nothing usable is left.
    """
    cleaned = _DISALLOWED.sub("", "_".join(name.lower().split()))[:MAX_PROFILE_LEN]
    return cleaned or DEFAULT_PROFILE
