"""API key shape checks."""

import re

# Google API keys: "AIza" followed by 35 url-safe characters.
API_KEY_PATTERN = re.compile(r"^AIza[0-9A-Za-z_\-]{35}$")


def can_be_valid_api_key(api_key: str | None) -> bool:
    """Return True if the key looks like a Google API key.

    This only checks the shape; use ``is_valid_api_key`` to ask the API.
    """
    if not api_key or not api_key.strip():
        return False
    return API_KEY_PATTERN.match(api_key.strip()) is not None
