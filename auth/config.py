"""
Fixed strings for the Basic-Auth gate.

The realm and failure messages are part of the HTTP contract and are
returned verbatim to clients.
"""

from typing import Dict

REALM = "Restricted Area"
BASIC_PREFIX = "Basic "

# Header sent with every 401 response
CHALLENGE_HEADERS: Dict[str, str] = {
    "WWW-Authenticate": f'Basic realm="{REALM}"',
}

AUTH_REQUIRED = "Authentication required."
INVALID_CREDENTIALS = "Invalid credentials."
