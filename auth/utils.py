"""
Utility functions for the auth module.
"""

import base64
from typing import Optional

from .config import BASIC_PREFIX
from .schemas import Credentials


def decode_basic_credentials(header: Optional[str]) -> Optional[Credentials]:
    """
    Decode an `Authorization: Basic ...` header value into a credential pair.

    Args:
        header (Optional[str]): Raw header value, or None when absent.

    Returns:
        Optional[Credentials]: The decoded pair, or None when the header is
        missing, lacks the case-sensitive `Basic ` prefix, or its payload is
        not valid Base64 / UTF-8.

    Notes:
        - Missing "=" padding is tolerated.
        - Splits on the first ':' only, so passwords may contain colons.
        - Without a ':' the whole text is the username and the password is "".
    """
    if not header or not header.startswith(BASIC_PREFIX):
        return None

    encoded = header[len(BASIC_PREFIX):]
    # unpadded payloads are accepted; pad to a multiple of 4
    encoded += "=" * (-len(encoded) % 4)
    try:
        decoded = base64.b64decode(encoded, validate=True).decode("utf-8")
    except ValueError:
        # binascii.Error, UnicodeDecodeError and non-ASCII input all land here
        return None

    username, _, password = decoded.partition(":")
    return Credentials(username=username, password=password)
