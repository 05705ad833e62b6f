"""
Lightweight input shape checks.
"""

import re

# x@y.z shape only, not an RFC 5322 validator; "." never spans line breaks
_ANY = r"[^\n\r\u2028\u2029]"
_EMAIL_PATTERN = re.compile(rf"{_ANY}{_ANY}+@{_ANY}+\.{_ANY}{_ANY}+")


def is_email_basically_valid(email: object) -> bool:
    """Check that ``email`` roughly looks like ``someone@host.tld``."""
    if not isinstance(email, str):
        return False
    return _EMAIL_PATTERN.fullmatch(email) is not None
