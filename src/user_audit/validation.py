"""Email address validation.

A deliberately practical pattern, not RFC 5322:

* local part: word characters, dots and hyphens
* domain: one or more labels of word characters/hyphens, single dots only
* TLD: two or more ASCII letters
"""

from __future__ import annotations

import re

EMAIL_PATTERN = re.compile(r"[\w.-]+@(?:[\w-]+\.)+[A-Za-z]{2,}")


def is_valid_email(value: object) -> bool:
    """Return ``True`` if *value* is an email address as a whole string.

    Never raises: anything that is not a ``str`` is simply invalid.
    """
    if not isinstance(value, str):
        return False
    return EMAIL_PATTERN.fullmatch(value) is not None
