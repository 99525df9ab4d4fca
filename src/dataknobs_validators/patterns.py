"""Regular expressions shared by the field validators.

Every pattern is anchored with ``\\A`` and ``\\Z`` so that ``pattern.match()``
checks the whole string (``$`` would also accept a trailing newline).
Callers can use the table directly when they want the same matching rules
without the ``ValidationResult`` wrapper::

    from dataknobs_validators import PATTERNS

    if PATTERNS["SLUG"].match(candidate):
        ...
"""

from __future__ import annotations

import re

UUID = re.compile(
    r"\A[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}\Z",
    re.IGNORECASE,
)

# Deliberately loose: something@something.tld with no whitespace
EMAIL = re.compile(r"\A[^\s@]+@[^\s@]+\.[^\s@]+\Z")

URL = re.compile(r"\Ahttps?://[^\s/$.?#][^\s]*\Z", re.IGNORECASE)

IDENTIFIER = re.compile(r"\A[A-Za-z_$][A-Za-z0-9_$]*\Z")

SLUG = re.compile(r"\A[a-z0-9]+(?:-[a-z0-9]+)*\Z")

JSON_STRING = re.compile(r"\A\s*(?:\{.*\}|\[.*\])\s*\Z", re.DOTALL)

ISO_DATETIME = re.compile(
    r"\A[0-9]{4}-[0-9]{2}-[0-9]{2}"
    r"T[0-9]{2}:[0-9]{2}:[0-9]{2}(?:\.[0-9]+)?"
    r"(?:Z|[+-][0-9]{2}:[0-9]{2})?\Z"
)

# 0-65535, no leading zeros
PORT = re.compile(
    r"\A(?:[0-9]|[1-9][0-9]{1,3}|[1-5][0-9]{4}|6[0-4][0-9]{3}"
    r"|65[0-4][0-9]{2}|655[0-2][0-9]|6553[0-5])\Z"
)

PATTERNS: dict[str, re.Pattern[str]] = {
    "UUID": UUID,
    "EMAIL": EMAIL,
    "URL": URL,
    "IDENTIFIER": IDENTIFIER,
    "SLUG": SLUG,
    "JSON_STRING": JSON_STRING,
    "ISO_DATETIME": ISO_DATETIME,
    "PORT": PORT,
}

__all__ = [
    "PATTERNS",
    "UUID",
    "EMAIL",
    "URL",
    "IDENTIFIER",
    "SLUG",
    "JSON_STRING",
    "ISO_DATETIME",
    "PORT",
]
