"""
Input Validation Utilities
==========================

Validation helpers for request parameters. All of them take the raw string
from the query string or form body (or ``None`` when the key is missing).
"""

import math
import re
from datetime import date

NUMERIC_PATTERN = re.compile(r'^\s*[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?\s*$')

# Upper bound of the INTEGER id columns
MAX_ID = 2 ** 31 - 1

EMAIL_PATTERN = re.compile(
    r"^[A-Za-z0-9!#$%&'*+/=?^_`{|}~-]+(\.[A-Za-z0-9!#$%&'*+/=?^_`{|}~-]+)*"
    r"@([A-Za-z0-9]([A-Za-z0-9-]{0,61}[A-Za-z0-9])?\.)+[A-Za-z]{2,}$"
)


def parse_positive_int(value):
    """
    Parse a strictly positive integer.
    
    Args:
        value: Raw parameter value (e.g. "12")
        
    Returns:
        The integer, or None if missing, malformed, not positive or out of
        the id column range
    """
    if value is None:
        return None
    value = value.strip()
    if not re.match(r'^[+]?\d+$', value):
        return None
    digits = value.lstrip('+').lstrip('0')
    if len(digits) > len(str(MAX_ID)):
        return None
    number = int(digits or '0')
    return number if 0 < number <= MAX_ID else None


def is_numeric(value):
    """Return True if value is a plain decimal or exponent number string
    with a finite float value ("1e999" overflows to inf and is rejected)."""
    if value is None or not NUMERIC_PATTERN.match(value):
        return False
    return math.isfinite(float(value))


def is_valid_email(value):
    """Validate an email address (local@domain.tld)."""
    if not value or len(value) > 254:
        return False
    return bool(EMAIL_PATTERN.match(value))


def parse_date(value):
    """
    Parse an ISO date (YYYY-MM-DD).
    
    Returns:
        date instance, or None for an empty value
        
    Raises:
        ValueError: if the value is not a valid date
    """
    value = (value or '').strip()
    if not value:
        return None
    return date.fromisoformat(value)
