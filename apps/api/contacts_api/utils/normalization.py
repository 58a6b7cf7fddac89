"""Data normalization utilities for consistent data quality."""

import re
from typing import Optional


def format_phone(phone: Optional[str]) -> Optional[str]:
    """
    Rewrite 10-digit phone numbers to (AAA)-BBB-CCCC.

    Every non-digit is ignored when counting, so "555.987.6543",
    "(555) 987-6543" and "5559876543" all become "(555)-987-6543".
    Anything that does not reduce to exactly 10 digits is returned unchanged.

    Args:
        phone: Raw phone input

    Returns:
        Canonical phone, or the input as given
    """
    if phone is None:
        return None

    digits = re.sub(r"\D", "", phone)
    if len(digits) != 10:
        return phone

    return f"({digits[:3]})-{digits[3:6]}-{digits[6:]}"


def normalize_email(email: Optional[str]) -> Optional[str]:
    """
    Normalize email to lowercase.

    Args:
        email: Raw email input

    Returns:
        Lowercased email or None if empty
    """
    if not email:
        return None
    return email.strip().lower()


def escape_like(value: str) -> str:
    """Escape LIKE wildcards so user input only ever matches literally."""
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
