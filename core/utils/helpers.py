"""
Menufy utility functions
"""

from __future__ import annotations
import re
from datetime import date, datetime
from decimal import Decimal
from typing import Any, Optional


# Text & slug utilities

def normalize_text(s: Optional[str]) -> str:
    """Basic normalization: lowercase, collapse spaces."""
    if not s:
        return ""
    s = s.lower().strip()
    s = re.sub(r"\s+", " ", s)
    return s


def generate_slug(name: str) -> str:
    """URL-safe slug: lowercase, runs of other characters become one dash.

    >>> generate_slug("Spice Garden!")
    'spice-garden'
    """
    slug = re.sub(r"[^a-z0-9]+", "-", (name or "").lower())
    return slug.strip("-")


def text_matches(term: str, *fields: Optional[str]) -> bool:
    """Case-insensitive substring match of ``term`` against any field."""
    needle = normalize_text(term)
    if not needle:
        return True
    return any(needle in normalize_text(f) for f in fields if f)


# Money

# First number in the text; commas are thousands separators
_AMOUNT = re.compile(r"-?\d[\d,]*(?:\.\d+)?")


def parse_currency(value: Any) -> Decimal:
    """Parse a display price such as "₹1,200" or "$4.50" into a Decimal.

    Numbers pass straight through. Raises ValueError when no amount is found.
    """
    if isinstance(value, bool):
        raise ValueError(f"Not a price: {value!r}")
    if isinstance(value, (int, float, Decimal)):
        return Decimal(str(value))
    match = _AMOUNT.search(str(value or ""))
    if match is None:
        raise ValueError(f"Not a price: {value!r}")
    return Decimal(match.group(0).replace(",", ""))


def format_currency(amount: Any, symbol: str = "₹") -> str:
    return f"{symbol}{amount}"


# Serialization

def make_serializable(obj):
    """Convert objects to JSON-serializable format"""
    if isinstance(obj, Decimal):
        return float(obj)
    elif isinstance(obj, (datetime, date)):
        return obj.isoformat()
    elif isinstance(obj, dict):
        return {k: make_serializable(v) for k, v in obj.items()}
    elif isinstance(obj, (list, tuple)):
        return [make_serializable(item) for item in obj]
    return obj
