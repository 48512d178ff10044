"""
Helper and Security Tests

Verifies:
- slug generation and currency parsing used by restaurants and carts
- serialization of Decimal and datetime values
- bearer token issue/decode round trip and rejection of bad tokens
"""

from datetime import datetime, timedelta
from decimal import Decimal

import jwt
import pytest

from app.config import settings
from app.exceptions import UnauthorizedError
from app.security import create_access_token, decode_access_token, extract_bearer_token
from core.utils.helpers import (
    format_currency,
    generate_slug,
    make_serializable,
    parse_currency,
    text_matches,
)


@pytest.mark.parametrize(
    "name,expected",
    [
        ("Spice Garden", "spice-garden"),
        ("  Spice   Garden!! ", "spice-garden"),
        ("Café 24/7", "caf-24-7"),
        ("---", ""),
    ],
)
def test_generate_slug(name, expected):
    assert generate_slug(name) == expected


@pytest.mark.parametrize(
    "value,expected",
    [
        ("₹40", Decimal("40")),
        ("₹1,200", Decimal("1200")),
        ("$4.50", Decimal("4.50")),
        ("Rs. 40", Decimal("40")),
        ("₹ 1,200.50", Decimal("1200.50")),
        ("Rs.1,05,000", Decimal("105000")),
        (350, Decimal("350")),
        (12.5, Decimal("12.5")),
    ],
)
def test_parse_currency(value, expected):
    assert parse_currency(value) == expected


@pytest.mark.parametrize("value", ["", "free", None, True])
def test_parse_currency_rejects_non_prices(value):
    with pytest.raises(ValueError):
        parse_currency(value)


def test_format_currency():
    assert format_currency(700) == "₹700"
    assert format_currency(5, "$") == "$5"


def test_text_matches_is_case_insensitive():
    assert text_matches("CURRY", "Fish Curry")
    assert text_matches("", None)
    assert not text_matches("dosa", "Fish Curry", None)


def test_make_serializable_converts_nested_values():
    value = {"price": Decimal("350.00"), "at": datetime(2024, 1, 2, 3, 4, 5), "tags": (1, 2)}

    assert make_serializable(value) == {
        "price": 350.0,
        "at": "2024-01-02T03:04:05",
        "tags": [1, 2],
    }


# =============================================================================
# TOKENS
# =============================================================================


def test_token_round_trip():
    assert decode_access_token(create_access_token("owner-1")) == "owner-1"


def test_legacy_user_id_claim_accepted():
    token = jwt.encode({"user_id": "owner-2"}, settings.jwt_secret, algorithm=settings.jwt_algorithm)

    assert decode_access_token(token) == "owner-2"


def test_expired_token_rejected():
    token = create_access_token("owner-1", expires_in=timedelta(seconds=-5))

    with pytest.raises(UnauthorizedError) as exc_info:
        decode_access_token(token)
    assert exc_info.value.code == "TOKEN_EXPIRED"


def test_token_signed_with_other_key_rejected():
    token = jwt.encode({"sub": "owner-1"}, "x" * 40, algorithm="HS256")

    with pytest.raises(UnauthorizedError):
        decode_access_token(token)


def test_token_without_subject_rejected():
    token = jwt.encode({"role": "owner"}, settings.jwt_secret, algorithm=settings.jwt_algorithm)

    with pytest.raises(UnauthorizedError):
        decode_access_token(token)


@pytest.mark.parametrize(
    "header,expected",
    [
        (None, None),
        ("", None),
        ("Basic abc", None),
        ("Bearer ", None),
        ("Bearer abc.def", "abc.def"),
        ("bearer abc", "abc"),
    ],
)
def test_extract_bearer_token(header, expected):
    assert extract_bearer_token(header) == expected
