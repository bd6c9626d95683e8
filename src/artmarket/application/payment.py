"""Simulated payment details.

There is no gateway behind checkout. A payment token must be supplied,
it is never stored, and only its last four characters are ever logged.
"""

from __future__ import annotations

from artmarket.domain.exceptions import ValidationError


def mask_payment_token(token: str) -> str:
    if not token or not token.strip():
        raise ValidationError("Payment token is required")
    token = token.strip()
    return "*" * max(len(token) - 4, 0) + token[-4:]
