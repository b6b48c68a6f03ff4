from __future__ import annotations

import re


CURRENCY_SIGNS = "₹$€£"

_AMOUNT_RE = re.compile(r"^[+-]?(\d+(\.\d*)?|\.\d+)$")


def parse_amount(text: str) -> float:
    """
    Parse a user-typed money amount.

    Supported formats:
    - 1200
    - 1,200.50
    - ₹ 75
    - -50
    """
    clean = text.strip()
    for sign in CURRENCY_SIGNS:
        clean = clean.replace(sign, "")
    clean = clean.replace(",", "").replace(" ", "")

    if not _AMOUNT_RE.match(clean):
        raise ValueError(f"Could not parse amount: {text!r}")
    return float(clean)
