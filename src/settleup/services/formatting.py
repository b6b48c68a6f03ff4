from __future__ import annotations

from typing import Optional

from settleup.config import get_settings
from settleup.services.debts import DebtSummary
from settleup.services.settlement import Transfer
from settleup.utils.money import is_zero


def _money(amount: float, symbol: Optional[str]) -> str:
    if symbol is None:
        symbol = get_settings().currency_symbol
    return f"{symbol}{abs(amount):.2f}"


def format_transfer(transfer: Transfer, symbol: Optional[str] = None) -> str:
    return f"{transfer.from_member.name} pays {transfer.to_member.name} {_money(transfer.amount, symbol)}"


def format_debt_summary(summary: DebtSummary, symbol: Optional[str] = None) -> str:
    if is_zero(summary.total):
        return f"Settled with {summary.display_name}"
    if summary.total > 0:
        return f"You owe {summary.display_name} {_money(summary.total, symbol)}"
    return f"{summary.display_name} owes you {_money(summary.total, symbol)}"
