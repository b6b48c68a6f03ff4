from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Optional, Sequence

from settleup.models import PersonalDebt
from settleup.utils.money import is_zero


FILTER_KINDS = ("all", "owed", "owing")
SORT_ORDERS = ("newest", "oldest", "amount-high", "amount-low")


@dataclass(slots=True)
class DebtSummary:
    display_name: str
    total: float = 0.0
    transactions: list[PersonalDebt] = field(default_factory=list)


def summarize(debts: Iterable[PersonalDebt]) -> list[DebtSummary]:
    """Aggregate personal debts per counterparty, ignoring name case.

    The display name is the spelling on the first record seen for a person,
    so it depends on the order the caller passes records in.
    Positive totals mean the user owes that person.
    """
    summary: dict[str, DebtSummary] = {}
    for debt in debts:
        key = debt.person_name.lower()
        entry = summary.get(key)
        if entry is None:
            entry = summary[key] = DebtSummary(display_name=debt.person_name)
        entry.total += debt.amount
        entry.transactions.append(debt)

    for entry in summary.values():
        entry.transactions.sort(key=lambda d: d.created_at, reverse=True)
    return list(summary.values())


def outstanding(summaries: Iterable[DebtSummary]) -> list[DebtSummary]:
    return [s for s in summaries if not is_zero(s.total)]


def filter_debts(
    debts: Iterable[PersonalDebt],
    kind: str = "all",
    search: Optional[str] = None,
) -> list[PersonalDebt]:
    if kind not in FILTER_KINDS:
        raise ValueError(f"unknown filter kind: {kind}")

    result = list(debts)
    if search:
        term = search.lower()
        result = [d for d in result if term in d.person_name.lower()]
    if kind == "owed":
        # they owe you
        result = [d for d in result if d.amount < 0]
    elif kind == "owing":
        result = [d for d in result if d.amount > 0]
    return result


def sort_debts(debts: Sequence[PersonalDebt], order: str = "newest") -> list[PersonalDebt]:
    if order == "newest":
        return sorted(debts, key=lambda d: d.created_at, reverse=True)
    if order == "oldest":
        return sorted(debts, key=lambda d: d.created_at)
    if order == "amount-high":
        return sorted(debts, key=lambda d: abs(d.amount), reverse=True)
    if order == "amount-low":
        return sorted(debts, key=lambda d: abs(d.amount))
    raise ValueError(f"unknown sort order: {order}")
