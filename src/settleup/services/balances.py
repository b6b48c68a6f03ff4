from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence

from settleup.models import Expense, Member, MemberId


@dataclass(slots=True)
class MemberBalance:
    id: MemberId
    name: str
    balance: float


def compute_balances(expenses: Iterable[Expense]) -> dict[MemberId, float]:
    """Net balance per member over the whole expense history.

    Positive means the member is owed money, negative means they owe.
    Settled splits still count: settling is a workflow flag, not a payment.
    """
    balances: dict[MemberId, float] = {}
    for expense in expenses:
        balances[expense.paid_by_id] = balances.get(expense.paid_by_id, 0.0) + expense.amount
        for split in expense.splits:
            balances[split.member_id] = balances.get(split.member_id, 0.0) - split.amount
    return balances


def member_balances(members: Sequence[Member], expenses: Iterable[Expense]) -> list[MemberBalance]:
    balances = compute_balances(expenses)
    return [MemberBalance(id=m.id, name=m.name, balance=balances.get(m.id, 0.0)) for m in members]
