from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Mapping, Sequence

from settleup.logging import get_logger
from settleup.models import Expense, Member, MemberId, Split
from settleup.utils.money import EPSILON, is_zero, round_money


log = get_logger(__name__)


@dataclass(slots=True)
class Transfer:
    from_member: Member
    to_member: Member
    amount: float


@dataclass(slots=True)
class OutstandingDebt:
    transfer: Transfer
    splits: list[Split] = field(default_factory=list)
    total: float = 0.0

    @property
    def actionable(self) -> bool:
        return bool(self.splits) and not is_zero(self.total)


@dataclass(slots=True)
class _Position:
    member: Member
    balance: float


def plan_settlements(
    members: Sequence[Member],
    balances: Mapping[MemberId, float],
    epsilon: float = EPSILON,
) -> List[Transfer]:
    """Greedy two-pointer plan that brings every balance to zero.

    Debtors are matched from the most negative end, creditors from the most
    positive end. Emits at most ``len(members) - 1`` transfers.
    """
    positions = [_Position(member=m, balance=balances.get(m.id, 0.0)) for m in members]
    positions.sort(key=lambda p: p.balance)

    transfers: list[Transfer] = []
    i, j = 0, len(positions) - 1

    while i < j:
        debtor = positions[i]
        creditor = positions[j]

        if is_zero(debtor.balance, epsilon) and is_zero(creditor.balance, epsilon):
            i += 1
            j -= 1
            continue

        transfer_amount = min(abs(debtor.balance), creditor.balance)
        # sub-cent leftovers round to 0.0 and are moved without a transfer
        amount = round_money(transfer_amount)
        if amount > 0:
            transfers.append(
                Transfer(
                    from_member=debtor.member,
                    to_member=creditor.member,
                    amount=amount,
                )
            )

        debtor.balance += transfer_amount
        creditor.balance -= transfer_amount

        if is_zero(debtor.balance, epsilon):
            i += 1
        if is_zero(creditor.balance, epsilon):
            j -= 1

    log.debug("settlement.planned", members=len(positions), transfers=len(transfers))
    return transfers


def apply_transfers(
    balances: Mapping[MemberId, float],
    transfers: Iterable[Transfer],
) -> dict[MemberId, float]:
    result = dict(balances)
    for t in transfers:
        result[t.from_member.id] = result.get(t.from_member.id, 0.0) + t.amount
        result[t.to_member.id] = result.get(t.to_member.id, 0.0) - t.amount
    return result


def revert_transfer(balances: Mapping[MemberId, float], transfer: Transfer) -> dict[MemberId, float]:
    """Undo a transfer previously applied with :func:`apply_transfers`."""
    result = dict(balances)
    result[transfer.from_member.id] = result.get(transfer.from_member.id, 0.0) - transfer.amount
    result[transfer.to_member.id] = result.get(transfer.to_member.id, 0.0) + transfer.amount
    return result


def outstanding_splits(expenses: Iterable[Expense], transfer: Transfer) -> OutstandingDebt:
    """Unsettled splits the debtor still owes on expenses the creditor paid.

    These are the records to mark settled once the transfer has been made.
    """
    debt = OutstandingDebt(transfer=transfer)
    for expense in expenses:
        if expense.paid_by_id != transfer.to_member.id:
            continue
        for split in expense.splits:
            if split.member_id == transfer.from_member.id and not split.is_settled:
                debt.splits.append(split)
                debt.total += split.amount
    debt.total = round_money(debt.total)
    return debt
