from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Mapping, Optional, Sequence

from settleup.models import Member, MemberId
from settleup.utils.money import round_money


SPLIT_TYPES = ("equal", "percentage", "exact")


@dataclass(slots=True)
class SplitShare:
    member_id: MemberId
    name: Optional[str]
    amount: float


def calculate_splits(
    amount: float,
    split_type: str,
    members: Sequence[Member],
    values: Optional[Mapping[MemberId, float]] = None,
) -> list[SplitShare]:
    """Per-member shares of an expense, each rounded to two decimals.

    ``values`` holds percentages for ``percentage`` and amounts for ``exact``;
    only members listed there get a share. Rounding drift is left to the
    caller, see :func:`split_drift`.
    """
    if split_type not in SPLIT_TYPES:
        raise ValueError(f"unknown split type: {split_type}")
    if not amount or not members:
        return []

    if split_type == "equal":
        share = round_money(amount / len(members))
        return [SplitShare(member_id=m.id, name=m.name, amount=share) for m in members]

    names = {m.id: m.name for m in members}
    shares: list[SplitShare] = []
    for member_id, value in (values or {}).items():
        if split_type == "percentage":
            share = round_money(amount * value / 100)
        else:
            share = round_money(value)
        shares.append(SplitShare(member_id=member_id, name=names.get(member_id), amount=share))
    return shares


def split_drift(amount: float, shares: Iterable[SplitShare]) -> float:
    return round_money(amount - sum(s.amount for s in shares))
