"""Group debt settlement and personal debt ledger."""

from settleup.services.balances import compute_balances, member_balances
from settleup.services.debts import summarize
from settleup.services.reciprocal import find_reciprocal_pairs, settle_reciprocal_pairs
from settleup.services.settlement import Transfer, plan_settlements

__all__ = [
    "Transfer",
    "compute_balances",
    "find_reciprocal_pairs",
    "member_balances",
    "plan_settlements",
    "settle_reciprocal_pairs",
    "summarize",
]
