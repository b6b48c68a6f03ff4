from __future__ import annotations

from typing import Hashable, Iterable, Optional, Sequence, Union

from settleup.logging import get_logger
from settleup.utils.money import EPSILON, round_money
from settleup.utils.parse import parse_amount


log = get_logger(__name__)


class ValidationError(ValueError):
    pass


def validate_group(name: Optional[str], members: Sequence[object]) -> None:
    if not name or not name.strip():
        raise ValidationError("Group name is required")
    if len(members) < 2:
        raise ValidationError("At least 2 members are required")


def validate_expense(
    description: Optional[str],
    amount: Optional[float],
    paid_by_id: Optional[Hashable],
    split_amounts: Iterable[float] = (),
) -> None:
    if not description or not amount:
        raise ValidationError("Description and amount are required")
    if amount < 0:
        raise ValidationError("Amount must be positive")
    if paid_by_id is None:
        raise ValidationError("Paid by member is required")

    split_amounts = list(split_amounts)
    if split_amounts:
        drift = round_money(amount - sum(split_amounts))
        if abs(drift) >= EPSILON:
            log.warning("expense.split_drift", amount=amount, drift=drift)


def validate_debt(person_name: Optional[str], amount: Union[str, float, None]) -> tuple[str, float]:
    if not person_name or not person_name.strip() or amount is None or amount == "":
        raise ValidationError("Person name and amount are required")

    if isinstance(amount, str):
        try:
            amount = parse_amount(amount)
        except ValueError as exc:
            raise ValidationError("Amount must be a number") from exc

    if amount == 0:
        raise ValidationError("Amount must not be zero")
    return person_name.strip(), float(amount)
