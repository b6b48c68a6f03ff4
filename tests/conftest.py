from __future__ import annotations

from datetime import datetime, timezone

import pytest

from settleup.models import Expense, Member, Split


def _build_expense(expense_id, paid_by, amount, shares, settled=()):
    return Expense(
        id=expense_id,
        description=f"expense {expense_id}",
        amount=amount,
        paid_by_id=paid_by,
        group_id="g1",
        created_at=datetime(2024, 5, 10, tzinfo=timezone.utc),
        splits=[
            Split(
                id=f"{expense_id}-{member_id}",
                expense_id=expense_id,
                member_id=member_id,
                amount=share,
                is_settled=member_id in settled,
            )
            for member_id, share in shares.items()
        ],
    )


@pytest.fixture
def make_expense():
    return _build_expense


@pytest.fixture
def trio() -> list[Member]:
    return [Member(id="alice", name="Alice"), Member(id="bob", name="Bob"), Member(id="carol", name="Carol")]


@pytest.fixture
def trio_expenses() -> list[Expense]:
    return [
        _build_expense("e1", "alice", 300.0, {"alice": 100.0, "bob": 100.0, "carol": 100.0}),
        _build_expense("e2", "bob", 150.0, {"bob": 75.0, "carol": 75.0}),
    ]
