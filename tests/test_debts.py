from datetime import datetime, timedelta, timezone

import pytest

from settleup.models import PersonalDebt
from settleup.services.debts import filter_debts, outstanding, sort_debts, summarize

BASE = datetime(2024, 5, 10, 12, 0, tzinfo=timezone.utc)


def debt(debt_id, name, amount, minutes=0):
    return PersonalDebt(id=debt_id, person_name=name, amount=amount, created_at=BASE + timedelta(minutes=minutes))


def test_summarize_case_insensitive():
    summary = summarize([debt(1, "Bob", 200.0, 5), debt(2, "bob", -50.0, 1)])

    assert len(summary) == 1
    assert summary[0].display_name == "Bob"
    assert summary[0].total == 150.0


def test_summarize_first_spelling_wins_and_transactions_newest_first():
    summary = summarize([debt(1, "bob", 10.0, 1), debt(2, "BOB", 5.0, 9), debt(3, "Ann", -20.0, 3)])

    assert [s.display_name for s in summary] == ["bob", "Ann"]
    assert [d.id for d in summary[0].transactions] == [2, 1]
    assert summary[1].total == -20.0


def test_summarize_empty():
    assert summarize([]) == []


def test_outstanding_drops_settled_people():
    summary = summarize([debt(1, "Bob", 50.0), debt(2, "bob", -50.0), debt(3, "Ann", 5.0)])

    assert [s.display_name for s in outstanding(summary)] == ["Ann"]


def test_filter_debts():
    debts = [debt(1, "Bob", 50.0), debt(2, "Bobby", -10.0), debt(3, "Ann", -5.0)]

    assert [d.id for d in filter_debts(debts, "owed")] == [2, 3]
    assert [d.id for d in filter_debts(debts, "owing")] == [1]
    assert [d.id for d in filter_debts(debts, "all", search="BOB")] == [1, 2]
    assert [d.id for d in filter_debts(debts, "owed", search="bob")] == [2]


def test_filter_debts_unknown_kind():
    with pytest.raises(ValueError):
        filter_debts([], "mine")


def test_sort_debts():
    debts = [debt(1, "Bob", 50.0, 2), debt(2, "Ann", -80.0, 1), debt(3, "Cy", 5.0, 3)]

    assert [d.id for d in sort_debts(debts)] == [3, 1, 2]
    assert [d.id for d in sort_debts(debts, "oldest")] == [2, 1, 3]
    assert [d.id for d in sort_debts(debts, "amount-high")] == [2, 1, 3]
    assert [d.id for d in sort_debts(debts, "amount-low")] == [3, 1, 2]

    with pytest.raises(ValueError):
        sort_debts(debts, "alphabetical")
