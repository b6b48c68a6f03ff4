from settleup.models import Group, Member
from settleup.services.balances import compute_balances, member_balances


def test_compute_balances_three_members(trio_expenses):
    balances = compute_balances(trio_expenses)

    assert balances == {"alice": 200.0, "bob": -25.0, "carol": -175.0}
    assert abs(sum(balances.values())) < 0.01


def test_compute_balances_empty():
    assert compute_balances([]) == {}


def test_compute_balances_ignores_settled_flag(make_expense):
    expenses = [make_expense("e1", "alice", 50.0, {"bob": 50.0}, settled={"bob"})]

    assert compute_balances(expenses) == {"alice": 50.0, "bob": -50.0}


def test_compute_balances_zero_sum_with_uneven_shares(make_expense):
    expenses = [
        make_expense("e1", "a", 100.0, {"a": 33.33, "b": 33.33, "c": 33.34}),
        make_expense("e2", "c", 19.99, {"a": 10.0, "b": 9.99}),
        make_expense("e3", "b", 7.5, {"c": 7.5}),
    ]

    balances = compute_balances(expenses)

    assert abs(sum(balances.values())) < 0.01


def test_compute_balances_accepts_unbalanced_expense(make_expense):
    expenses = [make_expense("e1", "a", 100.0, {}), make_expense("e2", "b", -20.0, {"x": 5.0})]

    assert compute_balances(expenses) == {"a": 100.0, "b": -20.0, "x": -5.0}


def test_member_balances_defaults_missing_members(trio_expenses):
    roster = [Member(id="alice", name="Alice"), Member(id="dave", name="Dave")]

    result = member_balances(roster, trio_expenses)

    assert [(b.name, b.balance) for b in result] == [("Alice", 200.0), ("Dave", 0.0)]


def test_member_balances_for_group(trio, trio_expenses):
    group = Group(id="g1", name="Trip", members=trio, expenses=trio_expenses)

    result = member_balances(group.members, group.expenses)

    assert {b.id: b.balance for b in result} == {"alice": 200.0, "bob": -25.0, "carol": -175.0}
