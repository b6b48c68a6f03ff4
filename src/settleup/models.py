from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Hashable, Optional


MemberId = Hashable


@dataclass(slots=True)
class Member:
    id: MemberId
    name: str


@dataclass(slots=True)
class Split:
    id: Hashable
    expense_id: Hashable
    member_id: MemberId
    amount: float
    is_settled: bool = False
    settled_at: Optional[datetime] = None


@dataclass(slots=True)
class Expense:
    id: Hashable
    description: str
    amount: float
    paid_by_id: MemberId
    group_id: Hashable
    created_at: Optional[datetime] = None
    splits: list[Split] = field(default_factory=list)


@dataclass(slots=True)
class Group:
    id: Hashable
    name: str
    description: Optional[str] = None
    members: list[Member] = field(default_factory=list)
    expenses: list[Expense] = field(default_factory=list)


@dataclass(slots=True)
class PersonalDebt:
    id: Hashable
    person_name: str
    amount: float
    created_at: datetime
    user_id: Optional[Hashable] = None
