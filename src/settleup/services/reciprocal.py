from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Hashable, Optional, Protocol, Sequence

from settleup.logging import get_logger
from settleup.models import Expense, Split
from settleup.utils.money import EPSILON


log = get_logger(__name__)


class SplitStore(Protocol):
    async def settle_split(self, split_id: Hashable, settled_at: datetime) -> object: ...


@dataclass(slots=True)
class ReciprocalPair:
    split_a: Split
    split_b: Split


@dataclass(slots=True)
class SettleBatchResult:
    settled_split_ids: list[Hashable] = field(default_factory=list)
    failed_split_ids: list[Hashable] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failed_split_ids


def _pair_key(a: Split, b: Split) -> tuple[str, str]:
    first, second = sorted((str(a.id), str(b.id)))
    return first, second


def find_reciprocal_pairs(expenses: Sequence[Expense], epsilon: float = EPSILON) -> list[ReciprocalPair]:
    """Unsettled splits on two different expenses that cancel each other out.

    A owes B on an expense B paid, and B owes A the same amount on an expense
    A paid. Each pair is reported once, in the order it is first found.
    The scan is quadratic in the number of splits.
    """
    pairs: dict[tuple[str, str], ReciprocalPair] = {}

    for e1 in expenses:
        for s1 in e1.splits:
            if s1.is_settled:
                continue
            for e2 in expenses:
                if e2.id == e1.id or s1.member_id != e2.paid_by_id:
                    continue
                for s2 in e2.splits:
                    if s2.is_settled:
                        continue
                    if s2.member_id == e1.paid_by_id and abs(s1.amount - s2.amount) < epsilon:
                        key = _pair_key(s1, s2)
                        if key not in pairs:
                            pairs[key] = ReciprocalPair(split_a=s1, split_b=s2)

    if pairs:
        log.info("reciprocal.pairs_found", pairs=len(pairs))
    return list(pairs.values())


async def settle_reciprocal_pairs(
    store: SplitStore,
    pairs: Sequence[ReciprocalPair],
    now: Optional[datetime] = None,
) -> SettleBatchResult:
    """Mark both splits of every pair settled with one shared timestamp.

    A pair that reuses a split already taken by an earlier pair in the batch
    is skipped, so each split is settled at most once.

    Failures are collected rather than rolled back; the caller should
    recompute and retry.
    """
    settled_at = now or datetime.now(timezone.utc)
    result = SettleBatchResult()
    used: set[Hashable] = set()

    for pair in pairs:
        # a split can cancel only one debt
        if pair.split_a.id in used or pair.split_b.id in used:
            log.info("reciprocal.pair_skipped", split_a=pair.split_a.id, split_b=pair.split_b.id)
            continue
        used.update((pair.split_a.id, pair.split_b.id))

        for split in (pair.split_a, pair.split_b):
            try:
                await store.settle_split(split.id, settled_at)
            except Exception:
                log.exception("reciprocal.settle_failed", split_id=split.id)
                result.failed_split_ids.append(split.id)
            else:
                result.settled_split_ids.append(split.id)

    if not result.ok:
        log.warning(
            "reciprocal.batch_partial",
            settled=len(result.settled_split_ids),
            failed=len(result.failed_split_ids),
        )
    return result
