"""Sender history scoping and baseline statistics.

Every anomaly check compares the candidate against the sender's own
prior outgoing transactions: the average and largest amounts, the
thresholds derived from them, and the sets of recipients, locations and
devices the sender has already used. Blank values count as missing.
"""

from dataclasses import dataclass, field
from typing import Iterable

from app.models import RiskConfig, Transaction


@dataclass(frozen=True)
class HistoryBaseline:
    """Aggregates over a non-empty list of prior outgoing transactions."""

    average_amount: float
    largest_amount: float
    low_threshold: float
    medium_threshold: float
    recipients: frozenset = field(default_factory=frozenset)
    locations: frozenset = field(default_factory=frozenset)
    devices: frozenset = field(default_factory=frozenset)

    def is_new_recipient(self, receiver_id: str | None) -> bool:
        return bool(receiver_id) and receiver_id not in self.recipients


def scope_history(
    candidate: Transaction,
    history: Iterable[Transaction],
) -> list[Transaction]:
    """Return the sender's prior outgoing transactions, excluding the candidate."""
    return [
        t for t in history
        if t.sender_id == candidate.sender_id
        and (candidate.id is None or t.id != candidate.id)
    ]


def build_baseline(
    prior_outgoing: list[Transaction],
    config: RiskConfig,
) -> HistoryBaseline:
    """Compute the sender's baseline.

    Callers must handle the empty-history case first; an empty list has
    no average.
    """
    amounts = [t.amount for t in prior_outgoing]
    average = sum(amounts) / len(amounts)

    return HistoryBaseline(
        average_amount=average,
        largest_amount=max(amounts),
        low_threshold=max(average * config.low_multiplier, config.low_threshold_floor),
        medium_threshold=average * config.high_multiplier,
        recipients=frozenset(
            t.receiver_id for t in prior_outgoing if t.receiver_id
        ),
        locations=frozenset(
            t.location for t in prior_outgoing if t.location
        ),
        devices=frozenset(
            t.device_id for t in prior_outgoing if t.device_id
        ),
    )
