"""Core risk evaluator.

Checks a candidate payment against the sender's own history, in order:
  1. Amount versus the sender's average (sets the starting tier)
  2. New recipient
  3. Unusual location
  4. Unusual device

Every check after the first may only escalate the tier. The evaluator
keeps no state between calls and never raises: malformed input yields a
cautious MEDIUM/PENDING verdict instead.
"""

import logging
from collections.abc import Iterable, Mapping
from typing import Any, Union

from app.assessment.baseline import build_baseline, scope_history
from app.assessment.rules.amount import classify_amount
from app.assessment.rules.device import check_device
from app.assessment.rules.location import check_location
from app.assessment.rules.recipient import check_new_recipient
from app.assessment.scorer import (
    escalate,
    fallback_verdict,
    finalize_factors,
    new_user_verdict,
)
from app.models import RiskConfig, RiskVerdict, Transaction

logger = logging.getLogger(__name__)

TransactionLike = Union[Transaction, Mapping[str, Any]]


def _as_transaction(record: TransactionLike) -> Transaction:
    if isinstance(record, Transaction):
        return record
    return Transaction.model_validate(record)


def _sent_by(record: TransactionLike, sender_id: str) -> bool:
    """Whether a history record was sent by the sender, read before validation.

    Records that are not mappings cannot be read and are passed on to
    validation, which rejects them.
    """
    if isinstance(record, Transaction):
        return record.sender_id == sender_id
    if not isinstance(record, Mapping):
        return True
    value = record.get("senderId", record.get("sender_id"))
    return value is not None and str(value) == sender_id


def _raw_id(candidate: Any) -> str:
    """Best-effort transaction id for the fallback verdict."""
    if isinstance(candidate, Transaction):
        return candidate.id or ""
    if isinstance(candidate, Mapping):
        value = candidate.get("id")
        return str(value) if value is not None else ""
    return ""


class RiskEvaluator:
    """Assigns a risk tier, status and recommendation to a candidate payment."""

    def __init__(self, config: RiskConfig | None = None) -> None:
        self.config = config or RiskConfig()

    def evaluate(
        self,
        candidate: TransactionLike,
        history: Iterable[TransactionLike],
    ) -> RiskVerdict:
        """Assess one candidate transaction against a transaction history.

        The history may contain other senders' records; only the
        candidate sender's prior outgoing transactions are considered.
        """
        try:
            return self._evaluate(candidate, history)
        except Exception:
            logger.exception(
                "Risk assessment failed for transaction %r, using fallback verdict",
                _raw_id(candidate),
            )
            return fallback_verdict(_raw_id(candidate))

    def _evaluate(
        self,
        candidate: TransactionLike,
        history: Iterable[TransactionLike],
    ) -> RiskVerdict:
        txn = _as_transaction(candidate)
        # Other senders' records are dropped unread
        records = [
            _as_transaction(t) for t in history if _sent_by(t, txn.sender_id)
        ]
        transaction_id = txn.id or ""

        prior_outgoing = scope_history(txn, records)
        if not prior_outgoing:
            logger.debug("No history for sender %s", txn.sender_id)
            return new_user_verdict(transaction_id)

        config = self.config
        baseline = build_baseline(prior_outgoing, config)

        # 1. Amount -- sets the starting classification
        primary = classify_amount(txn.amount, baseline, config)
        risk_factors = list(primary.risk_factors)
        classification = primary.classification

        # 2. New recipient
        result = check_new_recipient(
            receiver_id=txn.receiver_id,
            amount=txn.amount,
            baseline=baseline,
            current=classification.risk_score,
            config=config,
        )
        risk_factors.extend(result.risk_factors)
        classification = escalate(classification, result.classification)

        # 3. Location
        result = check_location(
            location=txn.location,
            amount=txn.amount,
            baseline=baseline,
            current=classification.risk_score,
        )
        risk_factors.extend(result.risk_factors)
        classification = escalate(classification, result.classification)

        # 4. Device
        result = check_device(
            device_id=txn.device_id,
            amount=txn.amount,
            baseline=baseline,
            current=classification.risk_score,
            config=config,
        )
        risk_factors.extend(result.risk_factors)
        classification = escalate(classification, result.classification)

        verdict = RiskVerdict(
            transaction_id=transaction_id,
            risk_score=classification.risk_score,
            risk_factors=finalize_factors(risk_factors, classification.risk_score),
            status=classification.status,
            recommendation=classification.recommendation,
        )
        logger.debug(
            "Assessed %s: %s/%s (%d prior transactions)",
            transaction_id,
            verdict.risk_score,
            verdict.status,
            len(prior_outgoing),
        )
        return verdict
