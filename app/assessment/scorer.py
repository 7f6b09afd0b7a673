"""Escalation and verdict assembly.

Tiers only ever move upward: LOW -> MEDIUM -> HIGH. A rule may propose
a classification, but it is applied only when it is strictly riskier
than the current one. Each tier always travels with its matching status
(LOW/COMPLETED, MEDIUM/PENDING, HIGH/FLAGGED).
"""

from typing import Optional

from app.models import Classification, RiskLevel, RiskVerdict

RISK_ORDER: dict[str, int] = {"LOW": 0, "MEDIUM": 1, "HIGH": 2}

NEW_USER_FACTORS = ["No transaction history available", "New user"]
FALLBACK_FACTORS = ["Error in risk assessment", "Default to cautious approach"]


def escalate(
    current: Classification,
    proposed: Optional[Classification],
) -> Classification:
    """Return the riskier of the two classifications, keeping current on ties."""
    if proposed is None:
        return current
    if RISK_ORDER[proposed.risk_score] > RISK_ORDER[current.risk_score]:
        return proposed
    return current


def finalize_factors(risk_factors: list[str], risk_score: RiskLevel) -> list[str]:
    """Guarantee at least one factor in the verdict."""
    if risk_factors:
        return list(risk_factors)
    if risk_score == "LOW":
        return ["No risk factors identified"]
    return ["Transaction deviates from typical pattern"]


def new_user_verdict(transaction_id: str) -> RiskVerdict:
    """Verdict for a sender with no prior outgoing transactions."""
    return RiskVerdict(
        transaction_id=transaction_id,
        risk_score="MEDIUM",
        risk_factors=list(NEW_USER_FACTORS),
        status="PENDING",
        recommendation="Review first-time transaction",
    )


def fallback_verdict(transaction_id: str) -> RiskVerdict:
    """Cautious verdict used when the assessment itself fails.

    Never FLAGGED and never COMPLETED: a human takes a look.
    """
    return RiskVerdict(
        transaction_id=transaction_id,
        risk_score="MEDIUM",
        risk_factors=list(FALLBACK_FACTORS),
        status="PENDING",
        recommendation="Manual verification recommended due to assessment error",
    )
