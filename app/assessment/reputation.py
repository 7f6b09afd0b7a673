"""User reputation derived from past risk assessments.

Looks at every transaction the user took part in, as sender or
receiver, and grades them by how often those transactions were flagged
or rated high risk.
"""

from typing import Iterable

from app.models import Transaction


def user_transactions(
    user_id: str,
    transactions: Iterable[Transaction],
) -> list[Transaction]:
    return [
        t for t in transactions
        if t.sender_id == user_id or t.receiver_id == user_id
    ]


def calculate_reputation(user_id: str, transactions: Iterable[Transaction]) -> str:
    """Grade a user as excellent, good, average, bad or very bad."""
    involved = user_transactions(user_id, transactions)
    total = len(involved)
    if total == 0:
        return "average"

    flagged = sum(1 for t in involved if t.status == "FLAGGED")
    high_risk = sum(1 for t in involved if t.risk_score == "HIGH")
    medium_risk = sum(1 for t in involved if t.risk_score == "MEDIUM")

    flagged_ratio = flagged / total
    high_risk_ratio = high_risk / total

    if high_risk_ratio > 0.2 or flagged_ratio > 0.3:
        return "very bad"
    if high_risk_ratio > 0.1 or flagged_ratio > 0.2:
        return "bad"
    if medium_risk > 0 or flagged > 0:
        return "average"
    if total > 5:
        return "excellent"
    return "good"
