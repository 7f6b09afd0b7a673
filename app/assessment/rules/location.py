"""Unusual location rule.

Flags payments originating somewhere the sender has never transacted
from. Locations are free text and compared exactly.
"""

from app.assessment.baseline import HistoryBaseline
from app.models import Classification, RiskLevel, RuleResult


def check_location(
    location: str | None,
    amount: float,
    baseline: HistoryBaseline,
    current: RiskLevel,
) -> RuleResult:
    """Check the candidate's location against the sender's known locations.

    Senders with no recorded locations are not judged.
    """
    if not location or not baseline.locations:
        return RuleResult()

    if location in baseline.locations:
        return RuleResult()

    factors = ["Transaction from unusual location"]

    if current == "LOW" and amount > baseline.average_amount:
        return RuleResult(
            risk_factors=factors,
            classification=Classification(
                risk_score="MEDIUM",
                status="PENDING",
                recommendation="Unusual location - verify transaction",
            ),
        )

    return RuleResult(risk_factors=factors)
