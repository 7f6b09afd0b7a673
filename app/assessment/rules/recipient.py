"""New recipient rule.

A first payment to someone the sender has never paid before is a common
pattern in account takeover and authorised push payment scams. On its own
it only adds a factor; combined with an above-average amount it raises
the tier by one step.
"""

from app.assessment.baseline import HistoryBaseline
from app.models import Classification, RiskConfig, RiskLevel, RuleResult


def check_new_recipient(
    receiver_id: str | None,
    amount: float,
    baseline: HistoryBaseline,
    current: RiskLevel,
    config: RiskConfig,
) -> RuleResult:
    """Check whether the candidate pays a recipient absent from the sender's history."""
    if not baseline.is_new_recipient(receiver_id):
        return RuleResult()

    if amount <= baseline.average_amount * config.new_recipient_multiplier:
        return RuleResult(risk_factors=["First transaction with this recipient"])

    factors = ["First transaction with this recipient with above-average amount"]

    if current == "LOW" and amount > baseline.average_amount:
        return RuleResult(
            risk_factors=factors,
            classification=Classification(
                risk_score="MEDIUM",
                status="PENDING",
                recommendation="New recipient with significant amount - verify details",
            ),
        )

    if current == "MEDIUM" and amount > baseline.largest_amount:
        return RuleResult(
            risk_factors=factors,
            classification=Classification(
                risk_score="HIGH",
                status="FLAGGED",
                recommendation="Large transaction with new recipient - potential fraud risk",
            ),
        )

    return RuleResult(risk_factors=factors)
