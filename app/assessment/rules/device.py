"""Unusual device rule.

A device the sender has not used before raises a factor. A device that
could not be identified at all is treated as a possible account
compromise and flags the transaction whatever its amount.
"""

from app.assessment.baseline import HistoryBaseline
from app.models import Classification, RiskConfig, RiskLevel, RuleResult


def check_device(
    device_id: str | None,
    amount: float,
    baseline: HistoryBaseline,
    current: RiskLevel,
    config: RiskConfig,
) -> RuleResult:
    """Check the candidate's device against the sender's known devices.

    Senders with no recorded devices are not judged.
    """
    if not device_id or not baseline.devices:
        return RuleResult()

    if device_id in baseline.devices:
        return RuleResult()

    if device_id == config.unknown_device_label:
        factors = ["Transaction from unknown device"]
        if current != "HIGH":
            return RuleResult(
                risk_factors=factors,
                classification=Classification(
                    risk_score="HIGH",
                    status="FLAGGED",
                    recommendation=(
                        "Transaction from unknown device - potential account compromise"
                    ),
                ),
            )
        return RuleResult(risk_factors=factors)

    factors = ["Transaction from new device"]

    if current == "MEDIUM" and amount > baseline.average_amount:
        return RuleResult(
            risk_factors=factors,
            classification=Classification(
                risk_score="HIGH",
                status="FLAGGED",
                recommendation="Multiple risk factors detected - review carefully",
            ),
        )

    return RuleResult(risk_factors=factors)
