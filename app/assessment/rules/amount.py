"""Primary amount classification.

Sets the starting tier for the transaction from how its amount compares
with the sender's baseline. Small payments are always fine; payments
above three times the sender's average are flagged outright; payments
above one and a half times the average (with a floor) need verification.
"""

from decimal import ROUND_HALF_UP, Decimal, localcontext

from app.assessment.baseline import HistoryBaseline
from app.models import Classification, RiskConfig, RuleResult

NORMAL_RECOMMENDATION = "Transaction appears normal - no action required"


def format_ratio(amount: float, average: float) -> str:
    """Format amount/average to one decimal, rounding half up on the exact value."""
    ratio = Decimal(amount / average)
    with localcontext() as ctx:
        # Room for every integer digit plus the one decimal kept
        ctx.prec = max(ctx.prec, ratio.adjusted() + 3)
        return str(ratio.quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def classify_amount(
    amount: float,
    baseline: HistoryBaseline,
    config: RiskConfig,
) -> RuleResult:
    """Assign the initial classification for the transaction amount.

    Always returns a classification; the later checks can only escalate it.
    """
    if amount <= config.auto_approve_limit:
        return RuleResult(
            classification=Classification(
                risk_score="LOW",
                status="COMPLETED",
                recommendation=NORMAL_RECOMMENDATION,
            ),
        )

    if amount > baseline.medium_threshold:
        factors = [
            f"Amount {format_ratio(amount, baseline.average_amount)}x "
            f"higher than user average"
        ]
        if amount > baseline.largest_amount * config.largest_margin:
            factors.append(
                "Exceeds largest previous transaction by significant margin"
            )
        return RuleResult(
            risk_factors=factors,
            classification=Classification(
                risk_score="HIGH",
                status="FLAGGED",
                recommendation=(
                    "Transaction amount significantly exceeds user's "
                    "typical spending pattern"
                ),
            ),
        )

    if amount > baseline.low_threshold:
        return RuleResult(
            risk_factors=[
                f"Amount {format_ratio(amount, baseline.average_amount)}x "
                f"higher than user average"
            ],
            classification=Classification(
                risk_score="MEDIUM",
                status="PENDING",
                recommendation="Verify transaction details before processing",
            ),
        )

    # Within the sender's normal range
    return RuleResult(
        classification=Classification(
            risk_score="LOW",
            status="COMPLETED",
            recommendation=NORMAL_RECOMMENDATION,
        ),
    )
