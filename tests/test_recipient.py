"""Tests for the new recipient rule."""

from app.assessment.rules.recipient import check_new_recipient
from app.models import RiskConfig
from tests.conftest import make_baseline


def check(receiver="user-9", amount=130.0, current="LOW", baseline=None):
    return check_new_recipient(
        receiver_id=receiver,
        amount=amount,
        baseline=baseline or make_baseline(),
        current=current,
        config=RiskConfig(),
    )


class TestCheckNewRecipient:
    def test_known_recipient_no_factor(self):
        result = check(receiver="user-2")
        assert result.risk_factors == []
        assert result.classification is None

    def test_missing_recipient_no_factor(self):
        result = check(receiver=None)
        assert result.risk_factors == []
        assert result.classification is None

    def test_new_recipient_small_amount_factor_only(self):
        result = check(amount=110.0)
        assert result.risk_factors == ["First transaction with this recipient"]
        assert result.classification is None

    def test_exactly_at_multiplier_is_plain_factor(self):
        """120 is NOT > 100 * 1.2."""
        result = check(amount=120.0)
        assert result.risk_factors == ["First transaction with this recipient"]

    def test_low_escalates_to_medium(self):
        result = check(amount=130.0, current="LOW")
        assert result.risk_factors == [
            "First transaction with this recipient with above-average amount"
        ]
        assert result.classification.risk_score == "MEDIUM"
        assert result.classification.status == "PENDING"
        assert result.classification.recommendation == (
            "New recipient with significant amount - verify details"
        )

    def test_medium_above_largest_escalates_to_high(self):
        result = check(amount=130.0, current="MEDIUM")
        assert result.classification.risk_score == "HIGH"
        assert result.classification.status == "FLAGGED"
        assert result.classification.recommendation == (
            "Large transaction with new recipient - potential fraud risk"
        )

    def test_medium_below_largest_no_escalation(self):
        # average 100, largest 150
        baseline = make_baseline(amounts=(50.0, 150.0, 100.0))
        result = check(amount=130.0, current="MEDIUM", baseline=baseline)
        assert result.risk_factors == [
            "First transaction with this recipient with above-average amount"
        ]
        assert result.classification is None

    def test_high_stays_high(self):
        result = check(amount=1000.0, current="HIGH")
        assert len(result.risk_factors) == 1
        assert result.classification is None
