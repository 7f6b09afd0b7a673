"""Tests for the unusual device rule."""

from app.assessment.rules.device import check_device
from app.models import RiskConfig
from tests.conftest import make_baseline


def check(device="Pixel 8", amount=130.0, current="LOW", baseline=None, config=None):
    return check_device(
        device_id=device,
        amount=amount,
        baseline=baseline or make_baseline(),
        current=current,
        config=config or RiskConfig(),
    )


class TestCheckDevice:
    def test_known_device(self):
        result = check(device="iPhone 13")
        assert result.risk_factors == []
        assert result.classification is None

    def test_missing_device_not_judged(self):
        result = check(device=None)
        assert result.risk_factors == []

    def test_blank_device_not_judged(self):
        result = check(device="")
        assert result.risk_factors == []

    def test_history_without_devices_not_judged(self):
        result = check(device="Unknown Device", baseline=make_baseline(device=None))
        assert result.risk_factors == []
        assert result.classification is None

    def test_unknown_device_flags_low(self):
        result = check(device="Unknown Device", amount=10.0, current="LOW")
        assert result.risk_factors == ["Transaction from unknown device"]
        assert result.classification.risk_score == "HIGH"
        assert result.classification.status == "FLAGGED"
        assert result.classification.recommendation == (
            "Transaction from unknown device - potential account compromise"
        )

    def test_unknown_device_flags_medium(self):
        result = check(device="Unknown Device", current="MEDIUM")
        assert result.classification.risk_score == "HIGH"

    def test_unknown_device_on_high_factor_only(self):
        result = check(device="Unknown Device", current="HIGH")
        assert result.risk_factors == ["Transaction from unknown device"]
        assert result.classification is None

    def test_unknown_device_already_seen(self):
        baseline = make_baseline(device="Unknown Device")
        result = check(device="Unknown Device", baseline=baseline)
        assert result.risk_factors == []

    def test_new_device_low_factor_only(self):
        result = check(current="LOW")
        assert result.risk_factors == ["Transaction from new device"]
        assert result.classification is None

    def test_new_device_medium_above_average_escalates(self):
        result = check(current="MEDIUM", amount=130.0)
        assert result.classification.risk_score == "HIGH"
        assert result.classification.recommendation == (
            "Multiple risk factors detected - review carefully"
        )

    def test_new_device_medium_below_average_no_escalation(self):
        result = check(current="MEDIUM", amount=90.0)
        assert result.risk_factors == ["Transaction from new device"]
        assert result.classification is None

    def test_custom_unknown_device_label(self):
        config = RiskConfig(unknown_device_label="N/A")
        result = check(device="N/A", config=config)
        assert result.risk_factors == ["Transaction from unknown device"]
