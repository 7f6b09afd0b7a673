"""Pydantic models for the risk assessment API.

Field names are snake_case in Python and camelCase on the wire, matching
the dashboard's JSON payloads.
"""

from datetime import datetime, timezone
from typing import Any, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

RiskLevel = Literal["LOW", "MEDIUM", "HIGH"]
TransactionStatus = Literal["COMPLETED", "PENDING", "FLAGGED"]


class CamelModel(BaseModel):
    """Base model serialized with camelCase aliases."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Transaction(CamelModel):
    """A payment record, either a candidate or part of a sender's history.

    Records come from varied sources, so everything except the sender and
    the amount is optional and unknown extra fields are kept. Ids are
    opaque: numeric ids are read as strings.
    """
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
        coerce_numbers_to_str=True,
    )

    id: Optional[str] = None
    sender_id: str
    receiver_id: Optional[str] = None
    sender_account_id: Optional[str] = None
    receiver_account_id: Optional[str] = None
    amount: float = Field(strict=True, allow_inf_nan=False)
    description: Optional[str] = None
    category: Optional[str] = None
    location: Optional[str] = None
    device_id: Optional[str] = None
    # Prior disposition of historical records; admin review can set values
    # outside the evaluator's own vocabulary (e.g. CANCELLED, FROZEN).
    status: Optional[str] = None
    risk_score: Optional[str] = None
    created_at: Optional[datetime] = None


class Classification(BaseModel):
    """A risk tier together with the status and recommendation it implies."""
    risk_score: RiskLevel
    status: TransactionStatus
    recommendation: str


class RuleResult(BaseModel):
    """Output of an individual risk check."""
    risk_factors: list[str] = []
    # Proposed classification; only applied if it raises the current tier
    classification: Optional[Classification] = None


class RiskVerdict(CamelModel):
    """Result of assessing a single transaction."""
    transaction_id: str
    risk_score: RiskLevel
    risk_factors: list[str]
    status: TransactionStatus
    recommendation: str


class AssessmentRequest(CamelModel):
    """Incoming assessment request.

    The candidate and history are kept as raw mappings so malformed records
    reach the evaluator, which turns them into a cautious verdict.
    """
    current_transaction: Optional[dict[str, Any]] = None
    transaction_history: Optional[list[dict[str, Any]]] = None


class AssessmentResponse(CamelModel):
    success: bool = True
    updated_transaction: RiskVerdict


class BatchAssessmentRequest(CamelModel):
    """A batch of candidates assessed against the same history."""
    transactions: list[dict[str, Any]]
    transaction_history: Optional[list[dict[str, Any]]] = None


class BatchSummary(CamelModel):
    """Aggregate statistics for a batch assessment run."""
    total: int
    low: int
    medium: int
    high: int
    completed: int
    pending: int
    flagged: int
    common_risk_factors: list[str]


class BatchResponse(CamelModel):
    results: list[RiskVerdict]
    summary: BatchSummary


class AuditEntry(CamelModel):
    """Audit trail entry linking a submitted candidate to its verdict."""
    transaction_id: str
    assessed_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc)
    )
    request: dict[str, Any]
    history_size: int
    verdict: RiskVerdict


class ReputationResponse(CamelModel):
    user_id: str
    reputation: Literal["excellent", "good", "average", "bad", "very bad"]
    transaction_count: int


class RiskConfig(BaseModel):
    """Tunable thresholds for the risk evaluator."""
    auto_approve_limit: float = Field(default=100, gt=0)
    low_threshold_floor: float = Field(default=100, gt=0)
    low_multiplier: float = Field(default=1.5, gt=0)
    high_multiplier: float = Field(default=3.0, gt=0)
    largest_margin: float = Field(default=1.5, gt=0)
    new_recipient_multiplier: float = Field(default=1.2, gt=0)
    unknown_device_label: str = "Unknown Device"
