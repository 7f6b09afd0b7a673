"""Risk assessment endpoints for single and batch transactions."""

import logging
import uuid
from collections import Counter
from typing import Any, Optional

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from app.assessment.engine import RiskEvaluator
from app.models import (
    AssessmentRequest,
    AssessmentResponse,
    AuditEntry,
    BatchAssessmentRequest,
    BatchResponse,
    BatchSummary,
    RiskVerdict,
)
from app.storage.memory import MemoryStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api")


def _get_evaluator(request: Request) -> RiskEvaluator:
    """Retrieve the risk evaluator from application state."""
    return request.app.state.evaluator


def _get_store(request: Request) -> MemoryStore:
    """Retrieve the memory store from application state."""
    return request.app.state.store


def new_transaction_id() -> str:
    return f"tx_{uuid.uuid4().hex}"


def _with_id(candidate: dict[str, Any]) -> dict[str, Any]:
    """Copy of the candidate carrying a string id, assigning one when missing."""
    tx_id = candidate.get("id")
    if tx_id is None or tx_id == "":
        return {**candidate, "id": new_transaction_id()}
    if not isinstance(tx_id, str):
        return {**candidate, "id": str(tx_id)}
    return candidate


def _history(
    request: Request,
    transaction_history: Optional[list[dict[str, Any]]],
) -> list[Any]:
    """The caller's history, or the stored dataset when none was sent."""
    if transaction_history is None:
        return _get_store(request).get_all()
    return transaction_history


def _assess(
    request: Request,
    candidate: dict[str, Any],
    history: list[Any],
) -> RiskVerdict:
    """Evaluate one candidate and record it in the audit log."""
    verdict = _get_evaluator(request).evaluate(candidate, history)
    _get_store(request).add_audit(
        AuditEntry(
            transaction_id=verdict.transaction_id,
            request=candidate,
            history_size=len(history),
            verdict=verdict,
        )
    )
    return verdict


@router.post("/risk-assessment", response_model=AssessmentResponse)
async def assess_transaction(
    body: AssessmentRequest,
    request: Request,
):
    """Assess a single transaction against the sender's history.

    Evaluation problems never surface as errors: the response is still
    successful and carries a cautious fallback verdict.
    """
    if body.current_transaction is None:
        return JSONResponse(
            status_code=400,
            content={"error": "Current transaction data is required"},
        )

    candidate = _with_id(body.current_transaction)
    history = _history(request, body.transaction_history)
    verdict = _assess(request, candidate, history)
    logger.debug("Risk assessment %s -> %s", verdict.transaction_id, verdict.risk_score)

    return AssessmentResponse(success=True, updated_transaction=verdict)


@router.post("/risk-assessment/batch", response_model=BatchResponse)
async def assess_batch(
    batch: BatchAssessmentRequest,
    request: Request,
) -> BatchResponse:
    """Assess a batch of transactions and return an aggregate summary.

    Each candidate is assessed independently against the same history.
    The summary counts verdicts per tier and per status and lists the
    five most common risk factors.
    """
    history = _history(request, batch.transaction_history)

    results: list[RiskVerdict] = []
    for candidate in batch.transactions:
        results.append(_assess(request, _with_id(candidate), history))

    tiers = Counter(r.risk_score for r in results)
    statuses = Counter(r.status for r in results)

    factor_counts = Counter(f for r in results for f in r.risk_factors)
    common_risk_factors = [factor for factor, _ in factor_counts.most_common(5)]

    summary = BatchSummary(
        total=len(results),
        low=tiers["LOW"],
        medium=tiers["MEDIUM"],
        high=tiers["HIGH"],
        completed=statuses["COMPLETED"],
        pending=statuses["PENDING"],
        flagged=statuses["FLAGGED"],
        common_risk_factors=common_risk_factors,
    )

    return BatchResponse(results=results, summary=summary)
