"""Audit log endpoint for reviewing past assessments."""

from datetime import datetime
from typing import List, Literal, Optional

from fastapi import APIRouter, Query, Request

from app.models import AuditEntry
from app.storage.memory import MemoryStore

router = APIRouter(prefix="/api")


def _get_store(request: Request) -> MemoryStore:
    """Retrieve the memory store from application state."""
    return request.app.state.store


@router.get("/audit", response_model=List[AuditEntry])
async def get_audit_log(
    request: Request,
    transaction_id: Optional[str] = Query(default=None),
    risk_score: Optional[Literal["LOW", "MEDIUM", "HIGH"]] = Query(default=None),
    from_date: Optional[datetime] = Query(default=None),
    to_date: Optional[datetime] = Query(default=None),
) -> List[AuditEntry]:
    """Retrieve audit log entries with optional filters.

    Filters:
      - transaction_id: exact match on a specific transaction
      - risk_score: verdicts of one tier only
      - from_date: entries assessed at or after this time
      - to_date: entries assessed at or before this time
    """
    store = _get_store(request)
    return store.get_audit_log(
        transaction_id=transaction_id,
        risk_score=risk_score,
        since=from_date,
        until=to_date,
    )
