"""Transaction history endpoints.

The full listing doubles as the default history feed for assessments.
"""

from typing import List, Literal, Optional

from fastapi import APIRouter, Query, Request

from app.models import Transaction
from app.storage.memory import MemoryStore

router = APIRouter(prefix="/api")


def _get_store(request: Request) -> MemoryStore:
    """Retrieve the memory store from application state."""
    return request.app.state.store


@router.get("/transactions", response_model=List[Transaction])
async def get_transactions(request: Request) -> List[Transaction]:
    """Return every stored transaction."""
    return _get_store(request).get_all()


@router.get("/transactions/flagged", response_model=List[Transaction])
async def get_flagged_transactions(request: Request) -> List[Transaction]:
    """Return transactions awaiting review (HIGH risk or FLAGGED status)."""
    return _get_store(request).get_flagged()


@router.get("/transactions/{user_id}", response_model=List[Transaction])
async def get_user_transactions(
    user_id: str,
    request: Request,
    direction: Optional[Literal["outgoing"]] = Query(default=None),
) -> List[Transaction]:
    """Get transactions a user sent or received.

    With direction=outgoing only the user's sent transactions are returned,
    which is the history the evaluator works from.
    """
    store = _get_store(request)
    if direction == "outgoing":
        return store.get_by_sender(user_id)
    return store.get_by_user(user_id)
