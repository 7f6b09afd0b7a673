"""User reputation endpoint."""

from fastapi import APIRouter, Request

from app.assessment.reputation import calculate_reputation, user_transactions
from app.models import ReputationResponse

router = APIRouter(prefix="/api")


@router.get("/users/{user_id}/reputation", response_model=ReputationResponse)
async def get_user_reputation(user_id: str, request: Request) -> ReputationResponse:
    """Grade a user from the risk outcomes of their transactions."""
    transactions = request.app.state.store.get_all()
    return ReputationResponse(
        user_id=user_id,
        reputation=calculate_reputation(user_id, transactions),
        transaction_count=len(user_transactions(user_id, transactions)),
    )
