"""Rules configuration endpoints for reading and updating thresholds."""

import logging

from fastapi import APIRouter, Request

from app.models import RiskConfig

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api")


@router.get("/rules", response_model=RiskConfig)
async def get_rules(request: Request) -> RiskConfig:
    """Return the current risk thresholds."""
    return request.app.state.config


@router.put("/rules", response_model=RiskConfig)
async def update_rules(
    new_config: RiskConfig,
    request: Request,
) -> RiskConfig:
    """Replace the risk thresholds.

    The evaluator's config reference is swapped too, so the next
    assessment uses the new values.
    """
    request.app.state.config = new_config
    request.app.state.evaluator.config = new_config
    logger.info("Risk thresholds updated: %s", new_config.model_dump())
    return new_config
