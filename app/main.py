"""PayKrypt Transaction Risk Assessment API.

Rule-based risk scoring for outgoing payments. Each candidate payment is
compared with the sender's own history (average and largest amounts,
known recipients, locations and devices) and receives a risk tier, a
recommended status, the contributing risk factors and a recommendation.

Run with:
    python3 -m uvicorn app.main:app --host 0.0.0.0 --port 8000
"""

import json
import logging
import os
from pathlib import Path
from typing import Dict, List

from fastapi import FastAPI

from app.assessment.engine import RiskEvaluator
from app.models import RiskConfig, Transaction
from app.routes import assessment, audit, rules, transactions, users
from app.storage.memory import MemoryStore

logging.basicConfig(level=os.getenv("LOG_LEVEL", "INFO").upper())
logger = logging.getLogger(__name__)

# Resolve the data/ directory relative to this file so the server works
# regardless of which directory uvicorn is launched from.
DATA_DIR = Path(
    os.getenv("PAYKRYPT_DATA_DIR", Path(__file__).parent.parent / "data")
)

app = FastAPI(
    title="PayKrypt Transaction Risk Assessment API",
    description=(
        "Rule-based risk scoring for outgoing payments. Compares each "
        "payment with the sender's history of amounts, recipients, "
        "locations and devices."
    ),
    version="1.0.0",
)


@app.on_event("startup")
async def startup() -> None:
    """Load the default transaction dataset and initialize the evaluator."""

    # The default history used when a request carries none
    transactions_path = DATA_DIR / "transactions.json"
    seed: List[Transaction] = []
    if transactions_path.exists():
        with open(transactions_path, "r") as f:
            seed = [Transaction.model_validate(t) for t in json.load(f)]
    else:
        logger.warning("No transaction dataset at %s, starting empty", transactions_path)

    # Load tunable thresholds (or use defaults)
    config_path = DATA_DIR / "risk_config.json"
    if config_path.exists():
        with open(config_path, "r") as f:
            config = RiskConfig(**json.load(f))
    else:
        config = RiskConfig()

    store = MemoryStore(seed)
    evaluator = RiskEvaluator(config=config)
    logger.info("Loaded %d transactions from %s", len(seed), DATA_DIR)

    # Attach to app state for dependency injection in routes
    app.state.evaluator = evaluator
    app.state.store = store
    app.state.config = config


# Mount all API routers
app.include_router(assessment.router)
app.include_router(transactions.router)
app.include_router(users.router)
app.include_router(rules.router)
app.include_router(audit.router)


@app.get("/health")
async def health_check() -> Dict[str, str]:
    """Simple health check endpoint."""
    return {"status": "healthy"}
