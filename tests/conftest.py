"""Shared fixtures for the test suite."""

import pytest
from fastapi.testclient import TestClient

from app.assessment.baseline import build_baseline
from app.assessment.engine import RiskEvaluator
from app.main import app
from app.models import RiskConfig, Transaction
from app.storage.memory import MemoryStore


@pytest.fixture
def config():
    return RiskConfig()


@pytest.fixture
def store():
    return MemoryStore()


@pytest.fixture
def evaluator(config):
    return RiskEvaluator(config=config)


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c


def make_txn(
    tx_id="candidate",
    sender="user-1",
    receiver="user-2",
    amount=50.0,
    location="New York, USA",
    device="iPhone 13",
    **extra,
) -> Transaction:
    return Transaction(
        id=tx_id,
        sender_id=sender,
        receiver_id=receiver,
        amount=amount,
        location=location,
        device_id=device,
        **extra,
    )


def make_history(
    amounts=(100.0, 100.0, 100.0, 100.0, 100.0),
    sender="user-1",
    receiver="user-2",
    location="New York, USA",
    device="iPhone 13",
) -> list[Transaction]:
    """Prior outgoing transactions for one sender, all to the same recipient."""
    return [
        make_txn(
            tx_id=f"hist-{i}",
            sender=sender,
            receiver=receiver,
            amount=amount,
            location=location,
            device=device,
        )
        for i, amount in enumerate(amounts)
    ]


def make_baseline(amounts=(100.0, 100.0, 100.0, 100.0, 100.0), **kwargs):
    return build_baseline(make_history(amounts, **kwargs), RiskConfig())


def payload(**overrides) -> dict:
    """A camelCase candidate transaction as the dashboard sends it."""
    body = {
        "id": "tx-api",
        "senderId": "1",
        "receiverId": "2",
        "amount": 50.0,
        "location": "New York, USA",
        "deviceId": "iPhone 13",
    }
    body.update(overrides)
    return body
