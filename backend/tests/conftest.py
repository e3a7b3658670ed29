import pytest
from fastapi.testclient import TestClient

from splitledger.main import app
from splitledger.schemas import ExpenseRecord, Participant


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def participants():
    return [
        Participant(id="A", name="Asha"),
        Participant(id="B", name="Ben"),
        Participant(id="C", name="Chen"),
    ]


@pytest.fixture
def roster_json(participants):
    return [p.model_dump() for p in participants]


@pytest.fixture
def dinner():
    return ExpenseRecord(
        amount=100, paid_by={"A": 100},
        split_between={"A": "33.34", "B": "33.33", "C": "33.33"},
        description="Dinner",
    )


@pytest.fixture
def taxi():
    return ExpenseRecord(
        amount=60, paid_by={"B": 60},
        split_between={"A": 20, "B": 20, "C": 20},
        description="Taxi",
    )
