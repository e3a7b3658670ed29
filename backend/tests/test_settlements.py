import pytest


@pytest.fixture
def expenses(client):
    first = client.post("/api/expenses", json={
        "amount": 100.0, "description": "Dinner", "payer_id": "A", "consumer_ids": ["A", "B", "C"]
    }).json()
    second = client.post("/api/expenses", json={
        "amount": 60.0, "description": "Taxi", "payer_id": "B", "consumer_ids": ["A", "B", "C"]
    }).json()
    return [first, second]


def test_balances(client, roster_json, expenses):
    res = client.post("/api/settlements/balances", json={"participants": roster_json, "expenses": expenses})
    assert res.status_code == 200
    assert res.json() == [
        {"participant_id": "A", "name": "Asha", "balance": 46.66},
        {"participant_id": "B", "name": "Ben", "balance": 6.67},
        {"participant_id": "C", "name": "Chen", "balance": -53.33},
    ]


def test_plan(client):
    res = client.post("/api/settlements/plan", json={"balances": {"A": 66.66, "B": -33.33, "C": -33.33}})
    assert res.status_code == 200
    assert res.json() == [
        {"from_id": "B", "to_id": "A", "amount": 33.33},
        {"from_id": "C", "to_id": "A", "amount": 33.33},
    ]


def test_summary(client, roster_json, expenses):
    res = client.post("/api/settlements/summary", json={"participants": roster_json, "expenses": expenses})
    assert res.status_code == 200
    data = res.json()
    assert data["total_expenses"] == 160.0
    assert data["settled"] is False
    assert len(data["members"]) == 3
    assert [s["from_id"] for s in data["settlements"]] == ["C", "C"]
    assert round(sum(s["amount"] for s in data["settlements"]), 2) == 53.33


def test_summary_single_participant(client):
    res = client.post("/api/settlements/summary", json={"participants": [{"id": "A", "name": "Asha"}]})
    data = res.json()
    assert data["balances"] == [{"participant_id": "A", "name": "Asha", "balance": 0.0}]
    assert data["settlements"] == []
    assert data["settled"] is True


def test_summary_removed_participant(client, expenses):
    roster = [{"id": "A", "name": "Asha"}, {"id": "B", "name": "Ben"}]
    res = client.post("/api/settlements/summary", json={"participants": roster, "expenses": expenses})
    balances = res.json()["balances"]
    assert balances[-1] == {"participant_id": "C", "name": "C", "balance": -53.33}


def test_root(client):
    assert client.get("/").json()["docs"] == "/docs"
