"""Pydantic schemas for request/response."""
import datetime
from decimal import Decimal
from typing import Annotated, Optional

from pydantic import BaseModel, ConfigDict, PlainSerializer

# Decimal in Python, plain number in JSON.
Money = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]


# ----- Participant -----
class Participant(BaseModel):
    id: str
    name: Optional[str] = None


# ----- Expense -----
SPLIT_TYPES = ["equal", "custom"]


class ExpenseRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    amount: Money
    paid_by: dict[str, Money]
    split_between: dict[str, Money]
    description: Optional[str] = None
    date: Optional[datetime.date] = None


class ExpenseCreate(BaseModel):
    amount: Money
    description: str
    date: Optional[datetime.date] = None
    payer_id: Optional[str] = None
    paid_by: Optional[dict[str, Money]] = None
    consumer_ids: list[str]
    split_type: str = "equal"
    shares: Optional[dict[str, Money]] = None
    participants: Optional[list[Participant]] = None


class SplitRequest(BaseModel):
    amount: Money
    consumer_ids: list[str]


class SplitResponse(BaseModel):
    amount: Money
    shares: dict[str, Money]


# ----- Balances -----
class LedgerRequest(BaseModel):
    participants: list[Participant] = []
    expenses: list[ExpenseRecord] = []


class BalanceEntry(BaseModel):
    participant_id: str
    name: Optional[str] = None
    balance: Money


# ----- Settlement -----
class PlanRequest(BaseModel):
    balances: dict[str, Money]


class SettlementItem(BaseModel):
    from_id: str
    to_id: str
    amount: Money


class SettlementSummary(BaseModel):
    members: list[Participant] = []
    balances: list[BalanceEntry]
    settlements: list[SettlementItem]
    total_expenses: Money
    settled: bool
