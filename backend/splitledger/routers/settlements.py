"""Settlements: net balances and who pays whom for a set of expenses."""
import logging

from fastapi import APIRouter

from splitledger.schemas import (
    BalanceEntry, LedgerRequest, PlanRequest, SettlementItem, SettlementSummary,
)
from splitledger.services.balance_aggregator import aggregate_balances
from splitledger.services.ledger import balance_entries, summarize
from splitledger.services.settlement_calculator import compute_settlements

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/settlements", tags=["settlements"])


@router.post("/balances", response_model=list[BalanceEntry])
def get_balances(data: LedgerRequest):
    balances = aggregate_balances(data.expenses, [p.id for p in data.participants])
    return balance_entries(data.participants, balances)


@router.post("/plan", response_model=list[SettlementItem])
def get_plan(data: PlanRequest):
    return compute_settlements(data.balances)


@router.post("/summary", response_model=SettlementSummary)
def get_summary(data: LedgerRequest):
    summary = summarize(data.participants, data.expenses)
    logger.info(
        "Summarized %d expenses for %d participants: %d transfers",
        len(data.expenses), len(data.participants), len(summary.settlements),
    )
    return summary
