"""Balances and settlement plan for a roster and its expenses in one call."""
from typing import Iterable, Sequence

from splitledger.money import from_cents, is_settled, to_cents
from splitledger.schemas import (
    BalanceEntry, ExpenseRecord, Participant, SettlementSummary,
)
from splitledger.services.balance_aggregator import aggregate_balances
from splitledger.services.settlement_calculator import compute_settlements


def balance_entries(participants: Sequence[Participant], balances) -> list[BalanceEntry]:
    names = {p.id: p.name or p.id for p in participants}
    return [
        BalanceEntry(participant_id=pid, name=names.get(pid, pid), balance=bal)
        for pid, bal in balances.items()
    ]


def summarize(
    participants: Sequence[Participant], expenses: Iterable[ExpenseRecord]
) -> SettlementSummary:
    expenses = list(expenses)
    balances = aggregate_balances(expenses, [p.id for p in participants])
    settlements = compute_settlements(balances)
    total = sum(to_cents(e.amount) for e in expenses)
    return SettlementSummary(
        members=list(participants),
        balances=balance_entries(participants, balances),
        settlements=settlements,
        total_expenses=from_cents(total),
        settled=all(is_settled(to_cents(b)) for b in balances.values()),
    )
