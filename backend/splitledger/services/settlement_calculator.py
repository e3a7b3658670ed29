"""Greedy plan of transfers so everyone is settled (who pays whom)."""
import logging
from typing import Mapping

from splitledger.money import CENT, Amount, from_cents, is_settled, to_cents, to_decimal
from splitledger.schemas import SettlementItem

logger = logging.getLogger(__name__)


def compute_settlements(balances: Mapping[str, Amount]) -> list[SettlementItem]:
    """
    balances: participant_id -> net balance (positive = is owed money, negative = owes money).
    Returns the transfers that settle everyone, largest debts matched against
    largest credits first. Balances within a cent of zero are left out.
    """
    debtors = []  # (participant_id, exact balance), negative
    creditors = []
    for pid, bal in balances.items():
        exact = to_decimal(bal)
        if exact < -CENT:
            debtors.append((pid, exact))
        elif exact > CENT:
            creditors.append((pid, exact))
    # sort() is stable, so equal balances keep their input order.
    debtors.sort(key=lambda x: x[1])
    creditors.sort(key=lambda x: -x[1])
    # remaining amounts are tracked in cents from here on
    debtors = [[pid, to_cents(bal)] for pid, bal in debtors]
    creditors = [[pid, to_cents(bal)] for pid, bal in creditors]

    out: list[SettlementItem] = []
    i, j = 0, 0
    while i < len(debtors) and j < len(creditors):
        debtor, creditor = debtors[i], creditors[j]
        transfer = min(-debtor[1], creditor[1])
        if transfer > 0:
            out.append(SettlementItem(from_id=debtor[0], to_id=creditor[0], amount=from_cents(transfer)))
        debtor[1] += transfer
        creditor[1] -= transfer
        if is_settled(debtor[1]):
            i += 1
        if is_settled(creditor[1]):
            j += 1

    if i < len(debtors) or j < len(creditors):
        residue = sum(d[1] for d in debtors[i:]) + sum(c[1] for c in creditors[j:])
        logger.warning("Balances do not net to zero; %d cents left unsettled", residue)
    logger.debug("Planned %d transfers for %d balances", len(out), len(balances))
    return out
