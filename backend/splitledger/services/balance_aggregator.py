"""Net balance per participant over a set of expenses."""
import logging
from decimal import Decimal
from typing import Iterable

from splitledger.money import from_cents, to_cents
from splitledger.schemas import ExpenseRecord

logger = logging.getLogger(__name__)


def aggregate_balances(
    expenses: Iterable[ExpenseRecord], participant_ids: Iterable[str]
) -> dict[str, Decimal]:
    """
    Payers are credited what they paid, consumers debited what they consumed.
    Positive = is owed money, negative = owes money. Every roster id gets an
    entry; ids only found in expenses are kept too, after the roster.
    Sums inside each expense are trusted, not checked.
    """
    balances: dict[str, int] = {pid: 0 for pid in participant_ids}
    count = 0
    for e in expenses:
        count += 1
        for uid, paid in e.paid_by.items():
            balances[uid] = balances.get(uid, 0) + to_cents(paid)
        for uid, share in e.split_between.items():
            balances[uid] = balances.get(uid, 0) - to_cents(share)

    logger.debug("Aggregated %d expenses into %d balances", count, len(balances))
    return {uid: from_cents(bal) for uid, bal in balances.items()}
