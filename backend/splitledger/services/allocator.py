"""Equal split of an expense total among its consumers."""
import logging
from decimal import Decimal
from typing import Sequence

from splitledger.money import Amount, divide_cents, from_cents, has_sub_cents, to_cents

logger = logging.getLogger(__name__)


def allocate(total: Amount, consumer_ids: Sequence[str]) -> dict[str, Decimal]:
    """
    Give every consumer round(total / n, 2); whatever rounding leaves over
    (positive or negative) goes to the first consumer in the given order.
    consumer_ids must be non-empty, unique and in a stable order; total must
    be positive and in whole cents.
    """
    if not consumer_ids:
        raise ValueError("At least one consumer required")
    if len(set(consumer_ids)) != len(consumer_ids):
        raise ValueError("Consumer ids must be unique")
    if has_sub_cents(total):
        raise ValueError("Amount must be in whole cents")
    total_cents = to_cents(total)
    if total_cents <= 0:
        raise ValueError("Amount must be positive")

    share = divide_cents(total_cents, len(consumer_ids))
    shares = {cid: share for cid in consumer_ids}
    diff = total_cents - share * len(consumer_ids)
    if diff:
        shares[consumer_ids[0]] += diff
    logger.debug("Split %d cents among %d consumers, residual %d", total_cents, len(consumer_ids), diff)
    return {cid: from_cents(c) for cid, c in shares.items()}
