"""Expenses: equal split preview and validated expense records."""
import logging

from fastapi import APIRouter, HTTPException

from splitledger.money import TOLERANCE_CENTS, to_cents
from splitledger.schemas import (
    ExpenseCreate, ExpenseRecord, SplitRequest, SplitResponse, SPLIT_TYPES,
)
from splitledger.services.allocator import allocate

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/expenses", tags=["expenses"])


def _check_total(label: str, values, amount) -> None:
    total = sum(to_cents(v) for v in values)
    if abs(total - to_cents(amount)) > TOLERANCE_CENTS:
        raise HTTPException(
            status_code=400,
            detail=f"{label} total ({total / 100:.2f}) must equal expense amount ({amount})",
        )


def _paid_by(data: ExpenseCreate) -> dict:
    if (data.payer_id is None) == (data.paid_by is None):
        raise HTTPException(status_code=400, detail="Give either payer_id or paid_by")
    if data.payer_id is not None:
        return {data.payer_id: data.amount}
    if any(v < 0 for v in data.paid_by.values()):
        raise HTTPException(status_code=400, detail="Paid amounts cannot be negative")
    _check_total("Paid", data.paid_by.values(), data.amount)
    paid_by = {uid: amt for uid, amt in data.paid_by.items() if amt > 0}
    if not paid_by:
        raise HTTPException(status_code=400, detail="At least one payer required")
    return paid_by


def _split_between(data: ExpenseCreate) -> dict:
    if data.split_type == "custom":
        if not data.shares:
            raise HTTPException(status_code=400, detail="Custom split requires shares")
        if any(v < 0 for v in data.shares.values()):
            raise HTTPException(status_code=400, detail="Shares cannot be negative")
        if set(data.shares.keys()) != set(data.consumer_ids):
            raise HTTPException(status_code=400, detail="Shares must match consumer list")
        _check_total("Shares", data.shares.values(), data.amount)
        return {uid: data.shares[uid] for uid in data.consumer_ids}
    return allocate(data.amount, data.consumer_ids)


@router.post("/split", response_model=SplitResponse)
def split_expense(data: SplitRequest):
    try:
        shares = allocate(data.amount, data.consumer_ids)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return SplitResponse(amount=data.amount, shares=shares)


@router.post("", response_model=ExpenseRecord)
def create_expense(data: ExpenseCreate):
    if not data.description.strip():
        raise HTTPException(status_code=400, detail="Description required")
    if data.amount <= 0:
        raise HTTPException(status_code=400, detail="Amount must be positive")
    if not data.consumer_ids:
        raise HTTPException(status_code=400, detail="At least one consumer required")
    if len(set(data.consumer_ids)) != len(data.consumer_ids):
        raise HTTPException(status_code=400, detail="Consumers must be unique")
    if data.split_type not in SPLIT_TYPES:
        raise HTTPException(status_code=400, detail=f"Invalid split type. Must be one of: {', '.join(SPLIT_TYPES)}")

    paid_by = _paid_by(data)
    if data.participants is not None:
        roster = {p.id for p in data.participants}
        if not set(paid_by) <= roster:
            raise HTTPException(status_code=400, detail="Payers must be participants")
        if not set(data.consumer_ids) <= roster:
            raise HTTPException(status_code=400, detail="All consumers must be participants")

    try:
        split_between = _split_between(data)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    logger.info("Built expense of %s paid by %d, split among %d", data.amount, len(paid_by), len(split_between))
    return ExpenseRecord(
        amount=data.amount,
        paid_by=paid_by,
        split_between=split_between,
        description=data.description.strip(),
        date=data.date,
    )
