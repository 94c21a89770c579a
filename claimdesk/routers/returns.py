import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from claimdesk.models.base import get_db
from claimdesk.models.repository import returns
from claimdesk.models.return_request import ReturnRequest
from claimdesk.schemas.claim import normalize_email
from claimdesk.schemas.return_request import RETURN_COLUMNS, ReturnCreate, ReturnOut, ReturnUpdate

logger = logging.getLogger(__name__)

router = APIRouter()


def return_to_out(r: ReturnRequest) -> ReturnOut:
    known = {
        "id": r.id,
        "orderNumber": r.order_number,
        "email": r.email,
        "name": r.name,
        "street": r.street,
        "postalCode": r.postal_code,
        "city": r.city,
        "phoneNumber": r.phone_number,
        "status": r.status,
        "submissionDate": r.submission_date,
        "updatedAt": r.updated_at,
    }
    # Known columns win over payload keys of the same name
    return ReturnOut(**{**(r.details or {}), **known})


def _split(payload, exclude=()) -> tuple[dict, dict]:
    fields = payload.model_dump(exclude_unset=True, exclude=set(exclude))
    columns = {RETURN_COLUMNS[k]: v for k, v in fields.items() if k in RETURN_COLUMNS}
    return columns, payload.payload


def _storage_error(db: Session, message: str):
    db.rollback()
    logger.exception(message)
    return HTTPException(status_code=500, detail=message)


# Create Return
@router.post("", response_model=ReturnOut, status_code=201)
def create_return(payload: ReturnCreate, db: Session = Depends(get_db)):
    columns, details = _split(payload, exclude=("status",))
    columns["status"] = "Pending"
    columns["details"] = details or None
    try:
        item = returns(db).create(columns)
    except SQLAlchemyError:
        raise _storage_error(db, "An error occurred while creating the return")
    logger.info("Created return %s for order %s", item.id, item.order_number)
    return return_to_out(item)


# List Returns
@router.get("", response_model=List[ReturnOut])
def get_returns(
    orderNumber: Optional[str] = Query(None),
    email: Optional[str] = Query(None),
    db: Session = Depends(get_db),
):
    filters = {}
    if orderNumber is not None:
        filters["order_number"] = orderNumber
    if email is not None:
        filters["email"] = normalize_email(email)
    try:
        found = returns(db).find_many(**filters)
    except SQLAlchemyError:
        raise _storage_error(db, "An error occurred while fetching returns")
    return [return_to_out(r) for r in found]


# Get Return by ID
@router.get("/{id}", response_model=ReturnOut)
def get_return(id: str, db: Session = Depends(get_db)):
    try:
        item = returns(db).find_unique(id)
    except SQLAlchemyError:
        raise _storage_error(db, "An error occurred while fetching the return")
    if not item:
        raise HTTPException(status_code=404, detail="Return not found")
    return return_to_out(item)


# Update Return (partial)
@router.patch("/{id}", response_model=ReturnOut)
def update_return(id: str, payload: ReturnUpdate, db: Session = Depends(get_db)):
    repo = returns(db)
    columns, details = _split(payload)
    try:
        existing = repo.find_unique(id)
        if not existing:
            raise HTTPException(status_code=404, detail="Return not found")
        if details:
            # Reassign the JSON dict so the change is tracked
            columns["details"] = {**(existing.details or {}), **details}
        item = repo.update(id, columns)
    except SQLAlchemyError:
        raise _storage_error(db, "An error occurred while updating the return")
    logger.info("Updated return %s (status=%s)", item.id, item.status)
    return return_to_out(item)
