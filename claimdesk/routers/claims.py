import logging
from typing import List, Optional

from fastapi import APIRouter, BackgroundTasks, Depends, HTTPException, Query
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from claimdesk.models.base import get_db
from claimdesk.models.claim import Claim
from claimdesk.models.repository import claims
from claimdesk.schemas.claim import CLAIM_COLUMNS, ClaimCreate, ClaimOut, ClaimUpdate, normalize_email
from claimdesk.utils.notifications import NotificationDispatcher, get_notifier

logger = logging.getLogger(__name__)

router = APIRouter()


def claim_to_out(c: Claim) -> ClaimOut:
    return ClaimOut(
        id=c.id,
        orderNumber=c.order_number,
        email=c.email,
        name=c.name,
        street=c.street,
        postalCode=c.postal_code,
        city=c.city,
        phoneNumber=c.phone_number,
        brand=c.brand,
        problemDescription=c.problem_description,
        notificationAcknowledged=bool(c.notification_acknowledged),
        status=c.status,
        submissionDate=c.submission_date,
        updatedAt=c.updated_at,
    )


def _to_columns(data: dict) -> dict:
    return {CLAIM_COLUMNS[k]: v for k, v in data.items()}


def _storage_error(db: Session, message: str):
    db.rollback()
    logger.exception(message)
    return HTTPException(status_code=500, detail=message)


# Create Claim
@router.post("", response_model=ClaimOut, status_code=201)
def create_claim(
    payload: ClaimCreate,
    background_tasks: BackgroundTasks,
    db: Session = Depends(get_db),
    notifier: NotificationDispatcher = Depends(get_notifier),
):
    data = _to_columns(payload.model_dump(exclude={"status"}))
    # New claims always start as Pending, whatever the client sent
    data["status"] = "Pending"
    try:
        claim = claims(db).create(data)
    except SQLAlchemyError:
        raise _storage_error(db, "An error occurred while creating the claim")

    out = claim_to_out(claim)
    logger.info("Created claim %s for order %s", out.id, out.orderNumber)
    background_tasks.add_task(notifier.send_submission_notice, out.email, out.model_dump(mode="json"))
    return out


# List Claims
@router.get("", response_model=List[ClaimOut])
def get_claims(
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
        found = claims(db).find_many(**filters)
    except SQLAlchemyError:
        raise _storage_error(db, "An error occurred while fetching claims")
    return [claim_to_out(c) for c in found]


# Get Claim by ID
@router.get("/{id}", response_model=ClaimOut)
def get_claim(id: str, db: Session = Depends(get_db)):
    try:
        claim = claims(db).find_unique(id)
    except SQLAlchemyError:
        raise _storage_error(db, "An error occurred while fetching the claim")
    if not claim:
        raise HTTPException(status_code=404, detail="Claim not found")
    return claim_to_out(claim)


# Update Claim (partial)
@router.patch("/{id}", response_model=ClaimOut)
def update_claim(
    id: str,
    payload: ClaimUpdate,
    background_tasks: BackgroundTasks,
    db: Session = Depends(get_db),
    notifier: NotificationDispatcher = Depends(get_notifier),
):
    try:
        claim = claims(db).update(id, _to_columns(payload.model_dump(exclude_unset=True)))
    except SQLAlchemyError:
        raise _storage_error(db, "An error occurred while updating the claim")
    if not claim:
        raise HTTPException(status_code=404, detail="Claim not found")

    out = claim_to_out(claim)
    logger.info("Updated claim %s (status=%s)", out.id, out.status)
    background_tasks.add_task(notifier.send_status_change_notice, out.email, out.model_dump(mode="json"))
    return out
