import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from claimdesk.models.base import get_db
from claimdesk.routers.claims import claim_to_out
from claimdesk.routers.returns import return_to_out
from claimdesk.utils.case_lookup import ResolvedCase, resolve_by_id, resolve_by_query

logger = logging.getLogger(__name__)

router = APIRouter()

_SERIALIZERS = {
    "claim": claim_to_out,
    "return": return_to_out,
}


def case_to_out(case: ResolvedCase) -> dict:
    out = _SERIALIZERS[case.type](case.record).model_dump(mode="json")
    out["type"] = case.type
    return out


# Find case by order number + email
@router.get("")
def find_case(
    orderNumber: Optional[str] = Query(None),
    email: Optional[str] = Query(None),
    db: Session = Depends(get_db),
):
    try:
        case = resolve_by_query(db, orderNumber, email)
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Error fetching case")
        raise HTTPException(status_code=500, detail="An error occurred while fetching the case")
    if not case:
        raise HTTPException(status_code=404, detail="No case found")
    return case_to_out(case)


# Find case by ID
@router.get("/{id}")
def get_case(id: str, db: Session = Depends(get_db)):
    try:
        case = resolve_by_id(db, id)
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Error fetching case")
        raise HTTPException(status_code=500, detail="An error occurred while fetching the case")
    if not case:
        raise HTTPException(status_code=404, detail="Case not found")
    return case_to_out(case)
