"""Unified claim/return lookup.

A *case* is either a Claim or a ReturnRequest. Both collections share the
soft key (order number, email), which is not unique and may match in both.
Variants are probed in ``CASE_VARIANTS`` order and the first hit wins, so a
claim always takes precedence over a return.
"""
from dataclasses import dataclass
from typing import Optional, Type, Union

from sqlalchemy.orm import Session

from claimdesk.models.claim import Claim
from claimdesk.models.repository import CaseRepository
from claimdesk.models.return_request import ReturnRequest
from claimdesk.schemas.claim import normalize_email

CaseRecord = Union[Claim, ReturnRequest]


@dataclass(frozen=True)
class CaseVariant:
    type: str
    model: Type[CaseRecord]


@dataclass(frozen=True)
class ResolvedCase:
    type: str
    record: CaseRecord


CASE_VARIANTS = (
    CaseVariant("claim", Claim),
    CaseVariant("return", ReturnRequest),
)


def _first_hit(db: Session, probe) -> Optional[ResolvedCase]:
    for variant in CASE_VARIANTS:
        record = probe(CaseRepository(db, variant.model))
        if record is not None:
            return ResolvedCase(variant.type, record)
    return None


def resolve_by_query(db: Session, order_number: Optional[str], email: Optional[str]) -> Optional[ResolvedCase]:
    if not order_number or not email:
        return None
    email = normalize_email(email)
    return _first_hit(db, lambda repo: repo.find_first(order_number=order_number, email=email))


def resolve_by_id(db: Session, case_id: str) -> Optional[ResolvedCase]:
    return _first_hit(db, lambda repo: repo.find_unique(case_id))
