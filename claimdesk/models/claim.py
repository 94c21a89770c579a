import uuid
from datetime import datetime, timezone

from sqlalchemy import Boolean, Column, DateTime, Index, String, Text

from claimdesk.models.base import Base


def new_id() -> str:
    return uuid.uuid4().hex


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Claim(Base):
    __tablename__ = "claims"

    id = Column(String(32), primary_key=True, default=new_id)
    order_number = Column(String(100), nullable=False)
    email = Column(String(255), nullable=False)

    # contact details
    name = Column(String(255))
    street = Column(String(255))
    postal_code = Column(String(20))
    city = Column(String(100))
    phone_number = Column(String(50))

    brand = Column(String(100))
    problem_description = Column(Text)
    notification_acknowledged = Column(Boolean, default=False, nullable=False)
    status = Column(String(20), default="Pending", nullable=False)  # Pending, InReview, Resolved, Rejected

    submission_date = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow)

    __table_args__ = (
        Index("ix_claims_order_email", "order_number", "email"),
    )
