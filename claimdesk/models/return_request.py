from sqlalchemy import JSON, Column, DateTime, Index, String
from sqlalchemy.dialects.postgresql import JSONB

from claimdesk.models.base import Base
from claimdesk.models.claim import new_id, utcnow


class ReturnRequest(Base):
    __tablename__ = "return_requests"

    id = Column(String(32), primary_key=True, default=new_id)
    order_number = Column(String(100), nullable=False)
    email = Column(String(255), nullable=False)

    name = Column(String(255))
    street = Column(String(255))
    postal_code = Column(String(20))
    city = Column(String(100))
    phone_number = Column(String(50))

    status = Column(String(20), default="Pending", nullable=False)  # Pending, InReview, Resolved, Rejected
    # Return-specific payload, stored as received
    details = Column(JSON().with_variant(JSONB, "postgresql"))

    submission_date = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow)

    __table_args__ = (
        Index("ix_return_requests_order_email", "order_number", "email"),
    )
