from datetime import datetime
from typing import Literal, Optional

from email_validator import EmailNotValidError, validate_email
from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

CaseStatus = Literal["Pending", "InReview", "Resolved", "Rejected"]

# camelCase body field -> Claim column
CLAIM_COLUMNS = {
    "orderNumber": "order_number",
    "email": "email",
    "name": "name",
    "street": "street",
    "postalCode": "postal_code",
    "city": "city",
    "phoneNumber": "phone_number",
    "brand": "brand",
    "problemDescription": "problem_description",
    "notificationAcknowledged": "notification_acknowledged",
    "status": "status",
}

NON_NULLABLE = ("orderNumber", "email", "status", "notificationAcknowledged")


def normalize_email(value: Optional[str]) -> Optional[str]:
    """Normalize an address the same way ``EmailStr`` does when a record is stored.

    Lookups must compare against the stored form; unparseable input is returned as-is.
    """
    if not value:
        return value
    try:
        return validate_email(value, check_deliverability=False).normalized
    except EmailNotValidError:
        return value


class ClaimBase(BaseModel):
    name: Optional[str] = None
    street: Optional[str] = None
    postalCode: Optional[str] = None
    city: Optional[str] = None
    phoneNumber: Optional[str] = None
    brand: Optional[str] = None
    problemDescription: Optional[str] = None


class ClaimCreate(ClaimBase):
    model_config = ConfigDict(extra="forbid")

    orderNumber: str = Field(min_length=1)
    email: EmailStr
    notificationAcknowledged: bool = False
    # Accepted for compatibility; the server always starts a claim as Pending
    status: Optional[str] = None


class ClaimUpdate(ClaimBase):
    model_config = ConfigDict(extra="forbid")

    orderNumber: Optional[str] = Field(default=None, min_length=1)
    email: Optional[EmailStr] = None
    notificationAcknowledged: Optional[bool] = None
    status: Optional[CaseStatus] = None

    @field_validator(*NON_NULLABLE)
    @classmethod
    def _not_null(cls, v):
        if v is None:
            raise ValueError("may not be null")
        return v


class ClaimOut(ClaimBase):
    id: str
    orderNumber: str
    email: str
    notificationAcknowledged: bool
    status: str
    submissionDate: datetime
    updatedAt: Optional[datetime] = None
