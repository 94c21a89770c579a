from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

from claimdesk.schemas.claim import CaseStatus

# camelCase body field -> ReturnRequest column; anything else is return payload
RETURN_COLUMNS = {
    "orderNumber": "order_number",
    "email": "email",
    "name": "name",
    "street": "street",
    "postalCode": "postal_code",
    "city": "city",
    "phoneNumber": "phone_number",
    "status": "status",
}


class ReturnBase(BaseModel):
    # Return-specific fields are passed through untouched
    model_config = ConfigDict(extra="allow")

    name: Optional[str] = None
    street: Optional[str] = None
    postalCode: Optional[str] = None
    city: Optional[str] = None
    phoneNumber: Optional[str] = None

    @property
    def payload(self) -> dict:
        return dict(self.model_extra or {})


class ReturnCreate(ReturnBase):
    orderNumber: str = Field(min_length=1)
    email: EmailStr
    status: Optional[str] = None


class ReturnUpdate(ReturnBase):
    orderNumber: Optional[str] = Field(default=None, min_length=1)
    email: Optional[EmailStr] = None
    status: Optional[CaseStatus] = None

    @field_validator("orderNumber", "email", "status")
    @classmethod
    def _not_null(cls, v):
        if v is None:
            raise ValueError("may not be null")
        return v


class ReturnOut(ReturnBase):
    id: str
    orderNumber: str
    email: str
    status: str
    submissionDate: datetime
    updatedAt: Optional[datetime] = None
