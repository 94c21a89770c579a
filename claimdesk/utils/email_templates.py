from typing import Dict, Optional

APP_NAME = "ClaimDesk"

_STATUS_TEXT = {
    "Pending": "pending",
    "InReview": "in review",
    "Resolved": "resolved",
    "Rejected": "rejected",
}


def _greeting(name: Optional[str]) -> str:
    return f"Hi {name or 'there'},\n\n"


def claim_submission(claim_id: str, order_number: str, name: Optional[str] = None) -> Dict[str, str]:
    subject = f"Warranty claim received for order {order_number}"
    body = (
        _greeting(name)
        + "Thanks for submitting your warranty claim. We have received it and will review it shortly.\n\n"
        f"Claim ID: {claim_id}\n"
        f"Order number: {order_number}\n"
        "Status: pending\n\n"
        "You can check the status at any time with your order number and email address.\n\n"
        f"-- The {APP_NAME} Team"
    )
    return {"subject": subject, "body": body}


def claim_status_update(claim_id: str, order_number: str, new_status: str, name: Optional[str] = None) -> Dict[str, str]:
    subject = f"Warranty claim for order {order_number} updated"
    body = (
        _greeting(name)
        + f"Your warranty claim {claim_id} status is now: {_STATUS_TEXT.get(new_status, new_status)}.\n"
        "If you have any questions, reply to this email.\n\n"
        f"-- The {APP_NAME} Team"
    )
    return {"subject": subject, "body": body}
