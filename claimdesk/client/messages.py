from datetime import datetime, timezone
from typing import Optional, Union

DEFAULT_LOCALE = "en"

CATALOGS = {
    "en": {
        "submitWarrantyCase": "Submit a warranty case",
        "frequentlyAskedQuestions": "Frequently asked questions",
        "warrantyFAQ.eligibilityQuestion": "Is my product eligible for a warranty claim?",
        "warrantyFAQ.eligibilityAnswer": "Products within the manufacturer warranty period with a defect not caused by misuse are eligible.",
        "warrantyFAQ.processQuestion": "How does the claim process work?",
        "warrantyFAQ.processAnswer": "Submit the form, we review your case and contact you by email with the next steps.",
        "warrantyFAQ.timeframeQuestion": "How long does it take?",
        "warrantyFAQ.timeframeAnswer": "Most claims are reviewed within five business days.",
        "faqCompleted": "I have read the FAQ",
        "orderNumber": "Order number",
        "email": "Email",
        "name": "Name",
        "street": "Street",
        "postalCode": "Postal code",
        "city": "City",
        "phoneNumber": "Phone number",
        "brand": "Brand",
        "problemDescription": "Problem description",
        "status": "Status",
        "submissionDate": "Submission date",
        "submit": "Submit",
        "submitting": "Submitting...",
        "checkStatus": "Check status",
        "checkClaimStatus": "Check claim status",
        "claimStatus": "Claim status",
        "pleaseAcknowledgeNotification": "Please acknowledge the notification before submitting.",
        "missingRequiredFields": "Please fill in all required fields: {fields}",
        "failedToSubmitClaim": "Failed to submit claim",
        "errorSubmittingClaim": "An error occurred while submitting your claim. Please try again.",
        "failedToFetchClaim": "Failed to fetch claim",
        "errorFetchingClaim": "An error occurred while fetching the claim.",
        "noClaimFound": "No claim found for this order number and email.",
        "brandNotice.manufacturer": "Claims for this brand are forwarded to the manufacturer, who will contact you directly.",
        "pending": "Pending",
        "inreview": "In review",
        "resolved": "Resolved",
        "rejected": "Rejected",
        "timestampFormat": "%m/%d/%Y, %I:%M:%S %p",
    },
    "de": {
        "submitWarrantyCase": "Garantiefall einreichen",
        "frequentlyAskedQuestions": "Häufig gestellte Fragen",
        "warrantyFAQ.eligibilityQuestion": "Ist mein Produkt für einen Garantiefall berechtigt?",
        "warrantyFAQ.eligibilityAnswer": "Produkte innerhalb der Herstellergarantie mit einem Defekt, der nicht durch unsachgemäße Nutzung entstanden ist, sind berechtigt.",
        "warrantyFAQ.processQuestion": "Wie läuft der Garantiefall ab?",
        "warrantyFAQ.processAnswer": "Senden Sie das Formular ab. Wir prüfen Ihren Fall und melden uns per E-Mail mit den nächsten Schritten.",
        "warrantyFAQ.timeframeQuestion": "Wie lange dauert es?",
        "warrantyFAQ.timeframeAnswer": "Die meisten Fälle werden innerhalb von fünf Werktagen geprüft.",
        "faqCompleted": "Ich habe die FAQ gelesen",
        "orderNumber": "Bestellnummer",
        "email": "E-Mail",
        "name": "Name",
        "street": "Straße",
        "postalCode": "Postleitzahl",
        "city": "Ort",
        "phoneNumber": "Telefonnummer",
        "brand": "Marke",
        "problemDescription": "Problembeschreibung",
        "status": "Status",
        "submissionDate": "Eingangsdatum",
        "submit": "Absenden",
        "submitting": "Wird gesendet...",
        "checkStatus": "Status prüfen",
        "checkClaimStatus": "Status des Garantiefalls prüfen",
        "claimStatus": "Status des Garantiefalls",
        "pleaseAcknowledgeNotification": "Bitte bestätigen Sie den Hinweis vor dem Absenden.",
        "missingRequiredFields": "Bitte füllen Sie alle Pflichtfelder aus: {fields}",
        "failedToSubmitClaim": "Garantiefall konnte nicht gesendet werden",
        "errorSubmittingClaim": "Beim Senden ist ein Fehler aufgetreten. Bitte versuchen Sie es erneut.",
        "failedToFetchClaim": "Garantiefall konnte nicht geladen werden",
        "errorFetchingClaim": "Beim Laden des Garantiefalls ist ein Fehler aufgetreten.",
        "noClaimFound": "Kein Garantiefall für diese Bestellnummer und E-Mail gefunden.",
        "brandNotice.manufacturer": "Fälle dieser Marke werden an den Hersteller weitergeleitet, der sich direkt bei Ihnen meldet.",
        "pending": "Ausstehend",
        "inreview": "In Prüfung",
        "resolved": "Erledigt",
        "rejected": "Abgelehnt",
        "timestampFormat": "%d.%m.%Y, %H:%M:%S",
    },
}


def translate(key: str, locale: str = DEFAULT_LOCALE, **params) -> str:
    """Look up ``key`` in the locale catalog, then English, then return the key itself."""
    text = CATALOGS.get(locale, {}).get(key)
    if text is None:
        text = CATALOGS[DEFAULT_LOCALE].get(key, key)
    return text.format(**params) if params else text


def status_label(status: Optional[str], locale: str = DEFAULT_LOCALE) -> str:
    if not status:
        return ""
    key = status.lower()
    label = translate(key, locale)
    return status if label == key else label


def format_timestamp(value: Union[str, datetime, None], locale: str = DEFAULT_LOCALE) -> str:
    if not value:
        return ""
    if isinstance(value, str):
        try:
            value = datetime.fromisoformat(value.replace("Z", "+00:00"))
        except ValueError:
            return value
    # Stored timestamps are UTC; naive ones come back from SQLite without tzinfo
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone().strftime(translate("timestampFormat", locale))
