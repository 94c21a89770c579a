from dataclasses import dataclass
from typing import List, Optional, Tuple

from claimdesk.client.messages import DEFAULT_LOCALE, translate


@dataclass(frozen=True)
class Faq:
    question: str
    answer: str


WARRANTY_FAQS: Tuple[Faq, ...] = (
    Faq("warrantyFAQ.eligibilityQuestion", "warrantyFAQ.eligibilityAnswer"),
    Faq("warrantyFAQ.processQuestion", "warrantyFAQ.processAnswer"),
    Faq("warrantyFAQ.timeframeQuestion", "warrantyFAQ.timeframeAnswer"),
)


def toggle(open_index: Optional[int], index: int) -> Optional[int]:
    """Only one answer is open at a time; toggling the open one closes it."""
    return None if open_index == index else index


def render(faqs=WARRANTY_FAQS, open_index: Optional[int] = None, locale: str = DEFAULT_LOCALE) -> List[dict]:
    return [
        {
            "question": translate(faq.question, locale),
            "answer": translate(faq.answer, locale) if i == open_index else None,
            "open": i == open_index,
        }
        for i, faq in enumerate(faqs)
    ]
