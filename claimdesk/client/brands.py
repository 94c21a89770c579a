from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class Brand:
    name: str
    # Message key of the disclosure shown once the brand is picked
    notice: str = "brandNotice.manufacturer"


BRANDS: Tuple[Brand, ...] = (
    Brand("Bosch"),
    Brand("Philips"),
    Brand("Samsung"),
    Brand("Siemens"),
    Brand("Other"),
)


def find_brand(name: Optional[str], brands=BRANDS) -> Optional[Brand]:
    if not name:
        return None
    for brand in brands:
        if brand.name.lower() == name.strip().lower():
            return brand
    return None
