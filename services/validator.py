from __future__ import annotations

import re
import string
from typing import Optional

from models.registration import RejectionReason

# lokal-del @ domän med minst en punktseparerad etikett
EMAIL_PATTERN = re.compile(
    r"[a-zA-Z0-9+._%\-]{1,256}"
    r"@"
    r"[a-zA-Z0-9][a-zA-Z0-9\-]{0,64}"
    r"(\.[a-zA-Z0-9][a-zA-Z0-9\-]{0,25})+"
)

PHONE_MIN_DIGITS = 8
PHONE_MAX_DIGITS = 9


def is_blank(value: str) -> bool:
    return not value.strip()


def is_email_valid(email: str) -> bool:
    """Matcha hela strängen mot adressmönstret."""
    return EMAIL_PATTERN.fullmatch(email) is not None


def is_phone_valid(phone: str) -> bool:
    """Endast siffror 0-9, inga mellanslag eller bindestreck, 8-9 tecken."""
    return all(ch in string.digits for ch in phone) and PHONE_MIN_DIGITS <= len(phone) <= PHONE_MAX_DIGITS


def validate(name: str, email: str, phone: str) -> Optional[RejectionReason]:
    """Returnera första avvisningsorsaken, eller None om allt är giltigt."""
    if is_blank(name) or is_blank(email) or is_blank(phone):
        return RejectionReason.EMPTY_FIELD
    if not is_email_valid(email):
        return RejectionReason.INVALID_EMAIL
    if not is_phone_valid(phone):
        return RejectionReason.INVALID_PHONE
    return None


__all__ = ["EMAIL_PATTERN", "is_blank", "is_email_valid", "is_phone_valid", "validate"]
