from __future__ import annotations

import structlog

from models.registration import RegistrationResult
from services.profile_store import ProfileStore
from services.validator import validate

logger = structlog.get_logger()


class RegistrationService:
    """Validera formulärvärden och spara profilen om de godkänns."""

    def __init__(self, store: ProfileStore) -> None:
        self.store = store

    def register(self, name: str, email: str, phone: str) -> RegistrationResult:
        reason = validate(name, email, phone)
        if reason is not None:
            # Användarfel, inte ett systemfel
            logger.info("registration_rejected", reason=reason.value)
            return RegistrationResult(reason=reason)
        return RegistrationResult(profile=self.store.save_profile(name, email, phone))


__all__ = ["RegistrationService"]
