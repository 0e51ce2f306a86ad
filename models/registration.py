from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from models.profile import Profile


SAVED_MESSAGE = "Usuario guardado"
CLEARED_MESSAGE = "Datos borrados"


class RejectionReason(str, Enum):
    """Orsaker till att ett registreringsförsök avvisas."""

    EMPTY_FIELD = "empty_field"
    INVALID_EMAIL = "invalid_email"
    INVALID_PHONE = "invalid_phone"

    @property
    def message(self) -> str:
        return _MESSAGES[self]


# Korta meddelanden som visas direkt för användaren
_MESSAGES = {
    RejectionReason.EMPTY_FIELD: "Completa todos los campos",
    RejectionReason.INVALID_EMAIL: "Correo inválido",
    RejectionReason.INVALID_PHONE: "Teléfono inválido (usa 8–9 dígitos)",
}


class RegistrationRequest(BaseModel):
    """Råa formulärvärden, ej trimmade."""

    name: str = Field("", description="Namn")
    email: str = Field("", description="E-postadress")
    phone: str = Field("", description="Telefonnummer")


class RegistrationResult(BaseModel):
    profile: Optional[Profile] = None
    reason: Optional[RejectionReason] = None

    @property
    def ok(self) -> bool:
        return self.reason is None

    @property
    def message(self) -> str:
        return self.reason.message if self.reason else SAVED_MESSAGE
