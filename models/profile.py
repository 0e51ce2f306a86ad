from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


class ThemeMode(str, Enum):
    """Tillåtna visningslägen för appen."""

    LIGHT = "light"
    DARK = "dark"

    @classmethod
    def parse(cls, value: str | None) -> "ThemeMode":
        """Tolka ett lagrat värde; allt annat än "dark" blir ljust läge."""
        return cls.DARK if value == cls.DARK.value else cls.LIGHT

    def toggled(self) -> "ThemeMode":
        return ThemeMode.LIGHT if self is ThemeMode.DARK else ThemeMode.DARK


class Profile(BaseModel):
    """Senast registrerade användaren. Tomma strängar betyder "ej satt"."""

    name: str = Field("", description="Namn")
    email: str = Field("", description="E-postadress")
    phone: str = Field("", description="Telefonnummer, 8-9 siffror")
    registered_at: str = Field("", description="Registreringstid (yyyy-MM-dd HH:mm)")

    @property
    def is_empty(self) -> bool:
        return not any(value.strip() for value in (self.name, self.email, self.phone, self.registered_at))


class ThemePreference(BaseModel):
    mode: ThemeMode = Field(ThemeMode.LIGHT, description="Föredraget tema (light/dark)")
