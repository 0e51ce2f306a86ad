from __future__ import annotations

import threading
from datetime import datetime
from typing import Callable

import structlog

from core.config import settings
from models.profile import Profile, ThemeMode
from services.preferences_repository import PreferencesStore, SqlitePreferences

logger = structlog.get_logger()

THEME_KEY = "theme"
NAME_KEY = "name"
EMAIL_KEY = "email"
PHONE_KEY = "phone"
REGISTERED_AT_KEY = "registeredAt"

PROFILE_KEYS = (NAME_KEY, EMAIL_KEY, PHONE_KEY, REGISTERED_AT_KEY)
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M"


class ProfileStore:
    """Profil och temainställning ovanpå en injicerad nyckel/värde-lagring.

    Profilen skrivs och raderas alltid som en enhet (alla fyra nycklar),
    temat lever oberoende av profilen och överlever clear_profile().
    """

    def __init__(self, preferences: PreferencesStore, clock: Callable[[], datetime] = datetime.now) -> None:
        self.preferences = preferences
        self._clock = clock
        # Läs-ändra-skriv av temat sker under samma lås
        self._theme_lock = threading.RLock()

    def load_theme(self) -> ThemeMode:
        return ThemeMode.parse(self.preferences.get(THEME_KEY))

    def save_theme(self, mode: ThemeMode | str) -> ThemeMode:
        resolved = ThemeMode(mode)
        with self._theme_lock:
            self.preferences.put_many({THEME_KEY: resolved.value})
        logger.info("theme_changed", mode=resolved.value)
        return resolved

    def toggle_theme(self) -> ThemeMode:
        with self._theme_lock:
            return self.save_theme(self.load_theme().toggled())

    def save_profile(self, name: str, email: str, phone: str, timestamp: datetime | None = None) -> Profile:
        """Ersätt hela profilen. Strängarna trimmas och tiden formateras nu."""
        profile = Profile(
            name=name.strip(),
            email=email.strip(),
            phone=phone.strip(),
            registered_at=(timestamp or self._clock()).strftime(TIMESTAMP_FORMAT),
        )
        self.preferences.put_many(
            {
                NAME_KEY: profile.name,
                EMAIL_KEY: profile.email,
                PHONE_KEY: profile.phone,
                REGISTERED_AT_KEY: profile.registered_at,
            }
        )
        logger.info("profile_saved", registered_at=profile.registered_at)
        return profile

    def load_profile(self) -> Profile:
        # En enda läsning, så att en halvskriven profil aldrig syns
        values = self.preferences.get_many(PROFILE_KEYS)
        return Profile(
            name=values.get(NAME_KEY) or "",
            email=values.get(EMAIL_KEY) or "",
            phone=values.get(PHONE_KEY) or "",
            registered_at=values.get(REGISTERED_AT_KEY) or "",
        )

    def clear_profile(self) -> None:
        # OBS: "theme" rörs inte, användarens temaval ska finnas kvar
        self.preferences.remove_many(PROFILE_KEYS)
        logger.info("profile_cleared")


# Delad instans
profile_store = ProfileStore(SqlitePreferences(settings.preferences_name))


def get_profile_store() -> ProfileStore:
    return profile_store


__all__ = ["ProfileStore", "profile_store", "get_profile_store", "PROFILE_KEYS", "THEME_KEY"]
