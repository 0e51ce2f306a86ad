"""Datamodeller för profil, temainställning och registrering."""

from models.profile import Profile, ThemeMode, ThemePreference  # noqa: F401
from models.registration import RegistrationRequest, RegistrationResult, RejectionReason  # noqa: F401
