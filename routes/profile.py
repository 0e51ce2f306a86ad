from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Response, status

from models.profile import Profile, ThemePreference
from models.registration import RegistrationRequest
from services.profile_store import ProfileStore, get_profile_store
from services.registration_service import RegistrationService

router = APIRouter()


@router.get("/profile", response_model=Profile)
async def get_profile(store: ProfileStore = Depends(get_profile_store)) -> Profile:
    return store.load_profile()


@router.post("/profile", response_model=Profile, status_code=status.HTTP_201_CREATED)
async def register_profile(payload: RegistrationRequest, store: ProfileStore = Depends(get_profile_store)) -> Profile:
    result = RegistrationService(store).register(payload.name, payload.email, payload.phone)
    if not result.ok:
        raise HTTPException(
            status_code=400,
            detail={"reason": result.reason.value, "message": result.message},
        )
    return result.profile


@router.delete("/profile", status_code=status.HTTP_204_NO_CONTENT)
async def clear_profile(store: ProfileStore = Depends(get_profile_store)) -> Response:
    store.clear_profile()
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/theme", response_model=ThemePreference)
async def get_theme(store: ProfileStore = Depends(get_profile_store)) -> ThemePreference:
    return ThemePreference(mode=store.load_theme())


@router.put("/theme", response_model=ThemePreference)
async def set_theme(payload: ThemePreference, store: ProfileStore = Depends(get_profile_store)) -> ThemePreference:
    return ThemePreference(mode=store.save_theme(payload.mode))
