from __future__ import annotations

from typing import Any, Dict

from fastapi import APIRouter, Depends, Form, HTTPException, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates

from core.config import settings
from models.profile import ThemeMode
from models.registration import CLEARED_MESSAGE, SAVED_MESSAGE
from services.profile_store import ProfileStore, get_profile_store
from services.registration_service import RegistrationService

router = APIRouter()
templates = Jinja2Templates(directory=str(settings.template_dir))

# Engångsmeddelanden efter redirect (toast i mobilappen)
NOTICES = {
    "saved": SAVED_MESSAGE,
    "cleared": CLEARED_MESSAGE,
}


def _base_context(request: Request, store: ProfileStore, title: str) -> Dict[str, Any]:
    return {
        "title": title,
        "app_name": settings.app_name,
        "theme": store.load_theme().value,
        "current_path": request.url.path,
    }


def _safe_next(next_url: str | None) -> str:
    # Endast interna sökvägar
    if not next_url or not next_url.startswith("/") or next_url.startswith("//") or "\\" in next_url:
        return "/"
    return next_url


@router.get("/", response_class=HTMLResponse)
async def register_form(request: Request, store: ProfileStore = Depends(get_profile_store)):
    """Registreringsformulär med tomma fält."""
    context = _base_context(request, store, "Registrar")
    context.update({"form": {"name": "", "email": "", "phone": ""}, "error": None})
    return templates.TemplateResponse(request, "register.html", context)


@router.post("/register")
async def register(
    request: Request,
    name: str = Form(""),
    email: str = Form(""),
    phone: str = Form(""),
    store: ProfileStore = Depends(get_profile_store),
):
    result = RegistrationService(store).register(name, email, phone)
    if result.ok:
        return RedirectResponse(url="/user?notice=saved", status_code=303)
    # Behåll utkasten så att användaren kan rätta dem
    context = _base_context(request, store, "Registrar")
    context.update({"form": {"name": name, "email": email, "phone": phone}, "error": result.message})
    return templates.TemplateResponse(request, "register.html", context, status_code=400)


@router.get("/user", response_class=HTMLResponse)
async def show_user(request: Request, notice: str | None = None, store: ProfileStore = Depends(get_profile_store)):
    """Visa senast sparade användare."""
    context = _base_context(request, store, "Usuario")
    context.update({"profile": store.load_profile(), "notice": NOTICES.get(notice or "")})
    return templates.TemplateResponse(request, "user.html", context)


@router.post("/clear")
async def clear_user(store: ProfileStore = Depends(get_profile_store)):
    store.clear_profile()
    return RedirectResponse(url="/user?notice=cleared", status_code=303)


@router.post("/theme")
async def toggle_theme(
    mode: str | None = Form(None),
    next: str | None = Form(None),
    store: ProfileStore = Depends(get_profile_store),
):
    """Växla tema, eller sätt ett explicit läge om mode skickas med."""
    if mode is None:
        store.toggle_theme()
    else:
        try:
            store.save_theme(ThemeMode(mode))
        except ValueError:
            raise HTTPException(status_code=400, detail="Okänt tema")
    return RedirectResponse(url=_safe_next(next), status_code=303)


@router.get("/about", response_class=HTMLResponse)
async def about(request: Request, store: ProfileStore = Depends(get_profile_store)):
    context = _base_context(request, store, "Acerca de")
    context.update({"author": settings.app_author, "version": settings.app_version})
    return templates.TemplateResponse(request, "about.html", context)
