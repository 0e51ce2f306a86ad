from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from core.config import settings
from core.database import init_db
from core.logging import setup_logging
from routes import pages, profile

setup_logging()

app = FastAPI(title=settings.app_name, version=settings.app_version, debug=settings.debug)

# Initiera databasen vid start
init_db()

# Routers
app.include_router(pages.router)
app.include_router(profile.router, prefix="/api", tags=["profile"])

# Static files
app.mount("/static", StaticFiles(directory=settings.static_dir), name="static")


@app.get("/health")
def health_check() -> dict[str, str]:
    """Enkel hälso-kontroll för lokal utveckling."""
    return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("app:app", host="127.0.0.1", port=8000, reload=True)
