import logging

from fastapi import FastAPI

from agenda.core.config import settings
from agenda.db.session import SessionLocal
from agenda.services.users import ensure_admin
from agenda.api.errors import register_error_handlers

from agenda.api.routes.auth import router as auth_router
from agenda.api.routes.events import router as events_router
from agenda.api.routes.users import router as users_router

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="Agenda Institucional API", version="0.1.0")

register_error_handlers(app)

app.include_router(auth_router)
app.include_router(events_router)
app.include_router(users_router)

@app.on_event("startup")
def ensure_bootstrap_admin():
    email = settings.BOOTSTRAP_ADMIN_EMAIL.strip()
    if not email or not settings.BOOTSTRAP_ADMIN_PASSWORD:
        return

    db = SessionLocal()
    try:
        ensure_admin(db, email, settings.BOOTSTRAP_ADMIN_PASSWORD, settings.BOOTSTRAP_ADMIN_NAME)
    finally:
        db.close()

@app.get("/health")
def health():
    return {"status": "ok"}
