import logging

import uvicorn
from fastapi import FastAPI

from qazaq.api.endpoints import auth as auth_endpoints
from qazaq.api.endpoints import profile as profile_endpoints
from qazaq.api.endpoints import competitions as competition_endpoints
from qazaq.api.endpoints import me as me_endpoints
from qazaq.api.endpoints import live as live_endpoints
from qazaq.api.endpoints import judge as judge_endpoints
from qazaq.api.endpoints import organizer as organizer_endpoints
from qazaq.api.endpoints import ai as ai_endpoints
from qazaq.core.config import settings
from qazaq.core.database import Base, SessionLocal, engine
from qazaq.core.errors import register_exception_handlers
from qazaq.core.logging_config import setup_logging
from qazaq.services import auth_service, organizer_service
import qazaq.models # Registers every table on Base.metadata

setup_logging()
logger = logging.getLogger(__name__)

app = FastAPI(title=settings.PROJECT_NAME)
register_exception_handlers(app)

# Include routers
app.include_router(auth_endpoints.router, prefix="/api/auth", tags=["Authentication"])
app.include_router(profile_endpoints.router, prefix="/api/profile", tags=["Profile"])
app.include_router(competition_endpoints.router, prefix="/api/competitions", tags=["Competitions"])
app.include_router(me_endpoints.router, prefix="/api", tags=["History"])
app.include_router(live_endpoints.router, prefix="/api/live", tags=["Live"])
app.include_router(judge_endpoints.router, prefix="/api/judge", tags=["Judge"])
app.include_router(organizer_endpoints.router, prefix="/api/organizer", tags=["Organizer"])
app.include_router(ai_endpoints.router, prefix="/api/ai", tags=["AI"])


@app.get("/api/health")
async def health():
    return {"ok": True, "service": settings.PROJECT_NAME}


def init_db() -> None:
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        organizer_service.seed_services(db)
        auth_service.ensure_admin(db)
    finally:
        db.close()


@app.on_event("startup")
async def startup_event():
    init_db()
    logger.info("%s started with database %s", settings.PROJECT_NAME, engine.url.render_as_string(hide_password=True))


if __name__ == "__main__":
    uvicorn.run("qazaq.main:app", host=settings.HOST, port=settings.PORT)
