import uvicorn
from fastapi import APIRouter, Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from pointbet.core.config import settings
from pointbet.core.database import init_database, ping_database
from pointbet.core.errors import register_exception_handlers
from pointbet.core.logging import configure_logging, get_logger
from pointbet.core.middleware import RequestLoggingMiddleware, SecurityHeadersMiddleware
from pointbet.core.supabase import check_connection, get_optional_supabase
from pointbet.routes import auth, bets, events, users

logger = get_logger(__name__)

app = FastAPI(title="pointbet", debug=settings.DEBUG)

app.add_middleware(SecurityHeadersMiddleware)
app.add_middleware(RequestLoggingMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

api = APIRouter(prefix="/api")


@api.get("/health")
def api_health():
    return {"status": "ok"}


api.include_router(auth.router)
api.include_router(events.router)
api.include_router(bets.router)
api.include_router(users.router)

app.include_router(api)


@app.get("/health")
def health():
    return {"status": "ok"}


@app.get("/ready")
def ready(db=Depends(get_optional_supabase)):
    checks = {"supabase": "healthy" if check_connection(db) else "unhealthy"}

    database = ping_database()
    if database is not None:
        checks["database"] = "healthy" if database else "unhealthy"

    ok = all(value == "healthy" for value in checks.values())
    return JSONResponse(
        status_code=200 if ok else 503,
        content={"status": "ready" if ok else "not_ready", "checks": checks},
    )


@app.on_event("startup")
def on_startup():
    configure_logging()
    settings.validate()
    logger.info("application_starting", environment=settings.ENVIRONMENT)
    init_database()
    logger.info("application_started", port=settings.PORT)


@app.on_event("shutdown")
def on_shutdown():
    logger.info("application_stopped")


def run():
    uvicorn.run(
        "pointbet.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    run()
