import traceback
from datetime import datetime, timezone

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from core.exceptions import SportsWeekException

from db import Base, engine
from core.config import settings
from core.logging import logger

from models.user import User  # noqa: F401
from models.faculty import Faculty  # noqa: F401
from models.game import Game  # noqa: F401
from models.team import Team  # noqa: F401
from models.player import Player  # noqa: F401
from models.match import Match  # noqa: F401
from models.match_participant import MatchParticipant  # noqa: F401

# ROUTES
from api.routers.auth import router as auth_router
from api.routers.users import router as users_router
from api.routers.faculties import router as faculties_router
from api.routers.games import router as games_router
from api.routers.roster import router as roster_router
from api.routers.matches import router as matches_router
from api.routers.points import router as points_router
from api.routers.websocket import router as websocket_router


app = FastAPI(title="Sports Week API", version="1.0.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(SportsWeekException)
async def sports_week_exception_handler(request: Request, exc: SportsWeekException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.detail, "type": "sports_week_error"}
    )


@app.exception_handler(SQLAlchemyError)
async def storage_error_handler(request: Request, exc: SQLAlchemyError):
    logger.error(f"Storage failure on {request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=503,
        content={"detail": "Storage failure, no changes were applied", "type": "storage_error"}
    )


@app.exception_handler(ValueError)
async def value_error_handler(request: Request, exc: ValueError):
    return JSONResponse(
        status_code=400,
        content={"detail": str(exc), "type": "validation_error"}
    )


@app.exception_handler(Exception)
async def generic_exception_handler(request: Request, exc: Exception):
    error_traceback = ''.join(traceback.format_exception(type(exc), exc, exc.__traceback__))
    logger.error(f"Unhandled exception: {error_traceback}")
    return JSONResponse(
        status_code=500,
        content={"detail": "Internal server error", "type": type(exc).__name__}
    )


@app.get("/health")
async def health_check():
    return {
        "status": "ok",
        "message": "Sports Week API is running",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "version": app.version,
    }


@app.on_event("startup")
async def startup_event():
    logger.info("Starting up application...")
    Base.metadata.create_all(bind=engine)
    logger.info("Database tables created")


@app.on_event("shutdown")
async def shutdown_event():
    logger.info("Shutting down application...")


app.include_router(auth_router)
app.include_router(users_router)
app.include_router(faculties_router)
app.include_router(games_router)
app.include_router(roster_router)
app.include_router(matches_router)
app.include_router(points_router)
app.include_router(websocket_router)
