"""RSVP Server - FastAPI Application Entry Point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from rsvp_server.config import settings
from rsvp_server.database import init_db
from rsvp_server.services.errors import CapacityExceeded, ServiceError

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Initialize database on startup."""
    init_db()
    logger.info("%s started", settings.server_name)
    yield


app = FastAPI(
    title="RSVP Server",
    description="Personal invitation links, RSVP tracking and guest list admin",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# --- Error responses ---

@app.exception_handler(CapacityExceeded)
async def capacity_exceeded_handler(request: Request, exc: CapacityExceeded):
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "authorized": False,
            "deviceCount": exc.device_count,
            "message": exc.message,
        },
    )


@app.exception_handler(ServiceError)
async def service_error_handler(request: Request, exc: ServiceError):
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    first = exc.errors()[0] if exc.errors() else {}
    field = ".".join(str(p) for p in first.get("loc", ())[1:])
    message = first.get("msg", "Invalid request")
    return JSONResponse(
        status_code=400,
        content={"error": f"{field}: {message}" if field else message},
    )


# --- Register API routers ---
from rsvp_server.api.admin import router as admin_router  # noqa: E402
from rsvp_server.api.guests import router as guests_router  # noqa: E402
from rsvp_server.api.rsvp import router as rsvp_router  # noqa: E402
from rsvp_server.api.devices import router as devices_router  # noqa: E402
from rsvp_server.api.event import router as event_router  # noqa: E402
from rsvp_server.api.invitations import router as invitations_router  # noqa: E402

API_PREFIX = "/api"

app.include_router(admin_router, prefix=API_PREFIX)
app.include_router(guests_router, prefix=API_PREFIX)
app.include_router(rsvp_router, prefix=API_PREFIX)
app.include_router(devices_router, prefix=API_PREFIX)
app.include_router(event_router, prefix=API_PREFIX)
app.include_router(invitations_router, prefix=API_PREFIX)


@app.get("/")
def root():
    """Health check / server info."""
    return {
        "name": settings.server_name,
        "version": "0.1.0",
        "status": "running",
    }


@app.get("/api/health")
def health():
    return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=settings.host, port=settings.port)
