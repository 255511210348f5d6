# backend/venue_booking/main.py

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import ORJSONResponse

from .api import api_conflicts, api_pricing
from .core.config import settings
from .core.observability import setup_logging, setup_tracer

setup_logging()
logger = logging.getLogger(__name__)

app = FastAPI(title="Venue Booking Engine", default_response_class=ORJSONResponse)
setup_tracer(app)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials="*" not in settings.CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Return validation errors with details and log them for debugging."""
    errors = exc.errors()
    logger.warning("Validation error at %s: %s", request.url.path, errors)
    return ORJSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={"detail": jsonable_errors(errors)},
    )


def jsonable_errors(errors):
    # Pydantic puts the offending exception object in ctx; keep only text.
    cleaned = []
    for err in errors:
        err = dict(err)
        if "ctx" in err:
            err["ctx"] = {k: str(v) for k, v in err["ctx"].items()}
        err.pop("input", None)
        cleaned.append(err)
    return cleaned


api_prefix = settings.API_V1_STR  # usually something like "/api/v1"


# ─── PRICING ROUTES (under /api/v1/pricing) ─────────────────────────────────────────
app.include_router(api_pricing.router, prefix=f"{api_prefix}", tags=["pricing"])

# ─── CONFLICT ROUTES (under /api/v1/bookings) ──────────────────────────────────────
app.include_router(api_conflicts.router, prefix=f"{api_prefix}", tags=["conflicts"])


@app.get("/healthz")
def healthz():
    return {"status": "ok"}
