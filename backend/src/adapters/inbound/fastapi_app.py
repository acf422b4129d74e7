"""
FastAPI application - primary inbound adapter.
"""
from __future__ import annotations

import logging
import os
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from backend.src.infrastructure.config import Settings
from backend.src.infrastructure.logging_config import setup_logging

logger = logging.getLogger(__name__)

settings = Settings()

API_VERSION = "0.1.0"

# Auth-exempt paths (no Bearer token needed)
_AUTH_EXEMPT_PREFIXES = (
    "/api/health", "/api/config/firebase", "/api/webhooks",
    "/api/checkout/packs",
    "/docs", "/openapi.json", "/redoc",
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application startup/shutdown lifecycle."""
    setup_logging(settings.logging.level)
    settings.validate_production()
    logger.info("SketchToCode backend starting up (generator=%s)", settings.generator_backend)
    from backend.src.infrastructure.container import ApplicationContainer
    app.state.container = ApplicationContainer(settings)
    if settings.persistence_backend == "postgres":
        from backend.src.infrastructure.database import create_tables
        await create_tables(settings.database.url)
    yield
    logger.info("SketchToCode backend shutting down...")


app = FastAPI(
    title="SketchToCode API",
    description="Wireframe-to-code conversion with code quality scoring",
    version=API_VERSION,
    lifespan=lifespan,
)

# CORS: restrict origins in production
_allowed_origin = os.environ.get("ALLOWED_ORIGIN", "")
if settings.app_env == "production" and _allowed_origin:
    _origins = [o.strip() for o in _allowed_origin.split(",") if o.strip()]
else:
    _origins = ["*"]

app.add_middleware(
    CORSMiddleware,
    allow_origins=_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _cors_headers(request: Request) -> dict:
    """CORS headers for responses returned before CORSMiddleware runs."""
    origin = request.headers.get("origin", "")
    if not origin:
        return {}
    if _origins == ["*"] or origin in _origins:
        return {
            "access-control-allow-origin": origin,
            "access-control-allow-credentials": "true",
            "vary": "Origin",
        }
    return {}


def _auth_error(request: Request, detail: str) -> JSONResponse:
    """Return a 401 with CORS headers so the browser can read the body."""
    headers = _cors_headers(request)
    headers["cache-control"] = "no-store, no-cache, must-revalidate"
    return JSONResponse(
        status_code=401,
        content={"detail": detail},
        headers=headers,
    )


@app.middleware("http")
async def auth_middleware(request: Request, call_next):
    """Authenticate via Firebase Bearer token.

    Attaches ``request.state.user`` when authentication succeeds.
    """
    path = request.url.path

    if request.method == "OPTIONS":
        return await call_next(request)
    if path == "/" or any(path.startswith(p) for p in _AUTH_EXEMPT_PREFIXES):
        return await call_next(request)

    container = request.app.state.container
    user_auth = container.user_auth()

    auth_header = request.headers.get("Authorization", "")
    if auth_header.startswith("Bearer "):
        token = auth_header[7:]
        try:
            user = await user_auth.verify_token(token)
        except Exception as exc:
            logger.warning("Bearer token verification failed: %s", exc)
            return _auth_error(request, "Invalid or expired token")
        if not user:
            logger.warning("Auth: verify_token returned None for %s", path)
            return _auth_error(request, "Invalid or expired token")
        request.state.user = user
        return await call_next(request)

    # --- No auth configured (dev mode): attach dev user ---
    if not container.settings.firebase.enabled:
        user = await user_auth.verify_token("")
        if user:
            request.state.user = user
        return await call_next(request)

    return _auth_error(request, "Unauthorized")


@app.middleware("http")
async def request_logging_middleware(request: Request, call_next):
    """Log each request with method, path, status, and duration."""
    start = time.perf_counter()
    response = await call_next(request)
    duration_ms = (time.perf_counter() - start) * 1000
    if request.url.path.startswith("/api"):
        response.headers["cache-control"] = "no-store, no-cache, must-revalidate"
    logger.info(
        "%s %s -> %d (%.1fms)",
        request.method,
        request.url.path,
        response.status_code,
        duration_ms,
    )
    return response


from backend.src.core.exceptions import (
    AccountNotFoundError,
    CodeGenerationError,
    InsufficientCreditsError,
    InvalidCreditPackError,
    PaymentError,
    WebhookVerificationError,
)


@app.exception_handler(InsufficientCreditsError)
async def insufficient_credits_handler(request: Request, exc: InsufficientCreditsError):
    return JSONResponse(status_code=402, content={"detail": str(exc), "credits": exc.credits})


@app.exception_handler(AccountNotFoundError)
async def account_not_found_handler(request: Request, exc: AccountNotFoundError):
    return JSONResponse(status_code=404, content={"detail": str(exc)})


@app.exception_handler(InvalidCreditPackError)
async def invalid_pack_handler(request: Request, exc: InvalidCreditPackError):
    return JSONResponse(status_code=400, content={"detail": str(exc)})


@app.exception_handler(WebhookVerificationError)
async def webhook_verification_handler(request: Request, exc: WebhookVerificationError):
    logger.warning("Rejected webhook on %s: %s", request.url.path, exc)
    return JSONResponse(status_code=400, content={"detail": "Webhook signature verification failed"})


@app.exception_handler(CodeGenerationError)
async def code_generation_handler(request: Request, exc: CodeGenerationError):
    return JSONResponse(status_code=502, content={"detail": f"Conversion failed: {exc}"})


@app.exception_handler(PaymentError)
async def payment_error_handler(request: Request, exc: PaymentError):
    return JSONResponse(status_code=502, content={"detail": str(exc)})


@app.exception_handler(ValueError)
async def value_error_handler(request: Request, exc: ValueError):
    return JSONResponse(status_code=400, content={"detail": str(exc)})


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception):
    logger.error("Unhandled exception on %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})


# ── API routes ─────────────────────────────────────────────────

from backend.src.adapters.inbound.api.conversions import router as conversions_router
from backend.src.adapters.inbound.api.credits import router as credits_router
from backend.src.adapters.inbound.api.checkout import router as checkout_router
from backend.src.adapters.inbound.api.webhooks import router as webhooks_router
from backend.src.adapters.inbound.api.quality import router as quality_router

app.include_router(conversions_router, prefix="/api", tags=["conversions"])
app.include_router(credits_router, prefix="/api/credits", tags=["credits"])
app.include_router(checkout_router, prefix="/api/checkout", tags=["checkout"])
app.include_router(webhooks_router, prefix="/api/webhooks", tags=["webhooks"])
app.include_router(quality_router, prefix="/api/quality", tags=["quality"])


@app.get("/api/health")
async def health(request: Request):
    container = getattr(request.app.state, "container", None)
    backend = container.settings.generator_backend if container else settings.generator_backend
    return {
        "status": "ok",
        "version": API_VERSION,
        "generator_backend": backend,
    }


@app.get("/api/config/firebase")
async def firebase_config():
    """Return public Firebase config for frontend SDK initialization."""
    return {
        "enabled": settings.firebase.enabled,
        "apiKey": settings.firebase.api_key,
        "authDomain": settings.firebase.auth_domain,
        "projectId": settings.firebase.project_id,
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "backend.src.adapters.inbound.fastapi_app:app",
        host=settings.web.host,
        port=settings.web.port,
        reload=settings.app_env == "development",
        log_level=settings.logging.level.lower(),
    )
