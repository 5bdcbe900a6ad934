import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from hookguard.config import LOG_LEVEL
from hookguard.core.keyring import init_keyring
from hookguard.routes.webhook import router as webhook_router

logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger("hookguard")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Falla al arrancar si TWILIO_AUTH_TOKEN / TWILIO_ACCOUNT_SID faltan o son inválidos,
    en lugar de aceptar tráfico y responder 500 en cada webhook.
    """
    try:
        init_keyring()
    except (RuntimeError, ValidationError) as e:
        logger.error("Missing or invalid webhook configuration: %s", e)
        raise
    yield


app = FastAPI(title="Hookguard", lifespan=lifespan)

app.include_router(webhook_router)


# ---------- Ruta de salud ----------
@app.get("/health")
def health_check():
    return {
        "status": "healthy",
        "service": "hookguard",
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


@app.exception_handler(404)
async def not_found_handler(request: Request, exc: Exception):
    return JSONResponse(
        status_code=404,
        content={
            "error": "Not Found",
            "message": "The requested endpoint does not exist",
        },
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception("Server error on %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(
        status_code=500,
        content={
            "error": "Internal Server Error",
            "message": "Something went wrong processing your request",
        },
    )
