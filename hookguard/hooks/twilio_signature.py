import logging
from typing import Dict, Optional

from fastapi import Depends, HTTPException, Request

from hookguard.config import DEBUG, SIGNATURE_HEADER, Settings
from hookguard.models.webhook import VerifiedWebhook
from hookguard.routes.items.get_app_settings import get_app_settings
from hookguard.routes.items.get_keyring_store import get_keyring_store
from hookguard.security.canonical import collapse_params
from hookguard.security.keyring_store import KeyRingStore
from hookguard.security.verifier import verify

logger = logging.getLogger("webhook")

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"
SIGNATURE_EXCERPT = 10


# --------------------------------------------------------------------
# Helpers
# --------------------------------------------------------------------


def mask_signature(signature: Optional[str]) -> str:
    if not signature:
        return "<empty>"
    return signature[:SIGNATURE_EXCERPT] + "..."


def build_request_url(request: Request, trust_forwarded: bool = True) -> str:
    """
    Reconstruye la URL tal como la usó Twilio para firmar.
    Detrás de un proxy, X-Forwarded-Proto / X-Forwarded-Host indican
    el esquema y host públicos.
    """
    scheme = request.url.scheme
    host = request.headers.get("host") or request.url.netloc
    if trust_forwarded:
        scheme = request.headers.get("x-forwarded-proto") or scheme
        host = request.headers.get("x-forwarded-host") or host

    # raw_path keeps the percent-encoding the sender signed
    raw_path = request.scope.get("raw_path")
    if raw_path:
        path = raw_path.decode("latin-1").split("?", 1)[0]
    else:
        path = request.url.path

    url = f"{scheme}://{host}{path}"
    query = request.url.query
    if query:
        url = f"{url}?{query}"
    return url


async def extract_params(request: Request) -> Dict[str, str]:
    content_type = request.headers.get("content-type", "")
    if FORM_CONTENT_TYPE not in content_type.lower():
        return {}
    form = await request.form()
    return collapse_params((name, str(value)) for name, value in form.multi_items())


# --------------------------------------------------------------------
# Dependencia FastAPI
# --------------------------------------------------------------------


async def require_twilio_signature(
    request: Request,
    store: KeyRingStore = Depends(get_keyring_store),
    settings: Settings = Depends(get_app_settings),
) -> VerifiedWebhook:
    """
    Valida X-Twilio-Signature antes de ejecutar la ruta.
    - Cualquier fallo responde 403 con el mismo cuerpo (no revela el motivo)
    - El motivo y un extracto de la firma quedan solo en el log
    """
    signature = request.headers.get(SIGNATURE_HEADER)
    url = build_request_url(request, settings.trust_forwarded_headers)
    params = await extract_params(request)

    if DEBUG:
        logger.debug(
            "require_twilio_signature: url=%s params=%s", url, sorted(params)
        )

    result = verify(url, params, signature, store.current)

    if not result.ok:
        logger.warning(
            "Webhook validation failed: reason=%s url=%s signature=%s",
            result.reason.value,
            url,
            mask_signature(signature),
        )
        raise HTTPException(status_code=403, detail="Invalid request signature")

    logger.info(
        "Webhook validation successful: url=%s key_index=%d account_sid=%s",
        url,
        result.matched_key_index,
        settings.account_sid,
    )
    return VerifiedWebhook(url=url, params=params, key_index=result.matched_key_index)
