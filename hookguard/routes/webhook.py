from fastapi import APIRouter, Depends, Response

from hookguard.hooks.twilio_signature import require_twilio_signature
from hookguard.models.webhook import VerifiedWebhook
from hookguard.routes.items.get_message_service import get_message_service
from hookguard.services.message_service import MessageService

router = APIRouter()


@router.post("/sms")
async def sms_webhook(
    webhook: VerifiedWebhook = Depends(require_twilio_signature),
    service: MessageService = Depends(get_message_service),
):
    """
    Webhook de SMS entrantes.
    - Solo se ejecuta si X-Twilio-Signature es válida
    - Responde TwiML con un acuse de recibo
    """
    twiml = service.reply_to_sms(webhook.params)
    return Response(content=twiml, media_type="text/xml")


@router.post("/voice")
async def voice_webhook(
    webhook: VerifiedWebhook = Depends(require_twilio_signature),
    service: MessageService = Depends(get_message_service),
):
    twiml = service.reply_to_voice(webhook.params)
    return Response(content=twiml, media_type="text/xml")
