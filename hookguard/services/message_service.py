import logging
from typing import Dict
from xml.sax.saxutils import escape

logger = logging.getLogger("messages")

TWIML_HEADER = '<?xml version="1.0" encoding="UTF-8"?>'

VOICE_GREETING = "Hello! This is a secure Twilio webhook demo."


class MessageService:
    """
    Lógica de aplicación para webhooks ya verificados.
    Responde con TwiML.
    """

    def reply_to_sms(self, params: Dict[str, str]) -> str:
        """
        Registra el SMS recibido y construye la respuesta.

        Args:
            params: Campos del formulario enviado por Twilio

        Returns:
            str: Documento TwiML con un <Message>
        """
        logger.info(
            "Valid SMS webhook received: from=%s to=%s message_sid=%s account_sid=%s",
            params.get("From"),
            params.get("To"),
            params.get("MessageSid"),
            params.get("AccountSid"),
        )
        body = escape(params.get("Body", ""))
        return (
            f"{TWIML_HEADER}\n<Response>\n"
            f'  <Message>Thanks for your message! We received: "{body}"</Message>\n'
            "</Response>"
        )

    def reply_to_voice(self, params: Dict[str, str]) -> str:
        logger.info(
            "Valid voice webhook received: from=%s to=%s call_sid=%s call_status=%s",
            params.get("From"),
            params.get("To"),
            params.get("CallSid"),
            params.get("CallStatus"),
        )
        return (
            f"{TWIML_HEADER}\n<Response>\n"
            f"  <Say>{VOICE_GREETING}</Say>\n"
            "</Response>"
        )
