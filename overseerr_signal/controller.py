import logging

from flask import Flask, request

from .constants import SERVICE_NAME, Settings
from .enrichment import extract_notification
from .formatters import format_notification
from .services import build_signal_payload, check_signal_health, fetch_attachments, send_signal_payload

logger = logging.getLogger(__name__)


def create_app(settings=None):
    app = Flask(__name__)
    if settings is None:
        settings = Settings.from_env()

    @app.route('/health', methods=['GET'])
    def health():
        ok, detail = check_signal_health(settings)
        body = {
            'status': 'ok' if ok else 'error',
            'service': SERVICE_NAME,
            'signal_api': detail,
        }
        return body, 200 if ok else 500

    @app.route('/webhook', methods=['POST'])
    def webhook():
        try:
            logger.info("Webhook recebido do Overseerr")
            data = request.get_json(silent=True) or {}
            logger.debug("Payload recebido: %s", data)

            notification = extract_notification(data)
            logger.debug(
                "Evento: notification_type=%s event=%s media_type=%s",
                notification.notification_type, notification.event, notification.media_type,
            )

            message = format_notification(notification)
            logger.debug("Mensagem formatada:\n%s", message)

            attachments = fetch_attachments(notification.image, settings)
            payload = build_signal_payload(message, settings, attachments)
            send_signal_payload(payload, settings)

            return 'Notification sent to Signal', 200
        except Exception as e:
            logger.error("Erro ao processar webhook: %s", e)
            return f'Error: {str(e)}', 500

    return app
