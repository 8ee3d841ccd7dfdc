import base64
import logging

import requests

from .constants import SIGNAL_ABOUT_PATH

logger = logging.getLogger(__name__)


class SignalConfigError(Exception):
    pass


def degrade_on_failure(step, *args, fallback=None, errors=(requests.RequestException,), **kwargs):
    """
    Executa uma etapa falível; em caso de erro registra e devolve `fallback`.
    Usado para etapas opcionais (ex: anexo de imagem) que não podem bloquear o envio.
    """
    try:
        return step(*args, **kwargs)
    except errors as exc:
        logger.warning("Etapa %s falhou, seguindo sem ela: %s", getattr(step, '__name__', step), exc)
        return fallback


def fetch_image_base64(image_url, timeout):
    logger.info("Baixando imagem: %s", image_url)
    resp = requests.get(image_url, timeout=timeout)
    resp.raise_for_status()
    encoded = base64.b64encode(resp.content).decode('ascii')
    logger.info("Imagem anexada (%d bytes)", len(resp.content))
    return encoded


def fetch_attachments(image_url, settings):
    """
    Lista de anexos base64 (vazia se não houver imagem ou se o download falhar).
    Qualquer erro no download é absorvido: a mensagem segue sem anexo.
    """
    if not image_url or not image_url.startswith('http'):
        return []
    encoded = degrade_on_failure(fetch_image_base64, image_url, settings.image_fetch_timeout_seconds, errors=(Exception,))
    return [encoded] if encoded else []


def build_signal_payload(message, settings, attachments=None):
    payload = {
        "message": message,
        "number": settings.signal_number,
        "recipients": list(settings.signal_recipients),
    }
    if attachments:
        payload["base64_attachments"] = list(attachments)
    return payload


def send_signal_payload(payload, settings):
    send_url = settings.signal_send_url
    if not send_url:
        raise SignalConfigError("SIGNAL_API_URL is not configured")

    logger.info("Enviando para Signal API: %s", send_url)
    resp = requests.post(send_url, json=payload, timeout=settings.signal_timeout_seconds)
    logger.info("Signal API response: %s %s", resp.status_code, resp.reason)
    if resp.status_code >= 400:
        logger.debug("Response content: %s", resp.text)
    resp.raise_for_status()
    return resp


def check_signal_health(settings):
    """
    Consulta /v1/about do signal-cli-rest-api.
    Retorna (ok, detalhe) sem lançar exceção.
    """
    base_url = settings.signal_base_url
    if not base_url:
        return False, "SIGNAL_API_URL is not configured"

    try:
        resp = requests.get(f"{base_url}{SIGNAL_ABOUT_PATH}", timeout=settings.signal_timeout_seconds)
    except requests.RequestException as exc:
        logger.warning("Signal API inacessível: %s", exc)
        return False, str(exc)

    if not resp.ok:
        return False, f"HTTP {resp.status_code}"
    return True, "reachable"
