from .constants import DEFAULT_REQUEST_STATUS, LINE_PREFIX_EMOJIS, REQUEST_STATUS_PREFIX, REQUESTED_BY_PREFIX
from .detection import get_event_emoji
from .enrichment import extract_title_and_year


def build_base_message(notification):
    """Monta o texto da notificação, ainda sem emojis."""
    title, year = extract_title_and_year(notification.subject)
    # sem ano a linha termina com espaço, igual ao proxy antigo
    title_line = f"{notification.event} - {title} {year}"
    status = notification.status or DEFAULT_REQUEST_STATUS

    parts = [title_line]
    parts.append("")
    parts.append(notification.message)
    parts.append("")
    parts.append(f"{REQUESTED_BY_PREFIX} {notification.requested_by}")
    parts.append(f"{REQUEST_STATUS_PREFIX} {status}")
    return "\n".join(parts)


def _annotate_line(line):
    for prefix, emoji in LINE_PREFIX_EMOJIS.items():
        if line.startswith(prefix):
            return f"{emoji} {line}"
    return line


def format_message(message, event):
    """
    Injeta os emojis na mensagem já montada:
    - primeira linha recebe o emoji da categoria do evento
    - linhas 'Requested By:' e 'Request Status:' recebem 👤 e 📋
    Nenhuma linha é removida ou reordenada.
    """
    lines = message.split('\n')
    # split sempre devolve pelo menos uma linha
    lines[0] = f"{get_event_emoji(event)} {lines[0]}"
    return '\n'.join(_annotate_line(line) for line in lines)


def format_notification(notification):
    return format_message(build_base_message(notification), notification.event)
