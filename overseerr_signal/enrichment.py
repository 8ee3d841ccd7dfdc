import re
from dataclasses import dataclass
from typing import Optional

from .constants import DEFAULT_FIELD_VALUE
from .utils import get_nested_value

_YEAR_PATTERN = re.compile(r'\((\d{4})\)')


@dataclass
class OverseerrNotification:
    notification_type: str = DEFAULT_FIELD_VALUE
    event: str = DEFAULT_FIELD_VALUE
    subject: str = DEFAULT_FIELD_VALUE
    message: str = DEFAULT_FIELD_VALUE
    image: str = DEFAULT_FIELD_VALUE
    media_type: str = DEFAULT_FIELD_VALUE
    # None quando o Overseerr não envia media.status (a mensagem mostra PENDING)
    status: Optional[str] = None
    requested_by: str = DEFAULT_FIELD_VALUE


def _optional_str(value):
    return None if value is None else str(value)


def extract_notification(payload) -> OverseerrNotification:
    """
    Achata o payload do webhook do Overseerr nos campos usados na mensagem.
    O formato do Overseerr não é garantido, então todo acesso passa por get_nested_value.
    """
    return OverseerrNotification(
        notification_type=str(get_nested_value(payload, 'notification_type')),
        event=str(get_nested_value(payload, 'event')),
        subject=str(get_nested_value(payload, 'subject')),
        message=str(get_nested_value(payload, 'message')),
        image=str(get_nested_value(payload, 'image')),
        media_type=str(get_nested_value(payload, 'media.media_type')),
        status=_optional_str(get_nested_value(payload, 'media.status', default=None)),
        requested_by=str(get_nested_value(payload, 'request.requestedBy_username')),
    )


def extract_title_and_year(subject):
    """
    'Dune (2021)' -> ('Dune', '(2021)')
    'Dune'        -> ('Dune', '')
    """
    year = ''
    year_match = _YEAR_PATTERN.search(subject)
    if year_match:
        year = f"({year_match.group(1)})"
    title = subject.split(' (')[0]
    return title, year
