from enum import Enum

from .constants import EVENT_EMOJIS


class EventCategory(str, Enum):
    PENDING = "pending"
    APPROVED = "approved"
    AVAILABLE = "available"
    DECLINED = "declined"
    FAILED = "failed"
    ISSUE = "issue"
    DEFAULT = "default"


# Ordem importa: a primeira regra que casar vence.
# "Automatically Approved" já é coberto por "Approved", mas fica explícito.
EVENT_RULES = [
    (("Request Pending",), EventCategory.PENDING),
    (("Automatically Approved", "Approved"), EventCategory.APPROVED),
    (("Available",), EventCategory.AVAILABLE),
    (("Declined",), EventCategory.DECLINED),
    (("Failed",), EventCategory.FAILED),
    (("Issue",), EventCategory.ISSUE),
]


def detect_event_category(event):
    event = event or ''
    for keywords, category in EVENT_RULES:
        if any(keyword in event for keyword in keywords):
            return category
    return EventCategory.DEFAULT


def get_category_emoji(category):
    return EVENT_EMOJIS.get(EventCategory(category).value, EVENT_EMOJIS["default"])


def get_event_emoji(event):
    return get_category_emoji(detect_event_category(event))
