"""
storefront/notifications.py
---------------------------
Transient user-facing messages (toasts).

The cart and checkout logic never renders anything: it returns a
Notification and the web layer hands it to a sink. The Flask sink stores it
in the session flash queue. base.html pops the queue and renders toasts.

Flash payload:
    category = severity value ('normal' | 'destructive')
    message  = {'title': str, 'description': str}
"""
from dataclasses import dataclass
from enum import Enum
from typing import List

from flask import flash, get_flashed_messages


class Severity(str, Enum):
    NORMAL      = 'normal'
    DESTRUCTIVE = 'destructive'


@dataclass(frozen=True)
class Notification:
    title:       str
    description: str = ''
    severity:    Severity = Severity.NORMAL

    @property
    def is_destructive(self) -> bool:
        return self.severity is Severity.DESTRUCTIVE


def flash_sink(notification: Notification) -> None:
    """Fire-and-forget: queue the notification for the next rendered page."""
    flash(
        {'title': notification.title, 'description': notification.description},
        notification.severity.value,
    )


def pop_notifications() -> List[Notification]:
    """Drain the flash queue into Notification objects (used by templates)."""
    result = []
    for category, message in get_flashed_messages(with_categories=True):
        try:
            severity = Severity(category)
        except ValueError:
            severity = Severity.NORMAL
        if isinstance(message, dict):
            result.append(Notification(
                title=message.get('title', ''),
                description=message.get('description', ''),
                severity=severity,
            ))
        else:
            result.append(Notification(title=str(message), severity=severity))
    return result
