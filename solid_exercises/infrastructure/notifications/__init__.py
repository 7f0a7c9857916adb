"""Notification services - INotificationService variants."""

from solid_exercises.infrastructure.notifications.email_service import EmailService

__all__ = [
    "EmailService",
]
