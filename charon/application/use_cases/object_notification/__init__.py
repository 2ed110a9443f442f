"""Object Notification Use Cases"""
from .handle_object_notification import HandleObjectNotificationUseCase

__all__ = ["HandleObjectNotificationUseCase"]
