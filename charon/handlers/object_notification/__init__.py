"""Object Notification Handler"""
from .handler import lambda_handler

__all__ = ["lambda_handler"]
