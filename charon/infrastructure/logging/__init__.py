"""Logging"""
from .config import bind_invocation_context, configure_logging

__all__ = ["bind_invocation_context", "configure_logging"]
