"""Observability – structured logging helpers."""
from kp_query.observability.logging.factory import JsonLoggerFactory
from kp_query.observability.logging.processors import get_logger

__all__ = ["JsonLoggerFactory", "get_logger"]
