# File: hexmcts/protocol/__init__.py
"""
Line-delimited JSON match protocol: wire models and the adapter that drives
the search controller from stdin/stdout.
"""
from .schemas import Coordinate, BotzoneRequest, BotzoneResponse
from .adapter import BotzoneAdapter, parse_message

__all__ = [
    "Coordinate",
    "BotzoneRequest",
    "BotzoneResponse",
    "BotzoneAdapter",
    "parse_message",
]
