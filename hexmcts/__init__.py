# File: hexmcts/__init__.py
"""
HexMCTS: a time-boxed Monte Carlo Tree Search engine for 11x11 Hex.
"""
from .config import APP_NAME

__version__ = "0.1.0"

__all__ = ["APP_NAME", "__version__"]
