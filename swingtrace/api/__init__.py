"""
SwingTrace API Module

FastAPI routes for golf swing trajectory analysis.
"""

from .routes import router

__all__ = [
    "router",
]
