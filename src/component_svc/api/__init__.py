"""HTTP read API."""

from .routes import component_error_handler, configure, router

__all__ = ["component_error_handler", "configure", "router"]
