"""HTTP API for ChronoPeek."""

from .http_server import app
from .endpoints import router

__all__ = ["app", "router"]
