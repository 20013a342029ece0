"""Abstract interfaces for the Gopher client."""

from .display import Display, RenderPlan
from .gopher_transport import GopherTransport

__all__ = ["Display", "RenderPlan", "GopherTransport"]
