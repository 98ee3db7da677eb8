"""
Pointmap Backend
GraphQL service for maps annotated with named, categorized points
"""

__version__ = "0.1.0"

from .config import settings

__all__ = ["settings", "__version__"]
