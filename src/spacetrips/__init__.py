"""
Space Trips Backend
GraphQL API for browsing SpaceX launches and booking trips on them
"""

__version__ = "0.1.0"

from .config import settings

__all__ = ["settings", "__version__"]
