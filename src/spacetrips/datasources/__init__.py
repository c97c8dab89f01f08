"""Data sources used by the GraphQL resolvers."""

from .launch import LaunchAPI
from .models import Launch, Mission, Rocket
from .user import UserAPI

__all__ = ["LaunchAPI", "UserAPI", "Launch", "Mission", "Rocket"]
