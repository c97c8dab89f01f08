"""
Per-request GraphQL context
"""

from strawberry.fastapi import BaseContext

from ..auth.context import AuthUser
from ..datasources.launch import LaunchAPI
from ..datasources.user import UserAPI


class RequestContext(BaseContext):
    """Everything a resolver needs for one request: the caller and the data sources."""

    def __init__(
        self,
        launch_api: LaunchAPI,
        user_api: UserAPI,
        user: AuthUser | None = None,
    ):
        super().__init__()
        self.launch_api = launch_api
        self.user_api = user_api
        self.user = user
