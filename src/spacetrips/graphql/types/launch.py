"""
Launch GraphQL type definitions
"""

from enum import Enum
from typing import TYPE_CHECKING

import strawberry

if TYPE_CHECKING:
    from ...datasources.models import Launch as LaunchModel


@strawberry.enum
class PatchSize(Enum):
    """Size of a mission patch image."""

    SMALL = "small"
    LARGE = "large"


@strawberry.type
class Rocket:
    """Rocket type for GraphQL API."""

    id: strawberry.ID | None
    name: str | None
    type: str | None


@strawberry.type
class Mission:
    """Mission type for GraphQL API."""

    name: str | None
    patch_small: strawberry.Private[str | None] = None
    patch_large: strawberry.Private[str | None] = None

    @strawberry.field
    def mission_patch(self, size: PatchSize = PatchSize.LARGE) -> str | None:
        """URL of the mission patch in the requested size."""
        if size == PatchSize.SMALL:
            return self.patch_small
        return self.patch_large


@strawberry.type
class Launch:
    """Launch type for GraphQL API."""

    id: strawberry.ID
    site: str | None
    mission: Mission | None
    rocket: Rocket | None
    cursor: strawberry.Private[str | None] = None

    @strawberry.field
    async def is_booked(self, info: strawberry.Info) -> bool:
        """Whether the current user has a trip on this launch."""
        from ..resolvers.launch import resolve_launch_is_booked

        return await resolve_launch_is_booked(self, info)

    @classmethod
    def from_model(cls, launch: "LaunchModel") -> "Launch":
        mission = None
        if launch.mission is not None:
            mission = Mission(
                name=launch.mission.name,
                patch_small=launch.mission.mission_patch_small,
                patch_large=launch.mission.mission_patch_large,
            )
        rocket = None
        if launch.rocket is not None:
            rocket = Rocket(
                id=strawberry.ID(launch.rocket.id) if launch.rocket.id else None,
                name=launch.rocket.name,
                type=launch.rocket.type,
            )
        return cls(
            id=strawberry.ID(str(launch.id)),
            site=launch.site,
            mission=mission,
            rocket=rocket,
            cursor=launch.cursor,
        )


@strawberry.type
class LaunchConnection:
    """A page of launches and the cursor to continue from."""

    cursor: str | None
    has_more: bool
    launches: list[Launch]


@strawberry.type
class TripUpdateResponse:
    """Outcome of booking or cancelling trips."""

    success: bool
    message: str | None
    launches: list[Launch]
